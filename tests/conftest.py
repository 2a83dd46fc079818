"""Pytest configuration and fixtures."""

import shutil
from pathlib import Path

import pytest

from transport_catalogue.api import load_catalogue
from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.geo import Coordinates
from transport_catalogue.text.reader import read_document

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def network_input() -> Path:
    """Path to the reference network request file."""
    return FIXTURES / "network.txt"


@pytest.fixture
def network_expected() -> Path:
    """Path to the expected answers for the reference network."""
    return FIXTURES / "network_expected.txt"


@pytest.fixture
def invalid_input() -> Path:
    """Path to a request file with validation errors."""
    return FIXTURES / "invalid.txt"


@pytest.fixture
def intersections_input() -> Path:
    """Path to a request file with overlapping routes."""
    return FIXTURES / "intersections.txt"


@pytest.fixture
def network_catalogue(network_input: Path) -> TransportCatalogue:
    """Catalogue built from the reference network."""
    with open(network_input, encoding="utf-8") as f:
        return load_catalogue(read_document(f))


@pytest.fixture
def abc_catalogue() -> TransportCatalogue:
    """Three stops along a parallel, no buses."""
    catalogue = TransportCatalogue()
    catalogue.add_stop("A", Coordinates(55.0, 37.0))
    catalogue.add_stop("B", Coordinates(55.0, 38.0))
    catalogue.add_stop("C", Coordinates(55.5, 38.5))
    return catalogue


@pytest.fixture
def tmp_output(tmp_path: Path) -> Path:
    """Temporary output directory."""
    output_dir = tmp_path / "catalogue_output"
    output_dir.mkdir()
    yield output_dir
    # Cleanup
    if output_dir.exists():
        shutil.rmtree(output_dir)
