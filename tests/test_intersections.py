"""Tests for the intersection search."""

import io
from pathlib import Path

from transport_catalogue.analysis.intersections import find_best_intersection, two_shortest
from transport_catalogue.api import load_catalogue
from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.text.reader import read_document


def _load(path: Path) -> TransportCatalogue:
    with open(path, encoding="utf-8") as f:
        return load_catalogue(read_document(f))


def test_find_best_intersection(intersections_input: Path) -> None:
    """Test the stop with the two shortest meeting routes wins."""
    best = find_best_intersection(_load(intersections_input))

    assert best is not None
    assert best.stop.name == "C"
    assert {best.first.name, best.second.name} == {"short", "loop"}
    assert best.first.name == "short"
    assert best.score == 5


def test_find_best_intersection_tie_by_stop_name() -> None:
    """Test equal scores are resolved by stop name."""
    document = read_document(
        io.StringIO(
            "5\n"
            "Stop Y: 55.0, 37.0\n"
            "Stop X: 55.1, 37.1\n"
            "Bus 1: X - Y\n"
            "Bus 2: Y - X\n"
            "Bus 3: X - Y - X\n"
        )
    )
    best = find_best_intersection(load_catalogue(document))

    assert best is not None
    assert best.stop.name == "X"
    assert [best.first.name, best.second.name] == ["1", "2"]


def test_find_best_intersection_none(network_catalogue: TransportCatalogue) -> None:
    """Test no result when no stop has two buses."""
    catalogue = TransportCatalogue()
    assert find_best_intersection(catalogue) is None

    # Reference network has shared stops
    assert find_best_intersection(network_catalogue) is not None


def test_two_shortest_needs_two(abc_catalogue: TransportCatalogue) -> None:
    """Test fewer than two buses gives no pair."""
    bus = abc_catalogue.add_bus("1", ["A"])
    assert two_shortest(set()) is None
    assert two_shortest({bus}) is None
