"""Benchmark tests."""

import io
from pathlib import Path

import pytest

from transport_catalogue import process
from transport_catalogue.analysis.intersections import find_best_intersection
from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.geo import Coordinates
from transport_catalogue.render.svg import render_bus_svg


def _grid_catalogue(size: int) -> TransportCatalogue:
    """Square grid of stops with one bus per row and per column."""
    catalogue = TransportCatalogue()
    for row in range(size):
        for col in range(size):
            catalogue.add_stop(f"S{row}_{col}", Coordinates(55.0 + row / 100, 37.0 + col / 100))

    for i in range(size):
        catalogue.add_bus(f"R{i}", [f"S{i}_{col}" for col in range(size)])
        catalogue.add_bus(f"C{i}", [f"S{row}_{i}" for row in range(size)], is_roundtrip=True)
    return catalogue


@pytest.mark.benchmark
def test_bench_process_network(network_input: Path, benchmark: object) -> None:
    """Benchmark batch processing of the reference network."""
    text = network_input.read_text(encoding="utf-8")

    def do_process() -> None:
        process(io.StringIO(text), io.StringIO())

    benchmark(do_process)


@pytest.mark.benchmark
def test_bench_build_grid(benchmark: object) -> None:
    """Benchmark building a 30x30 grid catalogue."""
    catalogue = benchmark(_grid_catalogue, 30)
    assert catalogue.bus_count == 60


@pytest.mark.benchmark
def test_bench_bus_stats(benchmark: object) -> None:
    """Benchmark route statistics over every bus of a grid."""
    catalogue = _grid_catalogue(30)

    def do_stats() -> None:
        for bus in catalogue.get_all_buses():
            catalogue.get_bus_stat(bus.name)

    benchmark(do_stats)


@pytest.mark.benchmark
def test_bench_best_intersection(benchmark: object) -> None:
    """Benchmark the intersection search on a grid."""
    catalogue = _grid_catalogue(30)
    best = benchmark(find_best_intersection, catalogue)
    assert best is not None


@pytest.mark.benchmark
def test_bench_render_bus(benchmark: object) -> None:
    """Benchmark rendering a long bus."""
    catalogue = _grid_catalogue(30)
    bus = catalogue.find_bus("R0")
    benchmark(render_bus_svg, bus)
