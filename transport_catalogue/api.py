"""Public API for transport-catalogue."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from transport_catalogue.analysis.intersections import find_best_intersection
from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.models import Bus, InputDocument, RenderConfig, ValidationReport
from transport_catalogue.render.svg import inject_summary, render_bus_svg, render_stop_svg
from transport_catalogue.text.reader import InputReader, read_document
from transport_catalogue.text.stat_reader import parse_and_print_stat
from transport_catalogue.text.validator import InputValidator

logger = logging.getLogger(__name__)

BEST_INTERSECTION_FILENAME = "best_intersection_stop.svg"


def _as_base_requests(source: InputDocument | Iterable[str]) -> list[str]:
    if isinstance(source, InputDocument):
        return source.base_requests
    return list(source)


def load_catalogue(
    source: InputDocument | Iterable[str], strict: bool = True
) -> TransportCatalogue:
    """
    Build a catalogue from base requests.

    Args:
        source: Input document or base request lines
        strict: Refuse to build when validation reports errors; otherwise
            requests the catalogue rejects are logged and dropped

    Returns:
        Populated catalogue
    """
    reader = InputReader()
    reader.parse_lines(_as_base_requests(source))

    if strict:
        report = InputValidator(reader).validate()
        if not report.valid:
            for error in report.errors:
                logger.error(error)
            raise ValueError(f"Input validation failed with {len(report.errors)} errors")

    catalogue = TransportCatalogue()
    reader.apply_commands(catalogue, skip_invalid=not strict)
    return catalogue


def process(input_stream: TextIO, output_stream: TextIO, strict: bool = True) -> int:
    """
    Batch mode: build the catalogue and answer every stat request.

    Returns:
        Number of answered requests
    """
    document = read_document(input_stream)
    catalogue = load_catalogue(document, strict=strict)

    answered = 0
    for request in document.stat_requests:
        if parse_and_print_stat(catalogue, request, output_stream):
            answered += 1

    logger.info(f"Answered {answered} of {len(document.stat_requests)} stat requests")
    return answered


def validate(input_stream: TextIO) -> ValidationReport:
    """Validate the base requests of a document."""
    document = read_document(input_stream)

    reader = InputReader()
    reader.parse_lines(document.base_requests)

    report = InputValidator(reader).validate()
    report.stats["stat_requests"] = len(document.stat_requests)
    return report


def safe_filename(name: str) -> str:
    """Replace spaces so a name can be used in a file name."""
    return name.replace(" ", "_")


def _write_svg(output_dir: Path, filename: str, svg: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / filename
    path.write_text(svg, encoding="utf-8")
    logger.info(f"SVG saved to {path}")
    return path


def render_bus(
    catalogue: TransportCatalogue,
    bus_ref: str | int,
    output_dir: Path,
    config: RenderConfig | None = None,
) -> Path | None:
    """
    Render a bus, looked up by name or by 1-based index, to ``bus_<name>.svg``.

    Returns:
        Path of the written file, or None when the bus does not exist
    """
    if isinstance(bus_ref, int):
        bus = catalogue.get_bus_by_index(bus_ref)
    else:
        bus = catalogue.find_bus(bus_ref)

    if bus is None:
        logger.warning(f"Bus {bus_ref!r} not found")
        return None

    return _write_svg(
        output_dir, f"bus_{safe_filename(bus.name)}.svg", render_bus_svg(bus, config)
    )


def render_stop(
    catalogue: TransportCatalogue,
    stop_index: int,
    output_dir: Path,
    config: RenderConfig | None = None,
) -> Path | None:
    """
    Render a stop (1-based index) with its buses to ``stop_<name>.svg``.

    Buses are sorted by name and capped at ``config.max_routes_in_stop_svg``.

    Returns:
        Path of the written file, or None when the stop does not exist or has no buses
    """
    config = config or RenderConfig()

    stop = catalogue.get_stop_by_index(stop_index)
    if stop is None:
        logger.warning(f"Stop #{stop_index} not found")
        return None

    buses = sorted(catalogue.get_buses_by_stop(stop), key=lambda b: b.name)
    if not buses:
        logger.warning(f"Stop {stop.name!r} has no buses")
        return None

    if len(buses) > config.max_routes_in_stop_svg:
        logger.info(
            f"Stop {stop.name!r}: showing only first {config.max_routes_in_stop_svg} "
            f"routes out of {len(buses)}"
        )
        buses = buses[: config.max_routes_in_stop_svg]

    return _write_svg(
        output_dir, f"stop_{safe_filename(stop.name)}.svg", render_stop_svg(stop, buses, config)
    )


def render_best_intersection(
    catalogue: TransportCatalogue,
    output_dir: Path,
    config: RenderConfig | None = None,
) -> Path | None:
    """Render the stop where the two shortest routes meet, with its score."""
    best = find_best_intersection(catalogue)
    if best is None:
        return None

    buses: list[Bus] = sorted([best.first, best.second], key=lambda b: b.name)
    svg = inject_summary(render_stop_svg(best.stop, buses, config), best.score)
    return _write_svg(output_dir, BEST_INTERSECTION_FILENAME, svg)
