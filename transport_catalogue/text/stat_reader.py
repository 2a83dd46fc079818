"""Statistics requests: ``Bus X`` and ``Stop X`` answers."""

import logging
from typing import TextIO

from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.models import BusStat

logger = logging.getLogger(__name__)


def format_bus_stat(name: str, stat: BusStat) -> str:
    """Format a bus answer line (without newline)."""
    if not stat.found:
        return f"Bus {name}: not found"
    return (
        f"Bus {name}: {stat.stops_count} stops on route, "
        f"{stat.unique_stops} unique stops, "
        f"{stat.route_length:.6g} route length"
    )


def format_stop_stat(catalogue: TransportCatalogue, name: str) -> str:
    """Format a stop answer line (without newline)."""
    stop = catalogue.find_stop(name)
    if stop is None:
        return f"Stop {name}: not found"

    buses = catalogue.get_buses_by_stop(stop)
    if not buses:
        return f"Stop {name}: no buses"

    bus_names = sorted(bus.name for bus in buses)
    return f"Stop {name}: buses " + " ".join(bus_names)


def parse_and_print_stat(catalogue: TransportCatalogue, request: str, output: TextIO) -> bool:
    """
    Answer one stat request.

    Returns:
        True if the request was recognised and answered
    """
    kind, sep, name = request.partition(" ")
    if not sep:
        logger.debug(f"Ignoring request without name: {request!r}")
        return False

    if kind == "Bus":
        line = format_bus_stat(name, catalogue.get_bus_stat(name))
    elif kind == "Stop":
        line = format_stop_stat(catalogue, name)
    else:
        logger.debug(f"Ignoring unknown request kind: {kind!r}")
        return False

    output.write(line + "\n")
    return True
