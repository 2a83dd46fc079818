"""Search for the stop where the two shortest routes intersect."""

import logging

from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.models import Bus, Intersection

logger = logging.getLogger(__name__)


def _bus_key(bus: Bus) -> tuple[int, str]:
    return (len(bus.stops), bus.name)


def two_shortest(buses: frozenset[Bus] | set[Bus]) -> tuple[Bus, Bus] | None:
    """Two shortest buses by stored stop count, ties broken by name."""
    if len(buses) < 2:
        return None
    first, second = sorted(buses, key=_bus_key)[:2]
    return first, second


def find_best_intersection(catalogue: TransportCatalogue) -> Intersection | None:
    """
    Find the stop served by at least two buses whose two shortest buses are
    shortest overall.

    The score is the sum of the stored stop counts of both buses; the lowest
    score wins, ties broken by stop name.
    """
    best: Intersection | None = None

    for stop in catalogue.get_all_stops():
        pair = two_shortest(catalogue.get_buses_by_stop(stop))
        if pair is None:
            continue

        first, second = pair
        score = len(first.stops) + len(second.stops)

        if (
            best is None
            or score < best.score
            or (score == best.score and stop.name < best.stop.name)
        ):
            best = Intersection(stop=stop, first=first, second=second, score=score)

    if best is None:
        logger.info("No stop is served by two or more buses")
    else:
        logger.info(
            f"Best intersection at {best.stop.name!r}: "
            f"{best.first.name!r} + {best.second.name!r} (score {best.score})"
        )
    return best
