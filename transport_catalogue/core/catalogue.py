"""In-memory transport catalogue: stops, buses, indices and route statistics."""

import logging
from collections.abc import Iterable

from transport_catalogue.core.geo import Coordinates, compute_distance
from transport_catalogue.core.models import Bus, BusStat, Stop

logger = logging.getLogger(__name__)

_NO_BUSES: frozenset[Bus] = frozenset()


class CatalogueError(ValueError):
    """Base class for rejected catalogue mutations."""


class DuplicateNameError(CatalogueError):
    """A stop or bus with this name is already registered."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} {name!r} is already registered")
        self.kind = kind
        self.name = name


class UnresolvedStopError(CatalogueError):
    """A bus references a stop that has not been added."""

    def __init__(self, bus_name: str, stop_name: str) -> None:
        super().__init__(f"Bus {bus_name!r} references unknown stop {stop_name!r}")
        self.bus_name = bus_name
        self.stop_name = stop_name


class TransportCatalogue:
    """
    Owner of all stops and buses.

    Stops must be added before any bus that references them. Mutations are
    not thread-safe; once building is finished, read operations may be shared
    freely.
    """

    def __init__(self) -> None:
        """Initialize an empty catalogue."""
        # Append-only storage, insertion order
        self._stops: list[Stop] = []
        self._buses: list[Bus] = []

        # Name indices
        self._stop_by_name: dict[str, Stop] = {}
        self._bus_by_name: dict[str, Bus] = {}

        # Stop -> distinct buses passing through it
        self._buses_by_stop: dict[Stop, set[Bus]] = {}

    @property
    def stop_count(self) -> int:
        return len(self._stops)

    @property
    def bus_count(self) -> int:
        return len(self._buses)

    def add_stop(self, name: str, coordinates: Coordinates) -> Stop:
        """Register a new stop and return it."""
        if name in self._stop_by_name:
            raise DuplicateNameError("Stop", name)

        stop = Stop(name=name, coordinates=coordinates)
        self._stops.append(stop)
        self._stop_by_name[name] = stop

        logger.debug(f"Added stop {name!r} at ({coordinates.lat}, {coordinates.lng})")
        return stop

    def add_bus(self, name: str, stop_names: Iterable[str], is_roundtrip: bool = False) -> Bus:
        """
        Register a new bus over already added stops and return it.

        Args:
            name: Bus name, unique within the catalogue
            stop_names: Stop names in input order
            is_roundtrip: Whether the sequence is already a closed loop

        Raises:
            DuplicateNameError: a bus with this name exists
            UnresolvedStopError: a stop name is unknown; nothing is registered
        """
        if name in self._bus_by_name:
            raise DuplicateNameError("Bus", name)

        # Resolve everything before touching any index
        stops: list[Stop] = []
        for stop_name in stop_names:
            stop = self._stop_by_name.get(stop_name)
            if stop is None:
                raise UnresolvedStopError(name, stop_name)
            stops.append(stop)

        bus = Bus(name=name, stops=tuple(stops), is_roundtrip=is_roundtrip)
        self._buses.append(bus)
        self._bus_by_name[name] = bus

        for stop in bus.stops:
            if stop not in self._buses_by_stop:
                self._buses_by_stop[stop] = set()
            self._buses_by_stop[stop].add(bus)

        logger.debug(
            f"Added bus {name!r} with {len(bus.stops)} stops (roundtrip={is_roundtrip})"
        )
        return bus

    def find_stop(self, name: str) -> Stop | None:
        """Look up a stop by exact name."""
        return self._stop_by_name.get(name)

    def find_bus(self, name: str) -> Bus | None:
        """Look up a bus by exact name."""
        return self._bus_by_name.get(name)

    def get_buses_by_stop(self, stop: Stop | None) -> frozenset[Bus]:
        """Buses passing through a stop; empty for unknown or missing stops."""
        if stop is None:
            return _NO_BUSES
        buses = self._buses_by_stop.get(stop)
        if not buses:
            return _NO_BUSES
        return frozenset(buses)

    def get_all_stops(self) -> tuple[Stop, ...]:
        """All stops in insertion order."""
        return tuple(self._stops)

    def get_all_buses(self) -> tuple[Bus, ...]:
        """All buses in insertion order."""
        return tuple(self._buses)

    def get_stop_by_index(self, index: int) -> Stop | None:
        """Stop by 1-based insertion position."""
        if index < 1 or index > len(self._stops):
            return None
        return self._stops[index - 1]

    def get_bus_by_index(self, index: int) -> Bus | None:
        """Bus by 1-based insertion position."""
        if index < 1 or index > len(self._buses):
            return None
        return self._buses[index - 1]

    def get_bus_stat(self, name: str) -> BusStat:
        """Compute statistics for the named bus."""
        bus = self.find_bus(name)
        if bus is None:
            return BusStat()

        stops = bus.stops
        n = len(stops)
        unique_stops = len(set(stops))

        if n == 0:
            return BusStat(found=True, unique_stops=unique_stops)

        length = 0.0
        for i in range(1, n):
            length += compute_distance(stops[i - 1].coordinates, stops[i].coordinates)

        if bus.is_roundtrip:
            stops_count = n
        else:
            # A - B - C is travelled as A B C B A
            stops_count = 2 * n - 1
            for i in range(n - 1, 0, -1):
                length += compute_distance(stops[i].coordinates, stops[i - 1].coordinates)

        return BusStat(
            found=True,
            stops_count=stops_count,
            unique_stops=unique_stops,
            route_length=length,
        )
