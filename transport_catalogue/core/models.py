"""Data models for the catalogue and its consumers."""

from dataclasses import dataclass, field

from transport_catalogue.core.geo import Coordinates


@dataclass(frozen=True, eq=False)
class Stop:
    """Named stop. Compared and hashed by identity."""

    name: str
    coordinates: Coordinates

    def __repr__(self) -> str:
        return f"Stop({self.name!r}, {self.coordinates.lat}, {self.coordinates.lng})"


@dataclass(frozen=True, eq=False)
class Bus:
    """Named route over catalogue stops, in input order."""

    name: str
    stops: tuple[Stop, ...]
    is_roundtrip: bool = False  # True for "A > B > A", False for "A - B"

    def __repr__(self) -> str:
        kind = "roundtrip" if self.is_roundtrip else "there-and-back"
        return f"Bus({self.name!r}, {len(self.stops)} stops, {kind})"


@dataclass(frozen=True)
class BusStat:
    """Aggregate statistics for one route, computed per query."""

    found: bool = False
    stops_count: int = 0
    unique_stops: int = 0
    route_length: float = 0.0  # meters


@dataclass(frozen=True)
class CommandDescription:
    """One parsed base request, e.g. ``Stop A: 55.6, 37.2``."""

    command: str = ""
    id: str = ""
    description: str = ""

    def __bool__(self) -> bool:
        return bool(self.command)


@dataclass
class InputDocument:
    """Base and stat request lines of one input document."""

    base_requests: list[str] = field(default_factory=list)
    stat_requests: list[str] = field(default_factory=list)


@dataclass
class ValidationReport:
    """Report from validation process."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    stats: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class Intersection:
    """Stop where the two shortest routes serving it meet."""

    stop: Stop
    first: Bus
    second: Bus
    score: int  # sum of stored stop counts of both buses


@dataclass
class RenderConfig:
    """Configuration for SVG rendering."""

    width: float = 800.0
    height: float = 600.0
    padding: float = 50.0
    max_routes_in_stop_svg: int = 2
