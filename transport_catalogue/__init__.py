"""Transport Catalogue - in-memory stops, routes and route statistics."""

from transport_catalogue.api import load_catalogue, process, validate
from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.geo import Coordinates, compute_distance
from transport_catalogue.version import VERSION

__version__ = VERSION
__all__ = [
    "VERSION",
    "Coordinates",
    "TransportCatalogue",
    "compute_distance",
    "load_catalogue",
    "process",
    "validate",
]
