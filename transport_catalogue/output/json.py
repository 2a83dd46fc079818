"""JSON summary output."""

import json
import logging
from pathlib import Path

from transport_catalogue.core.catalogue import TransportCatalogue

logger = logging.getLogger(__name__)


def write_json_files(output_path: Path, catalogue: TransportCatalogue) -> dict[str, str]:
    """Write buses.json and stops.json summaries."""
    logger.info(f"Writing JSON summary files to {output_path}")

    output_path.mkdir(parents=True, exist_ok=True)

    files_written = {}

    # Write buses.json
    buses_data = []
    for bus in catalogue.get_all_buses():
        stat = catalogue.get_bus_stat(bus.name)
        buses_data.append(
            {
                "name": bus.name,
                "stops": [stop.name for stop in bus.stops],
                "is_roundtrip": bus.is_roundtrip,
                "stops_count": stat.stops_count,
                "unique_stops": stat.unique_stops,
                "route_length": stat.route_length,
            }
        )

    buses_path = output_path / "buses.json"
    with open(buses_path, "w", encoding="utf-8") as f:
        json.dump(buses_data, f, indent=2, sort_keys=True)
    files_written["buses.json"] = str(buses_path)
    logger.info(f"Wrote {buses_path}")

    # Write stops.json
    stops_data = []
    for stop in catalogue.get_all_stops():
        stops_data.append(
            {
                "name": stop.name,
                "lat": stop.coordinates.lat,
                "lng": stop.coordinates.lng,
                "buses": sorted(bus.name for bus in catalogue.get_buses_by_stop(stop)),
            }
        )

    stops_path = output_path / "stops.json"
    with open(stops_path, "w", encoding="utf-8") as f:
        json.dump(stops_data, f, indent=2, sort_keys=True)
    files_written["stops.json"] = str(stops_path)
    logger.info(f"Wrote {stops_path}")

    return files_written
