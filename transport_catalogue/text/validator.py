"""Input validator for parsed base requests."""

import logging
import math

from transport_catalogue.core.models import ValidationReport
from transport_catalogue.text.reader import InputReader, parse_coordinates, parse_route

logger = logging.getLogger(__name__)

class InputValidator:
    """Validate base requests for consistency before they reach the catalogue."""

    def __init__(self, reader: InputReader) -> None:
        """Initialize validator with a populated input reader."""
        self.reader = reader
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self._defined_stops: dict[str, None] = {}
        self._routes: dict[str, tuple[list[str], bool]] = {}

    def validate(self) -> ValidationReport:
        """Run all validation checks."""
        logger.info("Validating input requests")

        self._validate_stops()
        self._validate_buses()
        self._validate_coverage()

        valid = len(self.errors) == 0

        stats = {
            "stops": len(self.reader.stop_commands),
            "buses": len(self.reader.bus_commands),
        }

        report = ValidationReport(
            valid=valid,
            errors=self.errors.copy(),
            warnings=self.warnings.copy(),
            stats=stats,
        )

        if not valid:
            logger.error(f"Validation failed with {len(self.errors)} errors")
        elif self.warnings:
            logger.warning(f"Validation passed with {len(self.warnings)} warnings")
        else:
            logger.info("Validation passed")

        return report

    def _validate_stops(self) -> None:
        """Validate stop names are unique and coordinates are in range."""
        for command in self.reader.stop_commands:
            if command.id in self._defined_stops:
                self.errors.append(f"Stop {command.id} is defined more than once")
                continue
            self._defined_stops[command.id] = None

            try:
                coords = parse_coordinates(command.description, command.id)
            except ValueError as e:
                self.errors.append(str(e))
                continue

            if not (math.isfinite(coords.lat) and math.isfinite(coords.lng)):
                self.errors.append(f"Stop {command.id} has non-finite coordinates")
                continue
            if not (-90 <= coords.lat <= 90):
                self.errors.append(f"Stop {command.id} has invalid latitude: {coords.lat}")
            if not (-180 <= coords.lng <= 180):
                self.errors.append(f"Stop {command.id} has invalid longitude: {coords.lng}")

    def _validate_buses(self) -> None:
        """Validate buses are unique and reference defined stops."""
        for command in self.reader.bus_commands:
            if command.id in self._routes:
                self.errors.append(f"Bus {command.id} is defined more than once")
                continue

            stop_names, is_roundtrip = parse_route(command.description)
            self._routes[command.id] = (stop_names, is_roundtrip)

            if not stop_names:
                self.warnings.append(f"Bus {command.id} has no stops")
                continue

            for stop_name in stop_names:
                if stop_name not in self._defined_stops:
                    self.errors.append(
                        f"Bus {command.id} references non-existent stop {stop_name}"
                    )

            if is_roundtrip and stop_names[0] != stop_names[-1]:
                self.warnings.append(
                    f"Roundtrip bus {command.id} does not end where it starts: "
                    f"{stop_names[0]} -> {stop_names[-1]}"
                )

    def _validate_coverage(self) -> None:
        """Warn about stops not served by any bus."""
        served = {name for stop_names, _ in self._routes.values() for name in stop_names}
        for stop_name in self._defined_stops:
            if stop_name not in served:
                self.warnings.append(f"Stop {stop_name} is not served by any bus")
