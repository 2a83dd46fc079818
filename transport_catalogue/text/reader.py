"""Text command reader: parses base requests and feeds them to the catalogue."""

import logging
import math
from collections.abc import Iterable
from typing import TextIO

from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.geo import Coordinates
from transport_catalogue.core.models import CommandDescription, InputDocument

logger = logging.getLogger(__name__)

STOP_COMMAND = "Stop"
BUS_COMMAND = "Bus"
ROUNDTRIP_SEPARATOR = ">"
THERE_AND_BACK_SEPARATOR = "-"


class InputReader:
    """Collect base requests and apply them to a catalogue in two phases."""

    def __init__(self) -> None:
        """Initialize reader with no commands."""
        self.commands: list[CommandDescription] = []

    def parse_line(self, line: str) -> None:
        """Parse one base request line; malformed lines are ignored."""
        command = parse_command_description(line)
        if command:
            self.commands.append(command)
        else:
            logger.debug(f"Ignoring malformed request: {line!r}")

    def parse_lines(self, lines: Iterable[str]) -> None:
        """Parse several base request lines."""
        for line in lines:
            self.parse_line(line)

    @property
    def stop_commands(self) -> list[CommandDescription]:
        return [c for c in self.commands if c.command == STOP_COMMAND]

    @property
    def bus_commands(self) -> list[CommandDescription]:
        return [c for c in self.commands if c.command == BUS_COMMAND]

    def apply_commands(self, catalogue: TransportCatalogue, skip_invalid: bool = False) -> None:
        """
        Add all stops, then all buses, to the catalogue.

        Args:
            catalogue: Catalogue to populate
            skip_invalid: Log and drop requests the catalogue rejects instead of raising
        """
        logger.info(f"Applying {len(self.commands)} commands")

        for command in self.stop_commands:
            try:
                catalogue.add_stop(command.id, parse_coordinates(command.description, command.id))
            except ValueError as e:
                if not skip_invalid:
                    raise
                logger.warning(f"Skipping stop {command.id!r}: {e}")

        for command in self.bus_commands:
            stop_names, is_roundtrip = parse_route(command.description)
            try:
                catalogue.add_bus(command.id, stop_names, is_roundtrip)
            except ValueError as e:
                if not skip_invalid:
                    raise
                logger.warning(f"Skipping bus {command.id!r}: {e}")

        logger.info(f"Catalogue has {catalogue.stop_count} stops, {catalogue.bus_count} buses")


def parse_command_description(line: str) -> CommandDescription:
    """Split ``<Command> <id>: <description>``; returns an empty command on mismatch."""
    colon_pos = line.find(":")
    if colon_pos == -1:
        return CommandDescription()

    space_pos = line.find(" ")
    if space_pos == -1 or space_pos >= colon_pos:
        return CommandDescription()

    id_start = space_pos
    while id_start < colon_pos and line[id_start] == " ":
        id_start += 1
    if id_start >= colon_pos:
        return CommandDescription()

    return CommandDescription(
        command=line[:space_pos],
        id=line[id_start:colon_pos],
        description=line[colon_pos + 1 :],
    )


def parse_coordinates(description: str, stop_name: str = "") -> Coordinates:
    """
    Parse ``lat, lng[, ...]``.

    Fields after the second comma-separated value are ignored. A description
    without a comma yields NaN coordinates.

    Raises:
        ValueError: a coordinate is not a number
    """
    parts = description.split(",")
    if len(parts) < 2:
        logger.warning(f"Stop {stop_name!r} has no coordinates: {description.strip()!r}")
        return Coordinates(math.nan, math.nan)

    try:
        lat = float(parts[0].strip())
        lng = float(parts[1].strip())
    except ValueError as e:
        raise ValueError(
            f"Invalid coordinates for stop {stop_name!r}: {description.strip()!r}"
        ) from e

    return Coordinates(lat, lng)


def parse_route(description: str) -> tuple[list[str], bool]:
    """Split a route description into stop names and the round-trip flag."""
    if ROUNDTRIP_SEPARATOR in description:
        return _split(description, ROUNDTRIP_SEPARATOR), True
    return _split(description, THERE_AND_BACK_SEPARATOR), False


def _split(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter, trimming spaces and dropping empty tokens."""
    tokens = (token.strip(" ") for token in text.split(delimiter))
    return [token for token in tokens if token]


def read_document(stream: TextIO) -> InputDocument:
    """
    Read a request document.

    Layout: a count line, that many base requests, a second count line and
    that many stat requests. The second section may be absent.

    Raises:
        ValueError: a count line is not an integer
    """
    document = InputDocument()
    document.base_requests = _read_section(stream, "base")
    document.stat_requests = _read_section(stream, "stat")
    logger.info(
        f"Read {len(document.base_requests)} base requests, "
        f"{len(document.stat_requests)} stat requests"
    )
    return document


def _read_section(stream: TextIO, label: str) -> list[str]:
    count_line = stream.readline()
    while count_line and not count_line.strip():
        count_line = stream.readline()
    if not count_line:
        return []

    try:
        count = int(count_line.strip())
    except ValueError as e:
        raise ValueError(f"Invalid {label} request count: {count_line.strip()!r}") from e

    lines: list[str] = []
    for _ in range(count):
        line = stream.readline()
        if not line:
            logger.warning(f"Expected {count} {label} requests, got {len(lines)}")
            break
        lines.append(line.rstrip("\r\n"))
    return lines
