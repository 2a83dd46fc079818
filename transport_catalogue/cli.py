"""Command-line interface for transport-catalogue."""

import argparse
import contextlib
import logging
import sys
from pathlib import Path
from typing import TextIO

from transport_catalogue.api import (
    load_catalogue,
    process,
    render_best_intersection,
    render_bus,
    render_stop,
    validate,
)
from transport_catalogue.core.catalogue import TransportCatalogue
from transport_catalogue.core.models import RenderConfig
from transport_catalogue.output.json import write_json_files
from transport_catalogue.text.reader import read_document
from transport_catalogue.text.stat_reader import format_bus_stat
from transport_catalogue.version import VERSION


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def open_input(path: str | None) -> contextlib.AbstractContextManager[TextIO]:
    """Open the input file, or stdin when no path is given."""
    if path is None or path == "-":
        return contextlib.nullcontext(sys.stdin)
    if not Path(path).is_file():
        raise FileNotFoundError(f"Input file not found: {path}")
    return open(path, encoding="utf-8")


def _load(path: str | None) -> TransportCatalogue:
    with open_input(path) as f:
        document = read_document(f)
    return load_catalogue(document)


def cmd_query(args: argparse.Namespace) -> int:
    """Execute query command."""
    try:
        with open_input(args.input) as f:
            process(f, sys.stdout, strict=not args.lenient)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Query failed")
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Execute validate command."""
    try:
        with open_input(args.input) as f:
            report = validate(f)
        if report.valid:
            print("Validation successful!")
            print(f"Stats: {report.stats}")
            if report.warnings:
                print(f"Warnings ({len(report.warnings)}):")
                for warning in report.warnings:
                    print(f"  - {warning}")
            return 0
        else:
            print(f"Validation failed with {len(report.errors)} errors:")
            for error in report.errors:
                print(f"  - {error}")
            return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Validation failed")
        return 1


def cmd_list(args: argparse.Namespace) -> int:
    """Execute list command."""
    try:
        catalogue = _load(args.input)

        buses = catalogue.get_all_buses()
        print(f"Found routes: {len(buses)}")
        for i, bus in enumerate(buses, start=1):
            print(f"{i}) " + format_bus_stat(bus.name, catalogue.get_bus_stat(bus.name)))

        stops = catalogue.get_all_stops()
        print(f"\nStops list: {len(stops)}")
        for i, stop in enumerate(stops, start=1):
            route_count = len(catalogue.get_buses_by_stop(stop))
            print(f"{i}) Stop {stop.name} ({route_count} routes)")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Listing failed")
        return 1


def cmd_render(args: argparse.Namespace) -> int:
    """Execute render command."""
    config = RenderConfig(
        width=args.width,
        height=args.height,
        padding=args.padding,
        max_routes_in_stop_svg=args.max_routes,
    )
    output_dir = Path(args.output)

    try:
        catalogue = _load(args.input)

        no_target = args.bus is None and args.bus_index is None and args.stop_index is None

        if args.best_intersection or no_target:
            path = render_best_intersection(catalogue, output_dir, config)
            target = "Intersection"
        elif args.bus is not None:
            path = render_bus(catalogue, args.bus, output_dir, config)
            target = f"Bus {args.bus}"
        elif args.bus_index is not None:
            path = render_bus(catalogue, args.bus_index, output_dir, config)
            target = f"Bus #{args.bus_index}"
        else:
            path = render_stop(catalogue, args.stop_index, output_dir, config)
            target = f"Stop #{args.stop_index}"

        if path is None:
            print(f"{target}: nothing to render", file=sys.stderr)
            return 1

        print(f"SVG saved to: {path}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Rendering failed")
        return 1


def cmd_export(args: argparse.Namespace) -> int:
    """Execute export command."""
    try:
        catalogue = _load(args.input)
        files = write_json_files(Path(args.output), catalogue)
        print("Export successful!")
        for filename, path in files.items():
            print(f"  {filename}: {path}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        logging.exception("Export failed")
        return 1


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="transport-catalogue",
        description="Build a transport catalogue from text requests and query it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Query command
    query_parser = subparsers.add_parser("query", help="Answer stat requests (batch mode)")
    query_parser.add_argument("--input", help="Request file (default: stdin)")
    query_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip invalid requests instead of failing validation",
    )
    query_parser.set_defaults(func=cmd_query)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate base requests")
    validate_parser.add_argument("--input", help="Request file (default: stdin)")
    validate_parser.set_defaults(func=cmd_validate)

    # List command
    list_parser = subparsers.add_parser("list", help="List routes and stops with statistics")
    list_parser.add_argument("--input", help="Request file (default: stdin)")
    list_parser.set_defaults(func=cmd_list)

    # Render command
    render_parser = subparsers.add_parser("render", help="Render a bus or stop to SVG")
    render_parser.add_argument("--input", required=True, help="Request file")
    render_parser.add_argument(
        "--output", default=".", help="Output directory (default: current directory)"
    )
    target = render_parser.add_mutually_exclusive_group()
    target.add_argument("--bus", help="Render bus by name")
    target.add_argument("--bus-index", type=int, help="Render bus by 1-based index")
    target.add_argument("--stop-index", type=int, help="Render stop by 1-based index")
    target.add_argument(
        "--best-intersection",
        action="store_true",
        help="Render the stop where the two shortest routes meet (default)",
    )
    render_parser.add_argument(
        "--width", type=float, default=800.0, help="Canvas width (default: 800)"
    )
    render_parser.add_argument(
        "--height", type=float, default=600.0, help="Canvas height (default: 600)"
    )
    render_parser.add_argument(
        "--padding", type=float, default=50.0, help="Canvas padding (default: 50)"
    )
    render_parser.add_argument(
        "--max-routes",
        type=int,
        default=2,
        help="Maximum routes drawn on a stop map (default: 2)",
    )
    render_parser.set_defaults(func=cmd_render)

    # Export command
    export_parser = subparsers.add_parser("export", help="Export catalogue summary as JSON")
    export_parser.add_argument("--input", required=True, help="Request file")
    export_parser.add_argument("--output", required=True, help="Output directory")
    export_parser.set_defaults(func=cmd_export)

    # Parse and execute
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
