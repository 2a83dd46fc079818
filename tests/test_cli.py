"""Tests for CLI."""

import subprocess
import sys
from pathlib import Path


def _run(*args: str, stdin: str | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "transport_catalogue.cli", *args],
        input=stdin,
        capture_output=True,
        text=True,
    )


def test_cli_query_file(network_input: Path, network_expected: Path) -> None:
    """Test CLI query command answers every stat request."""
    result = _run("query", "--input", str(network_input))

    assert result.returncode == 0
    assert result.stdout == network_expected.read_text(encoding="utf-8")


def test_cli_query_stdin(network_input: Path, network_expected: Path) -> None:
    """Test CLI query command reads stdin when no input is given."""
    result = _run("query", stdin=network_input.read_text(encoding="utf-8"))

    assert result.returncode == 0
    assert result.stdout == network_expected.read_text(encoding="utf-8")


def test_cli_query_invalid(invalid_input: Path) -> None:
    """Test CLI query refuses input with validation errors."""
    result = _run("query", "--input", str(invalid_input))

    assert result.returncode == 1
    assert result.stdout == ""
    assert "Input validation failed" in result.stderr


def test_cli_missing_input(tmp_path: Path) -> None:
    """Test CLI reports a missing input file."""
    result = _run("query", "--input", str(tmp_path / "missing.txt"))

    assert result.returncode == 1
    assert "Input file not found" in result.stderr


def test_cli_validate_basic(network_input: Path) -> None:
    """Test CLI validate command."""
    result = _run("validate", "--input", str(network_input))

    assert result.returncode == 0
    assert "Validation successful" in result.stdout
    assert "Prazhskaya" in result.stdout


def test_cli_validate_invalid(invalid_input: Path) -> None:
    """Test CLI validate command lists errors."""
    result = _run("validate", "--input", str(invalid_input))

    assert result.returncode == 1
    assert "Validation failed" in result.stdout
    assert "non-existent stop Nowhere" in result.stdout


def test_cli_list(network_input: Path) -> None:
    """Test CLI list command."""
    result = _run("list", "--input", str(network_input))

    assert result.returncode == 0
    assert "Found routes: 3" in result.stdout
    assert "2) Bus 750: 5 stops on route, 3 unique stops" in result.stdout
    assert "Stops list: 10" in result.stdout
    assert "Stop Prazhskaya (0 routes)" in result.stdout


def test_cli_render_bus(network_input: Path, tmp_path: Path) -> None:
    """Test CLI render command for a bus by name."""
    result = _run(
        "render", "--input", str(network_input), "--bus", "256", "--output", str(tmp_path)
    )

    assert result.returncode == 0
    assert "SVG saved to" in result.stdout
    assert (tmp_path / "bus_256.svg").exists()


def test_cli_render_stop(network_input: Path, tmp_path: Path) -> None:
    """Test CLI render command for a stop by index."""
    # Stop 4 is Biryulyovo Zapadnoye
    result = _run(
        "render", "--input", str(network_input), "--stop-index", "4", "--output", str(tmp_path)
    )

    assert result.returncode == 0
    assert (tmp_path / "stop_Biryulyovo_Zapadnoye.svg").exists()


def test_cli_render_unknown_bus(network_input: Path, tmp_path: Path) -> None:
    """Test CLI render fails for an unknown bus index."""
    result = _run(
        "render", "--input", str(network_input), "--bus-index", "9", "--output", str(tmp_path)
    )

    assert result.returncode == 1
    assert "nothing to render" in result.stderr


def test_cli_render_best_intersection(intersections_input: Path, tmp_path: Path) -> None:
    """Test CLI render defaults to the best intersection."""
    result = _run("render", "--input", str(intersections_input), "--output", str(tmp_path))

    assert result.returncode == 0
    svg = (tmp_path / "best_intersection_stop.svg").read_text(encoding="utf-8")
    assert "Score (sum): 5" in svg


def test_cli_export(network_input: Path, tmp_path: Path) -> None:
    """Test CLI export command."""
    output = tmp_path / "output"
    result = _run("export", "--input", str(network_input), "--output", str(output))

    assert result.returncode == 0
    assert "Export successful" in result.stdout
    assert (output / "buses.json").exists()
    assert (output / "stops.json").exists()


def test_cli_version() -> None:
    """Test CLI version flag."""
    result = _run("--version")

    assert result.returncode == 0
    assert "0.1.0" in result.stdout


def test_cli_help() -> None:
    """Test CLI help."""
    result = _run("--help")

    assert result.returncode == 0
    assert "query" in result.stdout
    assert "render" in result.stdout


def test_cli_no_command() -> None:
    """Test CLI without a command prints help and fails."""
    result = _run()

    assert result.returncode == 1
    assert "usage" in result.stdout


def test_cli_query_lenient(invalid_input: Path) -> None:
    """Test CLI query skips invalid requests in lenient mode."""
    result = _run("query", "--lenient", "--input", str(invalid_input))

    assert result.returncode == 0
    assert result.stdout == "Bus 1: not found\n"


def test_cli_render_best_intersection_flag(intersections_input: Path, tmp_path: Path) -> None:
    """Test CLI render with an explicit best intersection target."""
    result = _run(
        "render",
        "--input",
        str(intersections_input),
        "--best-intersection",
        "--output",
        str(tmp_path),
    )

    assert result.returncode == 0
    assert (tmp_path / "best_intersection_stop.svg").exists()
    assert not list(tmp_path.glob("bus_*.svg"))
