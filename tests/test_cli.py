"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import unittest.mock
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

if TYPE_CHECKING:
    from pathlib import Path

import pytest

from coffee_commits.analysis import align
from coffee_commits.analysis.alignment import TimeSeriesPoint
from coffee_commits.cli import (
    cmd_build,
    cmd_fetch,
    cmd_info,
    cmd_refresh,
    cmd_serve,
    cmd_stats,
    create_parser,
    main,
)
from coffee_commits.flows.fetch import DataUnavailableError


def _mock_server() -> unittest.mock.MagicMock:
    mock_server = unittest.mock.MagicMock()
    mock_server.__enter__ = unittest.mock.Mock(return_value=mock_server)
    mock_server.__exit__ = unittest.mock.Mock(return_value=False)
    mock_server.serve_forever = unittest.mock.Mock(side_effect=KeyboardInterrupt)
    return mock_server


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "coffee-commits"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    @pytest.mark.parametrize("command", ["info", "fetch", "build", "refresh", "stats", "serve"])
    def test_parser_commands(self, command: str) -> None:
        parser = create_parser()
        args = parser.parse_args([command])
        assert args.command == command

    def test_parser_fetch_force(self) -> None:
        parser = create_parser()
        assert parser.parse_args(["fetch"]).force is False
        assert parser.parse_args(["fetch", "--force"]).force is True

    def test_parser_refresh_force(self) -> None:
        parser = create_parser()
        assert parser.parse_args(["refresh", "--force"]).force is True

    def test_parser_serve_with_port(self) -> None:
        """Parser accepts serve --port."""
        parser = create_parser()
        assert parser.parse_args(["serve"]).port is None
        assert parser.parse_args(["serve", "--port", "3000"]).port == 3000


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        assert cmd_info(argparse.Namespace()) == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
            assert "Application: coffee-commits" in output
            assert "API Ninjas key" in output


class TestCmdFetch:
    """Tests for cmd_fetch function."""

    def test_passes_settings(self) -> None:
        with (
            patch("coffee_commits.cli.fetch_all") as mock_fetch,
            patch("coffee_commits.cli.get_settings") as mock_settings,
        ):
            mock_settings.return_value.api_ninjas_key = "secret"
            mock_settings.return_value.cache_hours = 3
            mock_fetch.return_value = {}

            exit_code = cmd_fetch(argparse.Namespace(force=True))

            assert exit_code == 0
            mock_fetch.assert_called_once_with(api_key="secret", cache_hours=3, force=True)

    def test_invalid_data_returns_one(self) -> None:
        with (
            patch(
                "coffee_commits.cli.fetch_all",
                side_effect=DataUnavailableError("Invalid coffee prices data"),
            ),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            assert cmd_fetch(argparse.Namespace(force=False)) == 1
            assert "Invalid coffee prices data" in mock_stderr.getvalue()


class TestCmdBuild:
    """Tests for cmd_build function."""

    def test_success(self) -> None:
        with patch("coffee_commits.cli.build_all") as mock_build:
            mock_build.return_value = {"pages": 1, "output": "data/derived/site/index.html"}
            assert cmd_build(argparse.Namespace()) == 0

    def test_no_data_returns_one(self) -> None:
        with patch("coffee_commits.cli.build_all", return_value={"error": "no data"}):
            assert cmd_build(argparse.Namespace()) == 1


class TestCmdRefresh:
    """Tests for cmd_refresh function."""

    def test_returns_zero(self) -> None:
        """Refresh command returns exit code 0."""
        with (
            patch("coffee_commits.cli.fetch_all") as mock_fetch,
            patch("coffee_commits.cli.build_all") as mock_build,
        ):
            mock_fetch.return_value = {"coffee_months": 12, "activity_months": 12}
            mock_build.return_value = {"pages": 1, "output": "site/index.html"}

            assert cmd_refresh(argparse.Namespace()) == 0

    def test_calls_fetch_then_build(self) -> None:
        """Refresh calls fetch_all before build_all."""
        call_order: list[str] = []

        def mock_fetch(**_kwargs: object) -> dict[str, object]:
            call_order.append("fetch")
            return {}

        def mock_build() -> dict[str, object]:
            call_order.append("build")
            return {}

        with (
            patch("coffee_commits.cli.fetch_all", side_effect=mock_fetch),
            patch("coffee_commits.cli.build_all", side_effect=mock_build),
        ):
            cmd_refresh(argparse.Namespace())
            assert call_order == ["fetch", "build"]

    def test_fetch_failure_skips_build(self) -> None:
        with (
            patch("coffee_commits.cli.fetch_all", side_effect=DataUnavailableError("bad")),
            patch("coffee_commits.cli.build_all") as mock_build,
            patch("sys.stderr", new=StringIO()),
        ):
            assert cmd_refresh(argparse.Namespace(force=False)) == 1
            mock_build.assert_not_called()


class TestCmdStats:
    """Tests for cmd_stats function."""

    def test_no_data_returns_one(self) -> None:
        with (
            patch("coffee_commits.cli.load_coffee_prices") as mock_coffee,
            patch("coffee_commits.cli.load_developer_activity") as mock_activity,
            patch("sys.stderr", new=StringIO()),
        ):
            mock_coffee.fn.return_value = None
            mock_activity.fn.return_value = []
            assert cmd_stats(argparse.Namespace()) == 1

    def test_prints_summary(self) -> None:
        aligned = align(
            [TimeSeriesPoint("2023-01", 3.45), TimeSeriesPoint("2023-02", 3.65)],
            [TimeSeriesPoint("2023-02", 1380)],
        )
        analysis = unittest.mock.Mock()
        analysis.aligned = aligned
        analysis.summaries.series_a.min = 3.45
        analysis.summaries.series_a.max = 3.65
        analysis.summaries.series_a.avg = 3.55
        analysis.summaries.series_a.trend = 0.2
        analysis.summaries.series_b = None
        analysis.correlation = 0.0

        with (
            patch("coffee_commits.cli.load_coffee_prices") as mock_coffee,
            patch("coffee_commits.cli.load_developer_activity") as mock_activity,
            patch("coffee_commits.cli.analyze") as mock_analyze,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            mock_coffee.fn.return_value = []
            mock_activity.fn.return_value = []
            mock_analyze.fn.return_value = analysis

            assert cmd_stats(argparse.Namespace()) == 0

            output = mock_stdout.getvalue()
            assert "Months: 2 (2023-01 to 2023-02)" in output
            assert "trend=+0.20" in output
            assert "Developer activity: no data" in output
            assert "Correlation: 0.000" in output


class TestCmdServe:
    """Tests for cmd_serve function."""

    def test_missing_site_dir_returns_one(self, tmp_path: Path) -> None:
        """Serve returns 1 when the site hasn't been built."""
        with (
            patch("coffee_commits.cli.get_settings") as mock_settings,
            patch("sys.stderr", new=StringIO()),
        ):
            mock_settings.return_value.data_dir = tmp_path
            assert cmd_serve(argparse.Namespace(port=8080)) == 1

    def test_uses_port_from_args(self, tmp_path: Path) -> None:
        """Serve uses --port when provided."""
        (tmp_path / "derived" / "site").mkdir(parents=True)

        with (
            patch("coffee_commits.cli.get_settings") as mock_settings,
            patch(
                "coffee_commits.cli.http.server.HTTPServer", return_value=_mock_server()
            ) as mock_ctor,
        ):
            mock_settings.return_value.data_dir = tmp_path
            assert cmd_serve(argparse.Namespace(port=9999)) == 0
            mock_ctor.assert_called_once()
            assert mock_ctor.call_args[0][0] == ("", 9999)

    def test_uses_port_from_settings_when_none(self, tmp_path: Path) -> None:
        """Serve falls back to api_port from settings."""
        (tmp_path / "derived" / "site").mkdir(parents=True)

        with (
            patch("coffee_commits.cli.get_settings") as mock_settings,
            patch(
                "coffee_commits.cli.http.server.HTTPServer", return_value=_mock_server()
            ) as mock_ctor,
        ):
            mock_settings.return_value.data_dir = tmp_path
            mock_settings.return_value.api_port = 5555
            cmd_serve(argparse.Namespace(port=None))
            assert mock_ctor.call_args[0][0] == ("", 5555)


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["coffee-commits"]):
            assert main() == 0

    @pytest.mark.parametrize(
        ("command", "handler"),
        [
            ("info", "cmd_info"),
            ("fetch", "cmd_fetch"),
            ("build", "cmd_build"),
            ("refresh", "cmd_refresh"),
            ("stats", "cmd_stats"),
            ("serve", "cmd_serve"),
        ],
    )
    def test_command_dispatch(self, command: str, handler: str) -> None:
        with (
            patch("sys.argv", ["coffee-commits", command]),
            patch(f"coffee_commits.cli.{handler}") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            assert main() == 0
            mock_cmd.assert_called_once()

    def test_debug_prints_settings(self) -> None:
        with (
            patch("sys.argv", ["coffee-commits", "--debug", "info"]),
            patch("coffee_commits.cli.cmd_info", return_value=0),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            main()
            assert "Debug mode enabled" in mock_stdout.getvalue()

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("sys.argv", ["coffee-commits", "info"]),
            patch("coffee_commits.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(command="unknown")
            assert main() == 1
