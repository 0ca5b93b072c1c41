"""End-to-end tests for the textcal command line."""

import logging
from datetime import date
from pathlib import Path

import pytest

from textcal import __version__
from textcal.__main__ import EXIT_CONFIG_ERROR, _create_parser, main, run

pytestmark = pytest.mark.integration

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestParser:
    """Tests for argument parsing."""

    def test_parser_when_no_args_then_all_unset(self) -> None:
        args = _create_parser().parse_args([])

        assert args.month is None
        assert args.year is None
        assert args.show_surrounding is False
        assert args.starting_weekday is None
        assert args.days_per_week is None
        assert args.config is None
        assert args.debug is False

    def test_parser_when_short_flags_then_parsed(self) -> None:
        args = _create_parser().parse_args(
            ["-m", "2", "-y", "2016", "-S", "-w", "1", "-n", "5", "-c", "cal.yaml"]
        )

        assert (args.month, args.year) == (2, 2016)
        assert args.show_surrounding is True
        assert (args.starting_weekday, args.days_per_week) == (1, 5)
        assert args.config == "cal.yaml"

    def test_parser_when_month_not_a_number_then_exits(self) -> None:
        with pytest.raises(SystemExit):
            _create_parser().parse_args(["-m", "feb"])

    def test_parser_when_version_flag_then_prints_version(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            _create_parser().parse_args(["-v"])

        assert exc_info.value.code == 0
        assert f"textcal version {__version__}" in capsys.readouterr().out


class TestRun:
    """Tests for run() with a fixed reference date."""

    def test_run_when_no_selection_then_current_month(self) -> None:
        args = _create_parser().parse_args([])

        output = run(args, today=date(2016, 2, 3))

        assert "February 2016" in output
        assert "January" not in output

    def test_run_when_year_only_then_twelve_headings(self) -> None:
        args = _create_parser().parse_args(["-y", "2016"])

        output = run(args, today=date(2020, 1, 1))

        months = ["January", "February", "March", "April", "May", "June", "July",
                  "August", "September", "October", "November", "December"]
        positions = [output.index(f"{name} 2016") for name in months]
        assert positions == sorted(positions)

    def test_run_when_surrounding_then_three_months(self) -> None:
        args = _create_parser().parse_args(["-m", "1", "-y", "2016", "-S"])

        output = run(args, today=date(2020, 1, 1))

        assert output.index("December 2015") < output.index("January 2016")
        assert output.index("January 2016") < output.index("February 2016")

    def test_run_when_weekday_flags_then_override_config(self, tmp_path: Path) -> None:
        config = tmp_path / "cal.yaml"
        config.write_text("startDayOfWeek: 0\nnumDaysInWeek: 7\n", encoding="utf-8")
        args = _create_parser().parse_args(["-m", "2", "-y", "2016", "-w", "1", "-n", "5", "-c", str(config)])

        output = run(args, today=date(2020, 1, 1))

        assert "Mon Tue Wed Thu Fri" in output
        assert "Sat" not in output
        assert "Sun" not in output

    def test_run_when_config_from_environment_then_used(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        config = tmp_path / "env.yaml"
        config.write_text("monthHeadingFormatString: '%m/%Y'\n", encoding="utf-8")
        monkeypatch.setenv("TEXTCAL_CONFIG_FILE", str(config))

        output = run(_create_parser().parse_args(["-m", "2", "-y", "2016"]), today=date(2020, 1, 1))

        assert "02/2016" in output


class TestMain:
    """Tests for main() exit codes and streams."""

    def test_main_when_month_and_year_then_prints_calendar(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-m", "2", "-y", "2016"]) == 0

        captured = capsys.readouterr()
        assert "February 2016" in captured.out
        assert " 28  29" in captured.out

    def test_main_when_html_config_then_prints_markup(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = PROJECT_ROOT / "config" / "html.yaml.example"

        assert main(["-m", "2", "-y", "2016", "-c", str(config)]) == 0

        out = capsys.readouterr().out
        assert out.startswith("<div class='calendars'>")
        assert "<th>Sun</th>" in out

    def test_main_when_config_invalid_then_exit_code_and_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("numDaysInWeak: 5\n", encoding="utf-8")

        assert main(["-c", str(config)]) == EXIT_CONFIG_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("textcal: ")
        assert str(config) in captured.err

    def test_main_when_config_missing_then_defaults_used(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-m", "2", "-y", "2016", "-c", str(tmp_path / "missing.yaml")]) == 0

        assert "February 2016" in capsys.readouterr().out

    def test_main_when_surrounding_past_last_year_then_error(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["-m", "12", "-y", "9999", "-S"]) == EXIT_CONFIG_ERROR

        assert capsys.readouterr().err.startswith("textcal: ")

    def test_main_when_debug_env_invalid_then_exit_code_and_stderr(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("TEXTCAL_DEBUG", "maybe")

        assert main(["-m", "2", "-y", "2016"]) == EXIT_CONFIG_ERROR

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("textcal: invalid TEXTCAL_* environment variable")

    def test_main_when_config_env_empty_then_defaults_used(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("TEXTCAL_CONFIG_FILE", "")

        assert main(["-m", "2", "-y", "2016"]) == 0

        assert "February 2016" in capsys.readouterr().out

    def test_main_when_debug_env_true_then_textcal_logs_at_debug(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("TEXTCAL_DEBUG", "true")

        assert main(["-m", "2", "-y", "2016"]) == 0

        assert logging.getLogger("textcal").level == logging.DEBUG
