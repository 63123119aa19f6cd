"""Tests for the CLI layer (cli/app.py).

Drives ``main(argv)`` and the ``cli()`` error boundary directly; output
is captured with ``capsys``.

Coverage:
* Option parsing into ``CommandOptions``.
* Result lines on stdout for each input base.
* Exit codes and stderr messages for every error class.
* Usage errors raised by argparse.
"""

from __future__ import annotations

import sys

import pytest

from format_number.cli import exit_codes
from format_number.cli.app import CommandOptions, cli, main, parse_options
from format_number.core.models import NumberType
from format_number.exceptions import MissingArgumentError


def _run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    """Invoke the script-level boundary with *args* and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["format-number", *args])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    return int(exc_info.value.code)


# ---------------------------------------------------------------------------
# parse_options
# ---------------------------------------------------------------------------

class TestParseOptions:
    def test_defaults(self) -> None:
        assert parse_options(["12"]) == CommandOptions(number="12")

    def test_number_type_long_flag(self) -> None:
        options = parse_options(["--number-type", "hexadecimal", "ff"])
        assert options.number_type is NumberType.HEXADECIMAL
        assert options.number == "ff"

    def test_number_type_short_flag(self) -> None:
        options = parse_options(["-n", "binary", "101"])
        assert options.number_type is NumberType.BINARY

    def test_number_is_optional(self) -> None:
        assert parse_options([]).number is None

    def test_logging_flags(self) -> None:
        options = parse_options(["-v", "--log-json", "1"])
        assert options.verbose is True
        assert options.log_json is True

    def test_invalid_number_type_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_options(["-n", "octal", "7"])
        assert exc_info.value.code == exit_codes.USAGE_ERROR

    def test_options_are_frozen(self) -> None:
        options = parse_options(["1"])
        with pytest.raises(AttributeError):
            options.number = "2"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# main — successful conversions
# ---------------------------------------------------------------------------

class TestMain:
    def test_integer_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["107"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            "Integer: 107",
            "Hexadecimal: 6b",
            "Binary: 1101011",
        ]

    def test_hexadecimal_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-n", "hexadecimal", "0xFF"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            "Integer: 255",
            "Hexadecimal: ff",
            "Binary: 11111111",
        ]

    def test_binary_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--number-type", "binary", "1010"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            "Integer: 10",
            "Hexadecimal: a",
            "Binary: 1010",
        ]

    def test_long_binary_line_is_not_wrapped(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["-1"]) == exit_codes.SUCCESS
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "Binary: " + "1" * 128

    def test_negative_hexadecimal_after_double_dash(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["-n", "hexadecimal", "--", "-0x10"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "Integer: -16"

    def test_negative_binary_after_double_dash(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["-n", "binary", "--", "-0b101"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "Integer: -5"

    def test_help_mentions_double_dash(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit):
            main(["--help"])
        help_text = " ".join(capsys.readouterr().out.split())
        assert "-- -0x10" in help_text

    def test_leading_zeros_beyond_int_digit_limit(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["0" * 5000 + "1"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines()[0] == "Integer: 1"

    def test_missing_number_raises(self) -> None:
        with pytest.raises(MissingArgumentError):
            main([])

    def test_verbose_logs_to_stderr_only(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert main(["-v", "--log-json", "5"]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out.splitlines()[0] == "Integer: 5"
        assert "number_read" in captured.err


# ---------------------------------------------------------------------------
# cli — error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_success_exits_zero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert _run_cli(monkeypatch, "3") == exit_codes.SUCCESS
        assert "Binary: 11" in capsys.readouterr().out

    def test_invalid_digit(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "-n", "hexadecimal", "g")
        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert captured.out == ""
        assert "Number contains an invalid digit" in captured.err
        assert "Hint:" in captured.err

    def test_overflow(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "9" * 40)
        assert code == exit_codes.GENERAL_ERROR
        assert "Number too large" in capsys.readouterr().err

    def test_very_long_number_is_clean_overflow(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "9" * 5000)
        captured = capsys.readouterr()
        assert code == exit_codes.GENERAL_ERROR
        assert "Number too large" in captured.err
        assert "Unexpected error" not in captured.err

    def test_underflow(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "-" + "9" * 40)
        assert code == exit_codes.GENERAL_ERROR
        assert "Number too small" in capsys.readouterr().err

    def test_missing_argument(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch)
        assert code == exit_codes.GENERAL_ERROR
        assert "No value was entered" in capsys.readouterr().err

    def test_empty_argument(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "")
        assert code == exit_codes.GENERAL_ERROR
        assert "No value was entered" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from format_number.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert _run_cli(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from format_number.cli import app as app_module

        def _explode(argv: list[str] | None = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _explode)
        assert _run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaboom" in capsys.readouterr().err
