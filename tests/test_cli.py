"""Tests for the command-line interface."""

import logging
import subprocess
import sys

import pytest

from whatcharset import PROG_NAME, ScanOptions
from whatcharset.cli import main, parse_options
from whatcharset.errors import ArgumentParseError


def run_main(*argv: str) -> tuple[int, list[str]]:
    lines: list[str] = []
    code = main(list(argv), lines.append)
    return code, lines


def test_parse_options() -> None:
    """Test short and long option names."""
    options = parse_options(["-b", "61", "-s", "a", "-c", "UTF-8", "-f", "a"])
    assert options == ScanOptions(hex_bytes="61", text="a", charset="UTF-8", find="a")

    options = parse_options(["--bytes", "61", "--character-set", "latin-1", "--find", "x", "--strict", "-v"])
    assert options.hex_bytes == "61"
    assert options.charset == "latin-1"
    assert options.find == "x"
    assert options.strict
    assert options.verbose


def test_parse_options_empty() -> None:
    """Test that no arguments parse to an options record without a source."""
    options = parse_options([])
    assert not options.has_source
    assert options.find is None


@pytest.mark.parametrize("argv", [["--nope"], ["-b"], ["-c"]])
def test_parse_options_malformed(argv: list[str]) -> None:
    """Test that malformed command lines raise."""
    with pytest.raises(ArgumentParseError):
        parse_options(argv)


def test_string_with_charset() -> None:
    """Test -s test -c UTF-8."""
    code, lines = run_main("-s", "test", "-c", "UTF-8")

    assert code == 0
    assert lines == [
        "The string (test) has 4 characters.",
        "That consists of 4 bytes.",
        "Hex stream looks like 74657374",
        "Interpreting as UTF-8 returned test",
    ]


def test_single_charset_prints_one_result() -> None:
    """Test that -c yields exactly one result line for that charset."""
    code, lines = run_main("-b", "E9", "-c", "ISO-8859-1")
    results = [line for line in lines if line.startswith("Interpreting as ")]

    assert code == 0
    assert results == ["Interpreting as ISO-8859-1 returned \u00e9"]


def test_bytes_scan_includes_ascii_charsets() -> None:
    """Test -b 61 across all charsets."""
    code, lines = run_main("-b", "61")

    assert code == 0
    assert lines[0] == "Got a byte string of 61"
    for name in ("US-ASCII", "UTF-8", "ISO-8859-1"):
        assert f"Interpreting as {name} returned a" in lines


def test_find_filters_output() -> None:
    """Test that every printed result equals the -f target."""
    code, lines = run_main("-b", "61646D696E", "-f", "admin")
    results = [line for line in lines if line.startswith("Interpreting as ")]

    assert code == 0
    assert "Interpreting as UTF-8 returned admin" in results
    assert all(line.endswith(" returned admin") for line in results)


def test_missing_input() -> None:
    """Test that no byte source is fatal."""
    code, lines = run_main("-c", "UTF-8")

    assert code == 1
    assert lines == ["No string supplied"]


def test_unsupported_charset() -> None:
    """Test that an unknown -c charset is fatal."""
    code, lines = run_main("-b", "61", "-c", "x-bogus")

    assert code == 1
    assert lines[-1] == "Character set x-bogus is unsupported"
    assert not any(line.startswith("Interpreting as ") for line in lines)


def test_malformed_arguments() -> None:
    """Test that parse errors are reported and fatal."""
    code, lines = run_main("-b", "61", "--nope")

    assert code == 1
    assert "unrecognized arguments: --nope" in lines[0]


def test_malformed_hex_continues() -> None:
    """Test that bad hex is reported and scanning goes on with no bytes."""
    code, lines = run_main("-b", "6G", "-c", "UTF-8")

    assert code == 0
    assert lines == [
        "Got a byte string of 6G",
        "Illegal hexadecimal character G at index 1",
        "Interpreting as UTF-8 returned ",
    ]


def test_malformed_hex_strict() -> None:
    """Test that --strict makes bad hex fatal."""
    code, lines = run_main("-b", "616", "--strict")

    assert code == 1
    assert lines == ["Got a byte string of 616", "Odd number of characters."]


def test_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that -h prints usage and exits 0 whatever else is given."""
    with pytest.raises(SystemExit) as excinfo:
        main(["-h", "-c", "x-bogus"])

    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert f"usage: {PROG_NAME}" in out
    assert "--character-set" in out


def test_default_output_is_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that results go to stdout by default."""
    assert main(["-s", "test", "-c", "UTF-8"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Interpreting as UTF-8 returned test"


def test_module_entry_point() -> None:
    """Test python -m whatcharset."""
    proc = subprocess.run(
        [sys.executable, "-m", "whatcharset", "-s", "test", "-c", "UTF-8"],
        capture_output=True,
        text=True,
        encoding="utf-8",
    )
    assert proc.returncode == 0
    assert proc.stdout.splitlines()[-1] == "Interpreting as UTF-8 returned test"

    proc = subprocess.run([sys.executable, "-m", "whatcharset"], capture_output=True, text=True)
    assert proc.returncode == 1
    assert proc.stdout.strip() == "No string supplied"


def test_strict_only_codec_is_unsupported() -> None:
    """Test that -c idna is reported as unsupported."""
    code, lines = run_main("-b", "61", "-c", "idna")

    assert code == 1
    assert lines[-1] == "Character set idna is unsupported"


def test_string_with_undecodable_byte() -> None:
    """Test -s with a surrogate-escaped byte from argv."""
    code, lines = run_main("-s", "a\udcff", "-c", "ISO-8859-1")

    assert code == 0
    assert lines[1:] == [
        "That consists of 2 bytes.",
        "Hex stream looks like 61ff",
        "Interpreting as ISO-8859-1 returned a\u00ff",
    ]


def test_main_leaves_logging_alone(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that main only configures logging when asked to."""
    calls: list[bool] = []
    monkeypatch.setattr("whatcharset.cli.configure_logging", calls.append)

    run_main("-s", "test", "-c", "UTF-8")
    assert calls == []

    assert main(["-s", "test", "-c", "UTF-8", "-v"], lambda line: None, setup_logging=True) == 0
    assert calls == [True]


def test_scan_is_quiet_without_verbose(caplog: pytest.LogCaptureFixture) -> None:
    """Test that a normal scan of non-ASCII bytes logs no warnings."""
    with caplog.at_level(logging.WARNING):
        code, _ = run_main("-b", "C3A9")

    assert code == 0
    assert not caplog.records
