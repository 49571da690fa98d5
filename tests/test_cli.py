import io
import json
import logging

import pytest
from colorama import Fore, Style

from _bfup.cli import (
    DEFAULT_LINE_WIDTH,
    _LevelPrefixFormatter,
    main,
    parse_cli_arguments,
)


@pytest.fixture
def stdin(monkeypatch):
    def set_stdin(contents):
        monkeypatch.setattr("sys.stdin", io.StringIO(contents))

    return set_stdin


def test_default_arguments():
    args = parse_cli_arguments([])
    assert args.input_filepath is None
    assert args.output_filepath is None
    assert args.line_width == DEFAULT_LINE_WIDTH
    assert args.symbols == {}
    assert not args.no_newline


def test_no_align_disables_line_width():
    assert parse_cli_arguments(["-n"]).line_width is None


def test_no_align_conflicts_with_line_width():
    with pytest.raises(SystemExit) as excinfo:
        parse_cli_arguments(["-n", "-l", "5"])
    assert excinfo.value.code == 2


@pytest.mark.parametrize("width", ["0", "-2", "wide"])
def test_invalid_line_width(width):
    with pytest.raises(SystemExit):
        parse_cli_arguments([f"--line-width={width}"])


def test_config_file_conflicts_with_symbols(capsys):
    with pytest.raises(SystemExit):
        parse_cli_arguments(["-C", "config.json", "-m", "@"])
    assert "not allowed with --macro-prefix" in capsys.readouterr().err


def test_short_symbol_options():
    args = parse_cli_arguments(["-+", "ab", "-#", "*"])
    assert args.symbols == {"operators": "ab", "number_prefix": "*"}


def test_prefix_must_be_single_character():
    with pytest.raises(SystemExit):
        parse_cli_arguments(["--number-prefix", "##"])


def test_stdin_to_stdout(stdin, capsys):
    stdin("#40+")
    assert main([]) == 0
    assert capsys.readouterr().out == "+" * 32 + "\n" + "+" * 8 + "\n"


def test_no_align_no_newline(stdin, capsys):
    stdin("#40+")
    assert main(["-n", "-b"]) == 0
    assert capsys.readouterr().out == "+" * 40


def test_line_width(stdin, capsys):
    stdin("#6(#6(+))")
    assert main(["-l", "6", "-b"]) == 0
    assert capsys.readouterr().out == "++++++\n" * 6


def test_symbol_options(stdin, capsys):
    stdin("*3{ab}")
    assert main(
        [
            "-n",
            "--operators",
            "ab",
            "--number-prefix",
            "*",
            "--group-start-delimiter",
            "{",
            "--group-end-delimiter",
            "}",
        ]
    ) == 0
    assert capsys.readouterr().out == "ababab\n"


def test_files(tmp_path, capsys):
    source = tmp_path / "in.bfup"
    sink = tmp_path / "out.bf"
    source.write_text("$m(+-)#2m", encoding="utf-8")

    assert main([str(source), "-o", str(sink), "-n"]) == 0

    assert sink.read_text(encoding="utf-8") == "+-+-\n"
    assert capsys.readouterr().out == ""


def test_config_file(tmp_path, stdin, capsys):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"operators": "ab"}), encoding="utf-8")
    stdin("#2a+b")

    assert main(["-C", str(config), "-n"]) == 0
    assert capsys.readouterr().out == "aab\n"


def test_invalid_config_file(tmp_path, stdin, capsys):
    config = tmp_path / "config.json"
    config.write_text('{"number_prefix": "+"}', encoding="utf-8")
    stdin("+")

    assert main(["-C", str(config)]) == 1
    err = capsys.readouterr().err
    assert "error: failed to parse config" in err
    assert "number prefix cannot be operator." in err


def test_invalid_symbols(stdin, capsys):
    stdin("+")
    assert main(["-m", "+"]) == 1
    err = capsys.readouterr().err
    assert "error: invalid configuration" in err
    assert "macro prefix cannot be operator." in err


def test_syntax_errors_are_reported(stdin, capsys):
    stdin("(#+)())")
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == (
        "error: failure while preprocessing\n"
        "\n"
        "[1:2]: number prefix '#' must be followed by number.\n"
        "[1:6]: group is empty ('()').\n"
        "[1:7]: ')' must have a preceding '('.\n"
    )


def test_output_file_untouched_on_error(tmp_path, stdin):
    sink = tmp_path / "out.bf"
    sink.write_text("previous", encoding="utf-8")
    stdin(")")

    assert main(["-o", str(sink)]) == 1
    assert sink.read_text(encoding="utf-8") == "previous"


def test_missing_input_file(tmp_path, capsys):
    missing = tmp_path / "missing.bfup"
    assert main([str(missing)]) == 1
    assert f"error: failed to open '{missing}'" in capsys.readouterr().err


def test_license(capsys):
    assert main(["-L"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("bfup ")
    assert "GNU General Public License" in out


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("bfup ")


def test_verbose_logs_macros(stdin, capsys):
    stdin("$m+m")
    assert main(["-v", "-n"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "+\n"
    assert "debug: " in captured.err
    assert "binding macro 'm'" in captured.err


def test_deep_nesting_is_reported(stdin, capsys):
    stdin("(" * 5000 + "+" + ")" * 5000)
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: failure while preprocessing\n")
    assert "nested too deeply" in captured.err
    assert "Traceback" not in captured.err


def make_record(level):
    return logging.LogRecord("bfup", level, __file__, 1, "went wrong", None, None)


def test_error_prefix_without_colour():
    formatter = _LevelPrefixFormatter("%(message)s")
    assert formatter.format(make_record(logging.ERROR)) == "error: went wrong"


def test_error_prefix_in_colour():
    formatter = _LevelPrefixFormatter("%(message)s", colour=True)
    assert formatter.format(make_record(logging.ERROR)) == (
        f"{Style.BRIGHT}{Fore.RED}error:{Style.RESET_ALL} went wrong"
    )


def test_debug_prefix_is_never_coloured():
    formatter = _LevelPrefixFormatter("%(message)s", colour=True)
    assert formatter.format(make_record(logging.DEBUG)) == "debug: went wrong"


def test_no_colour_when_stderr_is_captured(stdin, capsys):
    stdin(")")
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("error: ")
