import io

import pytest
from hypothesis import given

import bfup

from .generators.program_contents import programs


def preprocessed(program, **kwargs):
    output = io.StringIO()
    bfup.preprocess(io.StringIO(program), output, **kwargs)
    return output.getvalue()


@pytest.mark.parametrize(
    "program, expected",
    [
        ("++++[][]---<><><><>", "++++[][]---<><><><>"),
        ("#5+-#2(>#2(--#0(+++)))", "+++++->---->----"),
        ("$m/thistextwillbeskipped/+$g$\n (#2([-]))(--)mg\n", "+--[-][-]"),
        ("thiswillnotbecopied\\+\\#\\(\\)", ""),
        ("", ""),
        ("#2#3+", "+++"),
        ("$m#2 m+ m(-)", "++--"),
    ],
)
def test_preprocess(program, expected):
    assert preprocessed(program) == expected


def test_preprocess_with_alignment():
    output = preprocessed("#6(#6(+))", line_width=6)
    assert output == "++++++\n++++++\n++++++\n++++++\n++++++\n++++++\n"


def test_preprocess_custom_config():
    config = bfup.Config(operators="ab", number_prefix="*")
    assert preprocessed("*3a+b", config=config) == "aaab"


def test_unopened_delimiter_writes_nothing():
    output = io.StringIO()
    with pytest.raises(bfup.ErrorGroup) as excinfo:
        bfup.preprocess(io.StringIO(")"), output)
    assert len(excinfo.value.errors) == 1
    assert isinstance(excinfo.value.errors[0], bfup.DelimiterUnopenedError)
    assert output.getvalue() == ""


def test_errors_write_nothing():
    output = io.StringIO()
    with pytest.raises(bfup.ErrorGroup):
        bfup.preprocess(io.StringIO("++++(+"), output)
    assert output.getvalue() == ""


@pytest.mark.parametrize("width", [0, -3])
def test_preprocess_invalid_line_width(width):
    with pytest.raises(ValueError):
        preprocessed("+", line_width=width)


def test_preprocess_files(tmp_path):
    source = tmp_path / "program.bfup"
    sink = tmp_path / "program.bf"
    source.write_text("$a(#8+) a>#2a", encoding="utf-8")

    bfup.preprocess(source, sink)

    assert sink.read_text(encoding="utf-8") == "++++++++>++++++++++++++++"


def test_sink_file_not_created_on_error(tmp_path):
    source = tmp_path / "program.bfup"
    sink = tmp_path / "program.bf"
    source.write_text("()", encoding="utf-8")

    with pytest.raises(bfup.ErrorGroup):
        bfup.preprocess(str(source), str(sink))

    assert not sink.exists()


def test_deep_nesting_is_nesting_error():
    output = io.StringIO()
    with pytest.raises(bfup.NestingError) as excinfo:
        bfup.preprocess(io.StringIO("(" * 5000 + "+" + ")" * 5000), output)
    assert isinstance(excinfo.value.__cause__, RecursionError)
    assert output.getvalue() == ""


def test_moderate_nesting():
    assert preprocessed("(" * 100 + "#3+" + ")" * 100) == "+++"


def test_tokenize():
    tokens = bfup.tokenize(io.StringIO("#2(+)"))
    assert tokens == [bfup.Number(2), bfup.Group((bfup.Operator("+"),))]


@given(programs(max_number=2, max_leaves=8))
def test_preprocess_output_contains_only_operators(program):
    assert set(preprocessed(program)) <= set(bfup.Config().operators)
