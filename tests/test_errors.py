import pytest

from quizbuild.errors import (
    MARKDOWN_FORMAT,
    CompiledWithWarningsError,
    ExecuteError,
    FilenameFormatError,
    MarkdownFormatError,
    MissingExpectedWarningError,
    QuizError,
    RustcError,
    ShouldCompileError,
    ShouldNotCompileError,
    UndefinedShouldCompileError,
    WrongOutputError,
    comma_separated,
)


def test_comma_separated_joins():
    assert comma_separated(["a", "b", "c"]) == "a, b, c"


def test_comma_separated_single_and_empty():
    assert comma_separated(["only"]) == "only"
    assert comma_separated([]) == ""


@pytest.mark.parametrize(
    "error, message",
    [
        (CompiledWithWarningsError(),
         "program compiled with warnings; make sure every expected warning "
         "is listed in a 'Warnings:' section"),
        (FilenameFormatError(), "wrong filename format"),
        (ShouldCompileError(), "program failed to compile"),
        (ShouldNotCompileError(), "program should fail to compile"),
        (UndefinedShouldCompileError(),
         "program with undefined behavior should compile"),
    ],
)
def test_fixed_messages(error, message):
    assert str(error) == message
    assert isinstance(error, QuizError)


def test_wrong_output_message_and_fields():
    err = WrongOutputError(expected="112", output="121")
    assert str(err) == "wrong output! expected: 112, actual: 121"
    assert err.expected == "112"
    assert err.output == "121"


def test_missing_expected_warning_message():
    err = MissingExpectedWarningError(["unused_variables", "dead_code"])
    assert str(err) == (
        "program compiled without expected warning: unused_variables, dead_code"
    )
    assert err.warnings == ["unused_variables", "dead_code"]


def test_markdown_format_includes_path_and_format():
    err = MarkdownFormatError("questions/001-x.md")
    text = str(err)
    assert text.startswith("questions/001-x.md does not match the expected format.\n")
    assert text.endswith(MARKDOWN_FORMAT)


def test_execute_and_rustc_wrap_cause():
    cause = FileNotFoundError("no such file")
    execute = ExecuteError(cause)
    rustc = RustcError(cause)
    assert str(execute) == "failed to execute quiz question: no such file"
    assert str(rustc) == "failed to execute rustc: no such file"
    assert execute.cause is cause