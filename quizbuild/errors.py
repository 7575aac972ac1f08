"""Errors raised while building and checking quiz questions."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

MARKDOWN_FORMAT = """
    Answer: 999
    Difficulty: 1|2|3

    # Hint

    <!-- markdown -->

    # Explanation

    <!-- markdown -->
"""


def comma_separated(items: Iterable[str]) -> str:
    """Join strings with a comma and a space."""
    return ", ".join(items)


class QuizError(Exception):
    """Base class for every failure reported by the quiz builder."""


class CompiledWithWarningsError(QuizError):
    def __init__(self) -> None:
        super().__init__(
            "program compiled with warnings; make sure every expected warning "
            "is listed in a 'Warnings:' section"
        )


class ExecuteError(QuizError):
    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"failed to execute quiz question: {cause}")


class FilenameFormatError(QuizError):
    def __init__(self) -> None:
        super().__init__("wrong filename format")


class MarkdownFormatError(QuizError):
    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = path
        super().__init__(
            f"{path} does not match the expected format.\n{MARKDOWN_FORMAT}"
        )


class MissingExpectedWarningError(QuizError):
    def __init__(self, warnings: list[str]) -> None:
        self.warnings = list(warnings)
        super().__init__(
            "program compiled without expected warning: "
            + comma_separated(self.warnings)
        )


class RustcError(QuizError):
    def __init__(self, cause: OSError) -> None:
        self.cause = cause
        super().__init__(f"failed to execute rustc: {cause}")


class ShouldCompileError(QuizError):
    def __init__(self) -> None:
        super().__init__("program failed to compile")


class ShouldNotCompileError(QuizError):
    def __init__(self) -> None:
        super().__init__("program should fail to compile")


class UndefinedShouldCompileError(QuizError):
    def __init__(self) -> None:
        super().__init__("program with undefined behavior should compile")


class WrongOutputError(QuizError):
    def __init__(self, expected: str, output: str) -> None:
        self.expected = expected
        self.output = output
        super().__init__(f"wrong output! expected: {expected}, actual: {output}")