"""Check every quiz question and render them into a script for the website."""

from __future__ import annotations

import enum
import json
import os
import re
import subprocess
import sys
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, field
from pathlib import Path

from markdown_it import MarkdownIt

from .errors import (
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
)

__all__ = [
    "MARKDOWN_FORMAT",
    "MARKDOWN_REGEX",
    "Question",
    "QuestionMarkdown",
    "Status",
    "check_answer",
    "find_question_files",
    "parse_markdown",
    "parse_markdown_text",
    "question_number",
    "render_all",
    "render_to_html",
    "run",
    "rustc_command",
    "work",
]

MARKDOWN_REGEX = r"""
    \AAnswer:\x20(?P<answer>undefined|error|[0-9]+)\n
    Difficulty:\x20(?P<difficulty>1|2|3)\n
    (?:Warnings:\x20(?P<warnings>[a-z_,\x20]+)\n
    )?\n
    \x23\x20Hint\n
    \n
    (?P<hint>.*)
    \n
    \x23\x20Explanation\n
    \n
    (?P<explanation>.*)
    \Z
"""

_MARKDOWN_PATTERN = re.compile(MARKDOWN_REGEX, re.MULTILINE | re.DOTALL | re.VERBOSE)
_FILENAME_PATTERN = re.compile(r"questions/(?P<num>[0-9]{3})[a-z0-9-]+\.rs")
_EXE_SUFFIX = ".exe" if os.name == "nt" else ""
_OUT_DIR_NAME = "rust-quiz"


@dataclass
class Question:
    """A checked question as published on the website."""

    code: str
    difficulty: int
    answer: str
    hint: str
    explanation: str


@dataclass
class QuestionMarkdown:
    """The parsed companion markdown file of a question."""

    answer: str
    difficulty: int
    warnings: list[str] = field(default_factory=list)
    hint: str = ""
    explanation: str = ""


class Status(enum.Enum):
    OK = "ok"
    ERR = "err"


def parse_markdown_text(content: str, path: str | os.PathLike[str]) -> QuestionMarkdown:
    """Parse markdown text; ``path`` is only used in the error message."""
    match = _MARKDOWN_PATTERN.search(content)
    if match is None:
        raise MarkdownFormatError(path)
    warnings_text = match.group("warnings")
    warnings = (
        [word.strip() for word in warnings_text.split(",")] if warnings_text else []
    )
    return QuestionMarkdown(
        answer=match.group("answer"),
        difficulty=int(match.group("difficulty")),
        warnings=warnings,
        hint=render_to_html(match.group("hint")),
        explanation=render_to_html(match.group("explanation")),
    )


def parse_markdown(path: str | os.PathLike[str]) -> QuestionMarkdown:
    """Read and parse a question's markdown file."""
    return parse_markdown_text(Path(path).read_text(encoding="utf-8"), path)


def render_to_html(markdown: str) -> str:
    """Render CommonMark to HTML, opening links in a new tab."""
    html = MarkdownIt("commonmark").render(markdown)
    return html.replace('<a href="', '<a target="_blank" href="')


def question_number(path: str | os.PathLike[str]) -> int:
    """Return the three-digit number in a question's file name."""
    match = _FILENAME_PATTERN.search(Path(path).as_posix())
    if match is None:
        raise FilenameFormatError()
    return int(match.group("num"))


def rustc_command(out_dir: str | os.PathLike[str], path: str | os.PathLike[str]) -> list[str]:
    """Build the base compiler command line for a question."""
    return ["rustc", str(path), "--edition=2021", "--out-dir", str(out_dir)]


def _compiles(command: list[str]) -> bool:
    try:
        completed = subprocess.run(command, stderr=subprocess.DEVNULL, check=False)
    except OSError as exc:
        raise RustcError(exc) from exc
    return completed.returncode == 0


def _deny_warnings_command(out_dir: Path, path: Path, allowed: list[str]) -> list[str]:
    command = rustc_command(out_dir, path) + ["--deny=warnings"]
    for warning in allowed:
        command += ["--allow", warning]
    return command


def check_answer(path: str | os.PathLike[str], expected: str, warnings: list[str]) -> None:
    """Compile and run a question, raising if it disagrees with its answer."""
    path = Path(path)
    out_dir = Path(tempfile.gettempdir()) / _OUT_DIR_NAME

    status = (
        Status.OK
        if _compiles(_deny_warnings_command(out_dir, path, warnings))
        else Status.ERR
    )

    if status is Status.ERR and _compiles(
        rustc_command(out_dir, path) + ["--allow=warnings"]
    ):
        raise CompiledWithWarningsError()

    if expected == "undefined":
        if status is Status.ERR:
            raise UndefinedShouldCompileError()
    elif expected == "error":
        if status is Status.OK:
            raise ShouldNotCompileError()
    elif status is Status.ERR:
        raise ShouldCompileError()
    else:
        run(out_dir, path, expected)

    if status is Status.OK:
        missing = [
            check
            for check in warnings
            if _compiles(
                _deny_warnings_command(
                    out_dir, path, [w for w in warnings if w != check]
                )
            )
        ]
        if missing:
            raise MissingExpectedWarningError(missing)


def run(out_dir: str | os.PathLike[str], path: str | os.PathLike[str], expected: str) -> None:
    """Run a compiled question and compare its output with ``expected``."""
    exe = Path(out_dir) / (Path(path).stem + _EXE_SUFFIX)
    try:
        completed = subprocess.run([str(exe)], capture_output=True, check=False)
    except OSError as exc:
        raise ExecuteError(exc) from exc
    try:
        output = completed.stdout.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise QuizError(str(exc)) from exc
    if output != expected:
        raise WrongOutputError(expected=expected, output=output)


def work(path: str | os.PathLike[str]) -> tuple[int, Question]:
    """Check one question file and return its number and published form."""
    path = Path(path)
    code = path.read_text(encoding="utf-8")
    markdown = parse_markdown(path.with_suffix(".md"))
    check_answer(path, markdown.answer, markdown.warnings)
    number = question_number(path)
    return number, Question(
        code=code,
        difficulty=markdown.difficulty,
        answer=markdown.answer,
        hint=markdown.hint,
        explanation=markdown.explanation,
    )


def find_question_files(directory: str | os.PathLike[str]) -> list[Path]:
    """List the question sources in a directory, sorted."""
    return sorted(
        entry for entry in Path(directory).iterdir() if str(entry).endswith(".rs")
    )


def _error_text(error: BaseException) -> str:
    if sys.stderr.isatty():
        return f"\x1b[1;31mERROR\x1b[0;1m: {error}\x1b[0m"
    return f"ERROR: {error}"


def _evaluate(path: Path) -> tuple[list[str], tuple[int, Question] | None]:
    lines = [f"evaluating {path}"]
    try:
        return lines, work(path)
    except (QuizError, OSError) as exc:
        lines.append(_error_text(exc))
        return lines, None


def render_all(root: str | os.PathLike[str] = ".") -> dict[int, Question]:
    """Check every question under ``root`` and write ``docs/questions.js``.

    Exits with status 1 after reporting if any question fails.
    """
    root = Path(root)
    files = find_question_files(root / "questions")

    questions: dict[int, Question] = {}
    with ThreadPoolExecutor(max_workers=os.cpu_count() or 1) as pool:
        for lines, result in pool.map(_evaluate, files):
            for line in lines:
                print(line, file=sys.stderr)
            if result is not None:
                number, question = result
                questions[number] = question

    if len(questions) < len(files):
        raise SystemExit(1)

    payload = {
        str(number): asdict(question) for number, question in sorted(questions.items())
    }
    javascript = f"var questions = {json.dumps(payload, indent=2, ensure_ascii=False)};\n"
    (root / "docs" / "questions.js").write_text(javascript, encoding="utf-8")
    return dict(sorted(questions.items()))