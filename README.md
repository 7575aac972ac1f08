# quizbuild

`quizbuild` checks a directory of quiz questions against the compiler and
builds the data file that the quiz website loads. It can also serve the site
locally.

## Repository layout

Run the command from a directory that holds:

- `questions/` with one program per question. Every file in it whose name
  ends in `.rs` is treated as a question and must be named `NNN-some-title.rs`
  (three digits, then lower-case letters, digits and dashes). Beside each one
  is a `NNN-some-title.md` file with the answer and its explanation.
- `docs/`, where `questions.js` is written.

Each markdown file has this shape:

```
Answer: 999
Difficulty: 1|2|3

# Hint

<!-- markdown -->

# Explanation

<!-- markdown -->
```

`Answer` is the exact output the program prints, or `error` if it must fail
to compile, or `undefined` if its behaviour is undefined. Right after the
`Difficulty` line there may be a `Warnings: lint_a, lint_b` line listing the
warnings the program is expected to raise.

## Checking and building

```
pip install quizbuild
quizbuild
```

Every question is compiled with `rustc --edition=2021` (which must be on
`PATH`) into a `rust-quiz` directory under the system temporary directory.
Questions that compile are run and their standard output is compared with the
recorded answer. The command also checks that:

- a question answered `error` fails to compile, and one answered `undefined`
  compiles;
- the program raises no warnings other than the listed ones, and each listed
  warning really is raised.

Questions are checked in parallel. For each one, `evaluating <path>` is
printed on standard error, followed by `ERROR: <message>` if it fails. If any
question fails, the command exits with status 1 and writes nothing. When every
question passes, `docs/questions.js` is written as
`var questions = {...};`, a JSON object keyed by question number holding the
code, difficulty, answer, and the hint and explanation rendered to HTML (links
open in a new tab).

`quizbuild --version` prints the installed version.

## Serving the site

```
quizbuild serve
```

After building, this serves the current directory at
`http://localhost:8000/`. A request for `/` is answered with a
`301 Moved Permanently` redirect to `/rust-quiz/`; every other path is served
as a static file. Request logs go to the `quizbuild.serve` logger at debug
level rather than to the terminal.

The command always uses port 8000 and the current directory. From Python,
`quizbuild.serve.serve(port, directory)` and
`quizbuild.serve.make_server(host, port, directory)` take other values.

## Using it from Python

```python
from pathlib import Path
from quizbuild.render import parse_markdown, question_number, render_all

question = parse_markdown(Path("questions/001-example.md"))
print(question.answer, question.difficulty, question.warnings)

print(question_number(Path("questions/001-example.rs")))  # 1

questions = render_all(Path("."))  # {number: Question, ...}
```

Other helpers in `quizbuild.render` include `parse_markdown_text`,
`render_to_html`, `check_answer`, `run`, `work` and `find_question_files`.

Failures raise subclasses of `quizbuild.errors.QuizError`, such as
`WrongOutputError`, `ShouldCompileError`, `MissingExpectedWarningError` or
`MarkdownFormatError`. `render_all` itself reports each failing question and
raises `SystemExit(1)` if any fail.