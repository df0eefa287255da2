"""
EBPL (English-Based Programming Language) package.

EBPL is a tiny controlled-English language for learners.  A program is a
list of statements such as::

    create variable a with value 10
    print a + 5

The package translates such programs into Python source text and shows a
preview of what the program would print.  The code is organised into
several modules:

* ``lang`` – the word-oriented tokenizer and the recursive descent parser.
* ``ast`` – frozen dataclasses representing the abstract syntax tree.
* ``codegen`` – turns the AST into Python text, one line per statement.
* ``runtime`` – a textual simulator that derives the print trace from the
  generated text without executing it.
* ``pipeline`` – :func:`compile_source`, which ties the stages together.
* ``cli`` and ``server`` – a command line interface and a small HTTP API
  around the pipeline.

The simulator is simple: it evaluates a single operator per
line, so programs that chain several operators preview differently from
what the generated Python would print.
"""

import re
from importlib import metadata as _metadata
from pathlib import Path

from .pipeline import CompileResult, compile_source


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("ebpl")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"

__all__ = ["__version__", "CompileResult", "compile_source"]
