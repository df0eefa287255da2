"""Built-in example programs shown to new EBPL users."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Example:
    name: str
    category: str
    description: str
    source: str

    @property
    def slug(self) -> str:
        return re.sub(r"[^a-z0-9]+", "-", self.name.lower()).strip("-")


CATEGORIES: Dict[str, str] = {
    "basics": "Basic Syntax",
    "math": "Math Operations",
}

EXAMPLES: Tuple[Example, ...] = (
    Example(
        name="Hello World",
        category="basics",
        description="The simplest EBPL program - printing a message.",
        source='print "Hello, EBPL World!"',
    ),
    Example(
        name="Variables",
        category="basics",
        description="Creating and using variables with different data types.",
        source=(
            'create variable name with value "Alice"\n'
            "create variable age with value 25\n"
            "print name\n"
            "print age"
        ),
    ),
    Example(
        name="Basic Math",
        category="basics",
        description="Basic arithmetic operations with variables.",
        source=(
            "create variable a with value 10\n"
            "create variable b with value 5\n"
            "print a + b\n"
            "print a - b\n"
            "print a * b\n"
            "print a / b"
        ),
    ),
    Example(
        name="Calculator",
        category="math",
        description="Complete calculator with all basic operations.",
        source=(
            "create variable num1 with value 15\n"
            "create variable num2 with value 3\n"
            "\n"
            "create variable addition with value num1 + num2\n"
            "create variable subtraction with value num1 - num2\n"
            "create variable multiplication with value num1 * num2\n"
            "create variable division with value num1 / num2\n"
            "\n"
            'print "Calculator Results:"\n'
            "print addition\n"
            "print subtraction\n"
            "print multiplication\n"
            "print division"
        ),
    ),
)


def list_examples(category: str | None = None) -> List[Example]:
    if category is None:
        return list(EXAMPLES)
    return [example for example in EXAMPLES if example.category == category]


def get_example(name: str) -> Example:
    """Look up an example by slug or display name, ignoring case."""
    wanted = name.strip().lower()
    for example in EXAMPLES:
        if wanted in (example.slug, example.name.lower()):
            return example
    raise KeyError(f"Unknown example '{name}'")


__all__ = ["Example", "CATEGORIES", "EXAMPLES", "list_examples", "get_example"]
