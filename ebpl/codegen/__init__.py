"""Code generators that turn EBPL programs into target source text."""

from .python import format_number, generate_python, render_expression, render_statement

__all__ = ["format_number", "generate_python", "render_expression", "render_statement"]
