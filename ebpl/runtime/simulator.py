"""Textual execution simulator for generated EBPL code.

The simulator never runs the generated Python.  It re-reads the emitted
text line by line and derives a print trace from a handful of simplified
rules:

* ``name = expr`` lines evaluate at most one binary operator.  Parentheses
  are discarded and the first operator found in the order ``+ - * /`` splits
  the expression, so nested expressions such as ``((a + b) * c)`` only
  combine ``a`` and ``b``.
* ``print(...)`` lines print a variable, a quoted string, a one-operator
  expression or the raw text.

Division by zero yields ``0``.  Failures never escape :func:`simulate`; they
are reported through :attr:`SimulationResult.error`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

from ebpl.codegen.python import format_number
from ebpl.errors import EBPLError, EBPLSimulationError
from ebpl.lang.lexer import is_number, is_quoted
from ebpl.observability.logging import get_logger

logger = get_logger("ebpl.runtime")

Value = Union[float, str]

# operator -> (left default, right default) for operands that resolve to nothing
OPERATOR_DEFAULTS: Dict[str, Tuple[float, float]] = {
    "+": (0.0, 0.0),
    "-": (0.0, 0.0),
    "*": (1.0, 1.0),
    "/": (0.0, 1.0),
}

SIMULATION_ERROR_PREFIX = "Simulation error: "


@dataclass
class SimulationResult:
    output_lines: List[str] = field(default_factory=list)
    error: str = ""
    variables: Dict[str, Value] = field(default_factory=dict)

    @property
    def output(self) -> str:
        return "\n".join(self.output_lines)

    @property
    def ok(self) -> bool:
        return not self.error


def render_value(value: Value) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)


def _to_number(value: Value) -> float:
    if isinstance(value, str):
        return float(value) if is_number(value) else math.nan
    return value


def _resolve_operand(text: str, variables: Dict[str, Value], default: float) -> Value:
    if is_number(text):
        return float(text)
    if text in variables:
        return variables[text]
    return default


def _apply(operator: str, left: Value, right: Value) -> Value:
    if operator == "+":
        if isinstance(left, str) or isinstance(right, str):
            return render_value(left) + render_value(right)
        return left + right

    lhs, rhs = _to_number(left), _to_number(right)
    if operator == "-":
        return lhs - rhs
    if operator == "*":
        return lhs * rhs
    if rhs == 0:
        return 0.0
    return lhs / rhs


def find_operator(text: str) -> Union[str, None]:
    for operator in OPERATOR_DEFAULTS:
        if operator in text:
            return operator
    return None


def evaluate_expression(expression: str, variables: Dict[str, Value]) -> Value:
    """Evaluate the right-hand side of an assignment line."""
    text = expression.replace("(", "").replace(")", "")

    operator = find_operator(text)
    if operator is not None:
        parts = [part.strip() for part in text.split(operator)]
        left_default, right_default = OPERATOR_DEFAULTS[operator]
        left = _resolve_operand(parts[0], variables, left_default)
        right = _resolve_operand(parts[1], variables, right_default)
        return _apply(operator, left, right)

    text = text.strip()
    if is_number(text):
        return float(text)
    if is_quoted(text):
        return text[1:-1]
    return text


def _print_value(content: str, variables: Dict[str, Value]) -> str:
    if content in variables:
        return render_value(variables[content])
    if is_quoted(content):
        return content[1:-1]
    if find_operator(content.replace("(", "").replace(")", "")) is not None:
        return render_value(evaluate_expression(content, variables))
    return content


def _simulate_lines(code: str) -> SimulationResult:
    result = SimulationResult()
    variables = result.variables

    for line_number, line in enumerate(code.split("\n"), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if "=" in stripped:
            name, expression = (part.strip() for part in stripped.split("=", 1))
            if expression:
                if not name:
                    raise EBPLSimulationError(
                        "Assignment without a target name",
                        line=line_number,
                        source_line=stripped,
                    )
                variables[name] = evaluate_expression(expression, variables)

        if stripped.startswith("print(") and stripped.endswith(")"):
            content = stripped[len("print("):-1].strip()
            result.output_lines.append(_print_value(content, variables))

    return result


def simulate(code: str) -> SimulationResult:
    """Compute the print trace of generated code without executing it."""
    try:
        result = _simulate_lines(code)
    except EBPLError as exc:
        logger.warning("Simulation failed: %s", exc)
        return SimulationResult(error=f"{SIMULATION_ERROR_PREFIX}{exc.message} (line {exc.line})")
    except Exception as exc:  # noqa: BLE001
        logger.warning("Simulation failed: %s", exc)
        return SimulationResult(error=f"{SIMULATION_ERROR_PREFIX}{exc}")

    logger.debug("Simulated %d print line(s)", len(result.output_lines))
    return result


__all__ = [
    "SimulationResult",
    "Value",
    "OPERATOR_DEFAULTS",
    "SIMULATION_ERROR_PREFIX",
    "evaluate_expression",
    "find_operator",
    "render_value",
    "simulate",
]
