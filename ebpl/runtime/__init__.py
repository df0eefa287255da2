"""Execution preview for generated EBPL code."""

from .simulator import SimulationResult, evaluate_expression, render_value, simulate

__all__ = ["SimulationResult", "evaluate_expression", "render_value", "simulate"]
