"""Orchestration core: execution context, variable scope and culture."""

from src.orchestration.context import ExecutionContext
from src.orchestration.culture import Culture, current_culture, use_culture
from src.orchestration.variables import MAIN_KEY, VariableScope

__all__ = [
    "MAIN_KEY",
    "Culture",
    "ExecutionContext",
    "VariableScope",
    "current_culture",
    "use_culture",
]
