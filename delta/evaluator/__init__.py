"""
Delta Evaluator Package

A thin calculator that walks statement trees and produces values.

Author: xwest
"""

from .evaluator import Evaluator, Value, ValueKind, evaluate_string
from .errors import EvaluationError

__all__ = [
    "Evaluator",
    "Value",
    "ValueKind",
    "EvaluationError",
    "evaluate_string",
]
