"""
Dotlin Evaluator Package

Numeric tree-walking evaluation of parsed expressions.

Author: xwest
"""

from .evaluator import Evaluator, evaluate, default_environment
from .errors import (
    EvaluationError, UnknownIdentifierError, NotANumberError,
    UnknownOperatorError, UnsupportedCallError, UnknownFunctionError,
    UnsupportedNodeError, NonNumericLiteralError, CallFailedError,
    NestingTooDeepError,
)

__all__ = [
    "Evaluator",
    "evaluate",
    "default_environment",
    "EvaluationError",
    "UnknownIdentifierError",
    "NotANumberError",
    "UnknownOperatorError",
    "UnsupportedCallError",
    "UnknownFunctionError",
    "UnsupportedNodeError",
    "NonNumericLiteralError",
    "CallFailedError",
    "NestingTooDeepError",
]
