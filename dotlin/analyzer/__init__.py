"""
Dotlin Analyzer Package

Text-level helpers built around the single semantic rule the parser
enforces (uninitialized variables need an explicit type).

Author: xwest
"""

from .errors import SemanticError, UninitializedVariableError, UNINITIALIZED_VARIABLE_MESSAGE
from .usage_inference import infer_type_from_usage, INFERABLE_TYPES
from .quickfix import QuickFix, compute_quick_fix_for_uninitialized

__all__ = [
    "SemanticError",
    "UninitializedVariableError",
    "UNINITIALIZED_VARIABLE_MESSAGE",
    "infer_type_from_usage",
    "INFERABLE_TYPES",
    "QuickFix",
    "compute_quick_fix_for_uninitialized",
]
