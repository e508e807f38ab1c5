"""
Dotlin Tooling Front-End

Source-level understanding of the Dotlin scripting language for editor
tooling: tokenizing, parsing, numeric evaluation and usage-based type hints.

Architecture:
    dotlin/
    ├── lexer/           # Tokenization
    ├── parser/          # Syntax analysis and AST generation
    ├── analyzer/        # Semantic error, type guessing, quick-fixes
    ├── evaluator/       # Numeric expression evaluation
    ├── config.py        # Tooling configuration
    └── cli.py           # Command line front-end

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__email__ = "dev@dotlin.dev"
__license__ = "MIT"

from .config import ToolingConfiguration
from .lexer import tokenize, Token, TokenType, LexerError
from .parser import parse_program, parse_expression, ParseError
from .analyzer import (
    SemanticError, UninitializedVariableError, QuickFix,
    infer_type_from_usage, compute_quick_fix_for_uninitialized,
)
from .evaluator import evaluate, default_environment, EvaluationError

__all__ = [
    # Entry points
    "tokenize",
    "parse_program",
    "parse_expression",
    "evaluate",
    "infer_type_from_usage",
    "compute_quick_fix_for_uninitialized",
    "default_environment",

    # Data
    "Token",
    "TokenType",
    "QuickFix",
    "ToolingConfiguration",

    # Errors
    "LexerError",
    "ParseError",
    "SemanticError",
    "UninitializedVariableError",
    "EvaluationError",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
