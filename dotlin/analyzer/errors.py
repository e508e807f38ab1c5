"""
Semantic error handling for Dotlin.

The front-end enforces exactly one semantic rule, and it does so while
parsing: a val/var declaration needs a type annotation, an initializer,
or both.

Author: xwest
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic


class SemanticError(Exception):
    """
    Exception raised when a program is well-formed but meaningless.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


UNINITIALIZED_VARIABLE_MESSAGE = "Uninitialized variable requires explicit type"


class UninitializedVariableError(SemanticError):
    """A val/var declaration with neither a type annotation nor an initializer."""

    def __init__(self, name: str, kind: str = "val"):
        super().__init__(
            UNINITIALIZED_VARIABLE_MESSAGE,
            code="S001",
            help_text=f"'{kind} {name}' has no initializer, so its type cannot be inferred.",
            suggestions=[f"Annotate the type: '{kind} {name}: Int'",
                         f"Initialize the variable: '{kind} {name} = 0'"]
        )
        self.name = name
        self.kind = kind

