"""
Evaluation error handling for Dotlin.

One subclass per way a numeric evaluation can fail, so callers can catch
exactly the failures they care about.

Author: xwest
"""

from typing import Optional, List

from ..lexer.errors import Diagnostic


class EvaluationError(Exception):
    """
    Exception raised when an expression cannot be evaluated to a number.

    Contains detailed diagnostic information for error reporting.
    """

    code: Optional[str] = None

    def __init__(
        self,
        message: str,
        node=None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.node = node
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=self.code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnknownIdentifierError(EvaluationError):
    """Identifier not bound in the environment."""
    code = "E001"

    def __init__(self, name: str, node=None):
        super().__init__(
            f"Unknown identifier: {name}",
            node,
            help_text=f"'{name}' has no value in the evaluation environment."
        )
        self.name = name


class NotANumberError(EvaluationError):
    """Identifier bound to something other than a number."""
    code = "E002"

    def __init__(self, name: str, node=None):
        super().__init__(
            f"Identifier is not a number: {name}",
            node,
            suggestions=[f"Call it instead: {name}(...)"]
        )
        self.name = name


class UnknownOperatorError(EvaluationError):
    """Operator the evaluator has no arithmetic for."""
    code = "E003"

    def __init__(self, op: str, arity: str, node=None):
        super().__init__(f"Unknown {arity} operator: {op}", node)
        self.op = op


class UnsupportedCallError(EvaluationError):
    """Call whose callee is not a bare identifier."""
    code = "E004"

    def __init__(self, node=None):
        super().__init__(
            "Only simple identifier calls are supported",
            node,
            help_text="Calls through member or index access cannot be evaluated."
        )


class UnknownFunctionError(EvaluationError):
    """Callee missing from the environment or not callable."""
    code = "E005"

    def __init__(self, name: str, node=None):
        super().__init__(f"Unknown function: {name}", node)
        self.name = name


class UnsupportedNodeError(EvaluationError):
    """Node kind the numeric evaluator does not handle (index, member, ...)."""
    code = "E006"

    def __init__(self, node_kind: str, node=None):
        super().__init__(
            f"Cannot evaluate {node_kind} expressions",
            node,
            help_text="Only arithmetic over numbers, names and function calls can be evaluated."
        )
        self.node_kind = node_kind


class NonNumericLiteralError(EvaluationError):
    """String literal inside a numeric expression."""
    code = "E007"

    def __init__(self, node=None):
        super().__init__("string literal in numeric expression", node)


class CallFailedError(EvaluationError):
    """Environment function that rejected the evaluated arguments."""
    code = "E008"

    def __init__(self, name: str, arg_count: int, reason: str, node=None):
        super().__init__(
            f"Cannot call {name} with {arg_count} argument(s)",
            node,
            help_text=reason
        )
        self.name = name
        self.arg_count = arg_count


class NestingTooDeepError(EvaluationError):
    """Expression tree deeper than the interpreter stack allows."""
    code = "E009"

    def __init__(self, node=None):
        super().__init__(
            "Expression nested too deeply",
            node,
            help_text="Split the expression into smaller parts."
        )


# Evaluation error codes for categorization
EVALUATION_ERROR_CODES = {
    cls.code: cls.__name__
    for cls in (UnknownIdentifierError, NotANumberError, UnknownOperatorError,
                UnsupportedCallError, UnknownFunctionError, UnsupportedNodeError,
                NonNumericLiteralError, CallFailedError, NestingTooDeepError)
}
