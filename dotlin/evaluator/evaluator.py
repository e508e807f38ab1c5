"""
Tree-walking numeric evaluator for Dotlin expressions.

Arithmetic follows IEEE-754 the way the language does: dividing by zero
gives an infinity or NaN and an overflowing power gives an infinity, where
plain Python arithmetic would raise.

Author: xwest
"""

import functools
import logging
import math
import numbers
from typing import Callable, Dict, Mapping, Optional, Union

from ..parser.ast_nodes import (
    ASTNode, Expression, NumberLiteral, StringLiteral, Identifier,
    IndexExpression, MemberExpression, UnaryExpression, BinaryExpression,
    CallExpression,
)
from .errors import (
    UnknownIdentifierError, NotANumberError, UnknownOperatorError,
    UnsupportedCallError, UnknownFunctionError, UnsupportedNodeError,
    NonNumericLiteralError, CallFailedError, NestingTooDeepError,
)

logger = logging.getLogger(__name__)

Number = float
EnvironmentValue = Union[float, Callable[..., float]]
Environment = Mapping[str, EnvironmentValue]


class Evaluator:
    """
    Evaluates expression trees against a name environment.

    The environment maps names to numbers or to callables taking numbers.
    It is only read, never modified.
    """

    def __init__(self, environment: Optional[Environment] = None):
        self.environment: Environment = environment if environment is not None else {}

    def evaluate(self, node: Expression) -> Number:
        """
        Evaluate ``node`` to a number.

        Raises:
            EvaluationError: Subclass describing why evaluation failed
        """
        try:
            return self._evaluate(node)
        except RecursionError:
            raise NestingTooDeepError(node) from None

    def _evaluate(self, node: Expression) -> Number:
        if isinstance(node, NumberLiteral):
            return self._evaluate_number(node)
        elif isinstance(node, StringLiteral):
            return self._evaluate_string(node)
        elif isinstance(node, Identifier):
            return self._evaluate_identifier(node)
        elif isinstance(node, UnaryExpression):
            return self._evaluate_unary(node)
        elif isinstance(node, BinaryExpression):
            return self._evaluate_binary(node)
        elif isinstance(node, CallExpression):
            return self._evaluate_call(node)
        elif isinstance(node, (IndexExpression, MemberExpression)):
            return self._evaluate_unsupported(node)
        raise UnsupportedNodeError(type(node).__name__, node)

    def _evaluate_number(self, node: NumberLiteral) -> Number:
        return node.value

    def _evaluate_string(self, node: StringLiteral) -> Number:
        raise NonNumericLiteralError(node)

    def _evaluate_identifier(self, node: Identifier) -> Number:
        if node.name not in self.environment:
            raise UnknownIdentifierError(node.name, node)
        value = self.environment[node.name]
        if callable(value) or isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise NotANumberError(node.name, node)
        return float(value)

    def _evaluate_unary(self, node: UnaryExpression) -> Number:
        operand = self._evaluate(node.operand)
        if node.op == "+":
            return +operand
        if node.op == "-":
            return -operand
        raise UnknownOperatorError(node.op, "unary", node)

    def _evaluate_binary(self, node: BinaryExpression) -> Number:
        operation = BINARY_OPERATIONS.get(node.op)
        left = self._evaluate(node.left)
        right = self._evaluate(node.right)
        if operation is None:
            raise UnknownOperatorError(node.op, "binary", node)
        return operation(left, right)

    def _evaluate_call(self, node: CallExpression) -> Number:
        if not isinstance(node.callee, Identifier):
            raise UnsupportedCallError(node)
        name = node.callee.name
        function = self.environment.get(name)
        if not callable(function):
            raise UnknownFunctionError(name, node)
        args = [self._evaluate(arg) for arg in node.args]
        try:
            return float(function(*args))
        except (TypeError, ValueError) as e:
            raise CallFailedError(name, len(args), str(e), node) from e

    def _evaluate_unsupported(self, node: ASTNode) -> Number:
        raise UnsupportedNodeError(node.node_type.value, node)


# Arithmetic with IEEE-754 results instead of Python exceptions

def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and float(value).is_integer() and int(value) % 2 == 1


def divide(left: float, right: float) -> float:
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # zero to a negative power, or a negative base to a fractional one
        if base == 0:
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


BINARY_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": divide,
    "^": power,
}


def _nan_on_domain_error(function: Callable[..., float]) -> Callable[..., float]:
    @functools.wraps(function)
    def wrapper(*args):
        try:
            return function(*args)
        except ValueError:
            return math.nan
    return wrapper


def default_environment() -> Dict[str, EnvironmentValue]:
    """
    Fresh environment with the math helpers the editor evaluation offers.

    Callers may add or override bindings on the returned dict.
    """
    return {
        "pow": power,
        "sin": _nan_on_domain_error(math.sin),
        "cos": _nan_on_domain_error(math.cos),
        "sqrt": _nan_on_domain_error(math.sqrt),
        "abs": abs,
        "min": min,
        "max": max,
        "pi": math.pi,
        "e": math.e,
    }


def evaluate(expression: Expression, environment: Optional[Environment] = None) -> Number:
    """
    Convenience function to evaluate one expression.

    Args:
        expression: Expression AST from parse_expression
        environment: Names bound to numbers or callables

    Returns:
        The numeric result

    Raises:
        EvaluationError: If evaluation fails
    """
    result = Evaluator(environment).evaluate(expression)
    logger.debug("evaluated %s to %r", expression.node_type.value, result)
    return result
