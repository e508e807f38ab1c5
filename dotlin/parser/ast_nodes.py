"""
Abstract Syntax Tree node definitions for Dotlin.

Expressions and statements are closed sets of frozen dataclasses: two parses
of the same text compare equal node for node, and nothing outside this
module adds variants. Consumers dispatch on the concrete class and treat
anything else as unsupported.

Author: xwest
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple, Union


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Statements
    EXPRESSION_STMT = "ExpressionStatement"
    RETURN_STATEMENT = "ReturnStatement"
    FUNCTION_DECL = "FunctionDeclaration"
    VARIABLE_DECL = "VariableDeclaration"

    # Expressions
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"
    IDENTIFIER = "Identifier"
    INDEX = "Index"
    MEMBER = "Member"
    UNARY = "Unary"
    BINARY = "Binary"
    CALL = "Call"


class ASTNode:
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]

    def children(self) -> List['ASTNode']:
        """Get all child nodes, in source order."""
        return []


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class NumberLiteral(ASTNode):
    """Numeric literal; every number is a float."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.NUMBER_LITERAL
    value: float


@dataclass(frozen=True)
class StringLiteral(ASTNode):
    """String literal with its raw contents (escapes kept verbatim)."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.STRING_LITERAL
    value: str


@dataclass(frozen=True)
class Identifier(ASTNode):
    """Identifier reference."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER
    name: str


@dataclass(frozen=True)
class IndexExpression(ASTNode):
    """Index access: object[index]."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.INDEX
    object: 'Expression'
    index: 'Expression'

    def children(self) -> List[ASTNode]:
        return [self.object, self.index]


@dataclass(frozen=True)
class MemberExpression(ASTNode):
    """Member access: object.property."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.MEMBER
    object: 'Expression'
    property: str

    def children(self) -> List[ASTNode]:
        return [self.object]


@dataclass(frozen=True)
class UnaryExpression(ASTNode):
    """Prefix operator application (+ or -)."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.UNARY
    op: str
    operand: 'Expression'

    def children(self) -> List[ASTNode]:
        return [self.operand]


@dataclass(frozen=True)
class BinaryExpression(ASTNode):
    """Binary operator application."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.BINARY
    op: str
    left: 'Expression'
    right: 'Expression'

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]


@dataclass(frozen=True)
class CallExpression(ASTNode):
    """Function call."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.CALL
    callee: 'Expression'
    args: Tuple['Expression', ...] = ()

    def children(self) -> List[ASTNode]:
        return [self.callee, *self.args]


Expression = Union[
    NumberLiteral, StringLiteral, Identifier, IndexExpression,
    MemberExpression, UnaryExpression, BinaryExpression, CallExpression,
]


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class ExpressionStatement(ASTNode):
    """Expression evaluated for its effect."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION_STMT
    expression: Expression

    def children(self) -> List[ASTNode]:
        return [self.expression]


@dataclass(frozen=True)
class ReturnStatement(ASTNode):
    """Return statement with optional value."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.RETURN_STATEMENT
    argument: Optional[Expression] = None

    def children(self) -> List[ASTNode]:
        return [self.argument] if self.argument is not None else []


@dataclass(frozen=True)
class FunctionDeclaration(ASTNode):
    """Function declaration. Parameter type annotations are not kept."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.FUNCTION_DECL
    name: str
    params: Tuple[str, ...]
    body: Tuple['Statement', ...]

    def children(self) -> List[ASTNode]:
        return list(self.body)


@dataclass(frozen=True)
class VariableDeclaration(ASTNode):
    """
    Variable declaration (val or var).

    At least one of type_name and init is always present; the parser
    raises before building a declaration that has neither.
    """
    node_type: ClassVar[ASTNodeType] = ASTNodeType.VARIABLE_DECL
    kind: str  # "val" or "var"
    name: str
    type_name: Optional[str] = None
    init: Optional[Expression] = None

    def __post_init__(self):
        if self.type_name is None and self.init is None:
            raise ValueError(f"declaration of '{self.name}' needs a type or an initializer")

    @property
    def is_mutable(self) -> bool:
        return self.kind == "var"

    def children(self) -> List[ASTNode]:
        return [self.init] if self.init is not None else []


Statement = Union[ExpressionStatement, ReturnStatement, FunctionDeclaration, VariableDeclaration]


@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node representing a complete program."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM
    body: Tuple[Statement, ...] = ()

    def children(self) -> List[ASTNode]:
        return list(self.body)


Declaration = Union[FunctionDeclaration, VariableDeclaration]


# ============================================================================
# Traversal and export helpers
# ============================================================================

def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield ``node`` and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))


def iter_declarations(program: Program) -> Iterator[Declaration]:
    """Yield every function and variable declaration, nested ones included."""
    for node in walk(program):
        if isinstance(node, (FunctionDeclaration, VariableDeclaration)):
            yield node


def ast_to_dict(node: ASTNode) -> Dict[str, Any]:
    """
    Convert an AST node into plain dicts and lists.

    Each dict carries a "type" key naming the node variant, which makes the
    result suitable for JSON output.
    """
    result: Dict[str, Any] = {"type": node.node_type.value}
    for field in fields(node):
        result[field.name] = _export_value(getattr(node, field.name))
    return result


def _export_value(value: Any) -> Any:
    if isinstance(value, ASTNode):
        return ast_to_dict(value)
    if isinstance(value, tuple):
        return [_export_value(item) for item in value]
    return value
