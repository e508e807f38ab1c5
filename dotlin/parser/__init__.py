"""
Dotlin Parser Package

Recursive descent parser for Dotlin statements with a precedence-climbing
expression parser. Produces immutable, structurally comparable ASTs.

Key Features:
- Statements: import/package headers, fun, return, val/var, expressions
- Expressions: + - * / and right-associative ^, unary signs, calls,
  index and member suffixes
- No error recovery: the first error aborts the parse

Author: xwest
"""

from .ast_nodes import *
from .parser import Parser, parse_program, parse_expression
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse_program", "parse_expression",

    # AST nodes
    "ASTNode", "ASTNodeType", "Program", "Statement", "Expression",
    "ExpressionStatement", "ReturnStatement", "FunctionDeclaration",
    "VariableDeclaration", "NumberLiteral", "StringLiteral", "Identifier",
    "IndexExpression", "MemberExpression", "UnaryExpression",
    "BinaryExpression", "CallExpression",
    "walk", "iter_declarations", "ast_to_dict",

    # Error handling
    "ParseError",
]
