"""
Dotlin Parser Implementation

Recursive descent for statements, precedence climbing for expressions.
Single-token lookahead over an immutable token list; the cursor only ever
moves forward and the first error aborts the parse.

Author: xwest
"""

import logging
import math
from typing import Dict, List
from enum import IntEnum

from ..lexer.tokens import Token, TokenType
from ..lexer.lexer import tokenize
from ..analyzer.errors import UninitializedVariableError
from .ast_nodes import (
    Program, Statement, Expression, ExpressionStatement, ReturnStatement,
    FunctionDeclaration, VariableDeclaration, NumberLiteral, StringLiteral,
    Identifier, IndexExpression, MemberExpression, UnaryExpression,
    BinaryExpression, CallExpression,
)
from .errors import (
    create_unexpected_token_error, create_expected_identifier_error,
    create_prefix_error, create_trailing_tokens_error, create_unexpected_eof_error,
    create_nesting_too_deep_error,
)

logger = logging.getLogger(__name__)


class Precedence(IntEnum):
    """Binding power of binary operators; higher binds tighter."""
    NONE = 0
    TERM = 2            # +, -
    FACTOR = 3          # *, /
    POWER = 4           # ^ (right associative)
    UNARY = 4           # prefix +, -


# Operator precedence table
BINARY_PRECEDENCE: Dict[TokenType, Precedence] = {
    TokenType.PLUS: Precedence.TERM,
    TokenType.MINUS: Precedence.TERM,
    TokenType.MULTIPLY: Precedence.FACTOR,
    TokenType.DIVIDE: Precedence.FACTOR,
    TokenType.POWER: Precedence.POWER,
}

RIGHT_ASSOCIATIVE = {TokenType.POWER}

UNARY_OPERATORS = {TokenType.PLUS, TokenType.MINUS}

# Directives whose tokens are skipped up to the next ';'
HEADER_DIRECTIVES = ("import", "package")

# Tokens allowed to follow a standalone expression
EXPRESSION_TERMINATORS = {TokenType.EOF, TokenType.SEMICOLON, TokenType.RIGHT_PAREN}


class Parser:
    """
    Dotlin parser.

    Statement order of checks: module headers, ``fun``, ``return``,
    ``val``/``var``, then a bare expression statement.
    """

    def __init__(self, tokens: List[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer, ending with EOF
        """
        self.tokens = tokens
        self.current = 0

    def parse_program(self) -> Program:
        """
        Parse statements until end of input.

        Returns:
            Program AST node representing the entire program

        Raises:
            ParseError: On the first syntax error
            UninitializedVariableError: On a val/var with neither type nor value
        """
        body = []
        try:
            while not self._is_at_end():
                body.append(self.parse_statement())
        except RecursionError:
            raise create_nesting_too_deep_error(self.current) from None
        logger.debug("parsed %d top-level statements", len(body))
        return Program(tuple(body))

    def parse_statement(self) -> Statement:
        """Parse a single statement."""
        token = self._peek()

        if token.type == TokenType.IDENTIFIER:
            if token.lexeme in HEADER_DIRECTIVES:
                return self._parse_header_directive()
            if token.lexeme == "fun":
                return self._parse_function()
            if token.lexeme == "return":
                return self._parse_return_statement()
            if token.lexeme in ("val", "var"):
                return self._parse_variable_declaration()

        expression = self.parse_expression()
        self._match(TokenType.SEMICOLON)
        return ExpressionStatement(expression)

    def _parse_header_directive(self) -> ExpressionStatement:
        """
        Skip an ``import``/``package`` line through its ';'.

        Kept in the tree as a no-op identifier statement named after the
        directive.
        """
        keyword = self._advance().lexeme
        while not self._is_at_end() and not self._check(TokenType.SEMICOLON):
            self._advance()
        self._match(TokenType.SEMICOLON)
        return ExpressionStatement(Identifier(keyword))

    def _parse_function(self) -> FunctionDeclaration:
        """Parse a function declaration."""
        self._advance()  # 'fun'
        name = self._consume_identifier("function name")

        self._consume(TokenType.LEFT_PAREN)
        params = []
        while not self._check(TokenType.RIGHT_PAREN):
            params.append(self._consume_identifier("parameter name"))
            if self._match(TokenType.COLON):
                self._skip_parameter_type()
            if not self._match(TokenType.COMMA) and not self._check(TokenType.RIGHT_PAREN):
                raise create_unexpected_token_error("',' or ')'", self._peek(), self.current)
        self._consume(TokenType.RIGHT_PAREN)

        self._consume(TokenType.LEFT_BRACE)
        body = []
        while not self._check(TokenType.RIGHT_BRACE):
            if self._is_at_end():
                raise create_unexpected_eof_error("'}'", self.current)
            body.append(self.parse_statement())
        self._consume(TokenType.RIGHT_BRACE)

        return FunctionDeclaration(name, tuple(params), tuple(body))

    def _skip_parameter_type(self):
        """
        Skip a parameter's type tokens up to the next ',' or ')' outside
        angle brackets, so generic types such as List<Int> pass through.
        """
        depth = 0
        while not self._is_at_end():
            token_type = self._peek().type
            if depth == 0 and token_type in (TokenType.COMMA, TokenType.RIGHT_PAREN):
                return
            if token_type == TokenType.LESS_THAN:
                depth += 1
            elif token_type == TokenType.GREATER_THAN and depth > 0:
                depth -= 1
            self._advance()

    def _parse_return_statement(self) -> ReturnStatement:
        """Parse a return statement."""
        self._advance()  # 'return'

        argument = None
        if not self._check_statement_terminator():
            argument = self.parse_expression()
        self._match(TokenType.SEMICOLON)

        return ReturnStatement(argument)

    def _parse_variable_declaration(self) -> VariableDeclaration:
        """Parse a val/var declaration."""
        kind = self._advance().lexeme
        name = self._consume_identifier("variable name")

        type_name = None
        if self._match(TokenType.COLON):
            type_name = self._consume_identifier("type name")

        init = None
        if self._match(TokenType.ASSIGN):
            init = self.parse_expression()

        if type_name is None and init is None:
            raise UninitializedVariableError(name, kind)

        self._match(TokenType.SEMICOLON)
        return VariableDeclaration(kind, name, type_name, init)

    # Expressions

    def parse_expression(self, min_precedence: int = Precedence.NONE) -> Expression:
        """Parse expression with given minimum precedence."""
        left = self._parse_prefix()

        while True:
            operator = self._peek().type
            precedence = BINARY_PRECEDENCE.get(operator)
            if precedence is None or precedence < min_precedence:
                break
            self._advance()
            # Left associative operators require the right side to bind tighter
            next_min = precedence if operator in RIGHT_ASSOCIATIVE else precedence + 1
            right = self.parse_expression(next_min)
            left = BinaryExpression(operator.value, left, right)

        return left

    def parse_standalone_expression(self) -> Expression:
        """Parse one expression that must be followed by EOF, ';' or ')'."""
        try:
            expression = self.parse_expression()
        except RecursionError:
            raise create_nesting_too_deep_error(self.current) from None
        remaining = self._peek()
        if remaining.type not in EXPRESSION_TERMINATORS:
            raise create_trailing_tokens_error(remaining, self.current)
        return expression

    def _parse_prefix(self) -> Expression:
        """Parse the tokens that can start an expression."""
        token = self._peek()

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(_to_number(token.lexeme))

        if token.type == TokenType.STRING:
            self._advance()
            return StringLiteral(token.value)

        if token.type == TokenType.IDENTIFIER:
            return self._parse_identifier_expression()

        if token.type == TokenType.LEFT_PAREN:
            return self._parse_grouping()

        if token.type in UNARY_OPERATORS:
            self._advance()
            operand = self.parse_expression(Precedence.UNARY)
            return UnaryExpression(token.lexeme, operand)

        raise create_prefix_error(token, self.current)

    def _parse_identifier_expression(self) -> Expression:
        """Parse a name, an optional call, then any [index] / .member suffixes."""
        node: Expression = Identifier(self._advance().lexeme)

        if self._match(TokenType.LEFT_PAREN):
            node = CallExpression(node, tuple(self._parse_arguments()))

        while True:
            if self._match(TokenType.LEFT_BRACKET):
                index = self.parse_expression()
                self._consume(TokenType.RIGHT_BRACKET)
                node = IndexExpression(node, index)
            elif self._match(TokenType.DOT):
                node = MemberExpression(node, self._consume_identifier("member name"))
            else:
                return node

    def _parse_arguments(self) -> List[Expression]:
        """Parse call arguments; the opening '(' is already consumed."""
        args = []
        while not self._check(TokenType.RIGHT_PAREN):
            if self._is_at_end():
                raise create_unexpected_eof_error("')'", self.current)
            args.append(self.parse_expression())
            if not self._match(TokenType.COMMA) and not self._check(TokenType.RIGHT_PAREN):
                raise create_unexpected_token_error("',' or ')'", self._peek(), self.current)
        self._advance()  # ')'
        return args

    def _parse_grouping(self) -> Expression:
        """Parse parenthesized expression."""
        self._advance()  # '('
        expression = self.parse_expression()
        self._consume(TokenType.RIGHT_PAREN)
        return expression

    # Utility methods

    def _match(self, token_type: TokenType) -> bool:
        """Check if current token matches type and consume if so."""
        if self._check(token_type):
            self._advance()
            return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token. EOF is never consumed."""
        token = self._peek()
        if not self._is_at_end():
            self.current += 1
        return token

    def _is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return Token(TokenType.EOF, "")

    def _consume(self, token_type: TokenType) -> Token:
        """Consume token of expected type or raise error."""
        if self._check(token_type):
            return self._advance()
        raise create_unexpected_token_error(token_type, self._peek(), self.current)

    def _consume_identifier(self, what: str) -> str:
        """Consume an identifier token and return its text."""
        token = self._peek()
        if token.type == TokenType.IDENTIFIER:
            self._advance()
            return token.lexeme
        if token.type == TokenType.EOF:
            raise create_unexpected_eof_error(what, self.current)
        raise create_expected_identifier_error(what, token, self.current)

    def _check_statement_terminator(self) -> bool:
        """Check for tokens that end a statement without an expression."""
        return (self._check(TokenType.SEMICOLON) or
                self._check(TokenType.RIGHT_BRACE) or
                self._is_at_end())


def _to_number(lexeme: str) -> float:
    """Numeral text to float; malformed runs such as '1.2.3' become NaN."""
    try:
        return float(lexeme)
    except ValueError:
        return math.nan


def parse_program(source: str) -> Program:
    """
    Convenience function to parse a source string into a Program.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails
        UninitializedVariableError: If a declaration lacks both type and value
    """
    return Parser(tokenize(source)).parse_program()


def parse_expression(source: str) -> Expression:
    """
    Convenience function to parse a single expression.

    The expression may be followed only by end of input, ';' or ')'.

    Raises:
        LexerError: If lexing fails
        ParseError: If parsing fails or other tokens remain
    """
    return Parser(tokenize(source)).parse_standalone_expression()
