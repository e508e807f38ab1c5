"""
Error handling for the Dotlin parser.

The parser has no error recovery: the first malformed construct raises a
ParseError and the whole parse is abandoned.

Author: xwest
"""

from typing import Optional, List, Union

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a syntax error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        position: Optional[int] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            position=f"token {position}" if position is not None else None
        )

    @property
    def kind(self) -> str:
        """Short category name for the error code."""
        return PARSER_ERROR_CODES.get(self.diagnostic.code, "Syntax error")

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Expected token not found",
    "P003": "Expected identifier",
    "P005": "Expression nested too deeply",
    "P010": "Unexpected end of input",
    "P013": "Unexpected token after expression",
}

TOKEN_SUGGESTIONS = {
    TokenType.SEMICOLON: ["Add a semicolon ';' to end the statement"],
    TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
    TokenType.RIGHT_BRACKET: ["Add a closing bracket ']'"],
    TokenType.RIGHT_BRACE: ["Add a closing brace '}'"],
    TokenType.LEFT_BRACE: ["Add an opening brace '{' to start the function body"],
    TokenType.LEFT_PAREN: ["Add '(' to start the parameter list"],
}


def describe_token(token: Token) -> str:
    """Human readable description of a token for error messages."""
    if token.type == TokenType.EOF:
        return "end of input"
    if token.type in (TokenType.NUMBER, TokenType.STRING, TokenType.IDENTIFIER):
        return f"{token.type.value} '{token.lexeme}'"
    return f"'{token.lexeme}'"


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token,
                                  position: int) -> ParseError:
    """Create an error for a token that does not fit where it was found."""
    if isinstance(expected, TokenType):
        expected_str = f"'{expected.value}'"
        suggestions = TOKEN_SUGGESTIONS.get(expected, [])
    else:
        expected_str = expected
        suggestions = []

    if found.type == TokenType.EOF:
        return create_unexpected_eof_error(expected_str, position)

    return ParseError(
        message=f"Expected {expected_str}, found {describe_token(found)}",
        token=found,
        position=position,
        code="P002",
        help_text=f"The parser expected to see {expected_str} at this position.",
        suggestions=suggestions
    )


def create_expected_identifier_error(what: str, found: Token, position: int) -> ParseError:
    """Create an error for a missing name (function, parameter, variable, type)."""
    return ParseError(
        message=f"Expected {what}, found {describe_token(found)}",
        token=found,
        position=position,
        code="P003",
        help_text=f"A {what} must be a plain identifier.",
    )


def create_prefix_error(found: Token, position: int) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    if found.type == TokenType.EOF:
        return create_unexpected_eof_error("an expression", position)
    return ParseError(
        message=f"Unexpected token in prefix position: {describe_token(found)}",
        token=found,
        position=position,
        code="P001",
        help_text="An expression must start with a number, string, name, '(' or a sign.",
        suggestions=["Check the expression syntax", "Ensure all operators have operands"]
    )


def create_trailing_tokens_error(found: Token, position: int) -> ParseError:
    """Create an error for input left over after a complete expression."""
    return ParseError(
        message=f"Unexpected token after expression: {describe_token(found)}",
        token=found,
        position=position,
        code="P013",
        help_text="Only ';' or ')' may follow a standalone expression.",
    )


def create_unexpected_eof_error(expected: str, position: int) -> ParseError:
    """Create an error for unexpected end of input."""
    return ParseError(
        message=f"Unexpected end of input, expected {expected}",
        position=position,
        code="P010",
        help_text=f"The parser reached the end of the input while expecting {expected}.",
        suggestions=[f"Add the missing {expected}", "Check for incomplete statements"]
    )


def create_nesting_too_deep_error(position: int) -> ParseError:
    """Create an error for input nested deeper than the parser's stack allows."""
    return ParseError(
        message="Expression nested too deeply",
        position=position,
        code="P005",
        help_text="Parentheses, signs and function bodies are nested beyond the supported depth.",
        suggestions=["Split the expression into smaller parts"]
    )
