"""
Token definitions for the Dotlin lexer.

Every punctuation character is its own token type and the enum value is the
character itself, so ``TokenType("(")`` resolves to ``LEFT_PAREN``. Keywords
are not separate token types: they are identifiers told apart by their text
at parse time.

Author: xwest
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Dotlin.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = "EOF"                     # End of input

    # ========================================================================
    # Literals and Identifiers
    # ========================================================================
    NUMBER = "Number"               # 42, 3.14, .5
    STRING = "String"               # "hello", 'hi'
    IDENTIFIER = "Identifier"       # names and keywords (fun, val, ...)

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COMMA = ","
    SEMICOLON = ";"
    ASSIGN = "="
    COLON = ":"
    DOT = "."
    LESS_THAN = "<"
    GREATER_THAN = ">"

    # ========================================================================
    # Arithmetic Operators
    # ========================================================================
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    # Any other single Unicode punctuation character (!, ?, @, #, ...)
    PUNCTUATION = "Punctuation"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Dotlin language.

    Tokens carry no source position; the index in the token list is the only
    location information the parser has.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any = None               # Numeral text, string contents, or name

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    @property
    def kind(self) -> str:
        """Token kind as the language sees it: the punctuation character itself,
        or one of Number/String/Identifier/EOF."""
        if self.type is TokenType.PUNCTUATION:
            return self.lexeme
        return self.type.value

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    def is_keyword(self, keyword: str) -> bool:
        """Check if this token is the identifier spelled ``keyword``."""
        return self.type == TokenType.IDENTIFIER and self.lexeme == keyword


# Single characters recognized as dedicated punctuation token types
PUNCTUATION: Dict[str, TokenType] = {
    token_type.value: token_type
    for token_type in TokenType
    if len(token_type.value) == 1
}

# Words the parser gives meaning to
KEYWORDS = frozenset({"fun", "val", "var", "return", "import", "package"})

# Words editor tooling offers for completion; no grammar exists for
# class/if/else/when and they parse as plain identifiers.
ADVERTISED_KEYWORDS = ("fun", "val", "var", "class", "if", "else", "when")

QUOTES = ('"', "'")


def punctuation_type(char: str) -> Optional[TokenType]:
    """Return the dedicated token type for ``char``, if it has one."""
    return PUNCTUATION.get(char)
