"""
Dotlin Lexer Package

Implements the tokenizer for the Dotlin scripting language.

Key Features:
- Single-character punctuation tokens (no compound operators)
- Keywords lexed as identifiers, distinguished by text at parse time
- Line (//) and block (/* */) comments
- Verbatim string contents (escapes preserved, not interpreted)

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, ADVERTISED_KEYWORDS
from .lexer import Lexer, tokenize
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "KEYWORDS",
    "ADVERTISED_KEYWORDS",
    "Diagnostic",
    "LexerError",
]
