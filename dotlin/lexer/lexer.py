"""
Dotlin Lexer - turns source text into a flat list of tokens

One character of punctuation is one token, so `==` comes out as two ASSIGN
tokens and `+=` as PLUS followed by ASSIGN. Tokens carry no source
positions.

Author: xwest
"""

import logging
import unicodedata
from typing import List

from .tokens import Token, TokenType, QUOTES, punctuation_type
from .errors import create_invalid_character_error, create_unterminated_string_error

logger = logging.getLogger(__name__)


class Lexer:
    """
    Dotlin lexical analyzer.

    Converts source code text into a list of tokens terminated by a single
    EOF token. Stops at the first character it cannot tokenize.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
        """
        self.source = source
        self.pos = 0
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token

        Raises:
            LexerError: On the first unrecognized character or unterminated string
        """
        self.pos = 0
        self.tokens = []

        while True:
            self._skip_whitespace_and_comments()
            if self._is_at_end():
                break
            self.tokens.append(self._next_token())

        self.tokens.append(Token(TokenType.EOF, ""))
        logger.debug("tokenized %d characters into %d tokens", len(self.source), len(self.tokens))
        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        start_pos = self.pos
        current_char = self.source[self.pos]

        # Numbers: a digit, or a dot immediately followed by a digit
        if _is_digit(current_char) or (current_char == '.' and _is_digit(self._peek())):
            return self._tokenize_number(start_pos)

        # Identifiers and keywords
        if self._is_identifier_start(current_char):
            return self._tokenize_identifier(start_pos)

        # String literals
        if current_char in QUOTES:
            return self._tokenize_string(start_pos)

        # Operators and punctuation, one character each
        token_type = punctuation_type(current_char)
        if token_type is None and unicodedata.category(current_char).startswith('P'):
            token_type = TokenType.PUNCTUATION
        if token_type is not None:
            self._advance()
            return Token(token_type, current_char, current_char)

        raise create_invalid_character_error(current_char, start_pos)

    def _tokenize_number(self, start_pos: int) -> Token:
        """Tokenize a maximal run of digits and dots."""
        while not self._is_at_end() and (_is_digit(self._current()) or self._current() == '.'):
            self._advance()
        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.NUMBER, lexeme, lexeme)

    def _tokenize_identifier(self, start_pos: int) -> Token:
        """Tokenize an identifier; keywords come out as identifiers too."""
        self._advance()
        while not self._is_at_end() and self._is_identifier_continue(self._current()):
            self._advance()
        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.IDENTIFIER, lexeme, lexeme)

    def _tokenize_string(self, start_pos: int) -> Token:
        """
        Tokenize a string literal delimited by ' or ".

        A backslash keeps itself and the character after it verbatim in the
        value; escape sequences are not interpreted.
        """
        quote = self.source[self.pos]
        self._advance()  # Skip opening quote

        value_parts = []
        while True:
            if self._is_at_end():
                raise create_unterminated_string_error(quote, start_pos)
            char = self._current()
            if char == quote:
                break
            if char == '\\' and self.pos + 1 < len(self.source):
                value_parts.append(self.source[self.pos:self.pos + 2])
                self._advance_by(2)
                continue
            value_parts.append(char)
            self._advance()

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, ''.join(value_parts))

    def _is_identifier_start(self, char: str) -> bool:
        """Check if character can start an identifier."""
        return char.isalpha() or char == '_'

    def _is_identifier_continue(self, char: str) -> bool:
        """Check if character can continue an identifier."""
        return char.isalpha() or _is_digit(char) or char == '_'

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and comments."""
        while not self._is_at_end():
            # Skip whitespace
            if self._current().isspace():
                self._advance()
                continue

            # Skip line comments //
            if self.source.startswith('//', self.pos):
                while not self._is_at_end() and self._current() != '\n':
                    self._advance()
                continue

            # Skip block comments /* */, an unclosed one runs to end of input
            if self.source.startswith('/*', self.pos):
                end = self.source.find('*/', self.pos + 2)
                self.pos = len(self.source) if end == -1 else end + 2
                continue

            break

    def _current(self) -> str:
        return self.source[self.pos]

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def _advance(self):
        self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        self.pos = min(self.pos + count, len(self.source))

    def _is_at_end(self) -> bool:
        return self.pos >= len(self.source)


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def tokenize(source: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If lexing fails
    """
    return Lexer(source).tokenize()
