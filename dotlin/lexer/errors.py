"""
Error handling for the Dotlin lexer.

Also home of the Diagnostic record shared by every stage of the front-end
(parser, analyzer, evaluator), so editor tooling can render any failure the
same way.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base class for front-end diagnostics (errors, warnings, info)."""
    message: str
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None
    position: Optional[str] = None  # "offset 12", "token 3", ...

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        code = f"[{self.code}] " if self.code else ""
        result = f"{severity_prefix}: {code}{self.message}\n"
        if self.position:
            result += f"  --> {self.position}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters a character it cannot tokenize.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        offset: Optional[int] = None,
        char: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.char = char
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions,
            position=f"offset {offset}" if offset is not None else None
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
}


# Suggested replacements for symbols people reach for out of habit
OPERATOR_ALTERNATIVES = {
    '~': ["Use '-' for negation"],
    '|': ["Compound operators such as '||' are not supported"],
    '$': ["String templates are not supported; concatenate with '+'"],
    '`': ["Use '\"' or \"'\" to delimit strings"],
}


# Helper functions for creating common errors

def create_invalid_character_error(char: str, offset: int) -> LexerError:
    """Create an error for an invalid character."""
    suggestions = OPERATOR_ALTERNATIVES.get(char, [])

    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Dotlin source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Unexpected character: '{char}'",
        offset=offset,
        char=char,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_unterminated_string_error(quote: str, offset: int) -> LexerError:
    """Create an error for an unterminated string literal."""
    return LexerError(
        message="Unterminated string literal",
        offset=offset,
        char=quote,
        code="L002",
        help_text=f"String literals must be closed with a matching {quote} quote.",
        suggestions=[f"Add a closing {quote} quote", "Check for unescaped quotes in the string"]
    )
