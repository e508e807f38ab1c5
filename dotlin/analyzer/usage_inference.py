"""
Usage-based type guessing for untyped declarations.

Works on raw text, not on the AST: the first ``name = literal`` (or
``name += literal``) anywhere in the file decides the type. Scopes are
ignored, so a same-named variable elsewhere can produce a wrong answer.
This is a best-effort hint for quick-fixes, not a type checker.

Author: xwest
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


INT = "Int"
DOUBLE = "Double"
STRING = "String"
BOOLEAN = "Boolean"
ARRAY_OF_INT = "Array<Int>"
ARRAY_OF_DOUBLE = "Array<Double>"
ARRAY_OF_STRING = "Array<String>"
ARRAY_OF_ANY = "Array<Any>"

INFERABLE_TYPES = (
    INT, DOUBLE, STRING, BOOLEAN,
    ARRAY_OF_INT, ARRAY_OF_DOUBLE, ARRAY_OF_STRING, ARRAY_OF_ANY,
)

# `name =` or `name +=`, then optional whitespace
ASSIGNMENT_PREFIX = r"\b{name}\s*\+?=\s*"

DIGITS_ONLY = re.compile(r"-?\d+")


def _classify_array(match: "re.Match") -> str:
    """Pick the array element type from the first element's literal shape."""
    first = match.group(1).strip()
    if first[:1] in ('"', "'"):
        return ARRAY_OF_STRING
    if "." in first:
        return ARRAY_OF_DOUBLE
    if DIGITS_ONLY.fullmatch(first):
        return ARRAY_OF_INT
    return ARRAY_OF_ANY


# Checked in order; the first category with a match anywhere in the text wins
USAGE_PATTERNS: List[Tuple[str, Callable[["re.Match"], str]]] = [
    (r"""["']""", lambda match: STRING),
    (r"(?:true|false)\b", lambda match: BOOLEAN),
    (r"\[\s*([^,\]]*)", _classify_array),
    (r"-?\d*\.\d+", lambda match: DOUBLE),
    (r"-?\d+\b", lambda match: INT),
]


def infer_type_from_usage(text: str, name: str) -> Optional[str]:
    """
    Guess the type of ``name`` from how it is later assigned in ``text``.

    Args:
        text: Complete source text
        name: Bare variable name

    Returns:
        One of INFERABLE_TYPES, or None when no assignment pattern matches
    """
    prefix = ASSIGNMENT_PREFIX.format(name=re.escape(name))
    for value_pattern, classify in USAGE_PATTERNS:
        match = re.search(prefix + value_pattern, text)
        if match:
            inferred = classify(match)
            logger.debug("inferred %s for %r", inferred, name)
            return inferred
    return None
