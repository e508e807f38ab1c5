"""
Quick-fix for declarations rejected with UninitializedVariableError.

Finds the first val/var whose name is followed by neither ':' nor '=' and
suggests a type annotation to insert right after the name, guessed from
later usage.

Author: xwest
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..config import ToolingConfiguration
from .usage_inference import infer_type_from_usage

logger = logging.getLogger(__name__)

# Names read like lexer identifiers: a letter or underscore, then word characters
DECLARATION_PATTERN = re.compile(r"\b(?:val|var)\b\s+([^\W\d]\w*)")


@dataclass(frozen=True)
class QuickFix:
    """Text edit inserting ``suggested`` after the name spanning [start, end)."""
    start: int
    end: int
    suggested: str

    def apply(self, text: str) -> str:
        """Return ``text`` with the suggestion inserted after the name."""
        return text[:self.end] + self.suggested + text[self.end:]


def compute_quick_fix_for_uninitialized(
    text: str,
    config: Optional[ToolingConfiguration] = None,
) -> Optional[QuickFix]:
    """
    Locate the first untyped, uninitialized declaration in ``text``.

    Args:
        text: Complete source text
        config: Supplies the annotation used when inference finds nothing

    Returns:
        QuickFix with str offsets of the variable name, or None if every
        declaration already has a ':' or '=' after its name
    """
    config = config or ToolingConfiguration()

    for match in DECLARATION_PATTERN.finditer(text):
        following = text[match.end():].lstrip()
        if following[:1] in (":", "="):
            continue

        name = match.group(1)
        inferred = infer_type_from_usage(text, name)
        suggested = f": {inferred or config.fallback_type}"
        logger.debug("quick-fix for %r at %d: %r", name, match.start(1), suggested)
        return QuickFix(match.start(1), match.end(1), suggested)

    return None
