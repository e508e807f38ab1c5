"""
Configuration for the Dotlin tooling front-end.

Author: xwest
"""

from dataclasses import dataclass


@dataclass
class ToolingConfiguration:
    """Configuration parameters for the analysis and evaluation helpers"""

    # Quick-fix
    fallback_type: str = "Any"  # Annotation used when usage inference fails

    # Evaluation
    math_builtins: bool = True  # Seed the environment with pow, sin, cos, ...

    # Debugging
    debug_mode: bool = False

    def __post_init__(self):
        if not self.fallback_type or not self.fallback_type.strip():
            raise ValueError("fallback_type must be a non-empty type name")
