"""
Pattern matching for detecting user intent to use a specific skill.

Strategies:
- Word boundary matching for exact skill names
- Intent detection with configurable keywords
- Negation detection to avoid false positives
- Alias keyword matching
"""

from .escape import escape_literal
from .matcher import MatchResult, has_intent_to_use, find_matching_skills

__all__ = [
    "escape_literal",
    "MatchResult",
    "has_intent_to_use",
    "find_matching_skills",
]
