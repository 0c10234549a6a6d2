"""
Heuristic intent/negation matcher for skill names in user messages.

Strategies (any one is enough for a positive match):
1. Word boundary - the skill name as a whole word ("use typescript-tdd")
2. Intent detection - an intent word anywhere before the name on the same
   line, or within 20 characters after it ("typescript-tdd approach, follow it")
3. Keywords - any alias keyword for the skill as a whole word

Negation: a negation phrase ending at most 50 characters before the skill
name ("don't use typescript-tdd") sets has_negation and vetoes the match.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence

from ..config import PatternMatchingConfig
from .escape import escape_literal

logger = logging.getLogger(__name__)

INTENT_WINDOW_AFTER = 20  # Max characters between skill name and trailing intent word
NEGATION_WINDOW = 50      # Max characters between negation phrase and skill name


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one skill name against one message"""
    matches: bool
    has_negation: bool = False
    matched_pattern: Optional[str] = None  # First pattern that fired (for debugging)


def _whole_word(escaped: str) -> str:
    # Lookarounds instead of \b: names may start or end with punctuation ("c++", ".net")
    return rf"(?<!\w){escaped}(?!\w)"


def _compile(pattern: str) -> "re.Pattern[str]":
    return re.compile(pattern, re.IGNORECASE)


def _positive_patterns(
    escaped_name: str,
    keywords: Iterable[str],
    config: PatternMatchingConfig
) -> List[tuple]:
    """Build (description, compiled pattern) pairs in evaluation order"""
    patterns = []

    if escaped_name and config.word_boundary:
        patterns.append(("word-boundary", _compile(_whole_word(escaped_name))))

    if escaped_name and config.intent_detection:
        for keyword in config.intent_keywords:
            escaped_keyword = escape_literal(keyword.lower())
            if not escaped_keyword:
                continue
            patterns.append((
                f"intent-before:{keyword}",
                _compile(f"{_whole_word(escaped_keyword)}.*{_whole_word(escaped_name)}"),
            ))
            patterns.append((
                f"intent-after:{keyword}",
                _compile(
                    f"{_whole_word(escaped_name)}.{{0,{INTENT_WINDOW_AFTER}}}"
                    f"{_whole_word(escaped_keyword)}"
                ),
            ))

    for keyword in keywords:
        escaped_keyword = escape_literal(keyword.lower())
        if escaped_keyword:
            patterns.append((f"keyword:{keyword}", _compile(_whole_word(escaped_keyword))))

    return patterns


def _has_negation(content: str, escaped_name: str, config: PatternMatchingConfig) -> bool:
    for phrase in config.negation_keywords:
        escaped_phrase = escape_literal(phrase.lower())
        if not escaped_phrase:
            continue
        pattern = _compile(
            f"{_whole_word(escaped_phrase)}.{{0,{NEGATION_WINDOW}}}{_whole_word(escaped_name)}"
        )
        if pattern.search(content):
            return True
    return False


def has_intent_to_use(
    message: str,
    skill_name: str,
    keywords: Sequence[str] = (),
    config: Optional[PatternMatchingConfig] = None
) -> MatchResult:
    """
    Check whether a message indicates intent to use a skill.

    Negation is evaluated independently of the positive patterns, so
    callers can veto a skill proposed by another mechanism (BM25) when
    the user says "skip <skill>".

    Args:
        message: User message text
        skill_name: Skill name to look for
        keywords: Alias keywords that also trigger the skill
        config: Pattern matching switches and keyword lists

    Returns:
        MatchResult; matches is False whenever has_negation is True

    Examples:
        >>> has_intent_to_use("Use typescript-tdd skill", "typescript-tdd")
        MatchResult(matches=True, has_negation=False, matched_pattern='word-boundary')

        >>> has_intent_to_use("Don't use typescript-tdd", "typescript-tdd").has_negation
        True

        >>> has_intent_to_use("Use TDD approach", "typescript-tdd", ["tdd"]).matched_pattern
        'keyword:tdd'
    """
    config = config or PatternMatchingConfig()

    content = message.lower()
    escaped_name = escape_literal(skill_name.lower())

    matched_pattern = None
    for description, pattern in _positive_patterns(escaped_name, keywords, config):
        if pattern.search(content):
            matched_pattern = description
            break

    has_negation = bool(
        escaped_name
        and config.negation_detection
        and _has_negation(content, escaped_name, config)
    )

    return MatchResult(
        matches=matched_pattern is not None and not has_negation,
        has_negation=has_negation,
        matched_pattern=matched_pattern,
    )


def find_matching_skills(
    message: str,
    skill_names: Sequence[str],
    skill_keywords: Optional[Mapping[str, Sequence[str]]] = None,
    config: Optional[PatternMatchingConfig] = None
) -> List[str]:
    """
    Batch check skills against a message.

    Returns:
        Names whose MatchResult.matches is True, in input order

    Example:
        >>> find_matching_skills("Use TDD approach", ["typescript-tdd", "bun-runtime"],
        ...                      {"typescript-tdd": ["TDD", "test-driven"]})
        ['typescript-tdd']
    """
    skill_keywords = skill_keywords or {}

    matching = []
    for name in skill_names:
        result = has_intent_to_use(message, name, skill_keywords.get(name, ()), config)
        if result.matches:
            matching.append(name)
        elif result.has_negation:
            logger.debug(f"Skill '{name}' negated in message (pattern: {result.matched_pattern})")

    return matching
