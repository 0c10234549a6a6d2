"""Literal escaping for skill names and keywords used in match patterns."""

# Characters with special meaning in a regular expression
SPECIAL_CHARACTERS = frozenset('.*+?^${}()|[]\\')


def escape_literal(text: str) -> str:
    """
    Escape pattern-significant characters so text matches literally.

    Only the characters in SPECIAL_CHARACTERS are escaped; hyphens and
    everything else pass through unchanged.

    Examples:
        >>> escape_literal("regex.utils")
        'regex\\\\.utils'
        >>> escape_literal("skill-name")
        'skill-name'
        >>> escape_literal("c++")
        'c\\\\+\\\\+'
    """
    return ''.join('\\' + char if char in SPECIAL_CHARACTERS else char for char in text)
