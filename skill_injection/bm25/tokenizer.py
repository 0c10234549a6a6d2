"""
Tokenizer for BM25 text processing.

Tokenization pipeline:
1. Lowercase conversion
2. Replace everything except word characters, whitespace and hyphens with a space
3. Split on whitespace runs
4. Drop empty tokens

No stemming and no stopword removal: skill names such as "typescript-tdd"
must survive as a single token, and every token counts toward document length.
"""

import re
from typing import List

# Anything that is not a word character, whitespace or a hyphen
_NON_TOKEN_CHARS = re.compile(r'[^\w\s-]')


def tokenize(text: str) -> List[str]:
    """
    Tokenize text into lowercase words, removing punctuation but keeping hyphens.

    Args:
        text: Input text to tokenize

    Returns:
        List of lowercase tokens (may be empty)

    Examples:
        >>> tokenize("Hello, World!")
        ['hello', 'world']

        >>> tokenize("Use typescript-tdd skill")
        ['use', 'typescript-tdd', 'skill']

        >>> tokenize("Version 1.2.3")
        ['version', '1', '2', '3']

        >>> tokenize("!!!???...")
        []
    """
    if not text:
        return []

    text = _NON_TOKEN_CHARS.sub(' ', text.lower())

    # str.split() with no separator splits on whitespace runs and drops empties
    return text.split()
