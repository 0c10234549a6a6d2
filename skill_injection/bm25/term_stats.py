"""
Term statistics for BM25: term frequency and inverse document frequency.

IDF formula:
    IDF(t) = ln((N - n(t) + 0.5) / (n(t) + 0.5) + 1)

Where:
    N = total number of documents
    n(t) = number of documents containing term t at least once

The "+1" inside the logarithm keeps IDF non-negative even for terms that
appear in every document (plain Robertson/Spärck-Jones IDF goes negative there).
"""

import math
from typing import Sequence


def term_frequency(term: str, document: Sequence[str]) -> int:
    """
    Count occurrences of a term in a tokenized document.

    Comparison is exact (case-sensitive); tokens are expected to be
    normalized by the tokenizer already.

    Example:
        >>> term_frequency("test", ["test", "driven", "test"])
        2
    """
    return sum(1 for token in document if token == term)


def inverse_document_frequency(
    term: str,
    documents: Sequence[Sequence[str]],
    total_documents: int
) -> float:
    """
    Calculate BM25 inverse document frequency for a term.

    Args:
        term: Term to weigh
        documents: All tokenized documents in the corpus
        total_documents: Corpus size (N)

    Returns:
        IDF value (higher = rarer term)

    Examples:
        >>> round(inverse_document_frequency("a", [["a"], ["b"]], 2), 4)
        0.6931
        >>> round(inverse_document_frequency("z", [["a"], ["b"]], 2), 4)
        1.7918
    """
    docs_with_term = sum(1 for doc in documents if term in doc)
    return math.log(
        (total_documents - docs_with_term + 0.5) / (docs_with_term + 0.5) + 1
    )
