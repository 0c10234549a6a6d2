"""
BM25 scorer for ranking skills against a user message.

BM25 (Best Match 25) is a probabilistic ranking function used for information retrieval.

Formula:
    score(D, Q) = Σ IDF(q) × (tf × (k1 + 1)) / (tf + k1 × (1 - b + b × |D|/avgdl))

Where:
    q = each query token (duplicates counted once per occurrence)
    tf = term frequency of q in document D
    IDF(q) = cached inverse document frequency (0 for terms outside the corpus)
    k1 = term frequency saturation parameter (default: 1.5)
    b = length normalization parameter (default: 0.75)
    |D| = document length (number of tokens)
    avgdl = average document length across the corpus
"""

from typing import Optional

from ..config import BM25Config
from .index_builder import BM25Index
from .term_stats import term_frequency
from .tokenizer import tokenize


def calculate_bm25_score(
    query: str,
    document_position: int,
    index: BM25Index,
    config: Optional[BM25Config] = None
) -> float:
    """
    Compute BM25 score for a query against one indexed document.

    Args:
        query: Raw user message (tokenized here)
        document_position: Position of the document in the index
        index: Prebuilt BM25 index
        config: BM25 parameters (defaults if omitted)

    Returns:
        BM25 score (higher = more relevant). 0.0 for an out-of-range
        position or a query with no terms in common with the corpus.

    Example:
        >>> index = build_bm25_index({"typescript-tdd": "TypeScript development"})
        >>> calculate_bm25_score("typescript development", 0, index) > 0
        True
        >>> calculate_bm25_score("typescript", 5, index)
        0.0
    """
    if document_position < 0 or document_position >= index.total_documents:
        return 0.0

    config = config or BM25Config()
    k1, b = config.k1, config.b

    document = index.documents[document_position]
    doc_length = len(document)

    score = 0.0

    for term in tokenize(query):
        idf = index.idf_cache.get(term, 0.0)
        tf = term_frequency(term, document)

        # Zero numerator: skip rather than divide (empty documents have avgdl 0)
        if tf == 0 or idf == 0.0:
            continue

        numerator = tf * (k1 + 1)
        denominator = tf + k1 * (
            1 - b + b * (doc_length / index.average_document_length)
        )

        score += idf * (numerator / denominator)

    return score
