"""
BM25 index builder - precomputes corpus statistics for skill ranking.

The index is built once per skill corpus and never mutated afterwards.
A corpus change means building a new index.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .term_stats import inverse_document_frequency
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BM25Index:
    """Precomputed, read-only document statistics for BM25 scoring"""
    documents: Tuple[Tuple[str, ...], ...]  # Tokenized documents, by position
    average_document_length: float          # Mean token count (0.0 for empty corpus)
    total_documents: int
    idf_cache: Mapping[str, float]           # IDF for every distinct corpus term
    names: Tuple[str, ...] = ()              # Skill name at each document position


def build_bm25_index(corpus: Mapping[str, str]) -> BM25Index:
    """
    Build BM25 index from skill content.

    Each document is the skill name followed by its body, so a query that
    mentions the skill name scores against that document.

    Args:
        corpus: Mapping of unique skill name to raw text body

    Returns:
        Immutable BM25Index. Document i corresponds to the i-th name in
        the mapping's iteration order (also recorded in index.names).

    Example:
        >>> index = build_bm25_index({
        ...     "typescript-tdd": "TypeScript development with test-driven development",
        ...     "bun-runtime": "Bun runtime for fast JavaScript execution",
        ... })
        >>> index.total_documents
        2
        >>> index.names
        ('typescript-tdd', 'bun-runtime')
    """
    names = []
    documents = []

    for name, body in corpus.items():
        documents.append(tuple(tokenize(f"{name} {body}")))
        names.append(name)

    total_documents = len(documents)

    if total_documents == 0:
        # Nothing to average over; 0.0 instead of a NaN from 0/0
        logger.warning("Building BM25 index from an empty corpus")
        average_document_length = 0.0
    else:
        average_document_length = sum(len(doc) for doc in documents) / total_documents

    # Precompute IDF for every distinct term
    all_terms = {term for doc in documents for term in doc}
    idf_cache = {
        term: inverse_document_frequency(term, documents, total_documents)
        for term in all_terms
    }

    logger.debug(
        f"Built BM25 index: {total_documents} documents, {len(idf_cache)} unique terms, "
        f"avg length {average_document_length:.1f} tokens"
    )

    return BM25Index(
        documents=tuple(documents),
        average_document_length=average_document_length,
        total_documents=total_documents,
        idf_cache=MappingProxyType(idf_cache),
        names=tuple(names),
    )
