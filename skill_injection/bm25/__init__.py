"""
BM25 (Best Match 25) relevance ranking for skill injection.

Ranks a fixed corpus of skills against each user message using term
frequency, inverse document frequency and document length normalization.

Components:
- tokenizer: Text tokenization (lowercase, punctuation stripped, hyphens kept)
- term_stats: Term frequency and inverse document frequency
- index_builder: Immutable corpus index with cached IDF per term
- scorer: BM25 score for one query against one document
- ranker: Threshold filtering, descending sort and top-N selection
"""

from .tokenizer import tokenize
from .term_stats import term_frequency, inverse_document_frequency
from .index_builder import BM25Index, build_bm25_index
from .scorer import calculate_bm25_score
from .ranker import RankedSkill, rank_skills, rank_skills_by_bm25, get_top_skills_by_bm25

__all__ = [
    "tokenize",
    "term_frequency",
    "inverse_document_frequency",
    "BM25Index",
    "build_bm25_index",
    "calculate_bm25_score",
    "RankedSkill",
    "rank_skills",
    "rank_skills_by_bm25",
    "get_top_skills_by_bm25",
]
