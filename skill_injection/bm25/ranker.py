"""
Skill ranking on top of the BM25 scorer.

Ranking order among equal scores is implementation-defined. Python's stable
sort keeps the input name order for ties, but callers must not depend on it.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import BM25Config
from .index_builder import BM25Index
from .scorer import calculate_bm25_score


@dataclass(frozen=True)
class RankedSkill:
    """Skill name with its BM25 score (for diagnostics)"""
    name: str
    score: float


def rank_skills_by_bm25(
    query: str,
    skill_names: Sequence[str],
    index: BM25Index,
    config: Optional[BM25Config] = None
) -> List[Tuple[str, float]]:
    """
    Rank skills by BM25 relevance to a query.

    Args:
        query: User message
        skill_names: Skill names in the same order used to build the index
            (skill_names[i] is scored against document i)
        index: Prebuilt BM25 index
        config: BM25 parameters; config.threshold filters low scores

    Returns:
        List of (skill_name, score) tuples with score >= threshold,
        sorted by score (descending)

    Example:
        >>> rank_skills_by_bm25("How do I write TypeScript tests?",
        ...                     ["typescript-tdd", "bun-runtime"], index)
        [('typescript-tdd', 0.98...), ('bun-runtime', 0.0)]
    """
    config = config or BM25Config()

    scores = []
    for position, name in enumerate(skill_names):
        score = calculate_bm25_score(query, position, index, config)
        if score >= config.threshold:
            scores.append((name, score))

    scores.sort(key=lambda item: item[1], reverse=True)
    return scores


def get_top_skills_by_bm25(
    query: str,
    skill_names: Sequence[str],
    index: BM25Index,
    top_n: int = 3,
    config: Optional[BM25Config] = None
) -> List[str]:
    """
    Get the top N skill names by BM25 relevance.

    top_n larger than the number of candidates returns all of them.
    """
    if top_n <= 0:
        return []
    ranked = rank_skills_by_bm25(query, skill_names, index, config)
    return [name for name, _ in ranked[:top_n]]


def rank_skills(
    query: str,
    index: BM25Index,
    config: Optional[BM25Config] = None
) -> List[RankedSkill]:
    """Rank every skill in the index (using its recorded name order)"""
    return [
        RankedSkill(name=name, score=score)
        for name, score in rank_skills_by_bm25(query, index.names, index, config)
    ]
