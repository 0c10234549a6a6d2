"""
Injection selector - decides which skills to inject for one message.

Two modes:
- Relevance (BM25 enabled + index available): top-N BM25 candidates,
  minus any the user explicitly negated ("skip react-hooks")
- Heuristic: pattern matcher over every known skill name
"""

import logging
from typing import List, Mapping, Optional, Sequence

from .bm25 import BM25Index, get_top_skills_by_bm25
from .config import SkillsConfig
from .matching import find_matching_skills, has_intent_to_use

logger = logging.getLogger(__name__)


def _dedupe(names: Sequence[str]) -> List[str]:
    seen = set()
    unique = []
    for name in names:
        if name not in seen:
            seen.add(name)
            unique.append(name)
    return unique


def select_skills(
    message: str,
    skill_names: Sequence[str],
    index: Optional[BM25Index] = None,
    skill_keywords: Optional[Mapping[str, Sequence[str]]] = None,
    config: Optional[SkillsConfig] = None
) -> List[str]:
    """
    Select skill names to inject for a message.

    Args:
        message: Plain text of the user message
        skill_names: All available skill names (index order in relevance mode)
        index: BM25 index built from the same names; None disables relevance mode
        skill_keywords: Optional alias keywords per skill name
        config: Full skills config

    Returns:
        Ordered, duplicate-free list of skill names. Relevance mode keeps
        ranking order; heuristic mode keeps input order. Never raises for
        empty inputs.
    """
    config = config or SkillsConfig()
    skill_keywords = skill_keywords or {}

    if not skill_names:
        return []

    if config.bm25.enabled and index is not None:
        if index.total_documents == 0:
            return []

        candidates = get_top_skills_by_bm25(
            message, skill_names, index, config.bm25.max_skills, config.bm25
        )
        if config.debug:
            logger.info(f"BM25 top {config.bm25.max_skills} candidates: {candidates}")

        selected = []
        for name in candidates:
            # BM25 already established relevance; only the negation veto applies here
            result = has_intent_to_use(
                message, name, skill_keywords.get(name, ()), config.pattern_matching
            )
            if result.has_negation:
                if config.debug:
                    logger.info(f"Skipping skill '{name}' due to negation")
                continue
            selected.append(name)
    else:
        selected = find_matching_skills(
            message, skill_names, skill_keywords, config.pattern_matching
        )

    return _dedupe(selected)
