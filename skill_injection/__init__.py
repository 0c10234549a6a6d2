"""
Skill injection engine.

Decides, for each incoming chat message, which named knowledge documents
("skills") to inject into the conversation.

Usage:
    from skill_injection import Skill, SkillInjector, load_config

    skills = {
        "typescript-tdd": Skill(
            name="typescript-tdd",
            description="TypeScript development with TDD",
            content="Write the failing test first...",
            keywords=("tdd", "test-driven"),
        ),
    }
    injector = SkillInjector(skills, config=load_config())
    injector.process_message("Let's use TDD for this feature")
    # => ['typescript-tdd']
"""

from .config import BM25Config, PatternMatchingConfig, SkillsConfig, load_config
from .models import Skill, render_skill
from .bm25 import BM25Index, build_bm25_index, rank_skills_by_bm25, get_top_skills_by_bm25
from .matching import MatchResult, has_intent_to_use, find_matching_skills
from .selector import select_skills
from .injector import SkillInjector, extract_text

__all__ = [
    "BM25Config",
    "PatternMatchingConfig",
    "SkillsConfig",
    "load_config",
    "Skill",
    "render_skill",
    "BM25Index",
    "build_bm25_index",
    "rank_skills_by_bm25",
    "get_top_skills_by_bm25",
    "MatchResult",
    "has_intent_to_use",
    "find_matching_skills",
    "select_skills",
    "SkillInjector",
    "extract_text",
]
