"""
Configuration for skill injection.

Config values are immutable pydantic models passed explicitly into every
ranking and matching call. Defaults live on the models; partial overrides
are merged with SkillsConfig.merged() or read from the environment with
load_config().

Environment variables (all optional):
    SKILLS_AUTO_INJECT          "true"/"false" (default: true)
    SKILLS_DEBUG                "true"/"false" (default: false)
    SKILLS_BM25_ENABLED         "true"/"false" (default: false)
    SKILLS_BM25_K1              float (default: 1.5)
    SKILLS_BM25_B               float 0..1 (default: 0.75)
    SKILLS_BM25_THRESHOLD       float (default: 0.0)
    SKILLS_BM25_MAX_SKILLS      int (default: 3)
    SKILLS_WORD_BOUNDARY        "true"/"false" (default: true)
    SKILLS_INTENT_DETECTION     "true"/"false" (default: true)
    SKILLS_NEGATION_DETECTION   "true"/"false" (default: true)
    SKILLS_INTENT_KEYWORDS      comma-separated extra intent words
    SKILLS_NEGATION_KEYWORDS    comma-separated extra negation phrases
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Words that signal the user wants to use a skill
DEFAULT_INTENT_KEYWORDS: Tuple[str, ...] = (
    'use', 'apply', 'follow', 'implement', 'load', 'get', 'show', 'with',
)

# Phrases that signal the user wants to avoid a skill
DEFAULT_NEGATION_KEYWORDS: Tuple[str, ...] = (
    "don't", 'do not', 'avoid', 'skip', 'ignore', 'without', 'except', 'excluding',
)

_TRUE_VALUES = frozenset(['true', '1', 'yes', 'on'])
_FALSE_VALUES = frozenset(['false', '0', 'no', 'off'])


class BM25Config(BaseModel):
    """BM25 relevance ranking parameters"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = False
    k1: float = Field(default=1.5, ge=0.0, description="Term frequency saturation")
    b: float = Field(default=0.75, ge=0.0, le=1.0, description="Length normalization")
    threshold: float = Field(default=0.0, description="Minimum score to keep a skill")
    max_skills: int = Field(default=3, ge=0, description="Maximum skills injected per message")


class PatternMatchingConfig(BaseModel):
    """Heuristic intent/negation matcher switches and keyword lists"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    word_boundary: bool = True
    intent_detection: bool = True
    negation_detection: bool = True
    custom_intent_keywords: Tuple[str, ...] = ()
    custom_negation_keywords: Tuple[str, ...] = ()

    @property
    def intent_keywords(self) -> Tuple[str, ...]:
        return DEFAULT_INTENT_KEYWORDS + self.custom_intent_keywords

    @property
    def negation_keywords(self) -> Tuple[str, ...]:
        return DEFAULT_NEGATION_KEYWORDS + self.custom_negation_keywords


class SkillsConfig(BaseModel):
    """Top-level skill injection configuration"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    auto_inject: bool = True
    debug: bool = False
    pattern_matching: PatternMatchingConfig = Field(default_factory=PatternMatchingConfig)
    bm25: BM25Config = Field(default_factory=BM25Config)

    def merged(self, overrides: Optional[Dict[str, Any]] = None) -> "SkillsConfig":
        """
        Return a new config with partial overrides merged over this one.

        Nested sections are merged key by key, so
        {"bm25": {"enabled": True}} keeps the current k1, b, etc.

        Example:
            >>> cfg = SkillsConfig().merged({"bm25": {"enabled": True, "k1": 1.2}})
            >>> (cfg.bm25.enabled, cfg.bm25.k1, cfg.bm25.b)
            (True, 1.2, 0.75)
        """
        if not overrides:
            return self

        data = self.model_dump()
        for key, value in overrides.items():
            if isinstance(value, BaseModel):
                value = value.model_dump()
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value

        return SkillsConfig.model_validate(data)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be true or false, got: {value!r}")


def _env_number(name: str, default: Union[int, float], cast: type) -> Union[int, float]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return cast(value.strip())
    except ValueError:
        raise ValueError(f"{name} must be a valid {cast.__name__}, got: {value!r}") from None


def _env_list(name: str) -> Tuple[str, ...]:
    value = os.getenv(name, "")
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_config(env_file: Optional[Union[str, Path]] = None) -> SkillsConfig:
    """
    Build SkillsConfig from environment variables.

    Loads .env.local from the project root (or the given env_file) first.
    Values already present in the process environment win over the file.

    Raises:
        ValueError: If a variable is set to a malformed value
        pydantic.ValidationError: If a value is out of range (e.g. b > 1)
    """
    env_path = Path(env_file) if env_file else Path(__file__).parent.parent / ".env.local"
    if env_path.exists():
        logger.debug(f"Loading skill injection settings from: {env_path}")
        load_dotenv(env_path, override=False)

    defaults_bm25 = BM25Config()

    config = SkillsConfig(
        auto_inject=_env_bool("SKILLS_AUTO_INJECT", True),
        debug=_env_bool("SKILLS_DEBUG", False),
        pattern_matching=PatternMatchingConfig(
            word_boundary=_env_bool("SKILLS_WORD_BOUNDARY", True),
            intent_detection=_env_bool("SKILLS_INTENT_DETECTION", True),
            negation_detection=_env_bool("SKILLS_NEGATION_DETECTION", True),
            custom_intent_keywords=_env_list("SKILLS_INTENT_KEYWORDS"),
            custom_negation_keywords=_env_list("SKILLS_NEGATION_KEYWORDS"),
        ),
        bm25=BM25Config(
            enabled=_env_bool("SKILLS_BM25_ENABLED", defaults_bm25.enabled),
            k1=_env_number("SKILLS_BM25_K1", defaults_bm25.k1, float),
            b=_env_number("SKILLS_BM25_B", defaults_bm25.b, float),
            threshold=_env_number("SKILLS_BM25_THRESHOLD", defaults_bm25.threshold, float),
            max_skills=_env_number("SKILLS_BM25_MAX_SKILLS", defaults_bm25.max_skills, int),
        ),
    )

    logger.info(
        f"Skill injection config: auto_inject={config.auto_inject}, "
        f"bm25_enabled={config.bm25.enabled}, max_skills={config.bm25.max_skills}"
    )
    return config
