"""
Skill injector - the message hook a chat host calls once per user message.

Usage:
    async def deliver(session_id: str, text: str) -> None:
        await client.session.prompt(session_id, text, no_reply=True)

    injector = SkillInjector(skills, config=load_config(), deliver=deliver)

    # Inside the host's chat.message hook:
    injected = await injector.on_chat_message(session_id, message_parts)

The skill corpus is fixed for the lifetime of an injector. A changed corpus
means constructing a new SkillInjector (the BM25 index is rebuilt).
"""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence

from .bm25 import BM25Index, build_bm25_index, rank_skills, RankedSkill
from .config import SkillsConfig
from .models import Skill, render_skill
from .selector import select_skills

logger = logging.getLogger(__name__)

DeliverFn = Callable[[str, str], Awaitable[None]]


def extract_text(parts: Sequence[Mapping[str, Any]]) -> str:
    """
    Join the text of all text parts of a message.

    Non-text parts (files, tool calls, ...) are ignored.

    Example:
        >>> extract_text([{"type": "text", "text": "use"}, {"type": "file"},
        ...               {"type": "text", "text": "bun-runtime"}])
        'use\\nbun-runtime'
    """
    return "\n".join(
        part.get("text", "") for part in parts if part.get("type") == "text"
    )


class SkillInjector:
    """
    Selects and delivers skills for incoming chat messages.

    Builds the BM25 index once at construction when relevance mode is
    enabled; otherwise only the pattern matcher is used.
    """

    def __init__(
        self,
        skills: Mapping[str, Skill],
        config: Optional[SkillsConfig] = None,
        deliver: Optional[DeliverFn] = None
    ):
        """
        Initialize injector.

        Args:
            skills: Mapping of skill name to Skill (keys must equal skill.name)
            config: Skills config (defaults if omitted)
            deliver: Async callable(session_id, text) that posts a no-reply
                message into the session. Required for on_chat_message.

        Raises:
            ValueError: If a mapping key differs from its skill's name
        """
        for key, skill in skills.items():
            if key != skill.name:
                raise ValueError(f"Skill key '{key}' does not match skill name '{skill.name}'")

        self.config = config or SkillsConfig()
        self.skills: Dict[str, Skill] = dict(skills)
        self.skill_names: List[str] = list(self.skills)
        self.skill_keywords: Dict[str, Sequence[str]] = {
            name: skill.keywords for name, skill in self.skills.items() if skill.keywords
        }
        self._deliver = deliver

        self.index: Optional[BM25Index] = None
        if self.config.bm25.enabled:
            self.index = build_bm25_index(
                {name: skill.index_text() for name, skill in self.skills.items()}
            )
            logger.info(f"BM25 index built with {self.index.total_documents} skills")

        logger.info(f"Skill injector loaded with {len(self.skill_names)} skills")
        if self.config.debug:
            logger.info(f"Skills: {', '.join(self.skill_names)}")
            logger.info(f"Config: {self.config.model_dump()}")

    def process_message(self, raw_text: str) -> List[str]:
        """
        Return the ordered skill names to inject for a message.

        Blank messages select nothing.
        """
        if not raw_text or not raw_text.strip():
            return []

        return select_skills(
            raw_text,
            self.skill_names,
            index=self.index,
            skill_keywords=self.skill_keywords,
            config=self.config,
        )

    def explain(self, raw_text: str) -> List[RankedSkill]:
        """BM25 scores for every skill (empty when relevance mode is off)"""
        if self.index is None:
            return []
        return rank_skills(raw_text, self.index, self.config.bm25)

    async def on_chat_message(self, session_id: str, parts: Sequence[Mapping[str, Any]]) -> List[str]:
        """
        Handle one user message: select skills and deliver each one.

        A failed delivery is logged and skipped; the remaining skills are
        still delivered.

        Args:
            session_id: Host session identifier
            parts: Message parts ({"type": "text", "text": ...} and others)

        Returns:
            Names of skills actually delivered, in injection order
        """
        if not self.config.auto_inject:
            return []

        if self._deliver is None:
            raise RuntimeError("SkillInjector has no deliver callable configured")

        names = self.process_message(extract_text(parts))

        injected: List[str] = []
        for name in names:
            if name in injected:
                continue

            skill = self.skills.get(name)
            if skill is None:
                continue

            try:
                await self._deliver(session_id, render_skill(skill))
            except Exception as e:
                logger.error(f"Failed to inject skill '{name}' into session {session_id}: {e}")
                continue

            injected.append(name)
            if self.config.debug:
                logger.info(f"Auto-injected skill '{name}' in session {session_id}")
            else:
                logger.info(f"Injected skill: {name}")

        return injected
