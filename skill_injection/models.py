"""Skill data model and the text block injected into a conversation."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Skill(BaseModel):
    """
    A reusable piece of guidance that can be injected into chat context.

    The body is either free-form markdown (content) or the structured
    sections what_i_do / when_to_use_me / instructions / checklist.
    Content wins when both are present. Only name, description and the
    body take part in ranking; keywords feed the pattern matcher as
    aliases for the name.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique skill identifier (kebab-case)")
    description: str = Field(..., description="Brief description of what the skill provides")
    content: str = Field(default="", description="Full skill content in markdown")
    what_i_do: Optional[str] = None
    when_to_use_me: Optional[str] = None
    instructions: Optional[str] = None
    checklist: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    version: Optional[str] = None
    updated_at: Optional[str] = None
    category: Optional[str] = None
    dependencies: Tuple[str, ...] = ()

    def index_text(self) -> str:
        """Body indexed for BM25 (the name is prepended by the index builder)"""
        body = self.content or " ".join(
            part for part in (self.what_i_do, self.when_to_use_me, self.instructions) if part
        )
        return f"{self.description} {body}"

    def body_markdown(self) -> str:
        """Content, or the structured sections rendered as markdown"""
        if self.content:
            return self.content
        return "\n".join([
            "## What I do",
            self.what_i_do or "",
            "",
            "## When to use me",
            self.when_to_use_me or "",
            "",
            "## Instructions",
            self.instructions or "",
            "",
            "## Checklist",
            *[f"- [ ] {item}" for item in self.checklist],
        ])


def render_skill(skill: Skill) -> str:
    """
    Format a skill as the text block delivered into the session.

    Example:
        >>> print(render_skill(Skill(name="bun-runtime", description="Bun runtime",
        ...                          content="Use bun test.")))
        <BLANKLINE>
        <BLANKLINE>
        <skill name="bun-runtime">
        # Bun runtime
        <BLANKLINE>
        Use bun test.
        </skill>
    """
    return "\n".join([
        "",
        "",
        f'<skill name="{skill.name}">',
        f"# {skill.description}",
        "",
        skill.body_markdown(),
        "</skill>",
    ])
