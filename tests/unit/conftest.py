"""Unit test fixtures - small in-memory skill corpora, no environment needed"""

import os

import pytest

from skill_injection.bm25 import build_bm25_index
from skill_injection.models import Skill


SAMPLE_CORPUS = {
    "typescript-tdd": "TypeScript development with test-driven development approach",
    "react-hooks": "React hooks for state management in functional components",
    "node-api": "Building RESTful APIs with Node.js and Express framework",
}


@pytest.fixture
def sample_corpus():
    """Three skills with mostly disjoint vocabulary"""
    return dict(SAMPLE_CORPUS)


@pytest.fixture
def sample_names():
    """Skill names in index order"""
    return list(SAMPLE_CORPUS)


@pytest.fixture
def sample_index():
    """BM25 index over the sample corpus"""
    return build_bm25_index(SAMPLE_CORPUS)


@pytest.fixture
def sample_skills():
    """Skill objects keyed by name, two of them with alias keywords"""
    return {
        "typescript-tdd": Skill(
            name="typescript-tdd",
            description="TypeScript development with TDD",
            content="Write a failing test first, then the TypeScript code that passes it.",
            keywords=("tdd", "test-driven"),
        ),
        "react-hooks": Skill(
            name="react-hooks",
            description="React hooks patterns",
            content="Use hooks for state management in functional React components.",
            keywords=("usestate", "useeffect"),
        ),
        "bun-runtime": Skill(
            name="bun-runtime",
            description="Bun runtime",
            content="Run JavaScript fast with the Bun runtime and bun test.",
        ),
    }


@pytest.fixture(autouse=True)
def clean_skills_env(monkeypatch):
    """Keep SKILLS_* variables from the developer's shell out of unit tests"""
    for key in list(os.environ):
        if key.startswith("SKILLS_"):
            monkeypatch.delenv(key, raising=False)
