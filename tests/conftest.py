"""Shared builders for the position-fit tests."""
from __future__ import annotations

import os

import pytest

from positionfit.models import CandidateProfile, CandidateSkill, PositionSlot, RequiredSkillLevel, SlotQuestion

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data")


def make_slot(identifier: str, min_level: int = 1, skills=(), preferred=None, questions=(),
              current: int = 0, maximum: int = 1, role: str = "cat", role_type: str | None = "frontend") -> PositionSlot:
    return PositionSlot(
        id=identifier,
        role=role,
        role_type=role_type,
        preferred_personality_tag=preferred,
        min_level=min_level,
        required_skill_levels=[RequiredSkillLevel(name, lvl) for name, lvl in skills],
        questions=[SlotQuestion(qid, f"Question {qid}", required) for qid, required in questions],
        current_count=current,
        max_count=maximum,
    )


@pytest.fixture
def candidate() -> CandidateProfile:
    return CandidateProfile(id="u1", level=3, personality_tag=None)


@pytest.fixture
def react_skills() -> list[CandidateSkill]:
    return [CandidateSkill("React", 4)]


@pytest.fixture
def data_dir() -> str:
    return DATA_DIR
