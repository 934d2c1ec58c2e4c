"""Tests for building records from tabular snapshots."""
from __future__ import annotations

import pandas as pd
import pytest

from positionfit.fit_score import compute_fit_score
from positionfit.frames import load_snapshot, profiles_from_frame, skills_from_frame, slots_from_frames


def test_profiles_accept_animal_skin_alias() -> None:
    df = pd.DataFrame([{"id": "u1", "level": 3, "animal_skin": "Cat"}, {"id": "u2", "level": 1, "animal_skin": None}])

    profiles = profiles_from_frame(df)

    assert profiles["u1"].personality_tag == "cat"
    assert profiles["u2"].personality_tag is None


def test_missing_columns_are_reported() -> None:
    with pytest.raises(ValueError, match="level"):
        profiles_from_frame(pd.DataFrame([{"id": "u1"}]))


def test_skills_filtered_by_profile() -> None:
    df = pd.DataFrame([
        {"profile_id": "u1", "skill_name": "React", "level": 4},
        {"profile_id": "u2", "skill_name": "Go", "level": 2},
    ])

    skills = skills_from_frame(df, "u1")

    assert [(s.skill_name, s.level) for s in skills] == [("React", 4)]
    assert skills_from_frame(pd.DataFrame(), "u1") == []


def test_slots_join_requirements_and_questions() -> None:
    slots_df = pd.DataFrame([
        {"id": "s1", "team_id": "t1", "role": "cat", "role_type": "frontend", "preferred_animal_skin": None,
         "min_level": 2, "current_count": 0, "max_count": 2},
        {"id": "s2", "team_id": "t2", "role": "dog", "role_type": "", "preferred_animal_skin": "dog",
         "min_level": 1, "current_count": 1, "max_count": 1},
    ])
    skills_df = pd.DataFrame([{"slot_id": "s1", "skill": "React", "min_level": 3},
                              {"slot_id": "s1", "skill": "Node", "min_level": 2}])
    questions_df = pd.DataFrame([{"slot_id": "s1", "question_id": "q1", "text": "Why?", "required": "true"}])

    slots = slots_from_frames(slots_df, skills_df, questions_df)

    s1, s2 = slots
    assert [(r.skill_name, r.min_level) for r in s1.required_skill_levels] == [("React", 3), ("Node", 2)]
    assert s1.questions[0].required is True
    assert s1.preferred_personality_tag is None
    assert s2.role_type is None
    assert s2.preferred_personality_tag == "dog"
    assert s2.is_available is False
    assert [s.id for s in slots_from_frames(slots_df, skills_df, questions_df, team_id="t2")] == ["s2"]


def test_load_snapshot_from_csv(data_dir) -> None:
    frames = load_snapshot(data_dir)

    slots = slots_from_frames(frames["slots"], frames["slot_skills"], frames["slot_questions"], team_id="t1")

    assert [s.id for s in slots] == ["s1", "s2", "s3", "s4"]
    assert slots[0].required_questions[0].id == "q1"
    assert profiles_from_frame(frames["profiles"])["u3"].personality_tag is None


def test_load_snapshot_requires_profiles(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_snapshot(str(tmp_path))


def test_unknown_slot_preference_is_kept() -> None:
    slots_df = pd.DataFrame([{"id": "s1", "role": "cat", "preferred_animal_skin": "Owl", "min_level": 1}])

    slot = slots_from_frames(slots_df)[0]
    fit = compute_fit_score(slot, [], 3, "cat")

    assert slot.preferred_personality_tag == "owl"
    assert fit.personality_match is False
    assert fit.score == 80


def test_non_integral_levels_are_rejected() -> None:
    slots_df = pd.DataFrame([{"id": "s1", "role": "cat", "min_level": 1}])
    skills_df = pd.DataFrame([{"slot_id": "s1", "skill": "React", "min_level": 2.5}])

    with pytest.raises(ValueError, match="min_level"):
        slots_from_frames(slots_df, skills_df)
    assert slots_from_frames(slots_df, skills_df.assign(min_level=3.0))[0].required_skill_levels[0].min_level == 3
