"""
Build engine records from tabular snapshots (one DataFrame / CSV per table):

  profiles        id, level, personality_tag
  profile_skills  profile_id, skill, level
  slots           id, team_id, role, role_type, preferred_personality_tag,
                  min_level, current_count, max_count
  slot_skills     slot_id, skill, min_level
  slot_questions  slot_id, question_id, text, required

Exports from the app use animal_skin / preferred_animal_skin / skill_name
column names; those are accepted as aliases.
"""
import os
import logging

import pandas as pd

from positionfit.models import (CandidateProfile, CandidateSkill, PositionSlot,
                                RequiredSkillLevel, SlotQuestion)
from positionfit.vocab import normalize_tag, normalize_role_type

LOGGER = logging.getLogger(__name__)

TABLES = ("profiles", "profile_skills", "slots", "slot_skills", "slot_questions")

ALIASES = {
    "animal_skin": "personality_tag",
    "preferred_animal_skin": "preferred_personality_tag",
    "skill_name": "skill",
    "user_id": "profile_id",
    "position_slot_id": "slot_id",
}


def _normalize_columns(df):
    rename = {c: ALIASES[c] for c in df.columns if c in ALIASES and ALIASES[c] not in df.columns}
    return df.rename(columns=rename) if rename else df


def _require(df, table, cols):
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"{table}: missing column(s) {', '.join(missing)}")


def _opt(row, col):
    if col not in row.index or pd.isna(row[col]):
        return None
    value = row[col]
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _int(row, col, default):
    v = _opt(row, col)
    if v is None:
        return default
    num = float(v)
    if not num.is_integer():
        raise ValueError(f"{col}: expected a whole number, got {v!r}")
    return int(num)


def _bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "y")
    return bool(value)


def load_snapshot(base):
    """Read every table CSV under base; absent optional tables become empty frames."""
    frames = {}
    for name in TABLES:
        path = os.path.join(base, f"{name}.csv")
        if os.path.exists(path):
            frames[name] = pd.read_csv(path, dtype={"id": str, "profile_id": str, "slot_id": str,
                                                    "team_id": str, "question_id": str})
        elif name in ("profiles", "slots"):
            raise FileNotFoundError(path)
        else:
            frames[name] = pd.DataFrame()
    LOGGER.info("Loaded snapshot from %s: %s", base,
                ", ".join(f"{k}={len(v)}" for k, v in frames.items()))
    return frames


def profile_from_row(row):
    return CandidateProfile(
        id=str(row["id"]),
        level=_int(row, "level", 1),
        personality_tag=normalize_tag(_opt(row, "personality_tag")),
    )


def profiles_from_frame(df):
    df = _normalize_columns(df)
    _require(df, "profiles", ["id", "level"])
    return {str(r["id"]): profile_from_row(r) for _, r in df.iterrows()}


def skills_from_frame(df, profile_id=None):
    if df is None or df.empty:
        return []
    df = _normalize_columns(df)
    _require(df, "profile_skills", ["skill", "level"])
    if profile_id is not None:
        _require(df, "profile_skills", ["profile_id"])
        df = df[df["profile_id"].astype(str) == str(profile_id)]
    return [CandidateSkill(skill_name=str(r["skill"]), level=_int(r, "level", 0)) for _, r in df.iterrows()]


def _group(df, key):
    if df is None or df.empty:
        return {}
    return {str(k): g for k, g in df.groupby(df[key].astype(str), sort=False)}


def slots_from_frames(slots_df, slot_skills_df=None, slot_questions_df=None, team_id=None):
    slots_df = _normalize_columns(slots_df)
    _require(slots_df, "slots", ["id", "role"])
    if team_id is not None:
        _require(slots_df, "slots", ["team_id"])
        slots_df = slots_df[slots_df["team_id"].astype(str) == str(team_id)]

    if slot_skills_df is not None and not slot_skills_df.empty:
        slot_skills_df = _normalize_columns(slot_skills_df)
        _require(slot_skills_df, "slot_skills", ["slot_id", "skill", "min_level"])
    if slot_questions_df is not None and not slot_questions_df.empty:
        slot_questions_df = _normalize_columns(slot_questions_df)
        _require(slot_questions_df, "slot_questions", ["slot_id", "question_id", "text"])
    skills_by_slot = _group(slot_skills_df, "slot_id")
    questions_by_slot = _group(slot_questions_df, "slot_id")

    out = []
    for _, r in slots_df.iterrows():
        sid = str(r["id"])
        reqs = [RequiredSkillLevel(skill_name=str(s["skill"]), min_level=_int(s, "min_level", 1))
                for _, s in skills_by_slot[sid].iterrows()] if sid in skills_by_slot else []
        questions = [SlotQuestion(id=str(q["question_id"]), text=str(q["text"]),
                                  required=_bool(_opt(q, "required") or False))
                     for _, q in questions_by_slot[sid].iterrows()] if sid in questions_by_slot else []
        out.append(PositionSlot(
            id=sid,
            role=str(r["role"]),
            role_type=normalize_role_type(_opt(r, "role_type")),
            preferred_personality_tag=normalize_tag(_opt(r, "preferred_personality_tag")),
            min_level=_int(r, "min_level", 1),
            required_skill_levels=reqs,
            questions=questions,
            current_count=_int(r, "current_count", 0),
            max_count=_int(r, "max_count", 1),
            team_id=None if _opt(r, "team_id") is None else str(r["team_id"]),
        ))
    return out
