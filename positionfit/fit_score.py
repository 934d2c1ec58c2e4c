"""
compute_fit_score: one candidate against one position slot.

Weights: level 20, personality 20, skills 60 (fraction of requirements met).
A slot with no skill requirements gets a flat 40 baseline instead, and its
level block is worth 40. The total is rounded once, half up.
"""
import math
import logging

from positionfit.config import FIT_CONF
from positionfit.models import FitResult, SkillDetail

LOGGER = logging.getLogger(__name__)

LEVEL_WEIGHT = 20
PERSONALITY_WEIGHT = 20
SKILL_WEIGHT = 60
NO_SKILL_LEVEL_WEIGHT = 40
NO_SKILL_BASELINE = 40


def _round_half_up(x):
    return int(math.floor(x + 0.5))


def _skill_lookup(candidate_skills):
    # first entry wins on duplicate names
    lookup = {}
    for s in candidate_skills:
        lookup.setdefault(s.skill_name.lower(), s.level)
    return lookup


def compute_fit_score(slot, candidate_skills, candidate_level, personality_tag=None):
    level_met = candidate_level >= slot.min_level
    personality_match = (slot.preferred_personality_tag is None
                         or slot.preferred_personality_tag == personality_tag)

    if not slot.required_skill_levels:
        score = (NO_SKILL_LEVEL_WEIGHT if level_met else 0) \
            + (PERSONALITY_WEIGHT if personality_match else 0) \
            + NO_SKILL_BASELINE
        return FitResult(score=score, level_met=level_met, personality_match=personality_match)

    user_map = _skill_lookup(candidate_skills)
    details = []
    for req in slot.required_skill_levels:
        have = user_map.get(req.skill_name.lower())
        met = have is not None and have >= req.min_level
        details.append(SkillDetail(skill_name=req.skill_name, required_level=req.min_level,
                                   candidate_level=have, met=met))

    matched = sum(1 for d in details if d.met)
    total = len(details)
    raw = LEVEL_WEIGHT * level_met + PERSONALITY_WEIGHT * personality_match \
        + SKILL_WEIGHT * (matched / total)
    score = _round_half_up(raw)
    LOGGER.debug("slot %s: level=%s personality=%s skills=%s/%s -> %s",
                 slot.id, level_met, personality_match, matched, total, score)
    return FitResult(score=score, level_met=level_met, personality_match=personality_match,
                     skills_matched=matched, skills_total=total, details=details)


def score_candidate(slot, candidate, candidate_skills):
    return compute_fit_score(slot, candidate_skills, candidate.level, candidate.personality_tag)


def fit_tier(score, thresholds=None):
    t = thresholds or FIT_CONF["tiers"]
    if score >= t["high"]:
        return "high"
    if score >= t["medium"]:
        return "medium"
    return "low"
