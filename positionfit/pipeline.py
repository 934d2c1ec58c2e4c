import logging
from dataclasses import asdict

from positionfit.config import BASE
from positionfit.frames import load_snapshot, profiles_from_frame, skills_from_frame, slots_from_frames
from positionfit.explain import explain_fit
from positionfit.levels import breakdown_from_profile, level_progress, points_to_next_level, threshold_for
from positionfit.rank import slot_options, rank_applicants
from positionfit.vocab import role_label

LOGGER = logging.getLogger(__name__)


def option_to_dict(opt):
    slot = opt.slot
    band = threshold_for(slot.min_level)
    out = {
        "slot_id": slot.id,
        "team_id": slot.team_id,
        "label": role_label(slot.role, slot.role_type),
        "role": slot.role,
        "role_type": slot.role_type,
        "min_level": slot.min_level,
        "min_level_name": band.name,
        "count": f"{slot.current_count}/{slot.max_count}",
        "available": opt.available,
        "selectable": opt.selectable,
        "score": None,
        "tier": opt.tier,
    }
    if opt.fit is not None:
        out["score"] = opt.fit.score
        out["skills_matched"] = opt.fit.skills_matched
        out["skills_total"] = opt.fit.skills_total
        out["explanation"] = explain_fit(opt.fit, slot)
    return out


def recommend_slots(candidate_id, team_id=None, frames=None, base=None):
    """Slot options for one candidate, best fit first, read from the CSV snapshot."""
    frames = frames if frames is not None else load_snapshot(base or BASE)
    profiles = profiles_from_frame(frames["profiles"])
    candidate = profiles.get(str(candidate_id))
    if candidate is None:
        LOGGER.warning("Unknown candidate %s", candidate_id)
        return []
    skills = skills_from_frame(frames.get("profile_skills"), candidate.id)
    slots = slots_from_frames(frames["slots"], frames.get("slot_skills"), frames.get("slot_questions"),
                              team_id=team_id)
    options = slot_options(slots, candidate, skills)
    return [option_to_dict(o) for o in options]


def recommend_applicants(slot_id, candidate_ids=None, frames=None, base=None, top_k=None):
    """Rank candidates for one slot (all profiles unless candidate_ids is given)."""
    frames = frames if frames is not None else load_snapshot(base or BASE)
    slots = {s.id: s for s in slots_from_frames(frames["slots"], frames.get("slot_skills"),
                                                 frames.get("slot_questions"))}
    slot = slots.get(str(slot_id))
    if slot is None:
        LOGGER.warning("Unknown slot %s", slot_id)
        return []
    profiles = profiles_from_frame(frames["profiles"])
    ids = [str(c) for c in candidate_ids] if candidate_ids else list(profiles)
    pairs = [(profiles[i], skills_from_frame(frames.get("profile_skills"), i)) for i in ids if i in profiles]
    ranked = rank_applicants(slot, pairs, top_k=top_k)
    return [{"candidate_id": c.id, "level": c.level, "score": fit.score,
             "level_met": fit.level_met, "skills_matched": fit.skills_matched,
             "skills_total": fit.skills_total}
            for c, fit in ranked]


def candidate_summary(candidate_id, frames=None, base=None):
    """Level badge data for one profile: band, score, progress to the next band."""
    frames = frames if frames is not None else load_snapshot(base or BASE)
    df = frames["profiles"]
    rows = df[df["id"].astype(str) == str(candidate_id)]
    if rows.empty:
        return None
    breakdown = breakdown_from_profile(rows.iloc[0])
    band = threshold_for(breakdown.level)
    score = breakdown.calculated_level_score
    return {
        "candidate_id": str(candidate_id),
        "level": band.level,
        "level_name": band.name,
        "level_description": band.description,
        "level_score": score,
        "progress": level_progress(band.level, score),
        "points_to_next": points_to_next_level(band.level, score),
        "breakdown": asdict(breakdown),
    }
