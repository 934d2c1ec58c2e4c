import logging

from positionfit.fit_score import score_candidate, fit_tier
from positionfit.models import SlotOption

LOGGER = logging.getLogger(__name__)


def available_slots(all_slots):
    return [s for s in all_slots if s.current_count < s.max_count]


def is_selectable(slot, candidate):
    # only the level gate blocks selection; skill and personality gaps are just shown
    if candidate is None:
        return True
    return candidate.level >= slot.min_level


def rank_slots(slots, candidate, candidate_skills=()):
    """
    Best fit first. sorted() is stable, so equal scores keep input order and
    the auto-suggested slot is deterministic.
    """
    if candidate is None:
        return list(slots)
    scored = [(s, score_candidate(s, candidate, candidate_skills).score) for s in slots]
    scored.sort(key=lambda x: x[1], reverse=True)
    return [s for s, _ in scored]


def slot_options(all_slots, candidate, candidate_skills=()):
    """
    Every slot as a picker entry: ranked open slots first, then full slots in
    input order. Full or under-leveled slots come back with selectable=False.
    """
    open_slots = available_slots(all_slots)
    full = [s for s in all_slots if not s.is_available]
    options = []
    for s in rank_slots(open_slots, candidate, candidate_skills):
        fit = score_candidate(s, candidate, candidate_skills) if candidate is not None else None
        options.append(SlotOption(slot=s, fit=fit, selectable=is_selectable(s, candidate), available=True,
                                  tier=fit_tier(fit.score) if fit else None))
    for s in full:
        fit = score_candidate(s, candidate, candidate_skills) if candidate is not None else None
        options.append(SlotOption(slot=s, fit=fit, selectable=False, available=False,
                                  tier=fit_tier(fit.score) if fit else None))
    return options


def best_slot(all_slots, candidate, candidate_skills=()):
    for s in rank_slots(available_slots(all_slots), candidate, candidate_skills):
        if is_selectable(s, candidate):
            return s
    return None


def rank_applicants(slot, applicants, top_k=None):
    """
    applicants: iterable of (CandidateProfile, [CandidateSkill]) pairs
    returns: [(CandidateProfile, FitResult)] best fit first, stable on ties
    """
    results = [(cand, score_candidate(slot, cand, skills)) for cand, skills in applicants]
    results.sort(key=lambda x: x[1].score, reverse=True)
    LOGGER.debug("ranked %s applicants for slot %s", len(results), slot.id)
    return results[:top_k] if top_k else results
