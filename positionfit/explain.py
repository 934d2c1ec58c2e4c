from positionfit.levels import threshold_for


def explain_fit(fit, slot=None):
    '''
    fit: FitResult for one slot
    returns: human-readable explanation string
    '''

    reasons = []
    gaps = []

    # ---- Level ----
    if fit.level_met:
        reasons.append("Meets the minimum level for this position")
    elif slot is not None:
        band = threshold_for(slot.min_level)
        gaps.append(f"Requires Lv.{band.level} {band.name} or above")
    else:
        gaps.append("Below the minimum level for this position")

    # ---- Personality ----
    if fit.personality_match:
        if slot is not None and slot.preferred_personality_tag:
            reasons.append(f"Personality matches the preferred {slot.preferred_personality_tag} style")
    else:
        gaps.append("Personality differs from the preferred style")

    # ---- Skills ----
    for d in fit.details:
        if d.met:
            reasons.append(f"{d.skill_name} Lv.{d.candidate_level} (needs Lv.{d.required_level})")
        elif d.candidate_level is None:
            gaps.append(f"Missing skill {d.skill_name} (needs Lv.{d.required_level})")
        else:
            gaps.append(f"{d.skill_name} Lv.{d.candidate_level} below required Lv.{d.required_level}")

    explanation = f"Fit score {fit.score}%"
    if fit.skills_total:
        explanation += f" ({fit.skills_matched}/{fit.skills_total} skills met)"
    if reasons:
        explanation += "\nStrengths:\n" + "\n".join(f"- {r}" for r in reasons)
    if gaps:
        explanation += "\nGaps:\n" + "\n".join(f"- {g}" for g in gaps)
    return explanation
