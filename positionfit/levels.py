"""
Level bands: map a 0..100 competency score to a level 1..5 and back.

The score itself comes from the server-side level calculation (skill,
experience, portfolio, project and team-rating components); this module
only republishes the threshold table so eligibility can be checked locally.

classify() expects a score already clamped to 0..100. Out-of-range input
is not rejected: anything below 0 lands in band 1 and anything above 100
in band 5 because bands are picked by lower bound only.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LevelInfo:
    level: int
    min_score: int
    max_score: int
    name: str
    description: str


@dataclass
class LevelBreakdown:
    skill_score: float = 0.0
    experience_score: float = 0.0
    calculated_level_score: float = 0.0
    portfolio_bonus: float = 0.0
    project_bonus: float = 0.0
    team_rating_bonus: float = 0.0
    level: int = 1


LEVEL_THRESHOLDS = (
    LevelInfo(1, 0, 19, "Entry", "Just getting started"),
    LevelInfo(2, 20, 39, "Beginner", "Learning the fundamentals"),
    LevelInfo(3, 40, 59, "Intermediate", "Building hands-on experience"),
    LevelInfo(4, 60, 79, "Advanced", "Working with real expertise"),
    LevelInfo(5, 80, 100, "Expert", "Top-level specialist"),
)

_BY_LEVEL = {t.level: t for t in LEVEL_THRESHOLDS}


def classify(score):
    band = LEVEL_THRESHOLDS[0]
    for t in LEVEL_THRESHOLDS:
        if score >= t.min_score:
            band = t
    return band


def level_from_score(score):
    return classify(score).level


def threshold_for(level):
    # unknown levels fall back to band 1 instead of failing
    try:
        return _BY_LEVEL.get(level, LEVEL_THRESHOLDS[0])
    except TypeError:
        return LEVEL_THRESHOLDS[0]


def next_threshold(level):
    return _BY_LEVEL.get(threshold_for(level).level + 1)


def level_progress(level, score):
    """
    Percent of the way from the current band's floor to the next band's floor.
    Returns None at the top band.
    """
    current = threshold_for(level)
    nxt = next_threshold(level)
    if nxt is None:
        return None
    return (score - current.min_score) / (nxt.min_score - current.min_score) * 100


def points_to_next_level(level, score):
    nxt = next_threshold(level)
    if nxt is None:
        return None
    return nxt.min_score - score


def _number_or(value, default):
    try:
        num = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(num) or num == 0:
        return default
    return num


def breakdown_from_profile(profile):
    """
    Build a LevelBreakdown from a profile row (dict or pandas Series).
    Missing, null or non-numeric fields become 0; the level becomes 1.
    """
    get = profile.get
    return LevelBreakdown(
        skill_score=_number_or(get("skill_score"), 0.0),
        experience_score=_number_or(get("experience_score"), 0.0),
        calculated_level_score=_number_or(get("calculated_level_score"), 0.0),
        portfolio_bonus=_number_or(get("portfolio_bonus"), 0.0),
        project_bonus=_number_or(get("project_bonus"), 0.0),
        team_rating_bonus=_number_or(get("team_rating_bonus"), 0.0),
        level=int(_number_or(get("level"), 1)),
    )
