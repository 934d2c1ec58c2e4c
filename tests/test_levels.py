"""Tests for level band classification."""
from __future__ import annotations

import math

import pytest

from positionfit.levels import (LEVEL_THRESHOLDS, breakdown_from_profile, classify, level_from_score,
                                level_progress, points_to_next_level, threshold_for)


@pytest.mark.parametrize(
    "score, level",
    [(0, 1), (19, 1), (19.9, 1), (20, 2), (39, 2), (40, 3), (59, 3), (60, 4), (79, 4), (80, 5), (100, 5)],
)
def test_classify_band_boundaries(score: float, level: int) -> None:
    assert classify(score).level == level
    assert level_from_score(score) == level


def test_classify_is_monotonic() -> None:
    levels = [level_from_score(s / 2) for s in range(0, 201)]
    assert levels == sorted(levels)


def test_bands_are_contiguous() -> None:
    assert LEVEL_THRESHOLDS[0].min_score == 0
    assert LEVEL_THRESHOLDS[-1].max_score == 100
    for lower, upper in zip(LEVEL_THRESHOLDS, LEVEL_THRESHOLDS[1:]):
        assert upper.min_score == lower.max_score + 1
        assert upper.level == lower.level + 1


def test_out_of_range_scores_are_not_clamped_or_rejected() -> None:
    assert classify(-5).level == 1
    assert classify(140).level == 5


def test_threshold_for_lookup_and_fallback() -> None:
    assert threshold_for(3).name == "Intermediate"
    assert threshold_for(0) == threshold_for(1)
    assert threshold_for(6) == threshold_for(1)
    assert threshold_for(None) == threshold_for(1)


def test_level_progress_towards_next_band() -> None:
    assert level_progress(3, 50) == pytest.approx(50.0)
    assert points_to_next_level(3, 50) == 10
    assert level_progress(5, 95) is None
    assert points_to_next_level(5, 95) is None


def test_breakdown_defaults_for_missing_fields() -> None:
    breakdown = breakdown_from_profile({})
    assert breakdown.level == 1
    assert breakdown.skill_score == 0
    assert breakdown.team_rating_bonus == 0


def test_breakdown_coerces_values() -> None:
    breakdown = breakdown_from_profile(
        {"skill_score": "32.5", "experience_score": None, "portfolio_bonus": math.nan, "level": 4}
    )
    assert breakdown.skill_score == 32.5
    assert breakdown.experience_score == 0
    assert breakdown.portfolio_bonus == 0
    assert breakdown.level == 4
