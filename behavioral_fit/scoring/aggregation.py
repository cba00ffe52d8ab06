"""Fixed-weight blending of dimension and composite scores."""

from __future__ import annotations

import math
from collections.abc import Iterable

from behavioral_fit.scoring.config import FitConfig, get_fit_config
from behavioral_fit.scoring.models import (
    ConsolidatedResult,
    PairwiseFitResult,
    RangeFitResult,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties rounding up.

    Python's built-in round() uses banker's rounding (92.5 -> 92); scores
    here round 92.5 -> 93.
    """
    return int(math.floor(value + 0.5))


def mean(scores: Iterable[float]) -> int:
    """Rounded arithmetic mean of a non-empty group of scores."""
    values = list(scores)
    if not values:
        raise ValueError("cannot average an empty group of scores")
    return round_half_up(sum(values) / len(values))


def weighted_average(pairs: Iterable[tuple[float, float]]) -> int:
    """Rounded weighted average of (score, weight) pairs.

    Raises:
        ValueError: if the weights sum to zero.
    """
    items = list(pairs)
    total_weight = sum(weight for _score, weight in items)
    if total_weight <= 0:
        raise ValueError("weights must sum to a positive value")
    return round_half_up(
        sum(score * weight for score, weight in items) / total_weight
    )


def blend(disc_score: int, mbti_score: int, config: FitConfig | None = None) -> int:
    """Combine the DISC and MBTI group scores into the overall score."""
    config = config or get_fit_config()
    return round_half_up(
        disc_score * config.disc_weight + mbti_score * config.mbti_weight
    )


def compute_consolidated_fit(
    role_fit: RangeFitResult,
    leader_fit: PairwiseFitResult | None = None,
    config: FitConfig | None = None,
) -> ConsolidatedResult:
    """Blend a role fit with an optional leader fit.

    Without a leader fit the role score passes through unchanged.
    """
    config = config or get_fit_config()

    if leader_fit is None:
        return ConsolidatedResult(
            consolidated_score=role_fit.overall_score,
            role_score=role_fit.overall_score,
        )

    score = round_half_up(
        role_fit.overall_score * config.role_weight
        + leader_fit.overall_score * config.leader_weight
    )
    return ConsolidatedResult(
        consolidated_score=score,
        role_score=role_fit.overall_score,
        leader_score=leader_fit.overall_score,
    )
