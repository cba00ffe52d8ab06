"""Fit between a measured profile and a role's weighted ideal ranges."""

from __future__ import annotations

from collections.abc import Sequence

from behavioral_fit.scoring.aggregation import blend, round_half_up, weighted_average
from behavioral_fit.scoring.config import FitConfig, get_fit_config
from behavioral_fit.scoring.models import (
    ALL_DIMENSIONS,
    DISC_DIMENSIONS,
    MBTI_DIMENSIONS,
    Dimension,
    DimensionRange,
    DimensionScore,
    IdealProfile,
    MeasuredProfile,
    RangeFitResult,
)
from behavioral_fit.scoring.recommendations import (
    RecommendationContext,
    generate_recommendation,
)
from behavioral_fit.scoring.tiers import classify_tier
from behavioral_fit.scoring.validation import (
    validate_ideal_profile,
    validate_measured_profile,
)

MAX_PENALTY = 100


def score_against_range(value: float, band: DimensionRange) -> float:
    """Score a value against an expected band.

    Inside the band (bounds included) the score is 100. Outside, one point
    is lost per unit of distance to the nearest bound, floored at 0.
    """
    if band.contains(value):
        return 100.0

    if value < band.min_value:
        distance = band.min_value - value
    else:
        distance = value - band.max_value

    return max(0.0, 100.0 - min(distance, MAX_PENALTY))


def matches_preferred_type(
    type_code: str | None, preferred_types: Sequence[str] | None
) -> bool:
    """True if the type code is one of the preferred codes.

    Unknown or absent codes never match.
    """
    if not type_code or not preferred_types:
        return False
    return type_code.upper() in preferred_types


def apply_type_match_bonus(
    mbti_score: int, matched: bool, config: FitConfig | None = None
) -> int:
    """Add the type-match bonus to an MBTI group score, capped at 100."""
    config = config or get_fit_config()
    if not matched:
        return mbti_score
    return min(100, mbti_score + config.type_match_bonus)


def _group_score(
    scores: dict[Dimension, float],
    ideal: IdealProfile,
    group: tuple[Dimension, ...],
) -> int:
    return weighted_average(
        (scores[dimension], ideal.range_for(dimension).weight) for dimension in group
    )


def compute_range_fit(
    candidate: MeasuredProfile,
    ideal: IdealProfile,
    config: FitConfig | None = None,
) -> RangeFitResult:
    """Compute the fit of a measured profile against a role's ideal profile.

    Raises:
        InvalidProfileError: if a candidate dimension is out of bounds.
        InvalidIdealRangeError: if a range, a weight or a weight group is invalid.
    """
    config = config or get_fit_config()
    validate_measured_profile(candidate, label="candidate")
    validate_ideal_profile(ideal)

    scores: dict[Dimension, float] = {
        dimension: score_against_range(
            candidate.value_of(dimension), ideal.range_for(dimension)
        )
        for dimension in ALL_DIMENSIONS
    }

    disc_score = _group_score(scores, ideal, DISC_DIMENSIONS)
    mbti_score_raw = _group_score(scores, ideal, MBTI_DIMENSIONS)

    type_match = matches_preferred_type(candidate.type_code, ideal.preferred_types)
    mbti_score = apply_type_match_bonus(mbti_score_raw, type_match, config)

    overall_score = blend(disc_score, mbti_score, config)
    tier = classify_tier(overall_score, config)

    mismatched_type = None
    if ideal.preferred_types is not None and candidate.type_code and not type_match:
        mismatched_type = candidate.type_code

    recommendation = generate_recommendation(
        tier,
        RecommendationContext(
            role_name=ideal.role_name, mismatched_type=mismatched_type
        ),
    )

    details = []
    for dimension in ALL_DIMENSIONS:
        band = ideal.range_for(dimension)
        value = candidate.value_of(dimension)
        details.append(
            DimensionScore(
                dimension=dimension,
                score=round_half_up(scores[dimension]),
                within_range=band.contains(value),
                value=value,
                range_description=band.describe(),
            )
        )

    return RangeFitResult(
        overall_score=overall_score,
        disc_score=disc_score,
        mbti_score=mbti_score,
        tier=tier,
        recommendation=recommendation,
        role_name=ideal.role_name,
        mbti_score_raw=mbti_score_raw,
        type_match=type_match,
        dimension_details=details,
    )
