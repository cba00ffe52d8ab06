"""Distance-based fit between two measured profiles."""

from __future__ import annotations

from behavioral_fit.scoring.aggregation import blend, mean, round_half_up
from behavioral_fit.scoring.config import FitConfig, get_fit_config
from behavioral_fit.scoring.models import (
    ALL_DIMENSIONS,
    DISC_DIMENSIONS,
    MBTI_DIMENSIONS,
    Dimension,
    DimensionMatch,
    MeasuredProfile,
    PairwiseFitResult,
)
from behavioral_fit.scoring.recommendations import generate_recommendation
from behavioral_fit.scoring.tiers import classify_tier
from behavioral_fit.scoring.validation import validate_measured_profile


def dimension_similarity(value: float, other: float) -> float:
    """100 minus the absolute difference between two values in [0, 100]."""
    return 100 - abs(value - other)


def compute_pairwise_fit(
    a: MeasuredProfile,
    b: MeasuredProfile,
    config: FitConfig | None = None,
) -> PairwiseFitResult:
    """Compute the behavioral fit between two measured profiles.

    Raises:
        InvalidProfileError: if any dimension of either profile is out of bounds.
    """
    config = config or get_fit_config()
    validate_measured_profile(a, label="a")
    validate_measured_profile(b, label="b")

    similarities: dict[Dimension, float] = {
        dimension: dimension_similarity(a.value_of(dimension), b.value_of(dimension))
        for dimension in ALL_DIMENSIONS
    }

    disc_score = mean(similarities[d] for d in DISC_DIMENSIONS)
    mbti_score = mean(similarities[d] for d in MBTI_DIMENSIONS)
    overall_score = blend(disc_score, mbti_score, config)
    tier = classify_tier(overall_score, config)

    return PairwiseFitResult(
        overall_score=overall_score,
        disc_score=disc_score,
        mbti_score=mbti_score,
        tier=tier,
        recommendation=generate_recommendation(tier),
        dimension_details=[
            DimensionMatch(
                dimension=dimension,
                score=round_half_up(similarities[dimension]),
                value=a.value_of(dimension),
                other_value=b.value_of(dimension),
            )
            for dimension in ALL_DIMENSIONS
        ],
    )
