"""Combine scored questionnaires into a measured profile."""

from __future__ import annotations

from behavioral_fit.assessments.disc import DiscResult
from behavioral_fit.assessments.mbti import MbtiResult
from behavioral_fit.scoring.models import MeasuredProfile
from behavioral_fit.scoring.validation import validate_measured_profile


def build_measured_profile(disc: DiscResult, mbti: MbtiResult) -> MeasuredProfile:
    """Build the MeasuredProfile the fit engine consumes."""
    profile = MeasuredProfile(
        dominance=disc.dominance,
        influence=disc.influence,
        steadiness=disc.steadiness,
        conformity=disc.conformity,
        extraversion=mbti.extraversion,
        sensing=mbti.sensing,
        thinking=mbti.thinking,
        judging=mbti.judging,
        type_code=mbti.type_code,
    )
    validate_measured_profile(profile)
    return profile
