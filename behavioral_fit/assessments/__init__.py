"""DISC and MBTI questionnaire scoring.

Public API:
    - score_disc: Likert answers -> DiscResult
    - score_mbti: Likert answers -> MbtiResult
    - build_measured_profile: DiscResult + MbtiResult -> MeasuredProfile
"""

from behavioral_fit.assessments.builder import build_measured_profile
from behavioral_fit.assessments.disc import DISC_QUESTIONS, DiscResult, score_disc
from behavioral_fit.assessments.mbti import (
    MBTI_QUESTIONS,
    MbtiResult,
    describe_type,
    score_mbti,
)

__all__ = [
    "DISC_QUESTIONS",
    "MBTI_QUESTIONS",
    "DiscResult",
    "MbtiResult",
    "score_disc",
    "score_mbti",
    "describe_type",
    "build_measured_profile",
]
