"""Behavioral fit scoring engine.

This module turns measured DISC/MBTI profiles and weighted role
expectations into comparable fit scores, tiers and recommendations.

Public API:
    - compute_pairwise_fit: profile vs profile (e.g. candidate vs leader)
    - compute_range_fit: profile vs a role's ideal profile
    - compute_consolidated_fit: role fit blended with an optional leader fit
    - FitScoringService: configured facade plus candidate evaluation
    - ProfileService: load and normalize profile records
    - FitConfig: configuration settings
"""

from behavioral_fit.scoring.aggregation import compute_consolidated_fit
from behavioral_fit.scoring.config import FitConfig, get_fit_config, reset_fit_config
from behavioral_fit.scoring.errors import (
    FitEngineError,
    InvalidIdealRangeError,
    InvalidProfileError,
    ProfileNotFoundError,
)
from behavioral_fit.scoring.models import (
    CandidateEvaluation,
    ConsolidatedResult,
    Dimension,
    DimensionMatch,
    DimensionRange,
    DimensionScore,
    IdealProfile,
    MeasuredProfile,
    PairwiseFitResult,
    RangeFitResult,
    Tier,
)
from behavioral_fit.scoring.pairwise import compute_pairwise_fit
from behavioral_fit.scoring.profile import (
    ProfileService,
    normalize_ideal_profile,
    normalize_measured_profile,
)
from behavioral_fit.scoring.ranges import compute_range_fit
from behavioral_fit.scoring.service import FitScoringService
from behavioral_fit.scoring.sources import (
    DirectoryProfileSource,
    InMemoryProfileSource,
    ProfileSource,
)

__all__ = [
    "compute_pairwise_fit",
    "compute_range_fit",
    "compute_consolidated_fit",
    "FitScoringService",
    "ProfileService",
    "normalize_measured_profile",
    "normalize_ideal_profile",
    "ProfileSource",
    "InMemoryProfileSource",
    "DirectoryProfileSource",
    "MeasuredProfile",
    "IdealProfile",
    "DimensionRange",
    "DimensionScore",
    "DimensionMatch",
    "Dimension",
    "Tier",
    "PairwiseFitResult",
    "RangeFitResult",
    "ConsolidatedResult",
    "CandidateEvaluation",
    "FitEngineError",
    "InvalidProfileError",
    "InvalidIdealRangeError",
    "ProfileNotFoundError",
    "FitConfig",
    "get_fit_config",
    "reset_fit_config",
]
