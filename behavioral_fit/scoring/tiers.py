"""Score-to-tier classification."""

from __future__ import annotations

from behavioral_fit.scoring.config import FitConfig, get_fit_config
from behavioral_fit.scoring.models import Tier


def classify_tier(score: int, config: FitConfig | None = None) -> Tier:
    """Map a 0-100 composite score to a tier.

    With default thresholds: 75-100 -> alto, 50-74 -> medio, 0-49 -> baixo.
    """
    config = config or get_fit_config()
    if not (0 <= score <= 100):
        raise ValueError(f"score must be between 0 and 100 (got {score})")

    if score >= config.high_tier_threshold:
        return Tier.ALTO
    if score >= config.medium_tier_threshold:
        return Tier.MEDIO
    return Tier.BAIXO
