"""Configuration settings for the behavioral fit engine."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FitConfig(BaseSettings):
    """Fit engine configuration settings.

    Defaults reproduce the platform's scoring rules. Every value can be
    overridden via environment variables with `FIT_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="FIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # DISC vs MBTI blend (must sum to 1.0)
    disc_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.6,
        description="Weight of the DISC group in the overall score",
    )
    mbti_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.4,
        description="Weight of the MBTI group in the overall score",
    )

    # Role vs leader consolidation (must sum to 1.0)
    role_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.6,
        description="Weight of the role fit in the consolidated score",
    )
    leader_weight: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.4,
        description="Weight of the leader fit in the consolidated score",
    )

    # Type-code adjustment
    type_match_bonus: Annotated[int, Field(ge=0, le=100)] = Field(
        default=10,
        description="Points added to the MBTI score when the type is preferred",
    )

    # Tier thresholds
    high_tier_threshold: Annotated[int, Field(ge=0, le=100)] = Field(
        default=75,
        description="Minimum score for the 'alto' tier",
    )
    medium_tier_threshold: Annotated[int, Field(ge=0, le=100)] = Field(
        default=50,
        description="Minimum score for the 'medio' tier",
    )

    # Profile construction
    mbti_neutral_default: Annotated[float, Field(ge=0.0, le=100.0)] = Field(
        default=50.0,
        description="Value substituted for a missing MBTI dimension",
    )
    derive_type_code: bool = Field(
        default=True,
        description="Derive a missing type code from the MBTI dimensions",
    )

    @model_validator(mode="after")
    def validate_blend_weights(self) -> FitConfig:
        """Ensure each pair of blend weights sums to 1.0 (within tolerance)."""
        group_sum = self.disc_weight + self.mbti_weight
        if abs(group_sum - 1.0) > 1e-6:
            raise ValueError(
                "DISC/MBTI weights must sum to 1.0. "
                f"Got {group_sum:.6f} "
                f"(disc={self.disc_weight}, mbti={self.mbti_weight})."
            )
        consolidation_sum = self.role_weight + self.leader_weight
        if abs(consolidation_sum - 1.0) > 1e-6:
            raise ValueError(
                "Role/leader weights must sum to 1.0. "
                f"Got {consolidation_sum:.6f} "
                f"(role={self.role_weight}, leader={self.leader_weight})."
            )
        return self

    @model_validator(mode="after")
    def validate_tier_thresholds(self) -> FitConfig:
        """Ensure the 'medio' threshold sits strictly below the 'alto' one."""
        if self.medium_tier_threshold >= self.high_tier_threshold:
            raise ValueError(
                "medium_tier_threshold must be lower than high_tier_threshold "
                f"(got medium={self.medium_tier_threshold}, "
                f"high={self.high_tier_threshold})."
            )
        return self


# Singleton instance for easy import
_fit_config: FitConfig | None = None


def get_fit_config() -> FitConfig:
    """Get the fit configuration singleton."""
    global _fit_config
    if _fit_config is None:
        _fit_config = FitConfig()
    return _fit_config


def reset_fit_config() -> None:
    """Reset the fit configuration singleton (useful for testing)."""
    global _fit_config
    _fit_config = None
