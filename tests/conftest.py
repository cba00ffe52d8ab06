"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Make sure no test sees configuration cached by another."""
    from behavioral_fit.config.settings import reset_settings
    from behavioral_fit.scoring.config import reset_fit_config
    from behavioral_fit.utils.logging import reset_logging

    reset_fit_config()
    reset_settings()
    reset_logging()
    yield
    reset_fit_config()
    reset_settings()
    reset_logging()


@pytest.fixture
def fit_config():
    """Default fit configuration, isolated from any local .env file."""
    from behavioral_fit.scoring.config import FitConfig

    return FitConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def candidate_profile():
    """Candidate profile from the worked pairwise example."""
    from behavioral_fit.scoring.models import MeasuredProfile

    return MeasuredProfile(
        dominance=65,
        influence=45,
        steadiness=55,
        conformity=70,
        extraversion=40,
        sensing=60,
        thinking=70,
        judging=50,
        type_code="ESTJ",
    )


@pytest.fixture
def leader_profile():
    """Leader profile from the worked pairwise example (MBTI 20 points apart)."""
    from behavioral_fit.scoring.models import MeasuredProfile

    return MeasuredProfile(
        dominance=75,
        influence=50,
        steadiness=60,
        conformity=80,
        extraversion=60,
        sensing=80,
        thinking=50,
        judging=30,
        type_code="ESTP",
    )


@pytest.fixture
def sales_ideal():
    """Ideal profile for a sales role."""
    from behavioral_fit.scoring.models import IdealProfile

    return IdealProfile.model_validate(
        {
            "role_name": "Vendedor",
            "dominance": {"min": 60, "max": 90, "weight": 0.8},
            "influence": {"min": 70, "max": 100, "weight": 1.0},
            "steadiness": {"min": 30, "max": 60, "weight": 0.5},
            "conformity": {"min": 20, "max": 50, "weight": 0.4},
            "extraversion": {"min": 60, "max": 100, "weight": 1.0},
            "sensing": {"min": 40, "max": 80, "weight": 0.6},
            "thinking": {"min": 30, "max": 70, "weight": 0.5},
            "judging": {"min": 40, "max": 80, "weight": 0.6},
            "preferred_types": ["ENFP", "ENTP", "ESFP", "ESTP"],
        }
    )


@pytest.fixture
def make_profile():
    """Factory for measured profiles with every dimension defaulting to 50."""
    from behavioral_fit.scoring.models import MeasuredProfile

    def _make(**overrides):
        values = {
            "dominance": 50,
            "influence": 50,
            "steadiness": 50,
            "conformity": 50,
            "extraversion": 50,
            "sensing": 50,
            "thinking": 50,
            "judging": 50,
        }
        values.update(overrides)
        return MeasuredProfile(**values)

    return _make
