"""Tests for input validation."""

from __future__ import annotations

import math

import pytest


class TestValidateMeasuredProfile:
    """Test validate_measured_profile."""

    def test_valid_profile_passes(self, candidate_profile):
        """A profile inside the bounds raises nothing."""
        from behavioral_fit.scoring.validation import validate_measured_profile

        validate_measured_profile(candidate_profile)

    def test_bounds_are_inclusive(self, make_profile):
        """0 and 100 are both valid."""
        from behavioral_fit.scoring.validation import validate_measured_profile

        validate_measured_profile(make_profile(dominance=0, judging=100))

    def test_nan_is_rejected(self, make_profile):
        """NaN is not a usable score."""
        from behavioral_fit.scoring.errors import InvalidProfileError
        from behavioral_fit.scoring.validation import validate_measured_profile

        with pytest.raises(InvalidProfileError) as exc_info:
            validate_measured_profile(make_profile(sensing=math.nan), label="leader")

        assert exc_info.value.field == "leader.sensing"

    def test_error_is_a_fit_engine_error(self, make_profile):
        """Callers can catch the base error type."""
        from behavioral_fit.scoring.errors import FitEngineError
        from behavioral_fit.scoring.validation import validate_measured_profile

        with pytest.raises(FitEngineError):
            validate_measured_profile(make_profile(influence=150))


class TestIdealProfileValidation:
    """Test validate_ideal_profile and collect_ideal_profile_errors."""

    def test_templates_are_valid(self):
        """Every preset template passes validation."""
        from behavioral_fit.scoring.templates import get_template, list_templates
        from behavioral_fit.scoring.validation import collect_ideal_profile_errors

        for key in list_templates():
            assert collect_ideal_profile_errors(get_template(key)) == []

    def test_range_bound_above_100(self, sales_ideal):
        """A max above 100 is reported on that bound."""
        from behavioral_fit.scoring.errors import InvalidIdealRangeError
        from behavioral_fit.scoring.models import DimensionRange
        from behavioral_fit.scoring.validation import validate_ideal_profile

        broken = sales_ideal.model_copy(
            update={
                "judging": DimensionRange(min_value=40, max_value=120, weight=0.6)
            }
        )

        with pytest.raises(InvalidIdealRangeError) as exc_info:
            validate_ideal_profile(broken)

        assert exc_info.value.field == "judging.max"
        assert exc_info.value.value == 120

    def test_collect_reports_every_problem(self, sales_ideal):
        """All problems are listed, not only the first."""
        from behavioral_fit.scoring.models import DimensionRange
        from behavioral_fit.scoring.validation import collect_ideal_profile_errors

        broken = sales_ideal.model_copy(
            update={
                "dominance": DimensionRange(min_value=90, max_value=60, weight=0.8),
                "thinking": DimensionRange(min_value=30, max_value=70, weight=-0.1),
            }
        )

        errors = collect_ideal_profile_errors(broken)

        assert len(errors) == 2
        assert errors[0].startswith("dominance.min cannot be greater than max")
        assert errors[1] == "thinking.weight must be between 0 and 1"

    def test_zero_mbti_weights_reported(self):
        """An MBTI group without any weight is reported as a group."""
        from behavioral_fit.scoring.errors import InvalidIdealRangeError
        from behavioral_fit.scoring.models import MBTI_DIMENSIONS, DimensionRange
        from behavioral_fit.scoring.templates import blank_ideal_profile
        from behavioral_fit.scoring.validation import validate_ideal_profile

        zero = DimensionRange(min_value=0, max_value=100, weight=0)
        ideal = blank_ideal_profile("Livre").model_copy(
            update={d.value: zero for d in MBTI_DIMENSIONS}
        )

        with pytest.raises(InvalidIdealRangeError) as exc_info:
            validate_ideal_profile(ideal)

        assert exc_info.value.field == "mbti.weight"
