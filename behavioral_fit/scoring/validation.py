"""Input validation for the fit engine.

Scorers validate their inputs before computing anything and raise on the
first problem found, naming the offending field. Editing surfaces that want
every problem at once use `collect_ideal_profile_errors` instead.
"""

from __future__ import annotations

import math
from numbers import Real

from behavioral_fit.scoring.errors import InvalidIdealRangeError, InvalidProfileError
from behavioral_fit.scoring.models import (
    ALL_DIMENSIONS,
    DISC_DIMENSIONS,
    MBTI_DIMENSIONS,
    Dimension,
    IdealProfile,
    MeasuredProfile,
)

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def _is_number(value: object) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(float(value))
    )


def validate_measured_profile(
    profile: MeasuredProfile, *, label: str = "profile"
) -> None:
    """Raise InvalidProfileError unless every dimension lies in [0, 100]."""
    for dimension in ALL_DIMENSIONS:
        field_name = f"{label}.{dimension.value}"
        value = getattr(profile, dimension.value, None)
        if value is None:
            raise InvalidProfileError(
                f"{field_name} is missing", field=field_name, value=value
            )
        if not _is_number(value):
            raise InvalidProfileError(
                f"{field_name} must be a finite number (got {value!r})",
                field=field_name,
                value=value,
            )
        if not (SCORE_MIN <= value <= SCORE_MAX):
            raise InvalidProfileError(
                f"{field_name} must be between 0 and 100 (got {value})",
                field=field_name,
                value=value,
            )


def _range_errors(
    ideal: IdealProfile, dimension: Dimension
) -> list[tuple[str, str, object]]:
    errors: list[tuple[str, str, object]] = []
    band = ideal.range_for(dimension)
    prefix = dimension.value

    for attr, label in (("min_value", "min"), ("max_value", "max")):
        value = getattr(band, attr)
        if not _is_number(value) or not (SCORE_MIN <= value <= SCORE_MAX):
            errors.append(
                (
                    f"{prefix}.{label}",
                    f"{prefix}.{label} must be between 0 and 100",
                    value,
                )
            )
    if _is_number(band.min_value) and _is_number(band.max_value):
        if band.min_value > band.max_value:
            errors.append(
                (
                    f"{prefix}.min",
                    f"{prefix}.min cannot be greater than max "
                    f"({band.min_value} > {band.max_value})",
                    band.min_value,
                )
            )
    if not _is_number(band.weight) or not (0.0 <= band.weight <= 1.0):
        errors.append(
            (
                f"{prefix}.weight",
                f"{prefix}.weight must be between 0 and 1",
                band.weight,
            )
        )
    return errors


def _group_weight_errors(ideal: IdealProfile) -> list[tuple[str, str, object]]:
    errors: list[tuple[str, str, object]] = []
    for group, dimensions in (("disc", DISC_DIMENSIONS), ("mbti", MBTI_DIMENSIONS)):
        weights = [ideal.range_for(d).weight for d in dimensions]
        if not all(_is_number(w) for w in weights):
            continue
        total = sum(weights)
        if total <= 0:
            errors.append(
                (
                    f"{group}.weight",
                    f"{group.upper()} weights sum to zero "
                    "(weighted average is undefined)",
                    total,
                )
            )
    return errors


def _all_ideal_errors(ideal: IdealProfile) -> list[tuple[str, str, object]]:
    errors: list[tuple[str, str, object]] = []
    for dimension in ALL_DIMENSIONS:
        errors.extend(_range_errors(ideal, dimension))
    errors.extend(_group_weight_errors(ideal))
    return errors


def validate_ideal_profile(ideal: IdealProfile) -> None:
    """Raise InvalidIdealRangeError for the first malformed range or weight group."""
    errors = _all_ideal_errors(ideal)
    if errors:
        field_name, message, value = errors[0]
        raise InvalidIdealRangeError(message, field=field_name, value=value)


def collect_ideal_profile_errors(ideal: IdealProfile) -> list[str]:
    """Return every problem found in an ideal profile (empty when valid)."""
    return [message for _field, message, _value in _all_ideal_errors(ideal)]
