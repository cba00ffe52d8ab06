"""Profile loading, normalization and validation utilities.

This is the profile-construction boundary: raw records (platform rows,
YAML/JSON files) become validated MeasuredProfile / IdealProfile objects
here, so the scorers never special-case missing values.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from behavioral_fit.scoring.config import FitConfig, get_fit_config
from behavioral_fit.scoring.errors import InvalidIdealRangeError, InvalidProfileError
from behavioral_fit.scoring.models import (
    DISC_DIMENSIONS,
    LEGACY_KEYS,
    MBTI_DIMENSIONS,
    Dimension,
    IdealProfile,
    MeasuredProfile,
    derive_type_code,
    is_valid_type_code,
)
from behavioral_fit.scoring.validation import (
    collect_ideal_profile_errors,
    validate_ideal_profile,
    validate_measured_profile,
)
from behavioral_fit.utils.logging import get_logger

logger = get_logger("profile")

_FORMATS = {".yaml": "yaml", ".yml": "yaml", ".json": "json"}


def _lookup(data: Mapping[str, Any], dimension: Dimension) -> Any:
    for key in (dimension.value, LEGACY_KEYS[dimension]):
        value = data.get(key)
        if value is not None:
            return value
    return None


def _first_error_field(error: ValidationError) -> str | None:
    errors = error.errors()
    if not errors:
        return None
    return ".".join(str(part) for part in errors[0].get("loc", ())) or None


def normalize_measured_profile(
    raw: Mapping[str, Any], config: FitConfig | None = None
) -> MeasuredProfile:
    """Build a validated MeasuredProfile from a raw record.

    Accepts either naming scheme (`dominance` or `disc_d`, ...). Missing
    MBTI dimensions take the configured neutral value; a missing DISC
    dimension is an error. A missing type code is derived from the MBTI
    axes when `derive_type_code` is enabled.

    Raises:
        InvalidProfileError: if a dimension is missing, non-numeric or out of
            bounds.
    """
    config = config or get_fit_config()
    data: dict[str, Any] = {}

    for dimension in DISC_DIMENSIONS:
        value = _lookup(raw, dimension)
        if value is None:
            raise InvalidProfileError(
                f"{dimension.value} is missing", field=dimension.value
            )
        data[dimension.value] = value

    for dimension in MBTI_DIMENSIONS:
        value = _lookup(raw, dimension)
        data[dimension.value] = (
            config.mbti_neutral_default if value is None else value
        )

    type_code = raw.get("type_code") or raw.get("mbti_type")
    if type_code is not None:
        data["type_code"] = type_code

    try:
        profile = MeasuredProfile.model_validate(data)
    except ValidationError as e:
        field = _first_error_field(e)
        raise InvalidProfileError(
            f"Invalid measured profile field {field}: {e.errors()[0]['msg']}",
            field=field,
        ) from e

    validate_measured_profile(profile)

    if profile.type_code is not None and not is_valid_type_code(profile.type_code):
        logger.warning(
            "Unknown MBTI type code %r; it will never match a preferred type",
            profile.type_code,
        )

    if profile.type_code is None and config.derive_type_code:
        profile = profile.model_copy(
            update={
                "type_code": derive_type_code(
                    profile.extraversion,
                    profile.sensing,
                    profile.thinking,
                    profile.judging,
                )
            }
        )
    return profile


def normalize_ideal_profile(raw: Mapping[str, Any]) -> IdealProfile:
    """Build a validated IdealProfile from a raw record.

    Raises:
        InvalidIdealRangeError: if a range is missing or malformed.
    """
    try:
        ideal = IdealProfile.model_validate(dict(raw))
    except ValidationError as e:
        field = _first_error_field(e)
        raise InvalidIdealRangeError(
            f"Invalid ideal profile field {field}: {e.errors()[0]['msg']}",
            field=field,
        ) from e

    validate_ideal_profile(ideal)
    return ideal


class ProfileService:
    """Service for loading and validating measured and ideal profiles."""

    def __init__(self, config: FitConfig | None = None) -> None:
        self.config = config or get_fit_config()

    def load_measured_profile(self, path: Path | str) -> MeasuredProfile:
        """Load and normalize a measured profile from YAML or JSON."""
        return normalize_measured_profile(self._load(Path(path)), self.config)

    def load_ideal_profile(self, path: Path | str) -> IdealProfile:
        """Load and validate an ideal profile from YAML or JSON."""
        return normalize_ideal_profile(self._load(Path(path)))

    def validate_ideal_profile(self, ideal: IdealProfile) -> list[str]:
        """Return every problem found in an ideal profile."""
        return collect_ideal_profile_errors(ideal)

    def _load(self, path: Path) -> dict:
        if not path.exists():
            raise FileNotFoundError(f"Profile not found: {path}")

        raw = path.read_text(encoding="utf-8")
        kind = _FORMATS.get(path.suffix.lower())
        if kind is None:
            # No known extension: sniff the content.
            kind = "json" if raw.lstrip().startswith("{") else "yaml"
        return _parse(raw, kind, path)


def _parse(raw: str, kind: str, source: Path) -> dict:
    """Parse a JSON or YAML document into a profile record."""
    try:
        data = json.loads(raw) if kind == "json" else yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid {kind.upper()} profile: {source}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Profile must be a mapping, got {type(data).__name__}: {source}"
        )
    return data
