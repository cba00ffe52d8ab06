"""Data models for the behavioral fit engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Dimension(str, Enum):
    """Behavioral dimension measured by the DISC and MBTI assessments."""

    DOMINANCE = "dominance"
    INFLUENCE = "influence"
    STEADINESS = "steadiness"
    CONFORMITY = "conformity"
    EXTRAVERSION = "extraversion"
    SENSING = "sensing"
    THINKING = "thinking"
    JUDGING = "judging"


DISC_DIMENSIONS: tuple[Dimension, ...] = (
    Dimension.DOMINANCE,
    Dimension.INFLUENCE,
    Dimension.STEADINESS,
    Dimension.CONFORMITY,
)

MBTI_DIMENSIONS: tuple[Dimension, ...] = (
    Dimension.EXTRAVERSION,
    Dimension.SENSING,
    Dimension.THINKING,
    Dimension.JUDGING,
)

ALL_DIMENSIONS: tuple[Dimension, ...] = DISC_DIMENSIONS + MBTI_DIMENSIONS

DIMENSION_LABELS: dict[Dimension, str] = {
    Dimension.DOMINANCE: "Dominância (D)",
    Dimension.INFLUENCE: "Influência (I)",
    Dimension.STEADINESS: "Estabilidade (S)",
    Dimension.CONFORMITY: "Conformidade (C)",
    Dimension.EXTRAVERSION: "E-I",
    Dimension.SENSING: "S-N",
    Dimension.THINKING: "T-F",
    Dimension.JUDGING: "J-P",
}

# Record keys used by the platform's persisted profiles.
LEGACY_KEYS: dict[Dimension, str] = {
    Dimension.DOMINANCE: "disc_d",
    Dimension.INFLUENCE: "disc_i",
    Dimension.STEADINESS: "disc_s",
    Dimension.CONFORMITY: "disc_c",
    Dimension.EXTRAVERSION: "mbti_e_i",
    Dimension.SENSING: "mbti_s_n",
    Dimension.THINKING: "mbti_t_f",
    Dimension.JUDGING: "mbti_j_p",
}

VALID_TYPE_CODES: frozenset[str] = frozenset(
    e + s + t + j for e in "EI" for s in "SN" for t in "TF" for j in "JP"
)

TYPE_CODE_THRESHOLD = 50


def derive_type_code(
    extraversion: float, sensing: float, thinking: float, judging: float
) -> str:
    """Collapse the four MBTI axes into a type code (>= 50 picks E/S/T/J)."""
    return (
        ("E" if extraversion >= TYPE_CODE_THRESHOLD else "I")
        + ("S" if sensing >= TYPE_CODE_THRESHOLD else "N")
        + ("T" if thinking >= TYPE_CODE_THRESHOLD else "F")
        + ("J" if judging >= TYPE_CODE_THRESHOLD else "P")
    )


def is_valid_type_code(code: str | None) -> bool:
    return bool(code) and code.upper() in VALID_TYPE_CODES


class Tier(str, Enum):
    """Discrete fit classification."""

    ALTO = "alto"
    MEDIO = "medio"
    BAIXO = "baixo"


def _aliases(dimension: Dimension) -> AliasChoices:
    return AliasChoices(dimension.value, LEGACY_KEYS[dimension])


def _normalize_type_code(value: str | None) -> str | None:
    if value is None:
        return None
    code = str(value).strip().upper()
    return code or None


class MeasuredProfile(BaseModel):
    """Measured DISC + MBTI profile of a candidate or leader.

    MBTI axes run from the second pole (0) to the first pole (100):
    extraversion 100 = E, sensing 100 = S, thinking 100 = T, judging 100 = J.
    Bounds are enforced by `validate_measured_profile`, which every scorer
    calls before computing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    dominance: float = Field(..., validation_alias=_aliases(Dimension.DOMINANCE))
    influence: float = Field(..., validation_alias=_aliases(Dimension.INFLUENCE))
    steadiness: float = Field(..., validation_alias=_aliases(Dimension.STEADINESS))
    conformity: float = Field(..., validation_alias=_aliases(Dimension.CONFORMITY))
    extraversion: float = Field(
        ..., validation_alias=_aliases(Dimension.EXTRAVERSION)
    )
    sensing: float = Field(..., validation_alias=_aliases(Dimension.SENSING))
    thinking: float = Field(..., validation_alias=_aliases(Dimension.THINKING))
    judging: float = Field(..., validation_alias=_aliases(Dimension.JUDGING))
    type_code: str | None = Field(
        default=None,
        validation_alias=AliasChoices("type_code", "mbti_type"),
        description="4-letter MBTI type code, e.g. 'INTJ'",
    )

    @field_validator("type_code", mode="before")
    @classmethod
    def normalize_type_code(cls, value: str | None) -> str | None:
        return _normalize_type_code(value)

    def value_of(self, dimension: Dimension) -> float:
        """Return the measured value for a dimension."""
        return getattr(self, dimension.value)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> MeasuredProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class DimensionRange(BaseModel):
    """Expected band and relative importance of one dimension for a role."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    min_value: float = Field(
        ...,
        validation_alias=AliasChoices("min", "min_value"),
        serialization_alias="min",
    )
    max_value: float = Field(
        ...,
        validation_alias=AliasChoices("max", "max_value"),
        serialization_alias="max",
    )
    weight: float = Field(..., validation_alias=AliasChoices("weight", "peso"))

    def contains(self, value: float) -> bool:
        """Return True if value lies inside the closed band."""
        return self.min_value <= value <= self.max_value

    def describe(self) -> str:
        """Human-readable band, e.g. '60-90'."""
        return f"{_format_number(self.min_value)}-{_format_number(self.max_value)}"


class IdealProfile(BaseModel):
    """Weighted ideal ranges describing a role's behavioral expectations."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role_name: str = Field(
        ..., validation_alias=AliasChoices("role_name", "nome_funcao")
    )
    description: str | None = Field(
        default=None, validation_alias=AliasChoices("description", "descricao")
    )

    dominance: DimensionRange = Field(
        ..., validation_alias=_aliases(Dimension.DOMINANCE)
    )
    influence: DimensionRange = Field(
        ..., validation_alias=_aliases(Dimension.INFLUENCE)
    )
    steadiness: DimensionRange = Field(
        ..., validation_alias=_aliases(Dimension.STEADINESS)
    )
    conformity: DimensionRange = Field(
        ..., validation_alias=_aliases(Dimension.CONFORMITY)
    )
    extraversion: DimensionRange = Field(
        ..., validation_alias=_aliases(Dimension.EXTRAVERSION)
    )
    sensing: DimensionRange = Field(..., validation_alias=_aliases(Dimension.SENSING))
    thinking: DimensionRange = Field(
        ..., validation_alias=_aliases(Dimension.THINKING)
    )
    judging: DimensionRange = Field(..., validation_alias=_aliases(Dimension.JUDGING))

    # Ordered by priority. None means the role states no type preference;
    # an empty tuple means no type is preferred.
    preferred_types: tuple[str, ...] | None = Field(
        default=None,
        validation_alias=AliasChoices("preferred_types", "mbti_tipos_ideais"),
    )

    @field_validator("preferred_types", mode="before")
    @classmethod
    def normalize_preferred_types(cls, value):
        if value is None:
            return None
        if isinstance(value, str):
            value = [value]
        codes = (_normalize_type_code(code) for code in value)
        return tuple(code for code in codes if code)

    def range_for(self, dimension: Dimension) -> DimensionRange:
        """Return the expected range for a dimension."""
        return getattr(self, dimension.value)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_dict(cls, data: dict) -> IdealProfile:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


@dataclass
class DimensionScore:
    """Score of one measured value against its expected range."""

    dimension: Dimension
    score: int
    within_range: bool
    value: float
    range_description: str

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    def to_dict(self) -> dict:
        return {
            "dimension": self.dimension.value,
            "score": self.score,
            "within_range": self.within_range,
            "value": self.value,
            "range_description": self.range_description,
        }


@dataclass
class DimensionMatch:
    """Similarity of two measured values on one dimension."""

    dimension: Dimension
    score: int
    value: float
    other_value: float

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    def to_dict(self) -> dict:
        return {
            "dimension": self.dimension.value,
            "score": self.score,
            "value": self.value,
            "other_value": self.other_value,
        }


def _check_scores(result: object, names: tuple[str, ...]) -> None:
    for name in names:
        value = getattr(result, name)
        if not (0 <= value <= 100):
            raise ValueError(f"{name} must be between 0 and 100 (got {value})")


@dataclass
class PairwiseFitResult:
    """Fit between two measured profiles (e.g. candidate vs leader)."""

    overall_score: int
    disc_score: int
    mbti_score: int
    tier: Tier
    recommendation: str
    dimension_details: list[DimensionMatch] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_scores(self, ("overall_score", "disc_score", "mbti_score"))

    def to_dict(self) -> dict:
        """Serialize the result to a dictionary."""
        return {
            "kind": "pairwise",
            "overall_score": self.overall_score,
            "disc_score": self.disc_score,
            "mbti_score": self.mbti_score,
            "tier": self.tier.value,
            "recommendation": self.recommendation,
            "dimension_details": [d.to_dict() for d in self.dimension_details],
        }


@dataclass
class RangeFitResult:
    """Fit between a measured profile and a role's ideal profile."""

    overall_score: int
    disc_score: int
    mbti_score: int
    tier: Tier
    recommendation: str
    role_name: str
    mbti_score_raw: int
    type_match: bool = False
    dimension_details: list[DimensionScore] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_scores(
            self, ("overall_score", "disc_score", "mbti_score", "mbti_score_raw")
        )

    def to_dict(self) -> dict:
        """Serialize the result to a dictionary."""
        return {
            "kind": "range",
            "role_name": self.role_name,
            "overall_score": self.overall_score,
            "disc_score": self.disc_score,
            "mbti_score": self.mbti_score,
            "mbti_score_raw": self.mbti_score_raw,
            "type_match": self.type_match,
            "tier": self.tier.value,
            "recommendation": self.recommendation,
            "dimension_details": [d.to_dict() for d in self.dimension_details],
        }


@dataclass
class ConsolidatedResult:
    """Blend of a role fit and an optional leader fit."""

    consolidated_score: int
    role_score: int
    leader_score: int | None = None

    def __post_init__(self) -> None:
        _check_scores(self, ("consolidated_score", "role_score"))
        if self.leader_score is not None:
            _check_scores(self, ("leader_score",))

    def to_dict(self) -> dict:
        return {
            "consolidated_score": self.consolidated_score,
            "role_score": self.role_score,
            "leader_score": self.leader_score,
        }


@dataclass
class CandidateEvaluation:
    """Everything computed for one candidate against a role and its leader."""

    candidate_id: str
    role_id: str
    role_fit: RangeFitResult
    consolidated: ConsolidatedResult
    leader_id: str | None = None
    leader_fit: PairwiseFitResult | None = None

    def to_dict(self) -> dict:
        """Serialize the evaluation to a dictionary."""
        return {
            "candidate_id": self.candidate_id,
            "role_id": self.role_id,
            "leader_id": self.leader_id,
            "role_fit": self.role_fit.to_dict(),
            "leader_fit": self.leader_fit.to_dict() if self.leader_fit else None,
            "consolidated": self.consolidated.to_dict(),
        }
