"""Fit scoring service implementation."""

from __future__ import annotations

from behavioral_fit.scoring.aggregation import compute_consolidated_fit
from behavioral_fit.scoring.config import FitConfig, get_fit_config
from behavioral_fit.scoring.errors import ProfileNotFoundError
from behavioral_fit.scoring.models import (
    DIMENSION_LABELS,
    DISC_DIMENSIONS,
    MBTI_DIMENSIONS,
    CandidateEvaluation,
    ConsolidatedResult,
    IdealProfile,
    MeasuredProfile,
    PairwiseFitResult,
    RangeFitResult,
)
from behavioral_fit.scoring.pairwise import compute_pairwise_fit
from behavioral_fit.scoring.ranges import compute_range_fit
from behavioral_fit.scoring.recommendations import interpret_group
from behavioral_fit.scoring.sources import ProfileSource
from behavioral_fit.scoring.tiers import classify_tier
from behavioral_fit.utils.logging import get_logger

logger = get_logger("scoring")


class FitScoringService:
    """Service for computing behavioral fit scores and recommendations.

    Configuration is captured at construction, so every call on one
    instance uses the same weights and thresholds.
    """

    def __init__(self, config: FitConfig | None = None) -> None:
        self.config = config or get_fit_config()

    def compute_pairwise_fit(
        self, a: MeasuredProfile, b: MeasuredProfile
    ) -> PairwiseFitResult:
        """Fit between two measured profiles (e.g. candidate vs leader)."""
        result = compute_pairwise_fit(a, b, self.config)
        logger.debug(
            "Pairwise fit: overall=%s disc=%s mbti=%s tier=%s",
            result.overall_score,
            result.disc_score,
            result.mbti_score,
            result.tier.value,
        )
        return result

    def compute_range_fit(
        self, candidate: MeasuredProfile, ideal: IdealProfile
    ) -> RangeFitResult:
        """Fit between a measured profile and a role's ideal profile."""
        result = compute_range_fit(candidate, ideal, self.config)
        logger.debug(
            "Range fit for %s: overall=%s disc=%s mbti=%s (raw=%s) tier=%s",
            ideal.role_name,
            result.overall_score,
            result.disc_score,
            result.mbti_score,
            result.mbti_score_raw,
            result.tier.value,
        )
        return result

    def compute_consolidated_fit(
        self, role_fit: RangeFitResult, leader_fit: PairwiseFitResult | None = None
    ) -> ConsolidatedResult:
        """Blend a role fit with an optional leader fit."""
        return compute_consolidated_fit(role_fit, leader_fit, self.config)

    def evaluate_candidate(
        self,
        source: ProfileSource,
        candidate_id: str,
        role_id: str,
        leader_id: str | None = None,
    ) -> CandidateEvaluation:
        """Score a candidate against a role and, optionally, its leader.

        A leader id with no measured profile is skipped; the consolidated
        score then equals the role fit.

        Raises:
            ProfileNotFoundError: if the candidate or role profile is missing.
        """
        candidate = source.fetch_measured_profile(candidate_id)
        if candidate is None:
            raise ProfileNotFoundError(
                f"No measured profile for candidate {candidate_id!r}",
                field="candidate_id",
                value=candidate_id,
            )

        ideal = source.fetch_ideal_profile(role_id)
        if ideal is None:
            raise ProfileNotFoundError(
                f"No ideal profile for role {role_id!r}",
                field="role_id",
                value=role_id,
            )

        role_fit = self.compute_range_fit(candidate, ideal)

        leader_fit: PairwiseFitResult | None = None
        if leader_id is not None:
            leader = source.fetch_measured_profile(leader_id)
            if leader is None:
                logger.warning(
                    "Leader %s has no measured profile; scoring role fit only",
                    leader_id,
                )
            else:
                leader_fit = self.compute_pairwise_fit(candidate, leader)

        consolidated = self.compute_consolidated_fit(role_fit, leader_fit)
        logger.info(
            "Evaluated candidate %s for role %s: consolidated=%s",
            candidate_id,
            role_id,
            consolidated.consolidated_score,
        )

        return CandidateEvaluation(
            candidate_id=candidate_id,
            role_id=role_id,
            leader_id=leader_id,
            role_fit=role_fit,
            leader_fit=leader_fit,
            consolidated=consolidated,
        )

    def format_result(self, result: PairwiseFitResult | RangeFitResult) -> str:
        """Format a fit result for CLI output."""
        lines: list[str] = []
        if isinstance(result, RangeFitResult):
            lines.append(f"Função: {result.role_name}")

        lines.append(
            f"Score Geral: {result.overall_score}/100 ({result.tier.value.upper()})"
        )
        lines.append(f"DISC: {result.disc_score}/100 | MBTI: {result.mbti_score}/100")

        details = {d.dimension: d for d in result.dimension_details}
        groups = (
            ("DISC", DISC_DIMENSIONS, result.disc_score),
            ("MBTI", MBTI_DIMENSIONS, result.mbti_score),
        )
        for title, group, group_score in groups:
            lines.append(f"--- {title} ---")
            for dimension in group:
                detail = details.get(dimension)
                if detail is None:
                    continue
                label = DIMENSION_LABELS[dimension]
                if isinstance(result, RangeFitResult):
                    mark = "ok" if detail.within_range else "fora"
                    lines.append(
                        f"{label}: {_fmt(detail.value)} -> Range "
                        f"{detail.range_description} [{mark}] ({detail.score}%)"
                    )
                else:
                    lines.append(
                        f"{label}: {_fmt(detail.value)} vs "
                        f"{_fmt(detail.other_value)} ({detail.score}%)"
                    )
            if isinstance(result, PairwiseFitResult):
                tier = classify_tier(group_score, self.config)
                lines.append(f"Interpretação: {interpret_group(title, tier)}")

        if isinstance(result, RangeFitResult):
            match = "Match" if result.type_match else "Fora dos tipos ideais"
            lines.append(f"Tipo ideal: {match}")

        lines.append(f"Recomendação: {result.recommendation}")
        return "\n".join(lines)


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"
