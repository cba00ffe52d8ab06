"""Tests for profile-vs-profile fit."""

from __future__ import annotations

import pytest


class TestComputePairwiseFit:
    """Test compute_pairwise_fit."""

    def test_worked_example_candidate_vs_leader(
        self, candidate_profile, leader_profile, fit_config
    ):
        """DISC 90/95/95/90 and MBTI 80 should yield 93, 80 and 88 (alto)."""
        from behavioral_fit.scoring.models import Dimension, Tier
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        result = compute_pairwise_fit(candidate_profile, leader_profile, fit_config)

        scores = {d.dimension: d.score for d in result.dimension_details}
        assert scores[Dimension.DOMINANCE] == 90
        assert scores[Dimension.INFLUENCE] == 95
        assert scores[Dimension.STEADINESS] == 95
        assert scores[Dimension.CONFORMITY] == 90
        # mean 92.5 rounds half-up
        assert result.disc_score == 93
        assert result.mbti_score == 80
        assert result.overall_score == 88
        assert result.tier == Tier.ALTO

    def test_self_fit_is_perfect(self, candidate_profile, fit_config):
        """A profile compared with itself scores 100."""
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        result = compute_pairwise_fit(candidate_profile, candidate_profile, fit_config)

        assert result.overall_score == 100
        assert result.disc_score == 100
        assert result.mbti_score == 100

    @pytest.mark.parametrize(
        ("a_values", "b_values"),
        [
            ({"dominance": 0, "judging": 100}, {"dominance": 100, "judging": 0}),
            ({"influence": 33, "sensing": 71}, {"influence": 12, "sensing": 4}),
            ({"conformity": 99.5}, {"conformity": 0.25, "thinking": 77}),
        ],
    )
    def test_fit_is_symmetric(self, make_profile, fit_config, a_values, b_values):
        """Swapping the two profiles never changes the overall score."""
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        a = make_profile(**a_values)
        b = make_profile(**b_values)

        assert (
            compute_pairwise_fit(a, b, fit_config).overall_score
            == compute_pairwise_fit(b, a, fit_config).overall_score
        )

    def test_opposite_profiles_score_zero(self, make_profile, fit_config):
        """Maximal distance on every dimension scores 0 (baixo)."""
        from behavioral_fit.scoring.models import ALL_DIMENSIONS, Tier
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        low = make_profile(**{d.value: 0 for d in ALL_DIMENSIONS})
        high = make_profile(**{d.value: 100 for d in ALL_DIMENSIONS})

        result = compute_pairwise_fit(low, high, fit_config)

        assert result.overall_score == 0
        assert result.tier == Tier.BAIXO

    def test_recommendation_has_no_role_context(
        self, candidate_profile, leader_profile, fit_config
    ):
        """Pairwise recommendations use the generic template."""
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        result = compute_pairwise_fit(candidate_profile, leader_profile, fit_config)

        assert result.recommendation == (
            "Excelente compatibilidade comportamental. Perfis muito alinhados."
        )

    def test_details_keep_both_values(
        self, candidate_profile, leader_profile, fit_config
    ):
        """Each detail records the value from both profiles."""
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        result = compute_pairwise_fit(candidate_profile, leader_profile, fit_config)
        first = result.dimension_details[0]

        assert len(result.dimension_details) == 8
        assert first.value == 65
        assert first.other_value == 75

    def test_out_of_range_dimension_raises(self, make_profile, fit_config):
        """A value above 100 fails before any scoring."""
        from behavioral_fit.scoring.errors import InvalidProfileError
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        with pytest.raises(InvalidProfileError) as exc_info:
            compute_pairwise_fit(
                make_profile(), make_profile(steadiness=120), fit_config
            )

        assert exc_info.value.field == "b.steadiness"
        assert exc_info.value.value == 120

    def test_negative_dimension_raises(self, make_profile, fit_config):
        """A negative value in the first profile names that profile."""
        from behavioral_fit.scoring.errors import InvalidProfileError
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        with pytest.raises(InvalidProfileError) as exc_info:
            compute_pairwise_fit(make_profile(judging=-1), make_profile(), fit_config)

        assert exc_info.value.field == "a.judging"

    def test_repeated_calls_are_identical(
        self, candidate_profile, leader_profile, fit_config
    ):
        """Same inputs always yield equal results."""
        from behavioral_fit.scoring.pairwise import compute_pairwise_fit

        first = compute_pairwise_fit(candidate_profile, leader_profile, fit_config)
        second = compute_pairwise_fit(candidate_profile, leader_profile, fit_config)

        assert first == second
