"""Tests for DISC questionnaire scoring."""

import pytest


class TestScoreDisc:
    """Test score_disc."""

    def test_questionnaire_has_five_items_per_factor(self):
        """Each factor is measured by five statements."""
        from behavioral_fit.assessments.disc import DISC_QUESTIONS

        assert len(DISC_QUESTIONS) == 20
        for factor in "DISC":
            assert sum(1 for q in DISC_QUESTIONS if q.factor == factor) == 5

    def test_unanswered_items_count_as_one(self):
        """No answers gives 5/25 = 20 on every factor, primary D."""
        from behavioral_fit.assessments.disc import score_disc

        result = score_disc({})

        assert result.dominance == 20
        assert result.influence == 20
        assert result.steadiness == 20
        assert result.conformity == 20
        assert result.primary_factor == "D"

    def test_all_fives_score_100(self):
        """Full agreement everywhere maxes out every factor."""
        from behavioral_fit.assessments.disc import DISC_QUESTIONS, score_disc

        result = score_disc({q.id: 5 for q in DISC_QUESTIONS})

        assert result.dominance == 100
        assert result.conformity == 100

    def test_primary_factor_follows_highest_score(self):
        """The highest factor is primary and sets the description."""
        from behavioral_fit.assessments.disc import DISC_DESCRIPTIONS, score_disc

        answers = {6: 4, 7: 4, 8: 4, 9: 4, 10: 4, 16: 3, 17: 3}

        result = score_disc(answers)

        assert result.influence == 80
        # (3 + 3 + 1 + 1 + 1) / 25
        assert result.conformity == 36
        assert result.primary_factor == "I"
        assert result.description == DISC_DESCRIPTIONS["I"]

    @pytest.mark.parametrize("answer", [0, 6, 2.5, True])
    def test_invalid_answers_raise(self, answer):
        """Answers must be integers from 1 to 5."""
        from behavioral_fit.assessments.disc import score_disc

        with pytest.raises(ValueError):
            score_disc({1: answer})

    def test_to_dict(self):
        """DiscResult serializes every field."""
        from behavioral_fit.assessments.disc import score_disc

        data = score_disc({}).to_dict()

        assert data["primary_factor"] == "D"
        assert data["steadiness"] == 20
