"""Likert answer checks shared by the questionnaires."""

from __future__ import annotations

from collections.abc import Mapping

LIKERT_MIN = 1
LIKERT_MAX = 5


def check_answers(answers: Mapping[int, int]) -> None:
    """Raise ValueError if any given answer lies outside the 1-5 scale."""
    for question_id, answer in answers.items():
        if answer is None:
            continue
        if isinstance(answer, bool) or not isinstance(answer, int):
            raise ValueError(
                f"Answer to question {question_id} must be an integer (got {answer!r})"
            )
        if not (LIKERT_MIN <= answer <= LIKERT_MAX):
            raise ValueError(
                f"Answer to question {question_id} must be between "
                f"{LIKERT_MIN} and {LIKERT_MAX} (got {answer})"
            )
