"""DISC questionnaire scoring."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from behavioral_fit.assessments.likert import LIKERT_MAX, check_answers
from behavioral_fit.scoring.aggregation import round_half_up


@dataclass(frozen=True)
class DiscQuestion:
    id: int
    text: str
    factor: str  # D, I, S or C


DISC_QUESTIONS: tuple[DiscQuestion, ...] = (
    # Dominância (D)
    DiscQuestion(1, "Eu assumo o controle em situações difíceis", "D"),
    DiscQuestion(2, "Eu gosto de desafios e competição", "D"),
    DiscQuestion(3, "Eu tomo decisões rapidamente", "D"),
    DiscQuestion(4, "Eu sou direto ao falar o que penso", "D"),
    DiscQuestion(5, "Eu prefiro liderar do que seguir", "D"),
    # Influência (I)
    DiscQuestion(6, "Eu sou entusiasmado e otimista", "I"),
    DiscQuestion(7, "Eu gosto de trabalhar em equipe e socializar", "I"),
    DiscQuestion(8, "Eu convenço pessoas facilmente", "I"),
    DiscQuestion(9, "Eu sou expressivo e comunicativo", "I"),
    DiscQuestion(10, "Eu gosto de ser o centro das atenções", "I"),
    # Estabilidade (S)
    DiscQuestion(11, "Eu prefiro rotina e previsibilidade", "S"),
    DiscQuestion(12, "Eu sou paciente e calmo sob pressão", "S"),
    DiscQuestion(13, "Eu valorizo harmonia e cooperação", "S"),
    DiscQuestion(14, "Eu sou leal e confiável", "S"),
    DiscQuestion(15, "Eu escuto mais do que falo", "S"),
    # Conformidade (C)
    DiscQuestion(16, "Eu presto atenção a detalhes", "C"),
    DiscQuestion(17, "Eu sigo regras e procedimentos", "C"),
    DiscQuestion(18, "Eu analiso informações cuidadosamente antes de decidir", "C"),
    DiscQuestion(19, "Eu valorizo precisão e qualidade", "C"),
    DiscQuestion(20, "Eu prefiro fatos a opiniões", "C"),
)

DISC_FACTORS = ("D", "I", "S", "C")

DISC_DESCRIPTIONS: dict[str, str] = {
    "D": (
        "Dominante: Direto, decisivo, orientado a resultados. "
        "Gosta de desafios e assume controle."
    ),
    "I": (
        "Influente: Comunicativo, entusiasmado, persuasivo. "
        "Gosta de trabalhar com pessoas."
    ),
    "S": "Estável: Calmo, paciente, leal. Valoriza harmonia e previsibilidade.",
    "C": "Conforme: Analítico, preciso, meticuloso. Valoriza qualidade e detalhes.",
}

# Unanswered statements count as "strongly disagree".
UNANSWERED_DEFAULT = 1


@dataclass
class DiscResult:
    """Scored DISC questionnaire (each factor 0-100)."""

    dominance: int
    influence: int
    steadiness: int
    conformity: int
    primary_factor: str
    description: str

    def to_dict(self) -> dict:
        return {
            "dominance": self.dominance,
            "influence": self.influence,
            "steadiness": self.steadiness,
            "conformity": self.conformity,
            "primary_factor": self.primary_factor,
            "description": self.description,
        }


def score_disc(answers: Mapping[int, int]) -> DiscResult:
    """Score Likert (1-5) answers keyed by question id.

    Each factor is the share of its maximum possible total, 0-100. The
    primary factor is the first of D, I, S, C holding the highest score.

    Raises:
        ValueError: if an answer is outside 1-5.
    """
    check_answers(answers)

    totals = {factor: 0 for factor in DISC_FACTORS}
    counts = {factor: 0 for factor in DISC_FACTORS}
    for question in DISC_QUESTIONS:
        totals[question.factor] += answers.get(question.id) or UNANSWERED_DEFAULT
        counts[question.factor] += 1

    scores = {
        factor: round_half_up(totals[factor] / (counts[factor] * LIKERT_MAX) * 100)
        for factor in DISC_FACTORS
    }

    best = max(scores.values())
    primary = next(factor for factor in DISC_FACTORS if scores[factor] == best)

    return DiscResult(
        dominance=scores["D"],
        influence=scores["I"],
        steadiness=scores["S"],
        conformity=scores["C"],
        primary_factor=primary,
        description=DISC_DESCRIPTIONS[primary],
    )
