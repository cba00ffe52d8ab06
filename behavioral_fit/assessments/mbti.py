"""MBTI questionnaire scoring."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from behavioral_fit.assessments.likert import check_answers
from behavioral_fit.scoring.aggregation import round_half_up
from behavioral_fit.scoring.models import derive_type_code


@dataclass(frozen=True)
class MbtiQuestion:
    id: int
    text: str
    axis: str  # E-I, S-N, T-F or J-P
    first_pole: bool  # True scores toward E, S, T or J


MBTI_QUESTIONS: tuple[MbtiQuestion, ...] = (
    # Extroversão (E) vs Introversão (I)
    MbtiQuestion(1, "Eu ganho energia estando com pessoas", "E-I", True),
    MbtiQuestion(2, "Eu prefiro trabalhar sozinho", "E-I", False),
    MbtiQuestion(3, "Eu sou expansivo e falo facilmente com estranhos", "E-I", True),
    MbtiQuestion(4, "Eu preciso de tempo sozinho para recarregar", "E-I", False),
    # Sensação (S) vs Intuição (N)
    MbtiQuestion(5, "Eu foco em fatos e detalhes concretos", "S-N", True),
    MbtiQuestion(6, "Eu gosto de pensar em possibilidades futuras", "S-N", False),
    MbtiQuestion(7, "Eu confio mais na experiência prática", "S-N", True),
    MbtiQuestion(8, "Eu sou imaginativo e criativo", "S-N", False),
    # Pensamento (T) vs Sentimento (F)
    MbtiQuestion(9, "Eu tomo decisões baseadas em lógica", "T-F", True),
    MbtiQuestion(10, "Eu considero como as pessoas se sentirão", "T-F", False),
    MbtiQuestion(11, "Eu valorizo verdade e justiça acima de harmonia", "T-F", True),
    MbtiQuestion(12, "Eu sou empático e compreensivo", "T-F", False),
    # Julgamento (J) vs Percepção (P)
    MbtiQuestion(13, "Eu gosto de planejar e ter tudo organizado", "J-P", True),
    MbtiQuestion(14, "Eu prefiro manter opções em aberto", "J-P", False),
    MbtiQuestion(15, "Eu cumpro prazos com antecedência", "J-P", True),
    MbtiQuestion(16, "Eu sou espontâneo e flexível", "J-P", False),
)

MBTI_AXES = ("E-I", "S-N", "T-F", "J-P")

MBTI_DESCRIPTIONS: dict[str, str] = {
    "INTJ": (
        "O Arquiteto: Estratégico, independente, inovador. "
        "Confia em lógica e planejamento."
    ),
    "INTP": (
        "O Lógico: Analítico, criativo, flexível. Busca entender sistemas complexos."
    ),
    "ENTJ": (
        "O Comandante: Líder natural, decisivo, estratégico. Orientado a metas."
    ),
    "ENTP": (
        "O Inovador: Criativo, persuasivo, questionador. "
        "Gosta de debates e novidades."
    ),
    "INFJ": (
        "O Conselheiro: Empático, idealista, organizado. Busca significado profundo."
    ),
    "INFP": (
        "O Mediador: Idealista, criativo, empático. Guiado por valores pessoais."
    ),
    "ENFJ": "O Protagonista: Carismático, inspirador, organizado. Líder empático.",
    "ENFP": (
        "O Ativista: Entusiasta, criativo, sociável. "
        "Busca possibilidades e conexões."
    ),
    "ISTJ": (
        "O Logístico: Responsável, detalhista, prático. Valoriza tradição e ordem."
    ),
    "ISFJ": "O Defensor: Leal, dedicado, prestativo. Busca harmonia e segurança.",
    "ESTJ": (
        "O Executivo: Organizado, prático, decisivo. Valoriza eficiência e ordem."
    ),
    "ESFJ": (
        "O Cônsul: Sociável, prestativo, organizado. Busca harmonia e cooperação."
    ),
    "ISTP": (
        "O Virtuoso: Prático, adaptável, observador. Gosta de resolver problemas."
    ),
    "ISFP": (
        "O Aventureiro: Artístico, sensível, flexível. "
        "Valoriza experiências estéticas."
    ),
    "ESTP": (
        "O Empreendedor: Enérgico, pragmático, direto. Gosta de ação e resultados."
    ),
    "ESFP": "O Animador: Entusiasmado, sociável, espontâneo. Vive o momento.",
}

# Unanswered statements count as neutral.
UNANSWERED_DEFAULT = 3


@dataclass
class MbtiResult:
    """Scored MBTI questionnaire.

    Each axis is the share of the first pole, 0-100 (100 = E, S, T or J).
    """

    type_code: str
    extraversion: int
    sensing: int
    thinking: int
    judging: int
    description: str

    def to_dict(self) -> dict:
        return {
            "type_code": self.type_code,
            "extraversion": self.extraversion,
            "sensing": self.sensing,
            "thinking": self.thinking,
            "judging": self.judging,
            "description": self.description,
        }


def describe_type(type_code: str) -> str:
    """Return the description of a type code, with a generic fallback."""
    return MBTI_DESCRIPTIONS.get(
        type_code, f"Tipo {type_code}: Perfil único e valioso."
    )


def score_mbti(answers: Mapping[int, int]) -> MbtiResult:
    """Score Likert (1-5) answers keyed by question id.

    Raises:
        ValueError: if an answer is outside 1-5.
    """
    check_answers(answers)

    first = {axis: 0 for axis in MBTI_AXES}
    second = {axis: 0 for axis in MBTI_AXES}
    for question in MBTI_QUESTIONS:
        answer = answers.get(question.id) or UNANSWERED_DEFAULT
        if question.first_pole:
            first[question.axis] += answer
        else:
            second[question.axis] += answer

    shares = {
        axis: round_half_up(first[axis] / (first[axis] + second[axis]) * 100)
        for axis in MBTI_AXES
    }
    type_code = derive_type_code(
        shares["E-I"], shares["S-N"], shares["T-F"], shares["J-P"]
    )

    return MbtiResult(
        type_code=type_code,
        extraversion=shares["E-I"],
        sensing=shares["S-N"],
        thinking=shares["T-F"],
        judging=shares["J-P"],
        description=describe_type(type_code),
    )
