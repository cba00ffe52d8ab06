"""Template-based recommendation text."""

from __future__ import annotations

from dataclasses import dataclass

from behavioral_fit.scoring.models import Tier

# One template per tier: (without role context, with role context).
_TEMPLATES: dict[Tier, tuple[str, str]] = {
    Tier.ALTO: (
        "Excelente compatibilidade comportamental. Perfis muito alinhados.",
        "Excelente fit para {role}. "
        "Perfil altamente compatível com as expectativas da função.",
    ),
    Tier.MEDIO: (
        "Boa compatibilidade. Algumas diferenças podem ser complementares.",
        "Fit moderado para {role}. "
        "Avaliar outros aspectos e competências técnicas antes de decidir.",
    ),
    Tier.BAIXO: (
        "Compatibilidade moderada. Diferenças significativas nos perfis.",
        "Fit baixo para {role}. "
        "Considerar outras funções ou avaliar se há flexibilidade nos requisitos.",
    ),
}

_TYPE_MISMATCH_CLAUSE = (
    "Atenção: tipo {type_code} não está entre os tipos mais indicados "
    "para esta função."
)


@dataclass(frozen=True)
class RecommendationContext:
    """Optional inputs that parameterize a recommendation."""

    role_name: str | None = None
    mismatched_type: str | None = None


def generate_recommendation(
    tier: Tier, context: RecommendationContext | None = None
) -> str:
    """Build the recommendation text for a tier.

    The type-mismatch clause is appended whenever the context names a
    mismatched type, whatever the tier.
    """
    context = context or RecommendationContext()
    generic, with_role = _TEMPLATES[Tier(tier)]

    if context.role_name:
        text = with_role.format(role=context.role_name)
    else:
        text = generic

    if context.mismatched_type:
        text += " " + _TYPE_MISMATCH_CLAUSE.format(type_code=context.mismatched_type)
    return text


# Per-group reading of a pairwise sub-score, keyed by the sub-score's tier.
_GROUP_INTERPRETATIONS: dict[str, dict[Tier, str]] = {
    "DISC": {
        Tier.ALTO: "Perfis DISC muito alinhados. Estilos de trabalho compatíveis.",
        Tier.MEDIO: (
            "Boa compatibilidade DISC. Algumas diferenças podem gerar sinergia."
        ),
        Tier.BAIXO: (
            "Perfis DISC distintos. "
            "Pode haver desafios de comunicação e estilo de trabalho."
        ),
    },
    "MBTI": {
        Tier.ALTO: "Tipos de personalidade muito compatíveis.",
        Tier.MEDIO: "Personalidades complementares com boa sinergia.",
        Tier.BAIXO: (
            "Tipos de personalidade bastante diferentes. Requer adaptação mútua."
        ),
    },
}


def interpret_group(group: str, tier: Tier) -> str:
    """Describe what a DISC or MBTI sub-score tier means for two people."""
    try:
        texts = _GROUP_INTERPRETATIONS[group.upper()]
    except KeyError:
        raise ValueError(f"Unknown dimension group: {group}") from None
    return texts[Tier(tier)]
