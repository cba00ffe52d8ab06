"""Preset ideal profiles for common role families."""

from __future__ import annotations

from behavioral_fit.scoring.models import (
    ALL_DIMENSIONS,
    DimensionRange,
    IdealProfile,
)


def _r(low: float, high: float, weight: float) -> dict:
    return {"min": low, "max": high, "weight": weight}


_TEMPLATES: dict[str, dict] = {
    "vendedor": {
        "role_name": "Vendedor",
        "description": (
            "Perfil ideal para funções comerciais que exigem persuasão "
            "e relacionamento"
        ),
        "dominance": _r(60, 90, 0.8),
        "influence": _r(70, 100, 1.0),
        "steadiness": _r(30, 60, 0.5),
        "conformity": _r(20, 50, 0.4),
        "extraversion": _r(60, 100, 1.0),
        "sensing": _r(40, 80, 0.6),
        "thinking": _r(30, 70, 0.5),
        "judging": _r(40, 80, 0.6),
        "preferred_types": ["ENFP", "ENTP", "ESFP", "ESTP"],
    },
    "analista": {
        "role_name": "Analista de Dados",
        "description": (
            "Perfil ideal para funções analíticas que exigem precisão "
            "e atenção aos detalhes"
        ),
        "dominance": _r(30, 60, 0.5),
        "influence": _r(20, 50, 0.4),
        "steadiness": _r(60, 90, 0.8),
        "conformity": _r(70, 100, 1.0),
        "extraversion": _r(0, 40, 0.7),
        "sensing": _r(60, 100, 0.8),
        "thinking": _r(60, 100, 1.0),
        "judging": _r(60, 100, 0.8),
        "preferred_types": ["ISTJ", "INTJ", "ISTP", "INTP"],
    },
    "lider": {
        "role_name": "Líder de Equipe",
        "description": "Perfil ideal para liderança que inspira e direciona equipes",
        "dominance": _r(70, 95, 1.0),
        "influence": _r(60, 90, 0.9),
        "steadiness": _r(40, 70, 0.6),
        "conformity": _r(40, 70, 0.6),
        "extraversion": _r(60, 100, 0.9),
        "sensing": _r(40, 80, 0.6),
        "thinking": _r(50, 90, 0.7),
        "judging": _r(60, 100, 0.8),
        "preferred_types": ["ENTJ", "ESTJ", "ENFJ", "ENTP"],
    },
    "atendimento": {
        "role_name": "Atendimento ao Cliente",
        "description": (
            "Perfil ideal para funções de suporte que exigem empatia e paciência"
        ),
        "dominance": _r(30, 60, 0.5),
        "influence": _r(65, 95, 0.9),
        "steadiness": _r(70, 100, 1.0),
        "conformity": _r(40, 70, 0.6),
        "extraversion": _r(55, 100, 0.8),
        "sensing": _r(50, 90, 0.6),
        "thinking": _r(0, 50, 0.9),
        "judging": _r(40, 80, 0.5),
        "preferred_types": ["ESFJ", "ENFJ", "ISFJ", "ESFP"],
    },
    "desenvolvedor": {
        "role_name": "Desenvolvedor de Software",
        "description": (
            "Perfil ideal para funções técnicas que exigem lógica e autonomia"
        ),
        "dominance": _r(50, 80, 0.7),
        "influence": _r(20, 50, 0.4),
        "steadiness": _r(50, 80, 0.6),
        "conformity": _r(65, 95, 1.0),
        "extraversion": _r(0, 50, 0.6),
        "sensing": _r(0, 50, 0.8),
        "thinking": _r(60, 100, 1.0),
        "judging": _r(30, 80, 0.5),
        "preferred_types": ["INTJ", "INTP", "ISTJ", "ISTP"],
    },
    "rh": {
        "role_name": "Recursos Humanos",
        "description": "Perfil ideal para RH que equilibra empatia e estrutura",
        "dominance": _r(40, 70, 0.6),
        "influence": _r(65, 95, 0.9),
        "steadiness": _r(60, 90, 0.9),
        "conformity": _r(50, 80, 0.7),
        "extraversion": _r(55, 100, 0.8),
        "sensing": _r(40, 80, 0.6),
        "thinking": _r(0, 50, 0.9),
        "judging": _r(55, 100, 0.7),
        "preferred_types": ["ENFJ", "ESFJ", "INFJ", "ISFJ"],
    },
}


def list_templates() -> list[str]:
    """Return the available template keys, sorted."""
    return sorted(_TEMPLATES)


def get_template(key: str) -> IdealProfile:
    """Return the preset ideal profile for a template key.

    Raises:
        KeyError: if no template exists for the key.
    """
    normalized = key.strip().lower()
    if normalized not in _TEMPLATES:
        raise KeyError(
            f"Unknown ideal profile template: {key!r} "
            f"(available: {', '.join(list_templates())})"
        )
    return IdealProfile.model_validate(_TEMPLATES[normalized])


def blank_ideal_profile(role_name: str) -> IdealProfile:
    """Ideal profile that accepts any value with equal weights."""
    neutral = DimensionRange(min_value=0, max_value=100, weight=0.5)
    fields = {dimension.value: neutral for dimension in ALL_DIMENSIONS}
    return IdealProfile(role_name=role_name, **fields)
