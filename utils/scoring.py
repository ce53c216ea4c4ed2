"""
Scoring utilities — per-dimension scorers and the weighted composite used by
the matching engine.

Each scorer returns a value in [0, 1], except `language_bonus`, which is a
multiplier in [0.8, 1.1] applied to the weighted sum.
Unknown enum values fall back to a default instead of raising.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from utils.similarity import TagInput, normalize_tags

# Budget band -> (min, max, ideal) on the day-rate scale.
BUDGET_BANDS: Mapping[str, Tuple[int, int, int]] = MappingProxyType({
    "low": (0, 2, 1),
    "medium": (1, 3, 2),
    "high": (2, 4, 3),
})
DEFAULT_BUDGET = "medium"

RATE_BANDS: Mapping[str, int] = MappingProxyType({
    "low": 1,
    "medium": 2,
    "high": 3,
})
DEFAULT_RATE = 2

AVAILABILITY_SCORES: Mapping[str, float] = MappingProxyType({
    "available": 1.0,
    "busy": 0.3,
    "unavailable": 0.0,
})
DEFAULT_AVAILABILITY = 0.5

# Must sum to 1.0; language_bonus is applied on top.
MATCH_WEIGHTS: Mapping[str, float] = MappingProxyType({
    "skills_similarity": 0.25,
    "theme_overlap": 0.20,
    "portfolio_similarity": 0.15,
    "budget_fit": 0.15,
    "availability": 0.15,
    "performance": 0.10,
})

RATING_CEILING = 5.0
PROJECTS_CEILING = 200.0

BILINGUAL_BONUS = 1.1
SINGLE_LANGUAGE = 1.0
NO_LANGUAGE_PENALTY = 0.8


def clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else (1.0 if x > 1.0 else x)


def _key(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def budget_fit_score(budget: Optional[str], day_rate_band: Optional[str]) -> float:
    """
    How well a creative's day-rate band sits inside the brief's budget band.
    1.0 when the rate equals the band's ideal; linear falloff inside the band,
    a gentler /4 falloff outside it.
    """
    low, high, ideal = BUDGET_BANDS.get(_key(budget), BUDGET_BANDS[DEFAULT_BUDGET])
    rate = RATE_BANDS.get(_key(day_rate_band), DEFAULT_RATE)

    if low <= rate <= high:
        return 1 - abs(rate - ideal) / (high - low)
    return max(0.0, 1 - abs(rate - ideal) / 4)


def availability_score(availability: Optional[str]) -> float:
    return AVAILABILITY_SCORES.get(_key(availability), DEFAULT_AVAILABILITY)


def performance_score(rating: float, completed_projects: int) -> float:
    """Reputation composite: 70% rating (out of 5), 30% experience (capped at 200 projects)."""
    rating_s = clamp01((rating or 0.0) / RATING_CEILING)
    experience_s = clamp01((completed_projects or 0) / PROJECTS_CEILING)
    return rating_s * 0.7 + experience_s * 0.3


def language_bonus(languages: TagInput) -> float:
    langs = normalize_tags(languages)
    has_english = "english" in langs
    has_arabic = "arabic" in langs
    if has_english and has_arabic:
        return BILINGUAL_BONUS
    if has_english or has_arabic:
        return SINGLE_LANGUAGE
    return NO_LANGUAGE_PENALTY


def weighted_score(dimensions: Mapping[str, float], weights: Mapping[str, float] = MATCH_WEIGHTS) -> float:
    """
    Weighted composite of the relevance dimensions, before the language multiplier.
    Stays within [0, 1] as long as every dimension does.
    """
    return sum(dimensions[name] * weight for name, weight in weights.items())
