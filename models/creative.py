"""
Creative model — dataclass representing one professional in the roster.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List
import logging
import math

logger = logging.getLogger(__name__)

_EMPTY_MARKERS = ("", "–", "-", "nan", "None")


def _parse_list(raw: Any) -> List[str]:
    """Accept a JSON list or a comma-separated string; return a cleaned list."""
    if isinstance(raw, (list, tuple, set, frozenset)):
        return [str(item).strip() for item in raw if item is not None and str(item).strip()]
    if raw is None or str(raw).strip() in _EMPTY_MARKERS:
        return []
    return [item.strip() for item in str(raw).split(",") if item.strip()]


def _parse_str(raw: Any, default: str = "") -> str:
    if raw is None or str(raw).strip() in _EMPTY_MARKERS:
        return default
    return str(raw).strip()


def _parse_float(raw: Any, default: float = 0.0) -> float:
    if raw is None:
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning(f"Invalid number: {raw!r}")
        return default
    return value if math.isfinite(value) else default


@dataclass
class Creative:
    creative_id: str
    name: str
    city: str = ""
    country: str = ""
    skills: List[str] = field(default_factory=list)
    mediums: List[str] = field(default_factory=list)  # always lowercase
    themes: List[str] = field(default_factory=list)
    portfolio_tags: List[str] = field(default_factory=list)
    day_rate_band: str = "medium"  # low | medium | high
    availability: str = ""  # available | busy | unavailable; blank scores as unknown
    rating: float = 0.0
    completed_projects_count: int = 0
    languages: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, row: Any) -> Creative:
        """Create a Creative from a roster record (dict or pandas row)."""
        return cls(
            creative_id=_parse_str(row.get("id", "")),
            name=_parse_str(row.get("name", "")),
            city=_parse_str(row.get("city", "")),
            country=_parse_str(row.get("country", "")),
            skills=_parse_list(row.get("skills")),
            mediums=[m.lower() for m in _parse_list(row.get("mediums"))],
            themes=_parse_list(row.get("themes")),
            portfolio_tags=_parse_list(row.get("portfolio_tags")),
            day_rate_band=_parse_str(row.get("day_rate_band"), "medium"),
            availability=_parse_str(row.get("availability")),
            rating=_parse_float(row.get("rating")),
            completed_projects_count=int(_parse_float(row.get("completed_projects_count"))),
            languages=_parse_list(row.get("languages")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.creative_id,
            "name": self.name,
            "city": self.city,
            "country": self.country,
            "skills": list(self.skills),
            "mediums": list(self.mediums),
            "themes": list(self.themes),
            "portfolio_tags": list(self.portfolio_tags),
            "day_rate_band": self.day_rate_band,
            "availability": self.availability,
            "rating": self.rating,
            "completed_projects_count": self.completed_projects_count,
            "languages": list(self.languages),
        }

    @property
    def location(self) -> str:
        return ", ".join(part for part in (self.city, self.country) if part)
