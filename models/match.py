"""
Match models — per-candidate score outcomes and the ranked response shape.

A candidate is either `FilteredOut` by a hard filter (region / medium) or
`Scored` with a full breakdown. Keeping the two apart means a filter rejection
is never confused with a legitimately scored zero.
"""
from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

FILTER_REGION = "region"
FILTER_MEDIUM = "medium"


@dataclass(frozen=True)
class ScoreBreakdown:
    skills_similarity: float
    theme_overlap: float
    portfolio_similarity: float
    budget_fit: float
    availability: float
    performance: float
    language_bonus: float  # multiplier in [0.8, 1.1]
    total: float
    region_filter: float = 1.0
    medium_filter: float = 1.0


@dataclass(frozen=True)
class Scored:
    breakdown: ScoreBreakdown
    filtered_out: Optional[str] = field(default=None, init=False)

    @property
    def total(self) -> float:
        return self.breakdown.total

    def as_dict(self) -> Dict[str, float]:
        return asdict(self.breakdown)


@dataclass(frozen=True)
class FilteredOut:
    filtered_out: str  # FILTER_REGION | FILTER_MEDIUM
    filters: Dict[str, float] = field(default_factory=dict)

    @property
    def total(self) -> float:
        return 0.0

    def as_dict(self) -> Dict[str, Any]:
        return {**self.filters, "total": 0.0, "filtered_out": self.filtered_out}


ScoreOutcome = Union[Scored, FilteredOut]


@dataclass(frozen=True)
class MatchResult:
    """One ranked creative, rounded for display."""
    rank: int
    creative_id: str
    name: str
    location: str
    skills: List[str]
    mediums: List[str]
    themes: List[str]
    day_rate_band: str
    rating: float
    completed_projects: int
    availability: str
    total_score: float
    score_breakdown: Dict[str, float]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["score_breakdown"] = dict(self.score_breakdown)
        return data


@dataclass(frozen=True)
class MatchResponse:
    brief_summary: Dict[str, Any]
    total_candidates: int
    filtered_candidates: int
    top_matches: List[MatchResult]

    def to_dict(self) -> dict:
        return {
            "brief_summary": dict(self.brief_summary),
            "total_candidates": self.total_candidates,
            "filtered_candidates": self.filtered_candidates,
            "top_matches": [m.to_dict() for m in self.top_matches],
        }
