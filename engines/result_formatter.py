"""
Result Formatter — shapes ranked candidates into the response payload.
Scores are rounded half-up to 2 decimals for display; ranking uses the raw totals.
"""
from __future__ import annotations
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Sequence, Tuple

from models.brief import Brief, GLOBAL_REGION
from models.creative import Creative
from models.match import MatchResponse, MatchResult, Scored

BREAKDOWN_FIELDS = (
    "skills_similarity",
    "theme_overlap",
    "portfolio_similarity",
    "budget_fit",
    "availability",
    "performance",
    "language_bonus",
)


def round2(x: float) -> float:
    """Round to 2 decimals, halves up (0.125 -> 0.13)."""
    return float(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_match(rank: int, creative: Creative, scored: Scored) -> MatchResult:
    breakdown = scored.as_dict()
    return MatchResult(
        rank=rank,
        creative_id=creative.creative_id,
        name=creative.name,
        location=creative.location,
        skills=list(creative.skills),
        mediums=list(creative.mediums),
        themes=list(creative.themes),
        day_rate_band=creative.day_rate_band,
        rating=creative.rating,
        completed_projects=creative.completed_projects_count,
        availability=creative.availability,
        total_score=round2(scored.total),
        score_breakdown={name: round2(breakdown[name]) for name in BREAKDOWN_FIELDS},
    )


def build_brief_summary(brief: Brief) -> Dict[str, Any]:
    return {
        "category": brief.category,
        "region": brief.region or GLOBAL_REGION,
        "formats": list(brief.formats),
        "budget": brief.budget or "medium",
    }


def format_response(
    brief: Brief, total_candidates: int, ranked: Sequence[Tuple[Creative, Scored]]
) -> MatchResponse:
    """`ranked` is already filtered, sorted and truncated."""
    top_matches: List[MatchResult] = [
        format_match(i, creative, scored) for i, (creative, scored) in enumerate(ranked, start=1)
    ]
    return MatchResponse(
        brief_summary=build_brief_summary(brief),
        total_candidates=total_candidates,
        filtered_candidates=len(top_matches),
        top_matches=top_matches,
    )
