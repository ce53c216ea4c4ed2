"""
Matching Engine — scores and ranks creatives for a marketing brief.

Pipeline per creative: region hard filter -> medium hard filter -> five
relevance dimensions + performance -> weighted composite x language bonus.
Across the roster: drop totals <= 0, stable sort descending, keep top 10.
"""
from __future__ import annotations
import logging
from collections import Counter
from typing import Any, Iterable, List, Mapping, Tuple, Union

from models.brief import Brief, MATCH_DEFAULTS
from models.creative import Creative
from models.match import (
    FILTER_MEDIUM,
    FILTER_REGION,
    FilteredOut,
    MatchResponse,
    ScoreBreakdown,
    ScoreOutcome,
    Scored,
)
from engines.result_formatter import format_response
from utils.scoring import (
    DEFAULT_BUDGET,
    availability_score,
    budget_fit_score,
    language_bonus,
    performance_score,
    weighted_score,
)
from utils.similarity import jaccard, normalize_tags, theme_overlap

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10
OBJECTIVE_SKILL_WORDS = 3

RankedCreative = Tuple[Creative, Scored]


def passes_region_filter(brief: Brief, creative: Creative) -> bool:
    """Global (or no) region passes everyone; otherwise substring match on country or city."""
    if brief.is_global:
        return True
    region = brief.region.strip().lower()
    return region in creative.country.lower() or region in creative.city.lower()


def passes_medium_filter(brief: Brief, creative: Creative) -> bool:
    """At least one requested format must be among the creative's mediums."""
    return bool(normalize_tags(brief.formats) & normalize_tags(creative.mediums))


def brief_skill_tags(brief: Brief) -> List[str]:
    """Formats + category + the first few words of the objective."""
    words = (brief.objective or "").split()[:OBJECTIVE_SKILL_WORDS]
    return [*brief.formats, brief.category, *words]


def brief_portfolio_tags(brief: Brief) -> List[str]:
    return [tag for tag in (brief.category, brief.objective, *brief.channels) if tag]


def score_creative(brief: Brief, creative: Creative) -> ScoreOutcome:
    """
    Score one creative against a brief.
    Returns FilteredOut on the first failing hard filter (nothing else computed),
    else Scored with the full breakdown.
    """
    if not passes_region_filter(brief, creative):
        return FilteredOut(FILTER_REGION, {"region_filter": 0.0})

    if not passes_medium_filter(brief, creative):
        return FilteredOut(FILTER_MEDIUM, {"region_filter": 1.0, "medium_filter": 0.0})

    dimensions = {
        "skills_similarity": jaccard(brief_skill_tags(brief), creative.skills),
        "theme_overlap": theme_overlap(brief.category, creative.themes),
        "portfolio_similarity": jaccard(brief_portfolio_tags(brief), creative.portfolio_tags),
        "budget_fit": budget_fit_score(brief.budget or DEFAULT_BUDGET, creative.day_rate_band),
        "availability": availability_score(creative.availability),
        "performance": performance_score(creative.rating, creative.completed_projects_count),
    }
    bonus = language_bonus(creative.languages)
    total = weighted_score(dimensions) * bonus

    return Scored(ScoreBreakdown(**dimensions, language_bonus=bonus, total=total))


def rank_creatives(
    brief: Brief, roster: Iterable[Creative], top_n: int = DEFAULT_TOP_N
) -> List[RankedCreative]:
    """
    Return the top N scored creatives, best first.
    Filtered and zero-total candidates are dropped; ties keep roster order.
    """
    outcomes = [(creative, score_creative(brief, creative)) for creative in roster]

    if logger.isEnabledFor(logging.DEBUG):
        reasons = Counter(o.filtered_out for _, o in outcomes if isinstance(o, FilteredOut))
        logger.debug(
            f"Hard filters: {reasons.get(FILTER_REGION, 0)} region, "
            f"{reasons.get(FILTER_MEDIUM, 0)} medium out of {len(outcomes)}."
        )

    ranked = [(c, o) for c, o in outcomes if isinstance(o, Scored) and o.total > 0]
    # list.sort is stable, including with reverse=True.
    ranked.sort(key=lambda item: item[1].total, reverse=True)
    return ranked[:top_n]


def match(
    brief: Union[Brief, Mapping[str, Any]],
    roster: Iterable[Creative],
    top_n: int = DEFAULT_TOP_N,
) -> MatchResponse:
    """
    Rank the roster for a brief and shape the response.
    Raises InvalidBrief (before any scoring) if category or objective is missing.
    """
    if not isinstance(brief, Brief):
        brief = Brief.from_dict(brief, defaults=MATCH_DEFAULTS)
    brief.validate()

    candidates = list(roster)
    ranked = rank_creatives(brief, candidates, top_n=top_n)
    logger.info(
        f"Matched brief {brief.brief_id or '-'} ({brief.category}): "
        f"{len(ranked)} of {len(candidates)} creatives ranked."
    )
    return format_response(brief, len(candidates), ranked)
