"""End-to-end check of the matcher against the bundled creative roster."""
import pytest

from engines.matching_engine import match
from services.creatives_service import DEFAULT_CREATIVES_JSON, load_creatives


@pytest.fixture(scope="module")
def roster():
    return load_creatives(DEFAULT_CREATIVES_JSON)


BRIEFS = [
    ({"category": "technology", "objective": "Launch new app", "formats": ["video"]}, "TEST 1: Global video"),
    ({"category": "fashion", "objective": "Summer collection", "region": "Saudi", "formats": ["photo"]}, "TEST 2: Saudi photo"),
    ({"category": "food", "objective": "Menu refresh", "region": "Egypt", "formats": "video", "budget": "low"}, "TEST 3: Egypt scalar format"),
    ({"category": "travel", "objective": "Visit Oman", "region": "Atlantis", "formats": ["photo"]}, "TEST 4: Unknown region"),
]


@pytest.mark.parametrize("payload, label", BRIEFS, ids=[label for _, label in BRIEFS])
def test_match_on_bundled_roster(roster, payload, label):
    result = match(payload, roster).to_dict()

    assert result["total_candidates"] == len(roster)
    assert result["filtered_candidates"] == len(result["top_matches"]) <= 10
    scores = [m["total_score"] for m in result["top_matches"]]
    assert scores == sorted(scores, reverse=True)
    assert all(s > 0 for s in scores)


def test_bundled_roster_loads(roster):
    assert len(roster) == 16
    assert len({c.creative_id for c in roster}) == 16


def test_region_brief_only_returns_matching_country(roster):
    result = match({"category": "fashion", "objective": "Summer collection", "region": "Saudi", "formats": ["photo"]}, roster)
    assert result.top_matches
    assert all("Saudi" in m.location for m in result.top_matches)


def test_unknown_region_yields_empty_ranking(roster):
    result = match({"category": "travel", "objective": "Visit", "region": "Atlantis", "formats": ["photo"]}, roster)
    assert result.top_matches == []
    assert result.filtered_candidates == 0
