import json
from pathlib import Path

import pytest

from models.brief import Brief
from models.creative import Creative

# Path to tests/fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def load_json(fixtures_dir):
    """Returns a function: load_json("file.json") -> parsed JSON."""
    def _load(name: str):
        return json.loads((fixtures_dir / name).read_text(encoding="utf-8"))
    return _load


@pytest.fixture
def make_creative():
    """
    Factory for a creative that passes a Global/video brief.
    Override any field with keyword arguments.
    """
    def _make(**overrides) -> Creative:
        fields = dict(
            creative_id="C1",
            name="Test Creative",
            city="Riyadh",
            country="Saudi Arabia",
            skills=["technology"],
            mediums=["video"],
            themes=["technology"],
            portfolio_tags=["technology"],
            day_rate_band="medium",
            availability="available",
            rating=5.0,
            completed_projects_count=200,
            languages=["english", "arabic"],
        )
        fields.update(overrides)
        return Creative(**fields)
    return _make


@pytest.fixture
def make_brief():
    def _make(**overrides) -> Brief:
        fields = dict(
            objective="launch app",
            category="technology",
            region="Global",
            formats=["video"],
            budget="medium",
        )
        fields.update(overrides)
        return Brief(**fields)
    return _make
