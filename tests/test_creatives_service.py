import pytest

from services import creatives_service
from services.creatives_service import (
    DEFAULT_CREATIVES_JSON,
    clear_cache,
    creatives_path,
    get_creatives,
    load_creatives,
)


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


def test_load_creatives_from_fixture(fixtures_dir):
    creatives = load_creatives(fixtures_dir / "creatives_small.json")

    assert isinstance(creatives, tuple)
    assert [c.creative_id for c in creatives] == ["001", "002", "003"]
    assert creatives[0].mediums == ["photo", "video"]
    assert creatives[2].skills == []
    assert creatives[2].rating == 0.0


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_creatives(tmp_path / "nope.json")


def test_path_from_environment(monkeypatch, fixtures_dir):
    monkeypatch.setenv("CREATIVES_DATA_PATH", str(fixtures_dir / "creatives_small.json"))
    assert creatives_path() == fixtures_dir / "creatives_small.json"
    assert len(load_creatives()) == 3


def test_default_path(monkeypatch):
    monkeypatch.delenv("CREATIVES_DATA_PATH", raising=False)
    assert creatives_path() == DEFAULT_CREATIVES_JSON


def test_get_creatives_is_cached(fixtures_dir, monkeypatch):
    path = fixtures_dir / "creatives_small.json"
    first = get_creatives(path)

    calls = []
    monkeypatch.setattr(creatives_service, "load_creatives", lambda p=None: calls.append(p) or ())
    assert get_creatives(path) is first
    assert calls == []

    clear_cache()
    assert get_creatives(path) == ()
    assert calls == [str(path)]
