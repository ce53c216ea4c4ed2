import json
from unittest.mock import MagicMock, patch

import pytest
import requests

import services.llm_service as llm
from models.brief import Brief, InvalidBrief


@pytest.fixture
def brief():
    return Brief.from_dict({
        "objective": "Launch new app",
        "category": "technology",
        "audience": "Young professionals",
        "channels": ["instagram", "tiktok"],
        "formats": ["video"],
    })


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.delenv("OPENAI_MODEL", raising=False)


def _response(content):
    resp = MagicMock()
    resp.raise_for_status.return_value = None
    resp.json.return_value = {"choices": [{"message": {"content": content}}]}
    return resp


def test_build_messages_fills_template(brief):
    system, user = llm.build_messages(brief)

    assert system["role"] == "system"
    assert "senior marketing strategist" in system["content"]
    assert "BUSINESS OBJECTIVE: Launch new app" in user["content"]
    assert "PRIMARY CHANNELS: instagram, tiktok" in user["content"]
    assert "REGION: Global" in user["content"]
    assert "BUDGET BAND: Medium" in user["content"]
    assert "{objective}" not in user["content"]
    assert '"content_concepts"' in user["content"]


def test_generate_requires_audience(api_key):
    with pytest.raises(InvalidBrief):
        llm.generate_campaign(Brief(objective="x", category="food"))


def test_generate_without_api_key(monkeypatch, brief):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(llm.LLMNotConfigured):
        llm.generate_campaign(brief)


def test_generate_parses_json_draft(api_key, brief):
    draft = {"content_concepts": [{"title": "Tap In", "description": "Launch teaser"}]}
    with patch.object(llm.requests, "post", return_value=_response(json.dumps(draft))) as post:
        assert llm.generate_campaign(brief) == draft

    _, kwargs = post.call_args
    assert kwargs["headers"]["Authorization"] == "Bearer sk-test"
    assert kwargs["json"]["model"] == "gpt-4"
    assert kwargs["json"]["temperature"] == 0.7
    assert kwargs["json"]["max_tokens"] == 1500
    assert kwargs["timeout"] == llm.REQUEST_TIMEOUT


def test_generate_invalid_json_keeps_raw_excerpt(api_key, brief):
    raw = "Sure! " + "x" * 600
    with patch.object(llm.requests, "post", return_value=_response(raw)):
        with pytest.raises(llm.CampaignGenerationError) as exc:
            llm.generate_campaign(brief)

    assert exc.value.details == "OpenAI response was not valid JSON"
    assert exc.value.raw_response == raw[:500]


def test_generate_http_error(api_key, brief):
    with patch.object(llm.requests, "post", side_effect=requests.ConnectionError("boom")):
        with pytest.raises(llm.CampaignGenerationError) as exc:
            llm.generate_campaign(brief)
    assert "boom" in exc.value.details


def test_generate_empty_choices(api_key, brief):
    resp = MagicMock()
    resp.json.return_value = {"choices": []}
    with patch.object(llm.requests, "post", return_value=resp):
        with pytest.raises(llm.CampaignGenerationError, match="Invalid response"):
            llm.generate_campaign(brief)


@pytest.mark.parametrize("body", [
    [{"choices": []}],
    {"choices": "nope"},
    {"choices": [{"message": "text"}]},
])
def test_generate_unexpected_body_shape(api_key, brief, body):
    resp = MagicMock()
    resp.json.return_value = body
    with patch.object(llm.requests, "post", return_value=resp):
        with pytest.raises(llm.CampaignGenerationError, match="Invalid response"):
            llm.generate_campaign(brief)
