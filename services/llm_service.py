"""
LLM Service — campaign strategy drafts via the OpenAI chat-completions REST API.

Uses the REST endpoint directly with `requests` (no SDK). The brief is turned
into a fixed prompt; the model is asked for a JSON campaign draft which is
parsed and returned as a dict.
"""
import os
import json
import logging
from typing import Any, Dict, List

import requests
from dotenv import load_dotenv

from models.brief import Brief, CAMPAIGN_REQUIRED_FIELDS, INTAKE_DEFAULTS

load_dotenv()

logger = logging.getLogger(__name__)

OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4"
REQUEST_TIMEOUT = 30

SYSTEM_PROMPT = (
    "You are a senior marketing strategist for Mohtawa, an AI-powered creative platform. "
    "Your role is to transform client briefs into actionable campaign strategies that are:\n"
    "- Culturally sensitive and region-appropriate\n"
    "- Brand-safe and professional\n"
    "- Realistic and budget-conscious\n"
    "- Channel-specific and format-optimized\n\n"
    "Always consider:\n"
    "- Regional cultural nuances and local preferences\n"
    "- Platform-specific content requirements\n"
    "- Budget constraints and realistic timelines\n"
    "- Brand voice consistency\n"
    "- Measurable objectives\n\n"
    "Output structured JSON only, no additional text."
)

USER_PROMPT_TEMPLATE = """Create a comprehensive campaign strategy for this brief:

BUSINESS OBJECTIVE: {objective}
BRAND CATEGORY: {category}
TARGET AUDIENCE: {audience}
REGION: {region}
PRIMARY CHANNELS: {channels}
FORMATS: {formats}
TONE OF VOICE: {tone}
TIMELINE: {timeline}
BUDGET BAND: {budget}
BRAND ASSETS: {assets}

Generate exactly this JSON structure:
{
  "content_concepts": [
    {"title": "Concept 1", "description": "1-2 line description"},
    {"title": "Concept 2", "description": "1-2 line description"},
    {"title": "Concept 3", "description": "1-2 line description"}
  ],
  "content_plan": {
    "channels": [
      {
        "name": "channel_name",
        "formats": [
          {"format": "photo", "count": 5, "purpose": "purpose"},
          {"format": "video", "count": 3, "purpose": "purpose"}
        ]
      }
    ]
  },
  "copy_examples": {
    "ctas": ["CTA 1", "CTA 2", "CTA 3"],
    "headlines": ["Headline 1", "Headline 2"],
    "body_copy": ["Short copy example 1", "Short copy example 2"]
  },
  "tags_keywords": {
    "primary_tags": ["tag1", "tag2", "tag3"],
    "secondary_keywords": ["keyword1", "keyword2", "keyword3"],
    "hashtags": ["#hashtag1", "#hashtag2", "#hashtag3"]
  }
}"""

PROMPT_FIELDS = (
    "objective", "category", "audience", "region", "channels",
    "formats", "tone", "timeline", "budget", "assets",
)


class LLMServiceError(RuntimeError):
    """Base error for campaign generation failures."""

    def __init__(self, message: str, details: str = "", raw_response: str = ""):
        super().__init__(message)
        self.details = details
        self.raw_response = raw_response


class LLMNotConfigured(LLMServiceError):
    pass


class CampaignGenerationError(LLMServiceError):
    pass


def build_messages(brief: Brief) -> List[Dict[str, str]]:
    """Chat messages for a brief. Blank fields fall back to the intake defaults."""
    values = brief.to_dict()
    prompt = USER_PROMPT_TEMPLATE
    # str.format would trip over the JSON braces in the template
    for name in PROMPT_FIELDS:
        value = values.get(name)
        if isinstance(value, list):
            value = ", ".join(value)
        prompt = prompt.replace("{" + name + "}", str(value or INTAKE_DEFAULTS.get(name, "")))
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]


def _extract_content(data: Any) -> str:
    choices = data.get("choices") if isinstance(data, dict) else None
    if choices and isinstance(choices, list) and isinstance(choices[0], dict):
        message = choices[0].get("message")
        content = message.get("content") if isinstance(message, dict) else None
        if content:
            return content
    raise CampaignGenerationError("Invalid response from OpenAI", details="missing choices[0].message.content")


def generate_campaign(brief: Brief) -> Dict[str, Any]:
    """
    Ask the model for a campaign draft for a validated brief.

    Raises InvalidBrief if objective/category/audience are missing,
    LLMNotConfigured without OPENAI_API_KEY, CampaignGenerationError otherwise.
    """
    brief.validate(CAMPAIGN_REQUIRED_FIELDS)

    api_key = os.getenv("OPENAI_API_KEY", "").strip()
    if not api_key:
        logger.error("OpenAI API key not found")
        raise LLMNotConfigured("OpenAI API key not configured")

    payload = {
        "model": os.getenv("OPENAI_MODEL", "").strip() or DEFAULT_MODEL,
        "messages": build_messages(brief),
        "temperature": 0.7,
        "max_tokens": 1500,
    }

    try:
        resp = requests.post(
            OPENAI_API_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json=payload,
            timeout=REQUEST_TIMEOUT,
        )
        resp.raise_for_status()
        data = resp.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning("OpenAI API error: %s", e)
        raise CampaignGenerationError("Failed to call OpenAI API", details=str(e)) from e

    raw_content = _extract_content(data)
    logger.info("Raw OpenAI response: %s...", raw_content[:200])

    try:
        return json.loads(raw_content)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse OpenAI response: %s", e)
        raise CampaignGenerationError(
            "Failed to generate structured campaign",
            details="OpenAI response was not valid JSON",
            raw_response=raw_content[:500],
        ) from e
