"""
Brief model — dataclass representing a client's marketing brief.

Intake defaults mirror the brief builder form: anything the client leaves
blank gets a sensible placeholder so the campaign prompt and the matcher
always see a complete brief.
"""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional

GLOBAL_REGION = "Global"

INTAKE_DEFAULTS = {
    "region": GLOBAL_REGION,
    "tone": "Professional",
    "timeline": "4 weeks",
    "budget": "Medium",
    "assets": "Logo and brand colors available",
}

# A match request takes the brief as sent; a missing budget is reported as "medium".
MATCH_DEFAULTS = {k: v for k, v in INTAKE_DEFAULTS.items() if k != "budget"}

MATCH_REQUIRED_FIELDS = ("category", "objective")
CAMPAIGN_REQUIRED_FIELDS = ("objective", "category", "audience")


class InvalidBrief(ValueError):
    """Raised when a brief is missing fields required downstream."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


def as_list(value: Any) -> List[str]:
    """Coerce a scalar or sequence into a list; None becomes []."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, Iterable):
        return [str(v) for v in value if v is not None]
    return [str(value)]


@dataclass
class Brief:
    objective: str = ""
    category: str = ""
    audience: str = ""
    region: Optional[str] = None  # None or "Global" matches everywhere
    channels: List[str] = field(default_factory=list)
    formats: List[str] = field(default_factory=list)
    tone: Optional[str] = None
    timeline: Optional[str] = None
    budget: Optional[str] = None  # low | medium | high, any case
    assets: Optional[str] = None
    brief_id: str = ""
    timestamp: str = ""

    def __post_init__(self):
        self.channels = as_list(self.channels)
        self.formats = as_list(self.formats)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], defaults: Mapping[str, str] = INTAKE_DEFAULTS) -> Brief:
        """Build a brief from form/JSON input, filling blanks from `defaults`."""
        def text(key: str) -> Optional[str]:
            value = payload.get(key)
            if value is None or not str(value).strip():
                return defaults.get(key)
            return str(value).strip()

        return cls(
            objective=text("objective") or "",
            category=text("category") or "",
            audience=text("audience") or "",
            region=text("region"),
            channels=as_list(payload.get("channels")),
            formats=as_list(payload.get("formats")),
            tone=text("tone"),
            timeline=text("timeline"),
            budget=text("budget"),
            assets=text("assets"),
            brief_id=str(payload.get("id") or uuid.uuid4()),
            timestamp=str(payload.get("timestamp") or datetime.now(timezone.utc).isoformat()),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.brief_id,
            "timestamp": self.timestamp,
            "objective": self.objective,
            "category": self.category,
            "audience": self.audience,
            "region": self.region,
            "channels": list(self.channels),
            "formats": list(self.formats),
            "tone": self.tone,
            "timeline": self.timeline,
            "budget": self.budget,
            "assets": self.assets,
        }

    def validate(self, required: Iterable[str] = MATCH_REQUIRED_FIELDS) -> Brief:
        """Raise InvalidBrief if any required field is blank; returns self for chaining."""
        missing = [name for name in required if not str(getattr(self, name, "") or "").strip()]
        if missing:
            raise InvalidBrief(missing)
        return self

    @property
    def is_global(self) -> bool:
        region = (self.region or "").strip()
        return not region or region.lower() == GLOBAL_REGION.lower()
