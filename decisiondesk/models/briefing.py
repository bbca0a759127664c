import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

log = logging.getLogger("decisiondesk.models")


class Tone(Enum):
    STRATEGIC = "Strategic"
    CHILL = "Chill"
    TOUGH_LOVE = "Tough Love"

    @classmethod
    def parse(cls, value) -> "Tone":
        """Map a free-form tone label to a member, defaulting to CHILL."""
        if isinstance(value, Tone):
            return value
        key = _normalize(value)
        for tone in cls:
            if key in (_normalize(tone.value), _normalize(tone.name)):
                return tone
        return cls.CHILL


class BusinessCategory(Enum):
    COFFEE = "Coffee"
    RESTAURANT = "Restaurant"
    GYM = "Gym"
    FASHION = "Fashion"
    TECH = "Tech"
    MARKETING = "Marketing"
    REAL_ESTATE = "Real Estate"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    MUSIC = "Music"
    OTHER = "Other"

    @classmethod
    def parse(cls, value) -> "BusinessCategory":
        if isinstance(value, BusinessCategory):
            return value
        key = _normalize(value)
        for category in cls:
            if key in (_normalize(category.value), _normalize(category.name)):
                return category
        return cls.OTHER


def _normalize(value) -> str:
    if not isinstance(value, str):
        return ""
    return "".join(value.lower().replace("_", " ").replace("-", " ").split())


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: str  # ISO-8601, UTC
    raw_text: str

    @classmethod
    def create(cls, raw_text: str, now: Optional[datetime] = None) -> "HistoryEntry":
        now = now or datetime.now(timezone.utc)
        return cls(timestamp=now.isoformat(), raw_text=raw_text)

    @property
    def recorded_at(self) -> datetime:
        ts = datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp, "data": self.raw_text}

    @classmethod
    def from_dict(cls, raw: dict) -> Optional["HistoryEntry"]:
        """Build an entry from its stored form; None if the record is unusable."""
        if not isinstance(raw, dict):
            return None
        ts = raw.get("timestamp")
        text = raw.get("data")
        if not isinstance(ts, str) or not isinstance(text, str) or not text.strip():
            return None
        entry = cls(timestamp=ts, raw_text=text)
        try:
            entry.recorded_at
        except ValueError:
            log.warning("Dropping history entry with bad timestamp: %r", ts)
            return None
        return entry


@dataclass(frozen=True)
class BriefingRequest:
    raw_text: str
    tone: Tone = Tone.CHILL
    history: tuple[HistoryEntry, ...] = ()


@dataclass(frozen=True)
class BriefingSection:
    emoji: str
    title: str
    body: str

    @property
    def is_degenerate(self) -> bool:
        return not self.emoji and not self.title


@dataclass
class BriefingResult:
    text: str
    sections: list[BriefingSection] = field(default_factory=list)
    business_type: BusinessCategory = BusinessCategory.OTHER
