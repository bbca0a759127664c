import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from .. import config
from ..models.briefing import HistoryEntry
from .store import KeyValueStore

log = logging.getLogger("decisiondesk.memory.history")


def filter_recent(entries: Iterable[HistoryEntry], now: Optional[datetime] = None,
                  days: int = config.HISTORY_DAYS) -> list[HistoryEntry]:
    """Keep entries recorded strictly after now - days, preserving order."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cutoff = now - timedelta(days=days)
    return [e for e in entries if e.recorded_at > cutoff]


class HistoryStore:
    """Bounded, newest-first record of prior submissions."""

    def __init__(self, store: KeyValueStore, key: str = config.HISTORY_KEY,
                 limit: int = config.HISTORY_LIMIT, window_days: int = config.HISTORY_DAYS):
        self.store = store
        self.key = key
        self.limit = limit
        self.window_days = window_days

    def load(self) -> list[HistoryEntry]:
        try:
            raw = self.store.get(self.key)
        except Exception as e:
            log.error("History store unavailable: %s", e)
            return []
        if not raw:
            return []

        try:
            records = json.loads(raw)
        except (TypeError, ValueError) as e:
            log.warning("Discarding corrupt history: %s", e)
            return []
        if not isinstance(records, list):
            log.warning("Discarding history: expected a list, got %s", type(records).__name__)
            return []

        entries = []
        for record in records:
            entry = HistoryEntry.from_dict(record)
            if entry:
                entries.append(entry)
        return entries[:self.limit]

    def recent(self, now: Optional[datetime] = None) -> list[HistoryEntry]:
        return filter_recent(self.load(), now, self.window_days)

    def append(self, raw_text: str, now: Optional[datetime] = None) -> Optional[HistoryEntry]:
        """Prepend a submission and evict the oldest entries past the limit."""
        if not raw_text or not raw_text.strip():
            return None

        entry = HistoryEntry.create(raw_text, now)
        entries = [entry] + self.load()
        entries = entries[:self.limit]

        payload = json.dumps([e.to_dict() for e in entries], ensure_ascii=False)
        try:
            saved = self.store.set(self.key, payload)
        except Exception as e:
            log.error("Failed to save history: %s", e)
            return entry
        if saved is False:
            log.warning("History write was rejected by the store")
        else:
            log.info("Saved submission to history (%d entries)", len(entries))
        return entry
