import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

log = logging.getLogger("decisiondesk.memory.store")


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> bool:
        ...


class JsonFileStore:
    """String key-value storage kept as a single JSON object on disk."""

    def __init__(self, path: str):
        self.path = Path(path)

    def get(self, key: str) -> Optional[str]:
        value = self._load_state().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> bool:
        state = self._load_state()
        state[key] = value
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(state, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            log.error("Failed to write %s: %s", self.path, e)
            return False
        return True

    def _load_state(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                state = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            log.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(state, dict):
            log.warning("Ignoring store %s: expected a JSON object", self.path)
            return {}
        return state
