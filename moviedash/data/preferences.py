"""Key-value store for dashboard preferences (theme, language)."""

from __future__ import annotations

import json
from pathlib import Path

from moviedash.config import PREFERENCES_PATH


class PreferenceStore:
    """JSON-file backed preference store.

    Values are opaque strings. The file is read once on construction and
    rewritten on every set().
    """

    def __init__(self, path: Path = PREFERENCES_PATH) -> None:
        self.path = path
        self._values: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            print(f"Ignoring unreadable preferences at {self.path}: {e}")
            return {}
        if not isinstance(raw, dict):
            return {}
        return {str(k): str(v) for k, v in raw.items()}

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, ensure_ascii=False)
