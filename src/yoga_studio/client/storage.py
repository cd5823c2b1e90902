"""Key-value storage for the client's local session."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for client-local persistent storage."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value."""

    def clear(self, key: str) -> None:
        """Remove a value if present."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Process-local store, mainly for tests and scripts."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def clear(self, key: str) -> None:
        self.values.pop(key, None)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Store persisted as a JSON object in a single file."""

    path: Path

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value and flush the file."""
        values = self._load()
        values[key] = value
        self._save(values)

    def clear(self, key: str) -> None:
        """Remove a value and flush the file."""
        values = self._load()
        if values.pop(key, None) is not None:
            self._save(values)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, values: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(values), encoding="utf-8")
