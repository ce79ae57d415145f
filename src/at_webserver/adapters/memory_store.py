"""In-process configuration stores."""

from __future__ import annotations

from typing import Mapping


class InMemoryConfigStore:
    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        value = self._values.get(key)
        if value is None:
            return None
        return value.strip()


class NullConfigStore:
    """Store for hosts without UCI: every lookup is absent."""

    def get(self, key: str) -> str | None:
        return None
