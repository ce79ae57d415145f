"""Core ports (interfaces) for the configuration resolver.

The resolver only needs to look values up by key. Where they come from
(UCI over a subprocess, an in-memory map in tests) is an adapter concern.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigStore(Protocol):
    """External key-value configuration store."""

    def get(self, key: str) -> str | None:
        """Return the trimmed value for ``key``, or None if it could not be read."""
