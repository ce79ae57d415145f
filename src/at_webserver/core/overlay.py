"""Per-field parsers and layered-override combinators.

Parsers take raw text and return the typed value, or None when the text
does not parse. Combinators decide what a failed parse means for a layer.
"""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from .config_model import ConnectionType

T = TypeVar("T")

Parser = Callable[[str], "T | None"]

U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF
U64_MAX = 0xFFFFFFFFFFFFFFFF

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on", "enabled"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off", "disabled"})


def overlay(current: T, raw: str | None, parse: Parser) -> T:
    """Replace ``current`` only when ``raw`` is present and parses."""
    if raw is None:
        return current
    parsed = parse(raw)
    if parsed is None:
        return current
    return parsed


def overlay_or_fail_safe(current: T, raw: str | None, parse: Parser, fail_safe: T) -> T:
    """Like :func:`overlay`, but present-yet-unparseable text yields ``fail_safe``.

    An absent value (store unreachable) still keeps ``current``.
    """
    if raw is None:
        return current
    parsed = parse(raw)
    if parsed is None:
        return fail_safe
    return parsed


def _parse_unsigned(text: str, maximum: int) -> int | None:
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    # Length check before int(): huge digit strings must not reach the
    # interpreter's int conversion limit.
    digits = text.lstrip("+").lstrip("0")
    if not digits:
        return 0
    if len(digits) > len(str(maximum)):
        return None
    value = int(digits)
    if value > maximum:
        return None
    return value


def parse_u16(text: str) -> int | None:
    return _parse_unsigned(text, U16_MAX)


def parse_u32(text: str) -> int | None:
    return _parse_unsigned(text, U32_MAX)


def parse_u64(text: str) -> int | None:
    return _parse_unsigned(text, U64_MAX)


def parse_bool(text: str) -> bool | None:
    """UCI-style boolean ("1"/"0", "on"/"off", ...)."""
    token = text.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def parse_raw(text: str) -> str:
    """Accept any text, empty included."""
    return text


def parse_non_empty(text: str) -> str | None:
    return text or None


def parse_store_connection_type(text: str) -> ConnectionType | None:
    # Only the exact SERIAL token is recognised; the store layer's fail-safe
    # turns everything else into NETWORK.
    if text == "SERIAL":
        return ConnectionType.SERIAL
    return None


def parse_env_connection_type(text: str) -> ConnectionType | None:
    if text == "SERIAL":
        return ConnectionType.SERIAL
    if text == "NETWORK":
        return ConnectionType.NETWORK
    return None
