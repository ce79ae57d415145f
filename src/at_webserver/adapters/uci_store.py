"""UCI configuration store adapter (``uci get <key>``)."""

from __future__ import annotations

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)

DEFAULT_UCI_TIMEOUT = 5.0


class UciConfigStore:
    """Reads OpenWrt UCI values through the ``uci`` command line tool.

    Any failure (missing binary, non-zero exit, timeout) reads as None.
    """

    def __init__(self, command: str = "uci", timeout: float = DEFAULT_UCI_TIMEOUT):
        self._command = command
        self._timeout = timeout

    def get(self, key: str) -> str | None:
        result = _run([self._command, "get", key], self._timeout)
        if result is None:
            return None
        if result.returncode != 0:
            logger.debug(f"uci get {key} exited with status {result.returncode}")
            return None
        return result.stdout.strip()


def uci_available(command: str = "uci") -> bool:
    return _has_cmd(command)


def _has_cmd(name: str) -> bool:
    return shutil.which(name) is not None


def _run(args: list[str], timeout: float) -> subprocess.CompletedProcess[str] | None:
    try:
        return subprocess.run(
            args,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.debug(f"{' '.join(args)} timed out after {timeout}s")
        return None
    except (OSError, ValueError) as e:
        logger.debug(f"{' '.join(args)} failed: {e}")
        return None
