"""Env configuration adapter producing the resolved Config."""

from __future__ import annotations

import logging
import os
from typing import Mapping

from dotenv import load_dotenv

from ..core.config_model import Config
from ..core.ports import ConfigStore
from ..core.resolver import ConfigResolver
from .memory_store import NullConfigStore
from .uci_store import UciConfigStore, uci_available

logger = logging.getLogger(__name__)


def default_store() -> ConfigStore:
    if uci_available():
        return UciConfigStore()
    logger.debug("uci not found on PATH - skipping UCI overlay")
    return NullConfigStore()


def load_app_config(
    store: ConfigStore | None = None,
    environ: Mapping[str, str] | None = None,
    env_file: str | None = None,
) -> Config:
    if store is None:
        store = default_store()
    if environ is None:
        # A local .env helps when running off-device; real env vars still win.
        load_dotenv(env_file, override=False)
        environ = os.environ
    return ConfigResolver(store, environ).resolve()
