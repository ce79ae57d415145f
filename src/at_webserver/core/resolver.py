"""Layered configuration resolution.

Keeps the defaults -> store -> environment pipeline in one place, decoupled
from how the store is reached via the ``ConfigStore`` port.
"""

from __future__ import annotations

import logging
from typing import Mapping

from .config_model import Config, default_config
from .fields import ENV_FIELDS, FIELDS
from .overlay import overlay, overlay_or_fail_safe
from .ports import ConfigStore

logger = logging.getLogger(__name__)


class ConfigResolver:
    """Builds one immutable ``Config`` from defaults, a store and an environment."""

    def __init__(self, store: ConfigStore, environ: Mapping[str, str]):
        self._store = store
        self._environ = environ

    def resolve(self) -> Config:
        """Resolve the configuration. Never raises; failures keep the prior value."""
        config = default_config()
        config = self._apply_store(config)
        config = self._apply_environment(config)
        logger.info("Loaded configuration: %s", config)
        return config

    def _apply_store(self, config: Config) -> Config:
        for field in FIELDS:
            raw = self._store.get(field.store_key)
            current = field.get(config)
            if field.store_fail_safe is not None:
                value = overlay_or_fail_safe(
                    current, raw, field.store_parse, field.store_fail_safe
                )
            else:
                value = overlay(current, raw, field.store_parse)
            if value is not current:
                config = field.set(config, value)
        return config

    def _apply_environment(self, config: Config) -> Config:
        for field in ENV_FIELDS:
            raw = self._environ.get(field.env_var)
            current = field.get(config)
            value = overlay(current, raw, field.env_parse)
            if value is not current:
                config = field.set(config, value)
        return config


def resolve(store: ConfigStore, environ: Mapping[str, str]) -> Config:
    return ConfigResolver(store, environ).resolve()
