"""Registry of overridable configuration fields.

Each entry ties one ``Config`` attribute path to its UCI key and, for the
few fields that have one, its environment variable.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .config_model import Config, ConnectionType
from .overlay import (
    Parser,
    parse_bool,
    parse_env_connection_type,
    parse_non_empty,
    parse_raw,
    parse_store_connection_type,
    parse_u16,
    parse_u32,
    parse_u64,
)

STORE_NAMESPACE = "at-webserver.config"


@dataclass(frozen=True)
class ConfigField:
    """One overridable field.

    Attributes:
        name: Key suffix in the store namespace (``at-webserver.config.<name>``)
        path: Attribute path inside ``Config``
        store_parse: Parser applied to store text
        env_var: Environment variable name, or None when there is no env override
        env_parse: Parser applied to the environment value
        store_fail_safe: When set, malformed store text yields this value
            instead of keeping the previous one
    """

    name: str
    path: tuple[str, ...]
    store_parse: Parser
    env_var: str | None = None
    env_parse: Parser | None = None
    store_fail_safe: Any = None

    @property
    def store_key(self) -> str:
        return f"{STORE_NAMESPACE}.{self.name}"

    def get(self, config: Config) -> Any:
        value: Any = config
        for attr in self.path:
            value = getattr(value, attr)
        return value

    def set(self, config: Config, value: Any) -> Config:
        """Return a copy of ``config`` with this field replaced."""
        return _replace_path(config, self.path, value)


def _replace_path(obj: Any, path: tuple[str, ...], value: Any) -> Any:
    head, *rest = path
    if rest:
        value = _replace_path(getattr(obj, head), tuple(rest), value)
    return replace(obj, **{head: value})


FIELDS: tuple[ConfigField, ...] = (
    ConfigField(
        "connection_type",
        ("at_config", "connection_type"),
        parse_store_connection_type,
        env_var="AT_CONNECTION_TYPE",
        env_parse=parse_env_connection_type,
        store_fail_safe=ConnectionType.NETWORK,
    ),
    ConfigField(
        "network_host",
        ("at_config", "network", "host"),
        parse_non_empty,
        env_var="AT_NETWORK_HOST",
        env_parse=parse_raw,
    ),
    ConfigField(
        "network_port",
        ("at_config", "network", "port"),
        parse_u16,
        env_var="AT_NETWORK_PORT",
        env_parse=parse_u16,
    ),
    ConfigField("network_timeout", ("at_config", "network", "timeout"), parse_u64),
    ConfigField(
        "serial_port",
        ("at_config", "serial", "port"),
        parse_non_empty,
        env_var="AT_SERIAL_PORT",
        env_parse=parse_raw,
    ),
    ConfigField(
        "serial_baudrate",
        ("at_config", "serial", "baudrate"),
        parse_u32,
        env_var="AT_SERIAL_BAUDRATE",
        env_parse=parse_u32,
    ),
    ConfigField("serial_timeout", ("at_config", "serial", "timeout"), parse_u64),
    ConfigField(
        "wechat_webhook", ("notification_config", "wechat_webhook"), parse_non_empty
    ),
    ConfigField(
        "log_file",
        ("notification_config", "log_file"),
        parse_non_empty,
        env_var="AT_LOG_FILE",
        env_parse=parse_raw,
    ),
    ConfigField("notify_sms", ("notification_config", "notify_sms"), parse_bool),
    ConfigField("notify_call", ("notification_config", "notify_call"), parse_bool),
    ConfigField(
        "notify_memory_full", ("notification_config", "notify_memory_full"), parse_bool
    ),
    ConfigField("notify_signal", ("notification_config", "notify_signal"), parse_bool),
    ConfigField("websocket_port", ("websocket_port",), parse_u16),
)

ENV_FIELDS: tuple[ConfigField, ...] = tuple(f for f in FIELDS if f.env_var)
