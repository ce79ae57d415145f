"""Core configuration model (structured, immutable view).

Every value here is a frozen dataclass. A resolved ``Config`` is built once
per process start and handed to the transport, notification and websocket
layers as a read-only snapshot.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


class ConnectionType(Enum):
    """Which transport sub-configuration is authoritative."""

    NETWORK = "NETWORK"
    SERIAL = "SERIAL"


@dataclass(frozen=True)
class NetworkConfig:
    host: str
    port: int
    timeout: int


@dataclass(frozen=True)
class SerialConfig:
    port: str
    baudrate: int
    timeout: int


@dataclass(frozen=True)
class AtConfig:
    """AT command channel settings.

    Both ``network`` and ``serial`` are always populated, whichever one
    ``connection_type`` selects.
    """

    connection_type: ConnectionType
    network: NetworkConfig
    serial: SerialConfig


@dataclass(frozen=True)
class NotificationConfig:
    wechat_webhook: str | None
    log_file: str
    notify_sms: bool
    notify_call: bool
    notify_memory_full: bool
    notify_signal: bool


@dataclass(frozen=True)
class Config:
    at_config: AtConfig
    notification_config: NotificationConfig
    websocket_port: int

    def to_dict(self) -> dict:
        """Plain nested dict, with the connection type rendered by name."""
        data = asdict(self)
        data["at_config"]["connection_type"] = self.at_config.connection_type.name
        return data


def default_config() -> Config:
    """Return the compiled-in baseline. Every field has a value."""
    return Config(
        at_config=AtConfig(
            connection_type=ConnectionType.NETWORK,
            network=NetworkConfig(host="192.168.8.1", port=20249, timeout=10),
            serial=SerialConfig(port="/dev/ttyUSB2", baudrate=115200, timeout=10),
        ),
        notification_config=NotificationConfig(
            wechat_webhook=None,
            log_file="/var/log/at-notifications.log",
            notify_sms=True,
            notify_call=True,
            notify_memory_full=True,
            notify_signal=True,
        ),
        websocket_port=8765,
    )
