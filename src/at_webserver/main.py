"""at-webserver-config: print the resolved at-webserver configuration

Run as ``at-webserver-config`` or ``python -m at_webserver.main``.
"""

import argparse
import json
import logging

from .adapters.config_env import load_app_config
from .adapters.memory_store import NullConfigStore
from .core.config_model import Config


def format_config(config: Config) -> str:
    """Human-readable summary"""
    at = config.at_config
    notif = config.notification_config
    channels = [
        name
        for name, enabled in (
            ("sms", notif.notify_sms),
            ("call", notif.notify_call),
            ("memory_full", notif.notify_memory_full),
            ("signal", notif.notify_signal),
        )
        if enabled
    ]
    lines = [
        "=" * 50,
        "at-webserver configuration",
        "=" * 50,
        f"Connection: {at.connection_type.name}",
        f"Network:    {at.network.host}:{at.network.port} (timeout {at.network.timeout}s)",
        f"Serial:     {at.serial.port} @ {at.serial.baudrate} (timeout {at.serial.timeout}s)",
        f"WebSocket:  port {config.websocket_port}",
        f"Log file:   {notif.log_file}",
        f"WeChat:     {'enabled' if notif.wechat_webhook else 'disabled'}",
        f"Notify:     {', '.join(channels) if channels else 'none'}",
        "=" * 50,
    ]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="at-webserver-config",
        description="Resolve and print the at-webserver configuration",
    )
    parser.add_argument("--env-file", help="Load variables from this .env file first")
    parser.add_argument(
        "--no-store", action="store_true", help="Skip the UCI store and use defaults + env only"
    )
    parser.add_argument("--json", action="store_true", help="Print the configuration as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = NullConfigStore() if args.no_store else None
    config = load_app_config(store=store, env_file=args.env_file)

    if args.json:
        print(json.dumps(config.to_dict(), indent=2))
    else:
        print(format_config(config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
