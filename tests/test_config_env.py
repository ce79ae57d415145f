import json

from at_webserver.main import main as cli_main
from at_webserver.adapters import config_env
from at_webserver.adapters.memory_store import InMemoryConfigStore, NullConfigStore
from at_webserver.adapters.uci_store import UciConfigStore
from at_webserver.core.config_model import ConnectionType


def test_default_store_without_uci(monkeypatch):
    monkeypatch.setattr(config_env, "uci_available", lambda: False)
    assert isinstance(config_env.default_store(), NullConfigStore)


def test_default_store_with_uci(monkeypatch):
    monkeypatch.setattr(config_env, "uci_available", lambda: True)
    assert isinstance(config_env.default_store(), UciConfigStore)


def test_load_app_config_uses_given_sources():
    store = InMemoryConfigStore({"at-webserver.config.connection_type": "SERIAL"})
    config = config_env.load_app_config(store=store, environ={"AT_SERIAL_PORT": "/dev/pts/4"})
    assert config.at_config.connection_type == ConnectionType.SERIAL
    assert config.at_config.serial.port == "/dev/pts/4"


def test_load_app_config_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("AT_NETWORK_PORT", "unset")
    monkeypatch.delenv("AT_NETWORK_PORT")
    env_file = tmp_path / ".env"
    env_file.write_text("AT_NETWORK_PORT=9100\n")

    config = config_env.load_app_config(store=NullConfigStore(), env_file=str(env_file))

    assert config.at_config.network.port == 9100


def test_env_file_does_not_override_process_env(tmp_path, monkeypatch):
    monkeypatch.setenv("AT_NETWORK_PORT", "9200")
    env_file = tmp_path / ".env"
    env_file.write_text("AT_NETWORK_PORT=9100\n")

    config = config_env.load_app_config(store=NullConfigStore(), env_file=str(env_file))

    assert config.at_config.network.port == 9200


def test_cli_json_output(monkeypatch, capsys):
    for name in ("AT_CONNECTION_TYPE", "AT_NETWORK_HOST", "AT_SERIAL_PORT", "AT_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AT_NETWORK_PORT", "9000")
    monkeypatch.setenv("AT_SERIAL_BAUDRATE", "9600")

    assert cli_main(["--no-store", "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["at_config"]["connection_type"] == "NETWORK"
    assert data["at_config"]["network"]["port"] == 9000
    assert data["at_config"]["serial"]["baudrate"] == 9600
    assert data["notification_config"]["wechat_webhook"] is None
    assert data["websocket_port"] == 8765


def test_cli_summary_output(monkeypatch, capsys):
    for name in (
        "AT_NETWORK_HOST",
        "AT_NETWORK_PORT",
        "AT_SERIAL_PORT",
        "AT_SERIAL_BAUDRATE",
        "AT_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AT_CONNECTION_TYPE", "SERIAL")

    assert cli_main(["--no-store"]) == 0

    out = capsys.readouterr().out
    assert "Connection: SERIAL" in out
    assert "WeChat:     disabled" in out


def test_explicit_environ_ignores_env_file(tmp_path, monkeypatch):
    monkeypatch.setenv("AT_LOG_FILE", "unset")
    monkeypatch.delenv("AT_LOG_FILE")
    env_file = tmp_path / ".env"
    env_file.write_text("AT_LOG_FILE=/tmp/from-dotenv.log\nAT_NETWORK_PORT=9100\n")

    config = config_env.load_app_config(
        store=NullConfigStore(), environ={"AT_NETWORK_PORT": "9300"}, env_file=str(env_file)
    )

    assert config.at_config.network.port == 9300
    assert config.notification_config.log_file == "/var/log/at-notifications.log"
    assert "AT_LOG_FILE" not in config_env.os.environ
