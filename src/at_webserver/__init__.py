"""at-webserver - Layered runtime configuration for the AT command web server"""

__version__ = "1.0.0"
__description__ = "Layered runtime configuration for the AT command web server"

__all__ = ["Config", "ConnectionType", "load_app_config", "main", "__version__"]


def __getattr__(name: str):
    """Lazy import so ``import at_webserver`` does not load python-dotenv.

    The core model and resolver stay importable on their own.
    """
    if name == "Config":
        from .core.config_model import Config

        return Config
    if name == "ConnectionType":
        from .core.config_model import ConnectionType

        return ConnectionType
    if name == "load_app_config":
        from .adapters.config_env import load_app_config

        return load_app_config
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
