"""Extendible config loading. Add new providers (env, host settings) by implementing ConfigProvider."""

import logging

from commons.config.loader import ConfigProvider, YamlConfigProvider, get_config

logger = logging.getLogger(__name__)

_config_instance = None


def load_config(path=None):
    """
    Load config once; optional path for tests or overrides.
    A missing default file yields {} so built-in defaults apply; a missing explicit path raises.
    """
    global _config_instance
    if _config_instance is None:
        provider = YamlConfigProvider(path=path)
        try:
            _config_instance = provider.load()
        except FileNotFoundError:
            if path is not None:
                raise
            logger.warning("Config file %s not found; using built-in defaults", provider.path)
            _config_instance = {}
    return _config_instance


config = load_config()

__all__ = ["ConfigProvider", "YamlConfigProvider", "get_config", "load_config", "config"]
