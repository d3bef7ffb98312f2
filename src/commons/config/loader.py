"""Config provider protocol and implementations. Extend by adding new providers."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Shipped as package data next to this module
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config.yaml"


class ConfigProvider:
    """Protocol for config sources. Implement to add env, host settings, etc."""

    def load(self) -> Dict[str, Any]:
        """Return the full config dict."""
        raise NotImplementedError


class YamlConfigProvider(ConfigProvider):
    """Load config from a YAML file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else DEFAULT_CONFIG_PATH

    def load(self) -> Dict[str, Any]:
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


def get_config(provider: Optional[ConfigProvider] = None) -> Dict[str, Any]:
    """Get config from the given provider, or default YAML."""
    if provider is None:
        provider = YamlConfigProvider()
    return provider.load()
