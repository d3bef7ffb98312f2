"""
Shared infrastructure for the billing validators.

Subpackages:
  config   - ConfigProvider, YamlConfigProvider; add host-provided config by implementing ConfigProvider

Public API: load_config, get_config, configure_logging.
"""

from commons.config import get_config, load_config
from commons.logging_setup import configure_logging

__all__ = [
    "get_config",
    "load_config",
    "configure_logging",
]
