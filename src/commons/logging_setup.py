"""Logging setup for hosts and scripts embedding the validators."""

import logging
from typing import Any, Dict, Optional

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None, cfg: Optional[Dict[str, Any]] = None) -> int:
    """
    Apply logging.basicConfig using the `logging` section of the config.
    An explicit level wins over the configured one. Returns the numeric level.
    """
    if cfg is None:
        from commons.config import load_config
        cfg = load_config()
    log_cfg = (cfg or {}).get("logging") or {}
    name = (level or log_cfg.get("level") or "INFO").upper()
    numeric = getattr(logging, name, None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(level=numeric, format=log_cfg.get("format") or DEFAULT_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(numeric)
    return numeric
