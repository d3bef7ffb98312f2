"""Shared validation helpers: config resolution, length and presence checks."""

from __future__ import annotations

from typing import Any, Dict, Optional

from entity.bill import BillStatus

# Column sizes in the host schema; config may override
DEFAULT_MAX_RECEIPT_NUMBER_LENGTH = 256
DEFAULT_MAX_PRICE_NAME_LENGTH = 255
DEFAULT_ALLOWED_PAYMENT_STATUSES = (BillStatus.PENDING, BillStatus.PAID)

BILL_KEY = "bill"
LINE_ITEM_KEY = "billLineItem"


def get_config_for_validation(context: dict | None) -> dict:
    """Load config from context or commons. Returns merged config dict."""
    ctx = context or {}
    cfg = ctx.get("config")
    if cfg is None:
        from commons.config import load_config
        cfg = load_config()
    return cfg or {}


def _int_param(value: Any, default: int, name: str) -> int:
    if value is None:
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"validation.{name} must be an integer, got {value!r}") from None
    if limit < 0:
        raise ValueError(f"validation.{name} must not be negative, got {limit}")
    return limit


def _statuses_param(value: Any) -> tuple:
    if value is None:
        return DEFAULT_ALLOWED_PAYMENT_STATUSES
    try:
        return tuple(BillStatus(str(s).upper()) for s in value)
    except ValueError as e:
        raise ValueError(f"validation.allowed_payment_statuses: {e}") from e


def get_validation_params(entity_key: str, context: dict | None = None) -> dict:
    """
    Resolve validation parameters for one entity type from config.
    entity_key: 'bill' or 'billLineItem'. context may carry {"config": {...}}.
    """
    cfg = get_config_for_validation(context)
    val = cfg.get("validation") or {}
    entity_val = val.get(entity_key) or {}

    if entity_key == BILL_KEY:
        return {
            "max_receipt_number_length": _int_param(
                entity_val.get("max_receipt_number_length"),
                DEFAULT_MAX_RECEIPT_NUMBER_LENGTH,
                "max_receipt_number_length",
            ),
        }
    if entity_key == LINE_ITEM_KEY:
        return {
            "max_price_name_length": _int_param(
                entity_val.get("max_price_name_length"),
                DEFAULT_MAX_PRICE_NAME_LENGTH,
                "max_price_name_length",
            ),
            "allowed_payment_statuses": _statuses_param(
                entity_val.get("allowed_payment_statuses")
            ),
        }
    raise KeyError(f"No validation parameters for entity type: {entity_key}")


def exceeds_length(value: Optional[str], limit: int) -> bool:
    """True if value is a non-empty string longer than limit."""
    return bool(value) and len(value) > limit


def describe(errors_count: int) -> str:
    return "valid" if errors_count == 0 else f"{errors_count} error(s)"
