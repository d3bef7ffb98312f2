"""
Bill validators. Extend by implementing EntityValidator and registering.
"""

import logging
from typing import Any

from billing.validation.base import EntityValidator
from billing.validation.bill_validator import BillValidator
from billing.validation.errors import BillingValidationError, Errors, FieldError
from billing.validation.line_item_validator import LineItemValidator

logger = logging.getLogger(__name__)

_line_item_validator = LineItemValidator()

VALIDATOR_REGISTRY = {
    "bill": BillValidator(line_item_validator=_line_item_validator),
    "billLineItem": _line_item_validator,
}


def get_validator(entity_type: str) -> EntityValidator | None:
    """Return validator for entity type tag (e.g. 'bill', 'billLineItem')."""
    return VALIDATOR_REGISTRY.get(entity_type)


def register_validator(entity_type: str, validator: EntityValidator) -> None:
    """Register a validator for an entity type tag, replacing any existing one."""
    VALIDATOR_REGISTRY[entity_type] = validator


def validator_for(target: Any) -> EntityValidator:
    """Return the first registered validator supporting target's class."""
    for validator in VALIDATOR_REGISTRY.values():
        if validator.supports(type(target)):
            return validator
    raise LookupError(f"No validator registered for {type(target).__name__}")


def validate_bill(bill) -> Errors:
    """Validate a bill and its non-voided line items; empty result means it may be saved."""
    return VALIDATOR_REGISTRY["bill"].validate(bill)


def validate_line_item(line_item) -> Errors:
    """Validate a line item saved on its own, outside its bill."""
    return VALIDATOR_REGISTRY["billLineItem"].validate(line_item)


def validate_or_raise(target: Any) -> None:
    """
    Save-pipeline hook: validate target with its registered validator and
    raise BillingValidationError carrying every error when any is found.
    """
    if target is None:
        raise ValueError("Cannot validate a null object")
    errors = validator_for(target).validate(target)
    if errors.has_errors():
        logger.info(
            "%s rejected with %d validation error(s): %s",
            type(target).__name__,
            errors.error_count,
            ", ".join(errors.codes()),
        )
        raise BillingValidationError(errors)


__all__ = [
    "EntityValidator",
    "BillValidator",
    "LineItemValidator",
    "Errors",
    "FieldError",
    "BillingValidationError",
    "VALIDATOR_REGISTRY",
    "get_validator",
    "register_validator",
    "validator_for",
    "validate_bill",
    "validate_line_item",
    "validate_or_raise",
]
