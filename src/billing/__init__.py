"""
Billing module core: validation of bills and bill line items before the host persists them.

Subpackages:
  validation  - BillValidator, LineItemValidator; register new entity validators via register_validator
"""

from billing.validation import (
    VALIDATOR_REGISTRY,
    BillingValidationError,
    Errors,
    FieldError,
    get_validator,
    register_validator,
    validate_bill,
    validate_line_item,
    validate_or_raise,
)

__all__ = [
    "BillingValidationError",
    "Errors",
    "FieldError",
    "VALIDATOR_REGISTRY",
    "get_validator",
    "register_validator",
    "validate_bill",
    "validate_line_item",
    "validate_or_raise",
]
