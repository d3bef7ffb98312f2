"""Field-scoped validation errors: FieldError records, the Errors collection, nested paths."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

# Stable codes the host resolves to localized messages
BILL_PATIENT_REQUIRED = "billing.bill.patientRequired"
BILL_CASHIER_REQUIRED = "billing.bill.cashierRequired"
BILL_CASH_POINT_REQUIRED = "billing.bill.cashPointRequired"
BILL_LINE_ITEMS_REQUIRED = "billing.bill.lineItemsRequired"
BILL_STATUS_INVALID = "billing.bill.statusInvalid"
BILL_PAYMENT_INSUFFICIENT = "billing.bill.paymentInsufficient"
BILL_RECEIPT_NUMBER_TOO_LONG = "billing.bill.receiptNumberTooLong"

LINE_ITEM_ITEM_OR_SERVICE_REQUIRED = "billing.billLineItem.itemOrServiceRequired"
LINE_ITEM_QUANTITY_INVALID = "billing.billLineItem.quantityInvalid"
LINE_ITEM_PRICE_INVALID = "billing.billLineItem.priceInvalid"
LINE_ITEM_PAYMENT_STATUS_INVALID = "billing.billLineItem.paymentStatusInvalid"
LINE_ITEM_FIELD_TOO_LONG = "billing.billLineItem.fieldTooLong"


@dataclass(frozen=True)
class FieldError:
    """One rejected value: full field path, stable code, message args."""

    field: str
    code: str
    args: Tuple[Any, ...] = ()
    default_message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "code": self.code,
            "args": list(self.args),
            "default_message": self.default_message,
        }


@dataclass
class Errors:
    """
    Accumulates FieldErrors for one validation pass.

    Fields rejected while a nested path is active are recorded under that
    path, e.g. rejecting "quantity" inside nested("lineItems[1]")
    records "lineItems[1].quantity".
    """

    object_name: str = ""
    field_errors: List[FieldError] = field(default_factory=list)
    _path_stack: List[str] = field(default_factory=list, repr=False, compare=False)

    @property
    def nested_path(self) -> str:
        return ".".join(self._path_stack)

    def push_nested_path(self, path: str) -> None:
        self._path_stack.append(path)

    def pop_nested_path(self) -> None:
        if not self._path_stack:
            raise IndexError("Cannot pop nested path: no nested path on stack")
        self._path_stack.pop()

    @contextmanager
    def nested(self, path: str) -> Iterator["Errors"]:
        """Scope rejections under path; the previous path is restored on exit."""
        self.push_nested_path(path)
        try:
            yield self
        finally:
            self.pop_nested_path()

    def full_field(self, field_name: str) -> str:
        prefix = self.nested_path
        if not prefix:
            return field_name
        return f"{prefix}.{field_name}" if field_name else prefix

    def reject_value(
        self,
        field_name: str,
        code: str,
        args: Tuple[Any, ...] = (),
        default_message: Optional[str] = None,
    ) -> FieldError:
        error = FieldError(self.full_field(field_name), code, tuple(args), default_message)
        self.field_errors.append(error)
        return error

    def has_errors(self) -> bool:
        return bool(self.field_errors)

    @property
    def error_count(self) -> int:
        return len(self.field_errors)

    def get_field_errors(self, field_name: str) -> List[FieldError]:
        """Errors recorded on field_name, resolved against the current nested path."""
        target = self.full_field(field_name)
        return [e for e in self.field_errors if e.field == target]

    def get_field_error(self, field_name: str) -> Optional[FieldError]:
        found = self.get_field_errors(field_name)
        return found[0] if found else None

    def codes(self) -> List[str]:
        return [e.code for e in self.field_errors]

    def to_list(self) -> List[Dict[str, Any]]:
        """JSON-friendly rendering for API responses."""
        return [e.to_dict() for e in self.field_errors]

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.field_errors)

    def __len__(self) -> int:
        return len(self.field_errors)


class BillingValidationError(Exception):
    """Raised by validate_or_raise when a target fails validation."""

    def __init__(self, errors: Errors):
        self.errors = errors
        messages = [e.default_message or f"{e.field}: {e.code}" for e in errors]
        name = errors.object_name or "object"
        super().__init__(f"Validation failed for {name}: " + "; ".join(messages))
