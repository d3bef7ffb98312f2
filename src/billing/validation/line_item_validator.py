"""Bill line item validator: item or service, quantity, price, payment status, field lengths."""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from billing.validation._common import (
    LINE_ITEM_KEY,
    describe,
    exceeds_length,
    get_validation_params,
)
from billing.validation.errors import (
    LINE_ITEM_FIELD_TOO_LONG,
    LINE_ITEM_ITEM_OR_SERVICE_REQUIRED,
    LINE_ITEM_PAYMENT_STATUS_INVALID,
    LINE_ITEM_PRICE_INVALID,
    LINE_ITEM_QUANTITY_INVALID,
    Errors,
)
from entity.bill import BillLineItem, BillStatus

logger = logging.getLogger(__name__)


class LineItemValidator:
    """
    Validates one BillLineItem in isolation. Every check runs; each failure
    is recorded separately on the line item's own field names.
    """

    def __init__(
        self,
        max_price_name_length: Optional[int] = None,
        allowed_payment_statuses: Optional[Iterable[BillStatus]] = None,
        context: dict | None = None,
    ):
        params = get_validation_params(LINE_ITEM_KEY, context)
        self.max_price_name_length = (
            max_price_name_length
            if max_price_name_length is not None
            else params["max_price_name_length"]
        )
        self.allowed_payment_statuses = frozenset(
            allowed_payment_statuses
            if allowed_payment_statuses is not None
            else params["allowed_payment_statuses"]
        )

    def supports(self, entity_type: type) -> bool:
        return isinstance(entity_type, type) and issubclass(entity_type, BillLineItem)

    def validate(self, line_item: BillLineItem, errors: Optional[Errors] = None) -> Errors:
        if line_item is None:
            logger.error("BillLineItem object is null")
            raise ValueError("The BillLineItem object should not be null")
        if errors is None:
            errors = Errors(object_name=LINE_ITEM_KEY)
        before = errors.error_count

        self._validate_item_or_service(line_item, errors)
        self._validate_quantity(line_item, errors)
        self._validate_price(line_item, errors)
        self._validate_payment_status(line_item, errors)
        self._validate_field_lengths(line_item, errors)

        logger.debug(
            "Validated line item at %r: %s",
            errors.nested_path or LINE_ITEM_KEY,
            describe(errors.error_count - before),
        )
        return errors

    def _validate_item_or_service(self, line_item: BillLineItem, errors: Errors) -> None:
        if line_item.item is None and line_item.billable_service is None:
            errors.reject_value(
                "item",
                LINE_ITEM_ITEM_OR_SERVICE_REQUIRED,
                default_message="BillLineItem must have either an item or a billable service",
            )

    def _validate_quantity(self, line_item: BillLineItem, errors: Errors) -> None:
        quantity = line_item.quantity
        if quantity is None or quantity <= 0:
            errors.reject_value(
                "quantity",
                LINE_ITEM_QUANTITY_INVALID,
                default_message="Quantity must be greater than 0",
            )

    def _validate_price(self, line_item: BillLineItem, errors: Errors) -> None:
        # Missing price is allowed here; zero is a valid price
        price = line_item.price
        if price is not None and price < Decimal("0"):
            errors.reject_value(
                "price",
                LINE_ITEM_PRICE_INVALID,
                default_message="Price cannot be negative",
            )

    def _validate_payment_status(self, line_item: BillLineItem, errors: Errors) -> None:
        status = line_item.payment_status
        if status is not None and status not in self.allowed_payment_statuses:
            allowed = " or ".join(s.value for s in sorted(self.allowed_payment_statuses, key=_status_order))
            errors.reject_value(
                "paymentStatus",
                LINE_ITEM_PAYMENT_STATUS_INVALID,
                default_message=f"Payment status must be either {allowed}",
            )

    def _validate_field_lengths(self, line_item: BillLineItem, errors: Errors) -> None:
        limit = self.max_price_name_length
        if exceeds_length(line_item.price_name, limit):
            errors.reject_value(
                "priceName",
                LINE_ITEM_FIELD_TOO_LONG,
                args=("priceName", limit),
                default_message=f"Field priceName exceeds maximum length of {limit} characters",
            )


def _status_order(status: BillStatus) -> int:
    return list(BillStatus).index(status)
