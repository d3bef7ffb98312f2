"""Bill validator: required references, line items, status, payment coverage, receipt number."""

import logging
from typing import Optional

from billing.validation._common import (
    BILL_KEY,
    describe,
    exceeds_length,
    get_validation_params,
)
from billing.validation.errors import (
    BILL_CASH_POINT_REQUIRED,
    BILL_CASHIER_REQUIRED,
    BILL_LINE_ITEMS_REQUIRED,
    BILL_PATIENT_REQUIRED,
    BILL_PAYMENT_INSUFFICIENT,
    BILL_RECEIPT_NUMBER_TOO_LONG,
    BILL_STATUS_INVALID,
    Errors,
)
from billing.validation.line_item_validator import LineItemValidator
from entity.bill import Bill, BillStatus

logger = logging.getLogger(__name__)


class BillValidator:
    """
    Validates a Bill and its non-voided line items.

    Line item errors are recorded under "lineItems[i].<field>", where i is
    the item's position in bill.line_items. All checks run even when earlier
    ones fail, so one pass reports every problem.
    """

    def __init__(
        self,
        line_item_validator: Optional[LineItemValidator] = None,
        max_receipt_number_length: Optional[int] = None,
        context: dict | None = None,
    ):
        params = get_validation_params(BILL_KEY, context)
        self.line_item_validator = line_item_validator or LineItemValidator(context=context)
        self.max_receipt_number_length = (
            max_receipt_number_length
            if max_receipt_number_length is not None
            else params["max_receipt_number_length"]
        )

    def supports(self, entity_type: type) -> bool:
        return isinstance(entity_type, type) and issubclass(entity_type, Bill)

    def validate(self, bill: Bill, errors: Optional[Errors] = None) -> Errors:
        if bill is None:
            logger.error("Bill object is null")
            raise ValueError("The Bill object should not be null")
        if errors is None:
            errors = Errors(object_name=BILL_KEY)
        before = errors.error_count

        self._validate_required_entities(bill, errors)
        self._validate_line_items_exist(bill, errors)
        self._validate_line_items(bill, errors)
        self._validate_status(bill, errors)
        self._validate_payment_coverage(bill, errors)
        self._validate_receipt_number(bill, errors)

        logger.debug("Validated bill: %s", describe(errors.error_count - before))
        return errors

    def _validate_required_entities(self, bill: Bill, errors: Errors) -> None:
        if bill.patient is None:
            errors.reject_value("patient", BILL_PATIENT_REQUIRED, default_message="Patient is required")
        if bill.cashier is None:
            errors.reject_value("cashier", BILL_CASHIER_REQUIRED, default_message="Cashier is required")
        if bill.cash_point is None:
            errors.reject_value("cashPoint", BILL_CASH_POINT_REQUIRED, default_message="Cash point is required")

    def _validate_line_items_exist(self, bill: Bill, errors: Errors) -> None:
        # Counts the raw list: a bill whose only line item is voided passes here
        if not bill.line_items:
            errors.reject_value(
                "lineItems",
                BILL_LINE_ITEMS_REQUIRED,
                default_message="Bill must contain at least one line item",
            )

    def _validate_line_items(self, bill: Bill, errors: Errors) -> None:
        for i, line_item in enumerate(bill.line_items or []):
            if line_item is None or line_item.voided:
                continue
            with errors.nested(f"lineItems[{i}]"):
                self.line_item_validator.validate(line_item, errors)

    def _validate_status(self, bill: Bill, errors: Errors) -> None:
        if bill.status is None:
            errors.reject_value("status", BILL_STATUS_INVALID, default_message="Invalid bill status")

    def _validate_payment_coverage(self, bill: Bill, errors: Errors) -> None:
        if bill.status != BillStatus.PAID:
            return
        total = bill.total
        total_payments = bill.total_payments
        if total is None or total_payments is None:
            logger.debug("Skipping payment coverage check: bill total or payments undetermined")
            return
        if total_payments < total:
            errors.reject_value(
                "payments",
                BILL_PAYMENT_INSUFFICIENT,
                args=(total_payments, total),
                default_message="Payment amount does not cover bill total",
            )

    def _validate_receipt_number(self, bill: Bill, errors: Errors) -> None:
        limit = self.max_receipt_number_length
        if exceeds_length(bill.receipt_number, limit):
            errors.reject_value(
                "receiptNumber",
                BILL_RECEIPT_NUMBER_TOO_LONG,
                args=("receiptNumber", limit),
                default_message=f"Receipt number exceeds maximum length of {limit} characters",
            )
