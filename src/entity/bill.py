"""Bill aggregate: bill, line items, payments. Owned by the host; validators only read them."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BillStatus(str, Enum):
    PENDING = "PENDING"
    POSTED = "POSTED"
    PAID = "PAID"
    ADJUSTED = "ADJUSTED"
    EXEMPTED = "EXEMPTED"
    CANCELLED = "CANCELLED"


class _HostEntity(BaseModel):
    # Hosts send camelCase, Python callers use snake_case; references are opaque objects
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)


class Payment(_HostEntity):
    amount_tendered: Optional[Decimal] = Field(default=None, alias="amountTendered")
    voided: bool = False


class BillLineItem(_HostEntity):
    """One billable entry: a catalog item and/or a billable service, priced per unit."""

    item: Optional[Any] = None
    billable_service: Optional[Any] = Field(default=None, alias="billableService")
    quantity: Optional[int] = None
    price: Optional[Decimal] = None
    payment_status: Optional[BillStatus] = Field(default=None, alias="paymentStatus")
    price_name: Optional[str] = Field(default=None, alias="priceName")
    voided: bool = False

    @property
    def total(self) -> Optional[Decimal]:
        """quantity x price, or None when either is missing."""
        if self.quantity is None or self.price is None:
            return None
        return self.price * self.quantity


class Bill(_HostEntity):
    patient: Optional[Any] = None
    cashier: Optional[Any] = None
    cash_point: Optional[Any] = Field(default=None, alias="cashPoint")
    status: Optional[BillStatus] = None
    line_items: Optional[List[Optional[BillLineItem]]] = Field(
        default_factory=list, alias="lineItems"
    )
    payments: Optional[List[Optional[Payment]]] = Field(default_factory=list)
    receipt_number: Optional[str] = Field(default=None, alias="receiptNumber")

    def add_line_item(self, line_item: BillLineItem) -> BillLineItem:
        if self.line_items is None:
            self.line_items = []
        self.line_items.append(line_item)
        return line_item

    def add_payment(self, payment: Payment) -> Payment:
        if self.payments is None:
            self.payments = []
        self.payments.append(payment)
        return payment

    @property
    def total(self) -> Optional[Decimal]:
        """
        Sum of quantity x price over non-voided line items.
        None when any counted line item is missing its quantity or price.
        """
        total = Decimal("0")
        for line_item in self.line_items or []:
            if line_item is None or line_item.voided:
                continue
            line_total = line_item.total
            if line_total is None:
                return None
            total += line_total
        return total

    @property
    def total_payments(self) -> Optional[Decimal]:
        """Sum of amount tendered over non-voided payments; None if any amount is missing."""
        total = Decimal("0")
        for payment in self.payments or []:
            if payment is None or payment.voided:
                continue
            if payment.amount_tendered is None:
                return None
            total += payment.amount_tendered
        return total
