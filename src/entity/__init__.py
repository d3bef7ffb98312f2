"""Billing entities read by the validators: bill, line item, payment, status."""

from entity.bill import Bill, BillLineItem, BillStatus, Payment

__all__ = ["Bill", "BillLineItem", "BillStatus", "Payment"]
