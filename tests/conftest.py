"""Pytest fixtures and configuration. Run from project root with: PYTHONPATH=src pytest tests/ -v"""

import os
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Ensure src is on path so imports like billing.*, commons.*, entity.* work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.chdir(PROJECT_ROOT)

from entity.bill import Bill, BillLineItem, BillStatus, Payment  # noqa: E402


@pytest.fixture
def make_line_item():
    """Factory for a line item that passes validation unless overridden."""

    def _make(**overrides):
        fields = {
            "item": object(),
            "quantity": 1,
            "price": Decimal("100"),
            "payment_status": BillStatus.PENDING,
        }
        fields.update(overrides)
        return BillLineItem(**fields)

    return _make


@pytest.fixture
def make_bill(make_line_item):
    """Factory for a PENDING bill with one valid line item unless overridden."""

    def _make(line_items=None, payments=None, **overrides):
        fields = {
            "patient": object(),
            "cashier": object(),
            "cash_point": object(),
            "status": BillStatus.PENDING,
            "receipt_number": "RN-001",
        }
        fields.update(overrides)
        bill = Bill(**fields)
        bill.line_items = [make_line_item()] if line_items is None else line_items
        bill.payments = [Payment(amount_tendered=Decimal(p)) for p in (payments or [])]
        return bill

    return _make
