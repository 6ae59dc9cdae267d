"""Exceptions for goods receipt operations."""

from typing import TYPE_CHECKING

from ..core.exceptions import InvalidStateError, ValidationError

if TYPE_CHECKING:
    from .models import GoodsReceipt, GoodsReceiptLine


class ReceiptNotDraft(InvalidStateError):
    """Raised when trying to modify a receipt that is no longer a draft."""

    def __init__(self, receipt: "GoodsReceipt"):
        self.receipt = receipt
        self.status = receipt.status
        super().__init__(
            f"Receipt {receipt.id} is not a draft (status: {self.status}). "
            f"Only draft receipts can be modified.",
            field="receipt_id",
        )


class ReceiptLineNotDraft(InvalidStateError):
    """Raised when trying to change a line of a confirmed or cancelled receipt."""

    def __init__(self, receipt_line: "GoodsReceiptLine"):
        self.receipt_line = receipt_line
        self.receipt = receipt_line.receipt
        self.status = receipt_line.receipt.status
        super().__init__(
            f"Cannot change receipt line {receipt_line.id}: "
            f"receipt {self.receipt.id} is {self.status}. "
            f"Only lines of draft receipts can be changed.",
            field="line_id",
        )


class ConfirmedReceiptDeletion(InvalidStateError):
    def __init__(self, receipt: "GoodsReceipt"):
        self.receipt = receipt
        super().__init__(
            f"Cannot delete receipt {receipt.id}: confirmed receipts are part of "
            f"the stock history.",
            field="receipt_id",
        )


class EmptyReceipt(ValidationError):
    def __init__(self, receipt: "GoodsReceipt"):
        self.receipt = receipt
        super().__init__("Receipt must have at least one line", field="receipt_id")


class NonPositiveReceiptLine(ValidationError):
    def __init__(self, receipt: "GoodsReceipt", line_ids: list):
        self.receipt = receipt
        self.line_ids = line_ids
        super().__init__(
            "All receipt lines must have positive quantities", field="receipt_id"
        )
