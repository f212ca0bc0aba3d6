"""
Error taxonomy for the receipt points service.
"""
from __future__ import annotations


class ReceiptError(Exception):
    """Base class for every error raised by this package."""


class DecodeError(ReceiptError):
    """The submitted request body is not a decodable receipt."""


class ParseError(ReceiptError, ValueError):
    """A purchase date or time string could not be parsed."""


class ReceiptNotFound(ReceiptError, LookupError):
    """No receipt is stored under the requested identifier."""

    def __init__(self, receipt_id: str):
        super().__init__(f"Receipt not found: {receipt_id}")
        self.receipt_id = receipt_id
