"""Shared entities: bill record, upload receipt, session user."""

from entity.bill import BILL_STATUS_PENDING, AttachmentReceipt, BillRecord
from entity.user import User

__all__ = ["BILL_STATUS_PENDING", "AttachmentReceipt", "BillRecord", "User"]
