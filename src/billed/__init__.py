"""
New bill workflow.

Modules:
  container   - NewBill: file selection, form submission, bill update
  attachment  - AttachmentValidator / ExtensionAllowList
  gateway     - BillGateway over the store
  store       - Store protocol, ApiStore (REST), InMemoryStore
  state       - ContainerState and SessionPhase
"""

from billed.attachment import INVALID_ATTACHMENT_MESSAGE, ExtensionAllowList, is_valid_attachment
from billed.container import NewBill
from billed.errors import (
    AttachmentNotReadyError,
    InvalidAmountError,
    NewBillError,
    NotAuthenticatedError,
    SessionClosedError,
    StoreError,
)
from billed.events import FileSelectedEvent, SubmitEvent
from billed.form import NewBillForm, SelectedFile
from billed.gateway import BillGateway
from billed.logout import Logout
from billed.routes import ROUTES_PATH
from billed.state import ContainerState, SessionPhase

__all__ = [
    "INVALID_ATTACHMENT_MESSAGE",
    "ExtensionAllowList",
    "is_valid_attachment",
    "NewBill",
    "NewBillError",
    "StoreError",
    "AttachmentNotReadyError",
    "InvalidAmountError",
    "NotAuthenticatedError",
    "SessionClosedError",
    "FileSelectedEvent",
    "SubmitEvent",
    "NewBillForm",
    "SelectedFile",
    "BillGateway",
    "Logout",
    "ROUTES_PATH",
    "ContainerState",
    "SessionPhase",
]
