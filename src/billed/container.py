"""
NewBill container: the logic behind the "new bill" view.

The employee picks a receipt (handle_change_file), which is validated then uploaded; the
store answers with the file URL and the key of the bill it opened. Submitting the form
(handle_submit) builds the BillRecord from the form and the uploaded attachment and
writes it to that bill (update_bill), then navigates to the bill list.
"""

import logging
from typing import Callable, Optional

from billed import form as f
from billed._common import file_name_from_path, parse_int, resolve_pct
from billed.attachment import INVALID_ATTACHMENT_MESSAGE, AttachmentValidator, ExtensionAllowList
from billed.errors import AttachmentNotReadyError, InvalidAmountError, NotAuthenticatedError
from billed.events import FileSelectedEvent, SubmitEvent
from billed.gateway import BillGateway
from billed.logout import Logout
from billed.routes import ROUTES_PATH
from billed.state import ContainerState
from billed.store.base import Store
from commons.config import config, section
from commons.constants import Constants as Co
from commons.storage.base import SessionStorage
from entity.bill import BillRecord
from entity.user import User

logger = logging.getLogger(__name__)


def _default_pct_from_config() -> int:
    return int(section(config, Co.SUBMISSION).get(Co.DEFAULT_PCT) or 20)


def _user_key_from_config() -> str:
    return section(config, Co.SESSION).get(Co.USER_KEY) or "user"


class NewBill:
    def __init__(
        self,
        *,
        form: f.NewBillForm,
        on_navigate: Callable[[str], None],
        store: Store,
        storage: SessionStorage,
        alert: Callable[[str], None],
        validator: Optional[AttachmentValidator] = None,
        default_pct: Optional[int] = None,
    ):
        self.form = form
        self.on_navigate = on_navigate
        self.store = store
        self.storage = storage
        self.alert = alert
        self.validator = validator or ExtensionAllowList()
        self.default_pct = default_pct if default_pct is not None else _default_pct_from_config()
        self.user_key = _user_key_from_config()
        self.gateway = BillGateway(store)
        self.state = ContainerState()
        self.logout = Logout(storage=storage, on_navigate=on_navigate)

    @property
    def file_url(self) -> Optional[str]:
        return self.state.file_url

    @property
    def file_name(self) -> Optional[str]:
        return self.state.file_name

    @property
    def bill_id(self) -> Optional[str]:
        return self.state.bill_id

    def _current_email(self) -> str:
        user = User.from_session(self.storage, self.user_key)
        if user is None:
            raise NotAuthenticatedError(f"No signed-in user under {self.user_key!r} in session storage")
        return user.email

    async def handle_change_file(self, event: FileSelectedEvent) -> bool:
        """
        Validate the picked file and upload it. Returns False when the file was rejected
        (the user is alerted and the input cleared), True once the upload resolved.
        Only the latest selection updates the attachment, and never once submission started.
        Store failures propagate.
        """
        file_input = event.target
        if not file_input.files:
            return False
        file = file_input.files[0]
        file_name = file_name_from_path(file_input.value) or file.name

        if not self.validator.is_valid(file_name):
            logger.warning("Rejected attachment %r", file_name)
            self.alert(INVALID_ATTACHMENT_MESSAGE)
            file_input.value = ""
            return False

        event.prevent_default()
        email = self._current_email()
        token = self.state.begin_upload()
        try:
            receipt = await self.gateway.create_attachment(file, email)
        except Exception:
            self.state.fail_upload(token)
            logger.error("Upload of %r failed", file_name)
            raise
        if not self.state.complete_upload(token, receipt.file_url, file_name, receipt.key):
            # superseded by a newer selection, or the bill was already submitted
            logger.info("Ignoring late upload of %r (bill %s)", file_name, receipt.key)
        return True

    def build_record(self, form: f.NewBillForm, email: str) -> BillRecord:
        attachment = self.state.require_ready()
        raw_amount = form.value(f.AMOUNT)
        amount = parse_int(raw_amount)
        if amount is None:
            raise InvalidAmountError(raw_amount)
        return BillRecord(
            email=email,
            type=form.value(f.EXPENSE_TYPE),
            name=form.value(f.EXPENSE_NAME),
            amount=amount,
            date=form.value(f.DATE),
            vat=form.value(f.VAT),
            pct=resolve_pct(form.value(f.PCT), self.default_pct),
            commentary=form.value(f.COMMENTARY),
            file_url=attachment.file_url,
            file_name=attachment.file_name,
        )

    async def handle_submit(self, event: SubmitEvent) -> BillRecord:
        """
        Build the bill from the form and the uploaded attachment, then persist it.
        Raises AttachmentNotReadyError if the upload has not resolved, InvalidAmountError
        on a non-numeric amount; neither touches the store.
        """
        event.prevent_default()
        email = self._current_email()
        record = self.build_record(event.target, email)

        self.state.begin_submit()
        try:
            await self.update_bill(record)
        except Exception:
            self.state.fail_submit()
            raise
        self.state.complete_submit()
        return record

    async def update_bill(self, record: BillRecord) -> None:
        """Write record to the bill opened by the upload, then go to the bill list."""
        if self.state.bill_id is None:
            raise AttachmentNotReadyError("No bill key yet; upload an attachment first")
        try:
            await self.gateway.update_bill(record, self.state.bill_id)
        except Exception:
            logger.error("Update of bill %s failed", self.state.bill_id)
            raise
        self.on_navigate(ROUTES_PATH["Bills"])
