"""Bill persistence over the store: the attachment upload that opens a bill, and the update that fills it."""

import logging

from pydantic import ValidationError

from billed.errors import StoreError
from billed.form import SelectedFile
from billed.store.base import Store
from entity.bill import AttachmentReceipt, BillRecord

logger = logging.getLogger(__name__)


class BillGateway:
    """
    create_attachment returns the receipt (fileUrl, key) that correlates the uploaded file with
    the bill the store opened for it; update_bill addresses that bill by key.
    One store call per method call, no retries.
    """

    def __init__(self, store: Store):
        self.store = store

    async def create_attachment(self, file: SelectedFile, email: str) -> AttachmentReceipt:
        result = await self.store.bills().create(
            data={"email": email},
            files={"file": (file.name, file.content, file.content_type)},
        )
        try:
            receipt = AttachmentReceipt.model_validate(result)
        except ValidationError as e:
            raise StoreError(f"Malformed create response: {result!r}") from e
        logger.info("Uploaded %s as bill %s", file.name, receipt.key)
        return receipt

    async def update_bill(self, record: BillRecord, selector: str) -> None:
        await self.store.bills().update(data=record.to_json(), selector=selector)
        logger.info("Updated bill %s", selector)
