from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BILL_STATUS_PENDING = "pending"


class BillRecord(BaseModel):
    """A new expense bill as persisted by the store. Dumps with the store's camelCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    type: str
    name: str
    amount: int
    date: str  # YYYY-MM-DD from the date picker
    vat: str  # raw text, not coerced
    pct: int
    commentary: str = ""
    file_url: str = Field(alias="fileUrl")
    file_name: str = Field(alias="fileName")
    status: Literal["pending"] = BILL_STATUS_PENDING

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class AttachmentReceipt(BaseModel):
    """Store answer to an attachment upload: where the file lives and the new bill's key."""

    model_config = ConfigDict(populate_by_name=True)

    file_url: str = Field(alias="fileUrl")
    key: str
