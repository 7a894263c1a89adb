"""Errors raised by the new bill workflow. Invalid attachments are not errors: they alert and reset."""


class NewBillError(Exception):
    """Base class for new bill workflow failures."""


class StoreError(NewBillError):
    """The remote store rejected or failed a call (create, update, select...)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class AttachmentNotReadyError(NewBillError):
    """Submission attempted before the attachment upload resolved."""


class SessionClosedError(NewBillError):
    """The bill was already submitted; this session accepts no more changes."""


class InvalidAmountError(NewBillError):
    """The amount field does not hold a number."""

    def __init__(self, raw_value: str):
        super().__init__(f"Invalid amount: {raw_value!r}")
        self.raw_value = raw_value


class NotAuthenticatedError(NewBillError):
    """Session storage holds no signed-in user."""
