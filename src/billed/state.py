"""Per-session container state: which step of the new bill flow we are in, and the uploaded attachment."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from billed.errors import AttachmentNotReadyError, SessionClosedError


class SessionPhase(str, Enum):
    idle = "idle"
    uploading = "uploading"
    ready = "ready"
    submitting = "submitting"
    done = "done"


@dataclass(frozen=True)
class ReadyAttachment:
    file_url: str
    file_name: str
    bill_id: str


@dataclass
class ContainerState:
    """
    Lives as long as one visit of the new bill view.
    file_url, file_name and bill_id are written only when an upload resolves.
    """

    phase: SessionPhase = SessionPhase.idle
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    bill_id: Optional[str] = None
    _upload_token: int = field(default=0, repr=False)

    @property
    def is_ready(self) -> bool:
        return self.phase == SessionPhase.ready

    def begin_upload(self) -> int:
        """Start an upload; return its token. Only the latest token may resolve the upload."""
        if self.phase in (SessionPhase.submitting, SessionPhase.done):
            raise SessionClosedError(f"Cannot attach a file while {self.phase.value}")
        self._upload_token += 1
        self.phase = SessionPhase.uploading
        return self._upload_token

    def _is_current(self, token: int) -> bool:
        return token == self._upload_token and self.phase == SessionPhase.uploading

    def complete_upload(self, token: int, file_url: str, file_name: str, bill_id: str) -> bool:
        """Record the attachment. Returns False, changing nothing, for a superseded or late upload."""
        if not self._is_current(token):
            return False
        self.file_url = file_url
        self.file_name = file_name
        self.bill_id = bill_id
        self.phase = SessionPhase.ready
        return True

    def fail_upload(self, token: int) -> bool:
        if not self._is_current(token):
            return False
        # A previous attachment, if any, is still usable
        self.phase = SessionPhase.ready if self.bill_id is not None else SessionPhase.idle
        return True

    def require_ready(self) -> ReadyAttachment:
        if not self.is_ready:
            raise AttachmentNotReadyError(
                f"Attachment not ready (session is {self.phase.value}); wait for the upload before submitting"
            )
        return ReadyAttachment(file_url=self.file_url, file_name=self.file_name, bill_id=self.bill_id)

    def begin_submit(self) -> None:
        self.require_ready()
        self.phase = SessionPhase.submitting

    def complete_submit(self) -> None:
        self.phase = SessionPhase.done

    def fail_submit(self) -> None:
        self.phase = SessionPhase.ready
