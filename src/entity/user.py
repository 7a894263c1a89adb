"""Signed-in user, as kept in session storage under the "user" key."""

from __future__ import annotations

import json
from typing import Optional

from pydantic import BaseModel, ValidationError

from commons.storage.base import SessionStorage


class User(BaseModel):
    email: str
    type: Optional[str] = None  # "Employee" | "Admin"
    status: Optional[str] = None

    @classmethod
    def from_session(cls, storage: SessionStorage, key: str = "user") -> Optional["User"]:
        """Return the stored user, or None when the key is missing or does not hold a user object."""
        raw = storage.get_item(key)
        if not raw:
            return None
        try:
            return cls.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError):
            return None
