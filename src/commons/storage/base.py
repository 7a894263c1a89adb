"""Protocol for session storage. Implement to back the session with a browser bridge, keyring, etc."""

from typing import Protocol


class SessionStorage(Protocol):
    """Key/value string store holding the signed-in user's session (user JSON, jwt)."""

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...
