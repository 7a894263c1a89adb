from typing import Callable, Optional

from billed.routes import ROUTES_PATH
from commons.storage.base import SessionStorage


class Logout:
    """Disconnect: drop the whole session and go back to the login page."""

    def __init__(self, *, storage: SessionStorage, on_navigate: Callable[[str], None]):
        self.storage = storage
        self.on_navigate = on_navigate

    def handle_click(self, event: Optional[object] = None) -> None:
        self.storage.clear()
        self.on_navigate(ROUTES_PATH["Login"])
