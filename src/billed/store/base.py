"""Protocols for the remote store. Implement these to plug in another backend."""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple

# (file name, content, content type), as httpx takes multipart files
FileTuple = Tuple[str, bytes, Optional[str]]


class BillsResource(Protocol):
    """Per-bill operations of the store."""

    async def create(
        self, data: Mapping[str, Any], files: Optional[Mapping[str, FileTuple]] = None
    ) -> Dict[str, Any]:
        """Upload an attachment; return {"fileUrl": ..., "key": ...} for the new bill."""
        ...

    async def update(self, data: str, selector: str) -> Any:
        """Replace the bill addressed by selector with the JSON document in data."""
        ...

    async def select(self, selector: str) -> Dict[str, Any]:
        ...

    async def list(self) -> List[Dict[str, Any]]:
        ...

    async def delete(self, selector: str) -> Any:
        ...


class Store(Protocol):
    def bills(self) -> BillsResource:
        ...
