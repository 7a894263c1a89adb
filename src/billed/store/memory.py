"""In-process store for demos, offline runs and tests. Data is lost when the process exits."""

import json
import uuid
from typing import Any, Dict, List, Mapping, Optional

from billed.errors import StoreError
from billed.store.base import FileTuple


class InMemoryBills:
    def __init__(self, bills: Dict[str, Dict[str, Any]], files: Dict[str, bytes]):
        self._bills = bills
        self._files = files

    async def create(
        self, data: Mapping[str, Any], files: Optional[Mapping[str, FileTuple]] = None
    ) -> Dict[str, Any]:
        key = uuid.uuid4().hex
        file_name = ""
        if files and "file" in files:
            file_name, content, _ = files["file"]
            self._files[key] = content
        file_url = f"memory://{key}/{file_name}"
        self._bills[key] = {
            "id": key,
            "email": data.get("email"),
            "fileUrl": file_url,
            "fileName": file_name,
        }
        return {"fileUrl": file_url, "key": key}

    async def update(self, data: str, selector: str) -> Dict[str, Any]:
        bill = self._get(selector)
        bill.update(json.loads(data))
        return dict(bill)

    async def select(self, selector: str) -> Dict[str, Any]:
        return dict(self._get(selector))

    async def list(self) -> List[Dict[str, Any]]:
        return [dict(b) for b in self._bills.values()]

    async def delete(self, selector: str) -> None:
        self._get(selector)
        del self._bills[selector]
        self._files.pop(selector, None)

    def _get(self, selector: str) -> Dict[str, Any]:
        bill = self._bills.get(selector)
        if bill is None:
            raise StoreError(f"Bill not found: {selector}", status_code=404)
        return bill


class InMemoryStore:
    def __init__(self) -> None:
        self.data: Dict[str, Dict[str, Any]] = {}
        self.files: Dict[str, bytes] = {}

    def bills(self) -> InMemoryBills:
        return InMemoryBills(self.data, self.files)
