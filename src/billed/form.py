"""
New bill form surface: the fixed fields the view renders, addressed by their stable handles.
Rendering itself lives in the UI shell; the container only reads and resets values.
"""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

FORM_HANDLE = "form-new-bill"

EXPENSE_TYPE = "expense-type"
EXPENSE_NAME = "expense-name"
AMOUNT = "amount"
DATE = "datepicker"
VAT = "vat"
PCT = "pct"
COMMENTARY = "commentary"
FILE = "file"

TEXT_FIELDS = (EXPENSE_TYPE, EXPENSE_NAME, AMOUNT, DATE, VAT, PCT, COMMENTARY)

# Options of the expense type select, first one selected by default
EXPENSE_TYPES = (
    "Transports",
    "Restaurants et bars",
    "Hôtel et logement",
    "Services en ligne",
    "IT et électronique",
    "Equipement et matériel",
    "Fournitures de bureau",
)


@dataclass
class SelectedFile:
    """A file picked in the file input."""

    name: str
    content: bytes = b""
    content_type: Optional[str] = None

    @classmethod
    def from_path(cls, path: str) -> "SelectedFile":
        with open(path, "rb") as f:
            content = f.read()
        content_type, _ = mimetypes.guess_type(path)
        return cls(name=os.path.basename(path), content=content, content_type=content_type)


@dataclass
class FormField:
    handle: str
    value: str = ""


@dataclass
class FileInput:
    handle: str = FILE
    value: str = ""  # path shown by the input, e.g. C:\fakepath\receipt.jpg
    files: List[SelectedFile] = field(default_factory=list)

    def select(self, file: SelectedFile, value: Optional[str] = None) -> None:
        self.files = [file]
        self.value = value if value is not None else f"C:\\fakepath\\{file.name}"


class NewBillForm:
    handle = FORM_HANDLE

    def __init__(self) -> None:
        self.fields: Dict[str, FormField] = {h: FormField(h) for h in TEXT_FIELDS}
        self.fields[EXPENSE_TYPE].value = EXPENSE_TYPES[0]
        self.file = FileInput()

    def field(self, handle: str) -> Union[FormField, FileInput]:
        if handle == FILE:
            return self.file
        try:
            return self.fields[handle]
        except KeyError:
            raise KeyError(f"No field with handle {handle!r} in {FORM_HANDLE}") from None

    def value(self, handle: str) -> str:
        return self.field(handle).value

    def fill(self, values: Dict[str, str]) -> None:
        for handle, value in values.items():
            self.field(handle).value = "" if value is None else str(value)
