"""Attachment validation: an allow-list over the lower-cased file name suffix. Pure, no I/O."""

from typing import Iterable, Protocol

from commons.config import config, section
from commons.constants import Constants as Co

INVALID_ATTACHMENT_MESSAGE = "Seuls les fichiers jpg, jpeg ou png sont acceptés."

DEFAULT_ALLOWED_EXTENSIONS = (".jpg", ".jpeg", ".png")


def _allowed_extensions_from_config() -> tuple[str, ...]:
    lst = section(config, Co.ATTACHMENT).get(Co.ALLOWED_EXTENSIONS)
    if lst:
        return tuple(lst)
    return DEFAULT_ALLOWED_EXTENSIONS


class AttachmentValidator(Protocol):
    """Accept or reject a receipt file by its name."""

    def is_valid(self, file_name: str) -> bool:
        ...


class ExtensionAllowList:
    """
    Accepts file names whose suffix is in the allow-list, case-insensitive.
    Extensions may be given with or without the leading dot.
    """

    def __init__(self, extensions: Iterable[str] | None = None):
        raw = extensions if extensions is not None else _allowed_extensions_from_config()
        self.extensions = tuple(sorted({_normalize_extension(e) for e in raw}))

    def is_valid(self, file_name: str) -> bool:
        if not file_name:
            return False
        return file_name.strip().lower().endswith(self.extensions)


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


_default_validator = ExtensionAllowList(DEFAULT_ALLOWED_EXTENSIONS)


def is_valid_attachment(file_name: str) -> bool:
    """True for .jpg, .jpeg and .png file names, any case."""
    return _default_validator.is_valid(file_name)
