"""Tests for billed.attachment."""

import pytest

from billed.attachment import DEFAULT_ALLOWED_EXTENSIONS, ExtensionAllowList, is_valid_attachment


@pytest.mark.parametrize("name", ["test.jpg", "scan.jpeg", "receipt.png", "PHOTO.JPG", "Ticket.Png", "a.b.jpeg", ".png"])
def test_accepts_image_extensions(name):
    assert is_valid_attachment(name) is True


@pytest.mark.parametrize("name", ["fake.exe", "invoice.pdf", "image.gif", "jpg", "png.txt", "receipt.png.exe", ""])
def test_rejects_other_names(name):
    assert is_valid_attachment(name) is False


def test_default_extensions():
    assert DEFAULT_ALLOWED_EXTENSIONS == (".jpg", ".jpeg", ".png")


def test_custom_allow_list_normalizes_extensions():
    v = ExtensionAllowList(["PDF", ".Gif "])
    assert v.is_valid("bill.pdf")
    assert v.is_valid("bill.GIF")
    assert not v.is_valid("bill.jpg")


def test_default_validator_uses_config_extensions():
    assert ExtensionAllowList().extensions == tuple(sorted(DEFAULT_ALLOWED_EXTENSIONS))


def test_suffix_check_has_no_dotfile_special_case():
    v = ExtensionAllowList([".png"])
    assert v.is_valid(".png")
    assert v.is_valid(" scan.PNG ")
    assert not v.is_valid("png")
