"""Tests for billed.store.memory and the full workflow on top of it."""

import asyncio
import json

import pytest

from billed import form as f
from billed.container import NewBill
from billed.errors import StoreError
from billed.events import FileSelectedEvent, SubmitEvent
from billed.form import SelectedFile
from billed.store.memory import InMemoryStore


def test_create_then_update_merges_bill():
    store = InMemoryStore()
    created = asyncio.run(
        store.bills().create(data={"email": "a@b.c"}, files={"file": ("r.png", b"png", "image/png")})
    )
    key = created["key"]
    assert created["fileUrl"] == f"memory://{key}/r.png"
    assert store.files[key] == b"png"

    updated = asyncio.run(store.bills().update(data=json.dumps({"name": "Taxi", "status": "pending"}), selector=key))
    assert updated["name"] == "Taxi"
    assert updated["email"] == "a@b.c"
    assert asyncio.run(store.bills().select(key))["status"] == "pending"
    assert len(asyncio.run(store.bills().list())) == 1


def test_unknown_selector_raises_404():
    store = InMemoryStore()
    with pytest.raises(StoreError) as exc:
        asyncio.run(store.bills().update(data="{}", selector="missing"))
    assert exc.value.status_code == 404


def test_delete_removes_bill_and_file():
    store = InMemoryStore()
    key = asyncio.run(store.bills().create(data={}, files={"file": ("r.jpg", b"x", None)}))["key"]
    asyncio.run(store.bills().delete(key))
    assert store.data == {}
    assert store.files == {}


def test_end_to_end_new_bill(storage, on_navigate, alert):
    store = InMemoryStore()
    form = f.NewBillForm()
    new_bill = NewBill(form=form, on_navigate=on_navigate, store=store, storage=storage, alert=alert)

    form.file.select(SelectedFile(name="test.jpg", content=b"image", content_type="image/jpeg"))
    assert asyncio.run(new_bill.handle_change_file(FileSelectedEvent(target=form.file)))

    form.fill(
        {
            f.EXPENSE_TYPE: "Transports",
            f.EXPENSE_NAME: "Taxi",
            f.AMOUNT: "20",
            f.DATE: "2024-08-06",
            f.VAT: "10",
            f.PCT: "30",
            f.COMMENTARY: "Test commentaire",
        }
    )
    asyncio.run(new_bill.handle_submit(SubmitEvent(target=form)))

    stored = store.data[new_bill.bill_id]
    assert stored["amount"] == 20
    assert stored["pct"] == 30
    assert stored["fileName"] == "test.jpg"
    assert stored["fileUrl"] == new_bill.file_url
    assert stored["status"] == "pending"
    on_navigate.assert_called_once_with("#employee/bills")
    alert.assert_not_called()
