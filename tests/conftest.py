"""Pytest fixtures and configuration. Run from project root with: PYTHONPATH=src pytest tests/ -v"""

import json
import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Ensure src is on path so imports like billed.*, commons.*, entity.* work
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC = PROJECT_ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Optional: set working directory so relative paths in config resolve
os.chdir(PROJECT_ROOT)

from billed.container import NewBill  # noqa: E402
from billed.form import NewBillForm  # noqa: E402
from commons.storage import InMemorySessionStorage  # noqa: E402

EMPLOYEE_EMAIL = "test@employee.com"


@pytest.fixture
def storage():
    """Session of a signed-in employee."""
    return InMemorySessionStorage({"user": json.dumps({"email": EMPLOYEE_EMAIL, "type": "Employee"})})


@pytest.fixture
def bills():
    b = MagicMock()
    b.create = AsyncMock(return_value={"fileUrl": "https://test.file", "key": "1234"})
    b.update = AsyncMock(return_value=None)
    return b


@pytest.fixture
def store(bills):
    s = MagicMock()
    s.bills.return_value = bills
    return s


@pytest.fixture
def on_navigate():
    return MagicMock()


@pytest.fixture
def alert():
    return MagicMock()


@pytest.fixture
def form():
    return NewBillForm()


@pytest.fixture
def new_bill(form, on_navigate, store, storage, alert):
    return NewBill(form=form, on_navigate=on_navigate, store=store, storage=storage, alert=alert)
