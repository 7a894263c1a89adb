#!/usr/bin/env python3
"""
Create a new expense bill from the command line: upload the receipt, then submit the form.

Runs the same NewBill container as the UI, against the backend API configured under
store in src/config/config.yaml (or $BILLED_API_URL), or against an in-memory store.

Usage:
    python scripts/new_bill.py --file receipt.jpg --name Taxi --amount 20 --date 2024-08-06
    python scripts/new_bill.py --file receipt.png --type "Restaurants et bars" --name Lunch \
        --amount 35 --date 2024-08-07 --vat 7 --pct 10 --email me@company.tld --memory

Exit codes: 0 bill created, 1 attachment rejected or store/session error, 2 usage error.
"""

import argparse
import asyncio
import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from billed import form as f
from billed.container import NewBill
from billed.errors import NewBillError
from billed.events import FileSelectedEvent, SubmitEvent
from billed.store import InMemoryStore, get_api_store
from commons.config import config, section
from commons.constants import Constants as Co
from commons.logging_setup import setup_logging
from commons.storage import InMemorySessionStorage, JsonFileSessionStorage


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a new expense bill.")
    parser.add_argument("--file", required=True, help="Receipt image (.jpg, .jpeg or .png)")
    parser.add_argument("--type", default=f.EXPENSE_TYPES[0], choices=f.EXPENSE_TYPES, help="Expense type")
    parser.add_argument("--name", required=True, help="Expense name")
    parser.add_argument("--amount", required=True, help="Amount TTC, integer")
    parser.add_argument("--date", required=True, help="Date, YYYY-MM-DD")
    parser.add_argument("--vat", default="", help="VAT amount")
    parser.add_argument("--pct", default="", help="VAT percentage (default 20)")
    parser.add_argument("--commentary", default="")
    parser.add_argument(
        "--email",
        help="Sign in as this user for this run only; otherwise the session file from config is used",
    )
    parser.add_argument("--memory", action="store_true", help="Use an in-memory store instead of the API")
    return parser.parse_args(argv)


def _session_storage(args: argparse.Namespace):
    if args.email:
        return InMemorySessionStorage({"user": json.dumps({"email": args.email, "type": "Employee"})})
    path = section(config, Co.SESSION).get(Co.STORAGE_FILE) or ".billed_session.json"
    return JsonFileSessionStorage(path)


async def create_bill(args: argparse.Namespace) -> int:
    storage = _session_storage(args)
    store = InMemoryStore() if args.memory else get_api_store(storage)
    routes = []

    def alert(message: str) -> None:
        print(message, file=sys.stderr)

    form = f.NewBillForm()
    new_bill = NewBill(form=form, on_navigate=routes.append, store=store, storage=storage, alert=alert)

    form.file.select(f.SelectedFile.from_path(args.file))
    if not await new_bill.handle_change_file(FileSelectedEvent(target=form.file)):
        return 1

    form.fill(
        {
            f.EXPENSE_TYPE: args.type,
            f.EXPENSE_NAME: args.name,
            f.AMOUNT: args.amount,
            f.DATE: args.date,
            f.VAT: args.vat,
            f.PCT: args.pct,
            f.COMMENTARY: args.commentary,
        }
    )
    record = await new_bill.handle_submit(SubmitEvent(target=form))
    print(json.dumps({"route": routes[-1], "billId": new_bill.bill_id, "bill": record.to_payload()}, indent=2, ensure_ascii=False))
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    log_cfg = section(config, Co.LOGGING)
    setup_logging(level=log_cfg.get(Co.LEVEL) or "INFO", log_file=log_cfg.get(Co.LOG_FILE))
    try:
        return asyncio.run(create_bill(args))
    except (NewBillError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
