"""
Remote store for bills. Extend by implementing Store / BillsResource.
"""

from billed.store.base import BillsResource, FileTuple, Store
from billed.store.api import Api, ApiEntity, ApiStore, get_api_store
from billed.store.memory import InMemoryBills, InMemoryStore

__all__ = [
    "BillsResource",
    "FileTuple",
    "Store",
    "Api",
    "ApiEntity",
    "ApiStore",
    "get_api_store",
    "InMemoryBills",
    "InMemoryStore",
]
