import copy
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from stockroom.core.dependencies import get_inventory_store
from stockroom.core.exceptions import StorageError
from stockroom.main import app
from stockroom.models.inventory import InventoryRecord


class InMemoryInventoryStore:
    """Keeps whole documents, like Firestore, so callers never share objects with it."""

    def __init__(self):
        self.documents: Dict[str, dict] = {}
        self.reads = 0
        self.writes = 0

    def get_record(self, brand: str) -> Optional[InventoryRecord]:
        self.reads += 1
        document = self.documents.get(brand)
        if document is None:
            return None
        return InventoryRecord.model_validate(copy.deepcopy(document))

    def save_record(self, record: InventoryRecord) -> None:
        self.writes += 1
        self.documents[record.brand] = copy.deepcopy(record.to_document())

    def list_records(self, brand: Optional[str] = None) -> List[InventoryRecord]:
        self.reads += 1
        return [
            InventoryRecord.model_validate(copy.deepcopy(document))
            for document in self.documents.values()
            if not brand or document["brand"] == brand
        ]

    def clear(self) -> int:
        deleted = len(self.documents)
        self.documents.clear()
        return deleted


class FailingInventoryStore:
    def get_record(self, brand):
        raise StorageError("backend unavailable")

    def save_record(self, record):
        raise StorageError("backend unavailable")

    def list_records(self, brand=None):
        raise StorageError("backend unavailable")


@pytest.fixture
def store():
    return InMemoryInventoryStore()


@pytest.fixture
def client(store):
    app.dependency_overrides[get_inventory_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    app.dependency_overrides[get_inventory_store] = lambda: FailingInventoryStore()
    yield TestClient(app)
    app.dependency_overrides.clear()
