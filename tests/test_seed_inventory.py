import random
from unittest.mock import MagicMock

from stockroom.core.exceptions import StorageError
from stockroom.scripts import seed_inventory
from stockroom.scripts.seed_inventory import MAX_ADULT_STOCK, MAX_YOUTH_STOCK, build_seed_records, seed


def test_seed_records_cover_every_brand_and_size():
    records = build_seed_records(random.Random(7))

    assert [record.brand for record in records] == ["Gildan", "Bella+Canvas", "Hanes", "Nike"]
    for record in records:
        assert len(record.adult_sizes) == 9
        assert len(record.youth_sizes) == 5
        assert all(0 <= entry.quantity < MAX_ADULT_STOCK for entry in record.adult_sizes)
        assert all(0 <= entry.quantity < MAX_YOUTH_STOCK for entry in record.youth_sizes)
        assert not any(entry.size.startswith("Y") for entry in record.youth_sizes)
        assert record.total_quantity == sum(entry.quantity for entry in record.sizes)


def test_seed_replaces_existing_stock(store):
    store.documents["Nike"] = {"brand": "Nike", "sizes": [], "totalQuantity": 0}

    records = seed(store)

    assert len(records) == 4
    assert sorted(store.documents) == ["Bella+Canvas", "Gildan", "Hanes", "Nike"]
    assert store.get_record("Nike").total_quantity == records[3].total_quantity


def test_main_reports_bad_key_path(monkeypatch):
    closed = []

    def missing_key(settings):
        raise FileNotFoundError("serviceAccountKey.json")

    monkeypatch.setattr(seed_inventory, "init_firebase_app", missing_key)
    monkeypatch.setattr(seed_inventory, "close_firebase_app", closed.append)

    assert seed_inventory.main() == 1
    assert closed == []


def test_main_closes_app_when_storage_fails(monkeypatch):
    closed = []
    firebase_app = object()

    def failing_seed(store):
        raise StorageError("backend unavailable")

    monkeypatch.setattr(seed_inventory, "init_firebase_app", lambda settings: firebase_app)
    monkeypatch.setattr(seed_inventory, "get_firestore_client", lambda app: MagicMock())
    monkeypatch.setattr(seed_inventory, "seed", failing_seed)
    monkeypatch.setattr(seed_inventory, "close_firebase_app", closed.append)

    assert seed_inventory.main() == 1
    assert closed == [firebase_app]
