"""
Reset the inventory collection to random starting stock for every brand.

Deletes ALL existing inventory documents first.

  FIREBASE_SERVICE_ACCOUNT_KEY_PATH=key.json python -m stockroom.scripts.seed_inventory
"""

from __future__ import annotations

import random
import sys
from typing import List, Optional

from google.auth.exceptions import GoogleAuthError

from stockroom.core.config import settings
from stockroom.core.exceptions import StorageError
from stockroom.core.logging_config import get_logger, setup_logging
from stockroom.models.inventory import ADULT_SIZES, YOUTH_SIZES, Brand, InventoryRecord, SizeEntry, reconcile
from stockroom.services.firebase_service import close_firebase_app, get_firestore_client, init_firebase_app
from stockroom.services.inventory_store import FirestoreInventoryStore

logger = get_logger(__name__)

MAX_ADULT_STOCK = 50
MAX_YOUTH_STOCK = 30


def build_seed_records(rng: Optional[random.Random] = None) -> List[InventoryRecord]:
    rng = rng or random.Random()
    records = []
    for brand in Brand:
        sizes = [
            SizeEntry(size=size, category="adult", quantity=rng.randrange(MAX_ADULT_STOCK))
            for size in ADULT_SIZES
        ]
        sizes += [
            SizeEntry(size=size, category="youth", quantity=rng.randrange(MAX_YOUTH_STOCK))
            for size in YOUTH_SIZES
        ]
        records.append(reconcile(InventoryRecord(brand=brand, sizes=sizes)))
    return records


def seed(store) -> List[InventoryRecord]:
    store.clear()
    records = build_seed_records()
    for record in records:
        store.save_record(record)
    return records


def main() -> int:
    setup_logging(service_name=f"{settings.service_name}-seed", level=settings.log_level)
    firebase_app = None
    try:
        firebase_app = init_firebase_app(settings)
        store = FirestoreInventoryStore(get_firestore_client(firebase_app), settings.inventory_collection)
        records = seed(store)
    except (StorageError, GoogleAuthError, OSError, ValueError):
        # Bad key path or malformed key file surface as OSError / ValueError
        logger.exception("Error seeding database")
        return 1
    finally:
        if firebase_app is not None:
            close_firebase_app(firebase_app)

    logger.info(f"Database seeded successfully with {len(records)} brands")
    return 0


if __name__ == "__main__":
    sys.exit(main())
