from typing import List, Optional

import pydantic
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions
from google.cloud.firestore_v1.base_query import FieldFilter

from stockroom.core.exceptions import StorageError
from stockroom.core.logging_config import get_logger
from stockroom.models.inventory import InventoryRecord

logger = get_logger(__name__)

INVENTORY_COLLECTION = "inventory"

# Unreachable backend, rejected credentials, or a stored document that no
# longer decodes into an InventoryRecord
STORAGE_FAILURES = (
    google_exceptions.GoogleAPIError,
    google_auth_exceptions.GoogleAuthError,
    pydantic.ValidationError,
)


class FirestoreInventoryStore:
    """
    Inventory records kept in a Firestore collection, one document per brand.

    Writes always replace the whole document. There is no transaction around
    a read followed by a write, so two concurrent updates of the same brand
    can overwrite each other.
    """

    def __init__(self, client, collection: str = INVENTORY_COLLECTION):
        self.client = client
        self.collection_name = collection

    @property
    def collection(self):
        return self.client.collection(self.collection_name)

    def get_record(self, brand: str) -> Optional[InventoryRecord]:
        try:
            doc = self.collection.document(brand).get()
            if not doc.exists:
                return None
            return InventoryRecord.model_validate(doc.to_dict())
        except STORAGE_FAILURES as e:
            raise StorageError(f"Could not load inventory for {brand}") from e

    def save_record(self, record: InventoryRecord) -> None:
        try:
            self.collection.document(record.brand).set(record.to_document())
        except STORAGE_FAILURES as e:
            raise StorageError(f"Could not save inventory for {record.brand}") from e

    def list_records(self, brand: Optional[str] = None) -> List[InventoryRecord]:
        query = self.collection
        if brand:
            query = query.where(filter=FieldFilter("brand", "==", brand))
        try:
            return [InventoryRecord.model_validate(doc.to_dict()) for doc in query.stream()]
        except STORAGE_FAILURES as e:
            raise StorageError("Could not list inventory") from e

    def clear(self) -> int:
        """Delete every inventory document. Only the seeding script calls this."""
        deleted = 0
        try:
            batch = self.client.batch()
            for doc in self.collection.stream():
                batch.delete(doc.reference)
                deleted += 1
            batch.commit()
        except STORAGE_FAILURES as e:
            raise StorageError("Could not clear inventory") from e
        logger.info(f"Cleared {deleted} inventory documents")
        return deleted
