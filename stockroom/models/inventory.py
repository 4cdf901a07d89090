from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Brand(str, Enum):
    GILDAN = "Gildan"
    BELLA_CANVAS = "Bella+Canvas"
    HANES = "Hanes"
    NIKE = "Nike"


class SizeCategory(str, Enum):
    ADULT = "adult"
    YOUTH = "youth"


class StockAction(str, Enum):
    ADD = "add"
    REMOVE = "remove"


ADULT_SIZES = ["XS", "S", "M", "L", "XL", "2XL", "3XL", "4XL", "5XL"]
# Youth sizes are stored bare; the "Y" prefix only exists on screen
YOUTH_SIZES = ["XS", "S", "M", "L", "XL"]

SIZES_BY_CATEGORY: Dict[str, List[str]] = {
    SizeCategory.ADULT.value: ADULT_SIZES,
    SizeCategory.YOUTH.value: YOUTH_SIZES,
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SizeEntry(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    size: str = Field(..., description="Size label, without any youth prefix.")
    quantity: int = Field(0, ge=0, description="Units in stock for this size.")
    category: SizeCategory = Field(..., description="Sizing line the label belongs to.")

    @model_validator(mode="after")
    def check_size_for_category(self) -> "SizeEntry":
        if self.size not in SIZES_BY_CATEGORY[self.category]:
            raise ValueError(f"{self.size} is not a valid {self.category} size.")
        return self


class InventoryRecord(BaseModel):
    """Stock held for a single brand."""

    model_config = ConfigDict(
        use_enum_values=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    brand: Brand
    sizes: List[SizeEntry] = Field(default_factory=list)
    total_quantity: int = Field(0, ge=0)
    last_updated: datetime = Field(default_factory=utcnow)
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def adult_sizes(self) -> List[SizeEntry]:
        return [entry for entry in self.sizes if entry.category == SizeCategory.ADULT.value]

    @property
    def youth_sizes(self) -> List[SizeEntry]:
        return [entry for entry in self.sizes if entry.category == SizeCategory.YOUTH.value]

    def find_entry(self, size: str, category: str) -> Optional[SizeEntry]:
        for entry in self.sizes:
            if entry.size == size and entry.category == category:
                return entry
        return None

    def to_document(self) -> Dict[str, Any]:
        """Firestore document body; the brand doubles as the document id."""
        return self.model_dump(by_alias=True)

    def to_response(self) -> Dict[str, Any]:
        data = self.model_dump(mode="json", by_alias=True)
        data["id"] = self.brand
        data["adultSizes"] = [entry.model_dump(mode="json") for entry in self.adult_sizes]
        data["youthSizes"] = [entry.model_dump(mode="json") for entry in self.youth_sizes]
        return data


def reconcile(record: InventoryRecord, now: Optional[datetime] = None) -> InventoryRecord:
    """
    Recompute the derived fields of ``record`` in place.

    Must run right before every write: ``total_quantity`` becomes the sum of
    all size entries and ``last_updated`` is stamped with ``now``.
    """
    record.total_quantity = sum(entry.quantity for entry in record.sizes)
    record.last_updated = now or utcnow()
    return record


class StockUpdateRequest(BaseModel):
    """
    Body of ``POST /stock``.

    Every field is optional here so that absent values reach the presence
    check and come back as a 400 rather than FastAPI's 422.
    """

    brand: Optional[str] = None
    size: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = None
    action: Optional[str] = None


class StockChange(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    brand: Brand
    size: str
    category: SizeCategory
    quantity: int = Field(..., gt=0)
    action: StockAction


class SummaryRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    brand: str = Field(..., alias="_id")
    total_quantity: int = Field(0, alias="totalQuantity")
    item_count: int = Field(0, alias="itemCount")
