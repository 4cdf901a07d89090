from typing import Dict, List, Optional

from stockroom.core.exceptions import ValidationError
from stockroom.core.logging_config import get_logger
from stockroom.models.inventory import (
    SIZES_BY_CATEGORY,
    Brand,
    InventoryRecord,
    SizeCategory,
    SizeEntry,
    StockAction,
    StockChange,
    StockUpdateRequest,
    SummaryRow,
    reconcile,
)

logger = get_logger(__name__)

BRAND_VALUES = [brand.value for brand in Brand]
CATEGORY_VALUES = [category.value for category in SizeCategory]
ACTION_VALUES = [action.value for action in StockAction]


def validate_stock_update(request: StockUpdateRequest) -> StockChange:
    """Check a raw update request before anything touches storage."""
    if not (request.brand and request.size and request.category and request.quantity and request.action):
        raise ValidationError("Missing required fields")

    if request.brand not in BRAND_VALUES:
        raise ValidationError(f"Unknown brand: {request.brand}")
    if request.category not in CATEGORY_VALUES:
        raise ValidationError(f"category must be one of {', '.join(CATEGORY_VALUES)}")
    if request.size not in SIZES_BY_CATEGORY[request.category]:
        raise ValidationError(f"{request.size} is not a valid {request.category} size")
    if request.quantity < 1:
        raise ValidationError("quantity must be a positive integer")
    if request.action not in ACTION_VALUES:
        raise ValidationError(f"action must be one of {', '.join(ACTION_VALUES)}")

    return StockChange(
        brand=request.brand,
        size=request.size,
        category=request.category,
        quantity=request.quantity,
        action=request.action,
    )


def apply_size_change(record: InventoryRecord, change: StockChange) -> SizeEntry:
    """
    Apply ``change`` to the matching size entry of ``record``.

    A missing entry is created; a removal against a missing entry still
    creates it, at zero. Removals never take a quantity below zero.
    """
    entry = record.find_entry(change.size, change.category)

    if entry is None:
        entry = SizeEntry(
            size=change.size,
            category=change.category,
            quantity=change.quantity if change.action == StockAction.ADD.value else 0,
        )
        record.sizes.append(entry)
        return entry

    if change.action == StockAction.ADD.value:
        entry.quantity = entry.quantity + change.quantity
    else:
        entry.quantity = max(0, entry.quantity - change.quantity)
    return entry


def apply_stock_change(
    store,
    brand: Optional[str],
    size: Optional[str],
    category: Optional[str],
    quantity: Optional[int],
    action: Optional[str],
) -> InventoryRecord:
    """
    Add or remove stock for one size of one brand and persist the record.

    The brand's record is created on first use. The update is a plain
    read-modify-write of the whole document: concurrent changes to the same
    brand race and the last write wins.
    """
    change = validate_stock_update(
        StockUpdateRequest(brand=brand, size=size, category=category, quantity=quantity, action=action)
    )

    record = store.get_record(change.brand)
    if record is None:
        record = InventoryRecord(brand=change.brand, sizes=[], total_quantity=0)

    entry = apply_size_change(record, change)
    reconcile(record)
    store.save_record(record)

    logger.info(
        f"Stock {change.action} {change.quantity} x {change.brand} {change.category} {change.size}",
        extra={
            "extra_fields": {
                "brand": change.brand,
                "size": change.size,
                "category": change.category,
                "new_quantity": entry.quantity,
                "total_quantity": record.total_quantity,
            }
        },
    )
    return record


def list_inventory(store, brand: Optional[str] = None) -> List[InventoryRecord]:
    return store.list_records(brand)


def summarize_inventory(store) -> List[SummaryRow]:
    """Group stored records by brand: summed totals and record counts."""
    rows: Dict[str, SummaryRow] = {}
    for record in store.list_records():
        row = rows.get(record.brand)
        if row is None:
            row = rows[record.brand] = SummaryRow(brand=record.brand)
        row.total_quantity += record.total_quantity
        row.item_count += 1
    return list(rows.values())
