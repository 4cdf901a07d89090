from typing import Any, Dict, List

from stockroom.models.inventory import ADULT_SIZES, YOUTH_SIZES, InventoryRecord, SizeCategory

YOUTH_PREFIX = "Y"


def youth_label(size: str) -> str:
    return f"{YOUTH_PREFIX}{size}"


def _grid_cells(record: InventoryRecord, category: str, sizes: List[str]) -> List[Dict[str, Any]]:
    cells = []
    for size in sizes:
        entry = record.find_entry(size, category)
        quantity = entry.quantity if entry else 0
        cells.append({
            "label": youth_label(size) if category == SizeCategory.YOUTH.value else size,
            "size": size,
            "category": category,
            "quantity": quantity,
            "in_stock": quantity > 0,
        })
    return cells


def build_stock_grid(records: List[InventoryRecord]) -> List[Dict[str, Any]]:
    """
    Turn stored records into the brand x size grid shown on the dashboard.

    Every size of both categories gets a cell, zero when the brand has no
    entry for it yet.
    """
    return [
        {
            "brand": record.brand,
            "total_quantity": record.total_quantity,
            "adult": _grid_cells(record, SizeCategory.ADULT.value, ADULT_SIZES),
            "youth": _grid_cells(record, SizeCategory.YOUTH.value, YOUTH_SIZES),
        }
        for record in records
    ]


def overall_total(records: List[InventoryRecord]) -> int:
    return sum(record.total_quantity for record in records)
