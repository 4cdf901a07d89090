from typing import Any, Optional

from fastapi import APIRouter, Depends, status

from stockroom.core.dependencies import get_inventory_store
from stockroom.models.inventory import StockUpdateRequest
from stockroom.services.stock_service import apply_stock_change, list_inventory, summarize_inventory

router = APIRouter(
    prefix="/stock",
    tags=["Stock"]
)


@router.get("", response_model=Any, status_code=status.HTTP_200_OK)
def get_stock(brand: Optional[str] = None, store=Depends(get_inventory_store)):
    """
    List every brand's inventory record.
    - **brand**: optional, restricts the result to that brand.
    """
    return [record.to_response() for record in list_inventory(store, brand)]


@router.post("", response_model=Any, status_code=status.HTTP_200_OK)
def update_stock(request: StockUpdateRequest, store=Depends(get_inventory_store)):
    """
    Add or remove stock for one size of one brand.
    The brand's record and the size entry are created on first use.
    """
    record = apply_stock_change(
        store,
        brand=request.brand,
        size=request.size,
        category=request.category,
        quantity=request.quantity,
        action=request.action,
    )
    return record.to_response()


@router.get("/summary", response_model=Any, status_code=status.HTTP_200_OK)
def get_stock_summary(store=Depends(get_inventory_store)):
    return [row.model_dump(by_alias=True) for row in summarize_inventory(store)]
