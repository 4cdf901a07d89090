from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from stockroom.core.dependencies import get_inventory_store
from stockroom.models.inventory import ADULT_SIZES, YOUTH_SIZES, Brand
from stockroom.services.stock_grid import build_stock_grid, overall_total, youth_label
from stockroom.services.stock_service import list_inventory

router = APIRouter(tags=["Pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@router.get("/", response_class=HTMLResponse)
async def dashboard_page(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "brands": [brand.value for brand in Brand],
            "adult_sizes": ADULT_SIZES,
            "youth_sizes": [{"value": size, "label": youth_label(size)} for size in YOUTH_SIZES],
        },
    )


@router.get("/partials/stock-grid", response_class=HTMLResponse)
def stock_grid_partial(request: Request, store=Depends(get_inventory_store)):
    records = list_inventory(store)
    return templates.TemplateResponse(
        request,
        "partials/stock_grid.html",
        {"grid": build_stock_grid(records), "overall_total": overall_total(records)},
    )
