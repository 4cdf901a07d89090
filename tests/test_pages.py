from stockroom.models.inventory import InventoryRecord, reconcile
from stockroom.services.stock_grid import build_stock_grid, overall_total, youth_label


def make_record():
    return reconcile(
        InventoryRecord(
            brand="Hanes",
            sizes=[
                {"size": "L", "category": "adult", "quantity": 4},
                {"size": "S", "category": "youth", "quantity": 2},
                {"size": "XS", "category": "adult", "quantity": 0},
            ],
        )
    )


def test_grid_has_every_size_per_category():
    [brand] = build_stock_grid([make_record()])
    assert brand["brand"] == "Hanes"
    assert brand["total_quantity"] == 6
    assert [cell["label"] for cell in brand["adult"]] == ["XS", "S", "M", "L", "XL", "2XL", "3XL", "4XL", "5XL"]
    assert [cell["label"] for cell in brand["youth"]] == ["YXS", "YS", "YM", "YL", "YXL"]


def test_grid_cells_carry_quantities():
    [brand] = build_stock_grid([make_record()])
    adult = {cell["size"]: cell for cell in brand["adult"]}
    youth = {cell["size"]: cell for cell in brand["youth"]}
    assert adult["L"]["quantity"] == 4 and adult["L"]["in_stock"]
    assert adult["M"]["quantity"] == 0 and not adult["M"]["in_stock"]
    assert not adult["XS"]["in_stock"]
    assert youth["S"] == {"label": "YS", "size": "S", "category": "youth", "quantity": 2, "in_stock": True}


def test_youth_label_and_overall_total():
    assert youth_label("XL") == "YXL"
    assert overall_total([make_record(), reconcile(InventoryRecord(brand="Nike"))]) == 6
    assert build_stock_grid([]) == []


def test_dashboard_page_renders_form(client):
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.text
    assert "Stock Management" in html
    assert '<option value="Bella+Canvas">Bella+Canvas</option>' in html
    assert '<option value="M">YM</option>' in html
    assert "/static/js/inventory.js" in html


def test_stock_grid_partial_reflects_store(client):
    client.post("/stock", json={"brand": "Gildan", "size": "S", "category": "youth", "quantity": 3, "action": "add"})
    resp = client.get("/partials/stock-grid")
    assert resp.status_code == 200
    html = resp.text
    assert "Gildan" in html
    assert 'data-overall-total="3"' in html
    assert 'data-size="YS"' in html
    assert 'data-category="youth"' in html


def test_stock_grid_partial_empty(client):
    resp = client.get("/partials/stock-grid")
    assert resp.status_code == 200
    assert "No stock recorded yet." in resp.text


def test_static_script_is_served(client):
    resp = client.get("/static/js/inventory.js")
    assert resp.status_code == 200
    assert "stripYouthPrefix" in resp.text
