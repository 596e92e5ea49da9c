import pytest

from errandrunners.core.config import settings
from errandrunners.services.service_area import OUT_OF_AREA_MESSAGE


def add(client, headers, store_id, product_id, option_name=None):
    body = {"store_id": store_id, "product_id": product_id}
    if option_name:
        body["option_name"] = option_name
    return client.post("/api/cart/items", json=body, headers=headers)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_list_and_get_stores(client):
    stores = client.get("/api/stores").json()
    assert {s["id"] for s in stores} == {"store-001", "store-002", "store-003"}
    assert "products" not in stores[0]

    store = client.get("/api/stores/store-001").json()
    assert store["latitude"] == 6.8013
    assert any(p["id"] == "pepperpot" for p in store["products"])

    assert client.get("/api/stores/nope").status_code == 404


def test_new_cart_is_empty(client, session_headers):
    cart = client.get("/api/cart", headers=session_headers).json()["cart"]

    assert cart["items"] == []
    assert cart["store_id"] is None
    assert cart["subtotal"] == 0


def test_session_header_required(client):
    assert client.get("/api/cart").status_code == 400
    assert client.get("/api/cart", headers={"X-Session-Id": "unknown"}).status_code == 404


def test_add_increment_and_replace(client, session_headers):
    first = add(client, session_headers, "store-001", "pepperpot").json()
    assert first["change"] == "added"
    assert first["cart"]["store_id"] == "store-001"

    second = add(client, session_headers, "store-001", "pepperpot").json()
    assert second["change"] == "incremented"
    assert second["cart"]["items"][0]["quantity"] == 2
    assert second["cart"]["subtotal"] == 5000

    third = add(client, session_headers, "store-002", "fries").json()
    assert third["change"] == "replaced"
    assert [i["id"] for i in third["replaced_items"]] == ["pepperpot"]
    assert third["cart"]["store_id"] == "store-002"
    assert [(i["id"], i["quantity"]) for i in third["cart"]["items"]] == [("fries", 1)]


def test_add_product_option(client, session_headers):
    response = add(client, session_headers, "store-002", "burger-classic", "Large Combo")
    line = response.json()["cart"]["items"][0]

    assert line["id"] == "burger-classic_Large_Combo"
    assert line["name"] == "Classic Burger - Large Combo"
    assert line["unit_price"] == 1900


@pytest.mark.parametrize(
    "store_id,product_id,option_name,status",
    [
        ("nope", "fries", None, 404),
        ("store-002", "nope", None, 404),
        ("store-002", "burger-classic", "Tiny", 404),
        ("store-002", "milkshake", None, 400),
    ],
)
def test_add_rejections(client, session_headers, store_id, product_id, option_name, status):
    response = add(client, session_headers, store_id, product_id, option_name)
    assert response.status_code == status


def test_update_and_remove_items(client, session_headers):
    add(client, session_headers, "store-001", "pepperpot")
    add(client, session_headers, "store-001", "mauby")

    updated = client.put(
        "/api/cart/items/mauby", json={"quantity": 4}, headers=session_headers
    ).json()["cart"]
    assert updated["subtotal"] == 2500 + 4 * 500

    updated = client.put(
        "/api/cart/items/mauby", json={"quantity": 0}, headers=session_headers
    ).json()["cart"]
    assert [i["id"] for i in updated["items"]] == ["pepperpot"]

    missing = client.put("/api/cart/items/mauby", json={"quantity": 2}, headers=session_headers)
    assert missing.status_code == 404

    emptied = client.delete("/api/cart/items/pepperpot", headers=session_headers).json()["cart"]
    assert emptied["items"] == []
    assert emptied["store_id"] is None


def test_clear_cart_cancels_reminders(client, session_headers):
    add(client, session_headers, "store-001", "pepperpot")
    reminders = client.get("/api/cart/reminders", headers=session_headers).json()
    assert reminders["scheduled"] is True
    assert [r["hours"] for r in reminders["reminders"]] == [2, 4, 8, 12, 24]

    cleared = client.delete("/api/cart", headers=session_headers).json()["cart"]
    assert cleared["items"] == []
    assert cleared["store_id"] is None

    reminders = client.get("/api/cart/reminders", headers=session_headers).json()
    assert reminders["scheduled"] is False


def test_pricing_endpoints(client):
    distance = client.get(
        "/api/pricing/distance",
        params={"lat1": 6.8013, "lon1": -58.1551, "lat2": 6.8013, "lon2": -58.1551},
    ).json()
    assert distance["distance_km"] == 0

    price = client.get("/api/pricing/delivery-price", params={"distance_km": 0.1}).json()
    assert price["total"] == pytest.approx(815)
    assert price["minimum_applied"] is False

    assert client.get("/api/pricing/delivery-price", params={"distance_km": -1}).status_code == 422

    rules = client.get("/api/pricing/rules").json()
    assert rules == {"base_price": 800, "price_per_km": 150, "minimum_price": 800}


def test_service_area_endpoint(client):
    inside = client.get("/api/pricing/service-area", params={"lat": 6.80, "lon": -58.18}).json()
    assert inside == {"allowed": True, "zone": "Georgetown", "message": None}

    outside = client.get("/api/pricing/service-area", params={"lat": 7.50, "lon": -58.00}).json()
    assert outside["allowed"] is False
    assert outside["message"] == OUT_OF_AREA_MESSAGE


def test_checkout_flow(client, session_headers):
    add(client, session_headers, "store-001", "pepperpot")

    no_address = client.get("/api/checkout/quote", headers=session_headers)
    assert no_address.status_code == 400

    client.put(
        "/api/checkout/delivery",
        json={"address": "12 Camp Street, Georgetown", "latitude": 6.8050, "longitude": -58.1500},
        headers=session_headers,
    )

    quote = client.get("/api/checkout/quote", headers=session_headers).json()
    assert quote["subtotal"] == 2500
    assert quote["service_fee"] == 200
    assert quote["delivery"]["total"] == pytest.approx(905)
    assert quote["total"] == pytest.approx(3605)
    assert quote["formatted_total"] == "GYD$3,605"

    placed = client.post(
        "/api/checkout",
        json={"customer_phone": "592-600-0000", "delivery_notes": "Green gate"},
        headers=session_headers,
    ).json()
    assert placed["success"] is True
    order = placed["order"]
    assert order["total"] == 3605
    assert order["delivery"]["notes"] == "Green gate"
    assert order["payment_method"] == "cash"

    cart = client.get("/api/cart", headers=session_headers).json()["cart"]
    assert cart["items"] == []

    fetched = client.get(f"/api/checkout/orders/{order['order_id']}", headers=session_headers)
    assert fetched.status_code == 200
    assert fetched.json()["order_id"] == order["order_id"]

    listed = client.get("/api/checkout/orders", headers=session_headers).json()
    assert [o["order_id"] for o in listed] == [order["order_id"]]


def test_orders_are_private_to_session(client, session_headers):
    add(client, session_headers, "store-001", "pepperpot")
    client.put(
        "/api/checkout/delivery",
        json={"address": "Camp Street", "latitude": 6.8050, "longitude": -58.1500},
        headers=session_headers,
    )
    order_id = client.post("/api/checkout", json={}, headers=session_headers).json()["order"]["order_id"]

    other = {"X-Session-Id": client.post("/api/cart").json()["cart"]["session_id"]}
    assert client.get(f"/api/checkout/orders/{order_id}", headers=other).status_code == 404


def test_checkout_out_of_area(client, session_headers):
    add(client, session_headers, "store-001", "pepperpot")
    client.put(
        "/api/checkout/delivery",
        json={"address": "Linden", "latitude": 7.50, "longitude": -58.00},
        headers=session_headers,
    )

    response = client.post("/api/checkout", json={}, headers=session_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == OUT_OF_AREA_MESSAGE


def test_configured_currency_symbol(client, session_headers, monkeypatch):
    monkeypatch.setattr(settings, "currency_symbol", "G$")
    add(client, session_headers, "store-001", "pepperpot")
    client.put(
        "/api/checkout/delivery",
        json={"address": "Camp Street", "latitude": 6.8050, "longitude": -58.1500},
        headers=session_headers,
    )

    cart = client.get("/api/cart", headers=session_headers).json()["cart"]
    assert cart["formatted_subtotal"] == "G$2,500"

    quote = client.get("/api/checkout/quote", headers=session_headers).json()
    assert quote["formatted_total"] == "G$3,605"
