import pytest
from fastapi.testclient import TestClient

from errandrunners.core import dependencies
from errandrunners.core.session import SessionManager
from errandrunners.database.orders import OrderDatabase
from errandrunners.database.stores import StoreDatabase
from errandrunners.main import app
from errandrunners.services.pricing import DEFAULT_RULES
from errandrunners.services.service_area import ServiceAreaGate


@pytest.fixture
def client():
    """Test client with fresh sessions, orders, stores and offline pricing rules"""
    manager = SessionManager()
    orders = OrderDatabase()
    stores = StoreDatabase()
    gate = ServiceAreaGate()

    app.dependency_overrides[dependencies.get_session_manager] = lambda: manager
    app.dependency_overrides[dependencies.get_order_db] = lambda: orders
    app.dependency_overrides[dependencies.get_store_db] = lambda: stores
    app.dependency_overrides[dependencies.get_service_area_gate] = lambda: gate
    app.dependency_overrides[dependencies.get_pricing_rules] = lambda: DEFAULT_RULES

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def session_headers(client):
    response = client.post("/api/cart")
    assert response.status_code == 200
    return {"X-Session-Id": response.json()["cart"]["session_id"]}
