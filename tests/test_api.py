"""Tests for API endpoints"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock, AsyncMock

from api.index import app
from storefront.cart import CartRegistry
from storefront.routers.deps import get_cart_registry, get_catalog_store

SESSION = {"X-Cart-Session": "session-1"}


@pytest.fixture
def catalog(simple_product, variant_product, store_settings):
    """Catalog store double keyed by product id"""
    products = {p.id: p for p in (simple_product, variant_product)}
    catalog = Mock()
    catalog.get_product = AsyncMock(side_effect=lambda product_id: products.get(product_id))
    catalog.get_products = AsyncMock(return_value=list(products.values()))
    catalog.get_categories = AsyncMock(return_value=[])
    catalog.get_settings = AsyncMock(return_value=store_settings)
    return catalog


@pytest.fixture
def registry():
    return CartRegistry(ttl_seconds=3600, max_sessions=100)


@pytest.fixture
def client(catalog, registry):
    """Test client with a fresh cart registry and fake catalog"""
    app.dependency_overrides[get_catalog_store] = lambda: catalog
    app.dependency_overrides[get_cart_registry] = lambda: registry
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_products(client):
    """Products list includes variants with float prices"""
    response = client.get("/api/products")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 2
    camiseta = next(p for p in data if p["id"] == "camiseta-1")
    assert camiseta["variants"][1] == {"id": "g", "name": "G", "price": 30.0, "description": "Algodão, tamanho G"}


def test_get_product_not_found(client):
    """Unknown product is 404"""
    response = client.get("/api/products/nope")
    assert response.status_code == 404


def test_get_settings_hides_contact(client):
    """Public settings omit the contact number"""
    response = client.get("/api/settings")
    assert response.status_code == 200
    assert response.json()["store_name"] == "Loja"
    assert "whatsapp_number" not in response.json()


def test_cart_requires_session(client):
    """Cart endpoints need the session header"""
    response = client.get("/api/cart")
    assert response.status_code == 400


def test_add_and_merge(client):
    """Adding the same product twice merges into one line"""
    client.post("/api/cart/items", json={"product_id": "bolo-1"}, headers=SESSION)
    response = client.post("/api/cart/items", json={"product_id": "bolo-1"}, headers=SESSION)

    assert response.status_code == 200
    data = response.json()
    assert data["added"] == {"product_id": "bolo-1", "variant_id": None, "quantity": 2}
    assert len(data["cart"]["items"]) == 1
    assert data["cart"]["total_price"] == 50.0


def test_add_variant_required(client):
    """Variant product without variant_id is rejected, cart unchanged"""
    response = client.post("/api/cart/items", json={"product_id": "camiseta-1"}, headers=SESSION)

    assert response.status_code == 422
    assert response.json()["error"] == "VARIANT_REQUIRED"
    assert client.get("/api/cart", headers=SESSION).json()["is_empty"] is True


def test_add_unknown_variant(client):
    """Variant must belong to the product"""
    response = client.post(
        "/api/cart/items", json={"product_id": "camiseta-1", "variant_id": "xg"}, headers=SESSION
    )
    assert response.status_code == 422
    assert response.json()["error"] == "UNKNOWN_VARIANT"


def test_add_unknown_product(client):
    response = client.post("/api/cart/items", json={"product_id": "nope"}, headers=SESSION)
    assert response.status_code == 404


def test_sessions_are_isolated(client):
    """Each session header has its own cart"""
    client.post("/api/cart/items", json={"product_id": "bolo-1"}, headers=SESSION)

    other = client.get("/api/cart", headers={"X-Cart-Session": "session-2"})
    assert other.json()["is_empty"] is True


def test_adjust_and_remove(client):
    """Quantity adjustment, underflow removal and idempotent delete"""
    client.post("/api/cart/items", json={"product_id": "camiseta-1", "variant_id": "g"}, headers=SESSION)
    client.post("/api/cart/items", json={"product_id": "bolo-1"}, headers=SESSION)

    response = client.patch(
        "/api/cart/items", json={"product_id": "camiseta-1", "variant_id": "g", "delta": 2}, headers=SESSION
    )
    assert response.json()["items"][0]["quantity"] == 3

    response = client.patch("/api/cart/items", json={"product_id": "bolo-1", "delta": -1}, headers=SESSION)
    assert [i["product_id"] for i in response.json()["items"]] == ["camiseta-1"]

    response = client.delete("/api/cart/items?product_id=camiseta-1&variant_id=g", headers=SESSION)
    assert response.json()["is_empty"] is True

    response = client.delete("/api/cart/items?product_id=camiseta-1&variant_id=g", headers=SESSION)
    assert response.status_code == 200


def test_clear(client):
    client.post("/api/cart/items", json={"product_id": "bolo-1"}, headers=SESSION)

    response = client.delete("/api/cart", headers=SESSION)

    assert response.json()["is_empty"] is True


def test_checkout(client):
    """Checkout returns text and link; cart is kept"""
    client.post("/api/cart/items", json={"product_id": "bolo-1"}, headers=SESSION)

    response = client.post("/api/cart/checkout", headers=SESSION)

    assert response.status_code == 200
    data = response.json()
    assert data["recipient"] == "11999999999"
    assert "1x Bolo" in data["text"]
    assert data["uri"].startswith("https://wa.me/11999999999?text=")
    assert client.get("/api/cart", headers=SESSION).json()["total_items"] == 1


def test_checkout_empty_cart(client):
    response = client.post("/api/cart/checkout", headers=SESSION)
    assert response.status_code == 422
    assert response.json()["error"] == "EMPTY_CART"


def test_checkout_settings_unavailable(client, catalog):
    """Settings failure is a retryable 503 and the cart survives"""
    catalog.get_settings.side_effect = ConnectionError("down")
    client.post("/api/cart/items", json={"product_id": "bolo-1"}, headers=SESSION)

    response = client.post("/api/cart/checkout", headers=SESSION)

    assert response.status_code == 503
    assert response.json() == {
        "error": "SETTINGS_FETCH_FAILED",
        "detail": "Could not load store settings",
        "retryable": True,
    }
    assert client.get("/api/cart", headers=SESSION).json()["total_items"] == 1


def test_many_sessions_do_not_grow_registry(client, registry):
    """Distinct session headers are capped by the registry limit"""
    for i in range(500):
        response = client.get("/api/cart", headers={"X-Cart-Session": f"session-{i}"})
        assert response.status_code == 200

    assert len(registry) == 100
