"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock, AsyncMock

# Set test environment variables before storefront modules read them
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("STORE_CURRENCY", "BRL")

from storefront.models import Product, ProductVariant, StoreSettings


def make_table_mock(data=None):
    """Chainable Supabase query builder whose execute() resolves to data"""
    table_mock = Mock()
    for method in ("select", "eq", "limit", "order"):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute = AsyncMock(return_value=Mock(data=data if data is not None else []))
    return table_mock


@pytest.fixture
def mock_supabase_client():
    """Mock async Supabase client"""
    client = Mock()
    client.table.return_value = make_table_mock()
    return client


@pytest.fixture
def simple_product():
    """Product without variants and with an explicit size"""
    return Product(
        id="bolo-1",
        category_id="1",
        name="Bolo",
        price=25.0,
        description="Bolo de chocolate",
        size="Único",
    )


@pytest.fixture
def unsized_product():
    """Product without variants and without size"""
    return Product(id="cafe-1", name="Café", price="7.50", description="Coado")


@pytest.fixture
def variant_product():
    """Product sold in sizes"""
    return Product(
        id="camiseta-1",
        name="Camiseta",
        price=0,
        description="Algodão",
        size="M",
        variants=[
            ProductVariant(id="p", name="P", price="25.00"),
            ProductVariant(id="g", name="G", price="30.00", description="Algodão, tamanho G"),
        ],
    )


@pytest.fixture
def store_settings():
    """Settings row as stored in the catalog"""
    return StoreSettings(store_name="Loja", whatsapp_number="(11) 99999-9999")


@pytest.fixture
def make_table():
    """Factory for chainable query builder mocks"""
    return make_table_mock
