"""Pytest configuration and fixtures"""
import os
import pytest
from unittest.mock import Mock

# Set test environment variables (before storefront.config is imported)
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")
os.environ.setdefault("ADMIN_API_KEY", "test_admin_key")
os.environ.setdefault("CLOUDINARY_CLOUD_NAME", "test-cloud")
os.environ.setdefault("CLOUDINARY_API_KEY", "test_cloudinary_key")
os.environ.setdefault("CLOUDINARY_API_SECRET", "test_cloudinary_secret")
os.environ.setdefault("DEFAULT_WHATSAPP_NUMBER", "51987654321")


def result(data):
    """Fake PostgREST response"""
    return Mock(data=data)


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client. Every builder method returns the same table mock."""
    client = Mock()

    table_mock = Mock()
    for method in (
        "select", "insert", "update", "delete", "upsert",
        "eq", "neq", "or_", "limit", "order", "range", "single",
    ):
        getattr(table_mock, method).return_value = table_mock
    table_mock.execute.return_value = result([])

    client.table.return_value = table_mock
    return client


@pytest.fixture
def table(mock_supabase_client):
    """The table mock shared by all queries"""
    return mock_supabase_client.table.return_value


@pytest.fixture
def mock_database(mock_supabase_client):
    """Database facade over the mock client"""
    from storefront.services.database import Database

    return Database(mock_supabase_client)


@pytest.fixture(autouse=True)
def fresh_sessions():
    """Isolate in-memory cart and preview sessions between tests"""
    import storefront.cart.storage as cart_storage
    import storefront.preview.session as preview_session

    cart_storage._cart_store = None
    preview_session._preview_store = None
    yield
    cart_storage._cart_store = None
    preview_session._preview_store = None


@pytest.fixture
def sample_product():
    """Sample product row (with joined category)"""
    return {
        "id": "product-123",
        "name": "Cuaderno A4 Cuadriculado",
        "slug": "cuaderno-a4-cuadriculado",
        "description": "100 hojas",
        "price": 8.0,
        "sale_price": None,
        "sku": "CUA-A4-100",
        "category_id": "cat-1",
        "category": {"id": "cat-1", "name": "Útiles Escolares", "slug": "utiles-escolares"},
        "stock": 40,
        "image": "https://res.cloudinary.com/test-cloud/cuaderno.jpg",
        "gallery": None,
        "is_active": True,
        "is_featured": True,
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-01T00:00:00Z",
    }


@pytest.fixture
def sample_theme():
    """Sample seasonal theme row"""
    return {
        "id": "theme-1",
        "name": "Navidad",
        "slug": "navidad",
        "primary_color": "120 61% 34%",
        "secondary_color": "0 100% 50%",
        "accent_color": "43 74% 49%",
        "banner_image": None,
        "start_date": "2025-12-01T00:00:00Z",
        "end_date": "2026-12-01T00:00:00Z",
        "is_active": True,
        "created_at": "2025-11-01T00:00:00Z",
        "updated_at": "2025-11-01T00:00:00Z",
    }


@pytest.fixture
def sample_category():
    """Sample category row"""
    return {
        "id": "cat-1",
        "name": "Útiles Escolares",
        "slug": "utiles-escolares",
        "description": "Todo para el colegio",
        "image": None,
        "icon": "Backpack",
        "gallery": [],
        "order": 1,
        "is_active": True,
    }
