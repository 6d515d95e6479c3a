"""Tests for database operations"""
import pytest
from datetime import date, datetime, timedelta
from decimal import Decimal

from conftest import result


@pytest.mark.asyncio
async def test_list_products(mock_database, table, sample_product):
    """Listing filters active products and parses rows"""
    table.execute.return_value = result([sample_product])

    products = await mock_database.products.list(featured=True, limit=4)

    assert len(products) == 1
    assert products[0].price == Decimal("8.0")
    assert products[0].gallery == []
    table.eq.assert_any_call("is_active", True)
    table.eq.assert_any_call("is_featured", True)
    table.limit.assert_called_with(4)
    table.range.assert_not_called()


@pytest.mark.asyncio
async def test_list_products_with_offset(mock_database, table):
    await mock_database.products.list(limit=10, offset=20)

    table.range.assert_called_once_with(20, 29)


@pytest.mark.asyncio
async def test_list_products_including_inactive(mock_database, table):
    await mock_database.products.list(include_inactive=True)

    assert ("is_active", True) not in [c.args for c in table.eq.call_args_list]


@pytest.mark.asyncio
async def test_get_product_by_slug(mock_database, table, sample_product):
    table.execute.return_value = result([sample_product])

    product = await mock_database.products.get_by_slug("cuaderno-a4-cuadriculado")

    assert product.id == "product-123"
    presented = product.to_presentation()
    assert presented["category"] == "Útiles Escolares"
    assert presented["categorySlug"] == "utiles-escolares"
    assert presented["price"] == 8.0
    assert presented["isFeatured"] is True


@pytest.mark.asyncio
async def test_get_product_not_found(mock_database, table):
    table.execute.return_value = result([])

    assert await mock_database.products.get_by_slug("missing") is None


@pytest.mark.asyncio
async def test_search_products(mock_database, table, sample_product):
    table.execute.return_value = result([sample_product])

    products = await mock_database.products.search("cuaderno")

    assert len(products) == 1
    table.or_.assert_called_once_with("name.ilike.%cuaderno%,description.ilike.%cuaderno%")


@pytest.mark.asyncio
async def test_update_product_sets_updated_at(mock_database, table, sample_product):
    table.execute.return_value = result([sample_product])

    await mock_database.products.update("product-123", {"stock": 3})

    payload = table.update.call_args.args[0]
    assert payload["stock"] == 3
    assert "updated_at" in payload


@pytest.mark.asyncio
async def test_create_category_appends_order(mock_database, table, sample_category):
    table.execute.side_effect = [
        result([{"order": 4}]),
        result([{**sample_category, "order": 5}]),
    ]

    category = await mock_database.categories.create({"name": "Arte", "slug": "arte"})

    assert table.insert.call_args.args[0]["order"] == 5
    assert category.order == 5


@pytest.mark.asyncio
async def test_create_service_first_row(mock_database, table):
    table.execute.side_effect = [
        result([]),
        result([{"id": "svc-1", "title": "Impresiones", "slug": "impresiones", "order": 1}]),
    ]

    service = await mock_database.services.create({"title": "Impresiones", "slug": "impresiones"})

    assert table.insert.call_args.args[0]["order"] == 1
    assert service.to_presentation()["name"] == "Impresiones"


@pytest.mark.asyncio
async def test_create_promotion_defaults(mock_database, table):
    table.execute.return_value = result([{
        "id": "promo-1", "title": "Regreso a clases",
        "start_date": "2025-03-01", "end_date": "2025-03-31",
    }])

    await mock_database.promotions.create({"title": "Regreso a clases"})

    payload = table.insert.call_args.args[0]
    today = date.today()
    assert payload["discount_type"] == "percentage"
    assert payload["start_date"] == today.isoformat()
    assert payload["end_date"] == (today + timedelta(days=30)).isoformat()


@pytest.mark.asyncio
async def test_get_all_settings(mock_database, table):
    table.execute.return_value = result([
        {"key": "site_content", "value": {"hero": {}}},
        {"key": "store_name", "value": "Librería Central"},
    ])

    settings = await mock_database.settings.get_all()

    assert settings == {"site_content": {"hero": {}}, "store_name": "Librería Central"}


@pytest.mark.asyncio
async def test_upsert_setting(mock_database, table):
    table.execute.return_value = result([{"key": "store_name", "value": "X"}])

    await mock_database.settings.upsert("store_name", "X")

    payload = table.upsert.call_args.args[0]
    assert payload["key"] == "store_name"
    assert payload["value"] == "X"
    assert table.upsert.call_args.kwargs == {"on_conflict": "key"}


@pytest.mark.asyncio
async def test_get_active_theme(mock_database, table, sample_theme):
    table.execute.return_value = result([sample_theme])

    theme = await mock_database.themes.get_active()

    assert theme.slug == "navidad"
    table.order.assert_called_with("updated_at", desc=True)
    table.limit.assert_called_with(1)


@pytest.mark.asyncio
async def test_save_new_theme(mock_database, table, sample_theme):
    table.execute.side_effect = [
        result([]),  # deactivate others
        result([]),  # slug lookup
        result([sample_theme]),  # insert
    ]

    row, created = await mock_database.themes.save_by_slug({
        "name": "Navidad", "slug": "navidad",
        "primary_color": "120 61% 34%", "secondary_color": "0 100% 50%",
        "accent_color": "43 74% 49%", "banner_image": "", "is_active": True,
    })

    assert created is True
    assert row.slug == "navidad"
    table.update.assert_called_once_with({"is_active": False})
    payload = table.insert.call_args.args[0]
    assert payload["is_active"] is True
    assert payload["banner_image"] is None
    start = datetime.fromisoformat(payload["start_date"])
    end = datetime.fromisoformat(payload["end_date"])
    assert end.year == start.year + 1


@pytest.mark.asyncio
async def test_save_existing_theme_updates_in_place(mock_database, table, sample_theme):
    table.execute.side_effect = [
        result([{"id": "theme-1"}]),  # slug lookup
        result([sample_theme]),  # update
    ]

    row, created = await mock_database.themes.save_by_slug({
        "name": "Navidad", "slug": "navidad",
        "primary_color": "120 61% 34%", "secondary_color": "0 100% 50%",
        "accent_color": "43 74% 49%", "is_active": False,
    })

    assert created is False
    table.insert.assert_not_called()
    payload = table.update.call_args.args[0]
    assert payload["is_active"] is False
    assert "updated_at" in payload


@pytest.mark.asyncio
async def test_activate_theme_deactivates_others(mock_database, table, sample_theme):
    table.execute.side_effect = [result([]), result([sample_theme])]

    theme = await mock_database.themes.activate("theme-1")

    assert theme.is_active is True
    table.neq.assert_called_once_with("id", "theme-1")
    assert table.update.call_args_list[0].args[0] == {"is_active": False}


@pytest.mark.asyncio
async def test_is_admin(mock_database, table):
    table.execute.return_value = result([{"role": "admin"}])
    assert await mock_database.is_admin("user-1") is True

    table.execute.return_value = result([])
    assert await mock_database.is_admin("user-2") is False


@pytest.mark.asyncio
async def test_delete(mock_database, table):
    await mock_database.catalogs.delete("cat-9")

    table.delete.assert_called_once()
    table.eq.assert_called_with("id", "cat-9")


@pytest.mark.parametrize("repository", [
    "ProductRepository", "CategoryRepository", "ServiceRepository", "PromotionRepository",
    "ReviewRepository", "CatalogRepository", "ThemeRepository",
])
def test_repository_hints_resolve(repository):
    """A `list` method must not shadow the builtin in sibling annotations"""
    import typing
    from storefront.services import repositories

    cls = getattr(repositories, repository)
    for name in ("list", "search"):
        method = getattr(cls, name, None)
        if method is not None:
            hints = typing.get_type_hints(method)
            assert typing.get_origin(hints["return"]) is list
