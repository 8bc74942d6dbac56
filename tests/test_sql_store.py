"""
Integration tests for the SQLAlchemy store.

Each step opens its own store (one session, as for one HTTP request),
so every assertion reads what the previous step committed.
Runs against a temporary SQLite file through aiosqlite.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.application.shop.dtos import (
    AddItemToCartCommand,
    ClearCartCommand,
    CreateProductCommand,
    DeleteProductCommand,
    GetCartQuery,
    GetProductByIdQuery,
    GetProductsQuery,
    RemoveItemFromCartCommand,
    UpdateProductCommand,
)
from storefront.application.shop.registry import build_mediator
from storefront.core.config import Settings
from storefront.domain.shop.errors import CartErrors, ProductErrors
from storefront.infrastructure.shop.seed import seed_sample_products
from storefront.infrastructure.shop.sql_store import SqlAlchemyStoreProvider
from storefront.main import create_app
from storefront.shared.result import Success


async def send(provider: SqlAlchemyStoreProvider, request):
    async with provider.open() as store:
        return await build_mediator(store).send(request)


class TestSqlProducts:
    """Product use cases against the SQL store."""

    @pytest.mark.asyncio
    async def test_seeded_catalog(self, sql_provider: SqlAlchemyStoreProvider) -> None:
        result = await send(sql_provider, GetProductsQuery(page=1, page_size=10))

        assert [p.name for p in result.value.products] == [
            "Sample Product 1",
            "Sample Product 2",
            "Sample Product 3",
        ]
        assert [p.price for p in result.value.products] == [
            Decimal("19.99"),
            Decimal("29.99"),
            Decimal("39.99"),
        ]

    @pytest.mark.asyncio
    async def test_seeding_twice_inserts_nothing(
        self, sql_provider: SqlAlchemyStoreProvider
    ) -> None:
        async with sql_provider.open() as store:
            assert await seed_sample_products(store) == 0
            assert await store.products.count() == 3

    @pytest.mark.asyncio
    async def test_pagination(self, sql_provider: SqlAlchemyStoreProvider) -> None:
        result = await send(sql_provider, GetProductsQuery(page=2, page_size=1))

        assert [p.id for p in result.value.products] == [2]
        assert result.value.total_count == 3

    @pytest.mark.asyncio
    async def test_create_update_delete(self, sql_provider: SqlAlchemyStoreProvider) -> None:
        created = await send(
            sql_provider, CreateProductCommand("Lamp", "Desk lamp", Decimal("45.00"))
        )
        product_id = created.value.id
        assert product_id == 4

        await send(
            sql_provider,
            UpdateProductCommand(product_id, "Floor lamp", "Tall", Decimal("80.50")),
        )
        fetched = await send(sql_provider, GetProductByIdQuery(product_id))
        assert fetched.value.name == "Floor lamp"
        assert fetched.value.price == Decimal("80.50")

        assert await send(sql_provider, DeleteProductCommand(product_id)) == Success(None)
        assert await send(sql_provider, GetProductByIdQuery(product_id)) == ProductErrors.NOT_FOUND

    @pytest.mark.asyncio
    async def test_invalid_create_stores_nothing(
        self, sql_provider: SqlAlchemyStoreProvider
    ) -> None:
        result = await send(sql_provider, CreateProductCommand("", "", Decimal("-1")))

        assert set(result.errors) == {"name", "price"}
        listing = await send(sql_provider, GetProductsQuery())
        assert listing.value.total_count == 3

    @pytest.mark.asyncio
    async def test_sub_cent_price_is_never_stored(
        self, sql_provider: SqlAlchemyStoreProvider
    ) -> None:
        """Every stored price stays above zero; nothing is rounded to 0.00."""
        result = await send(sql_provider, CreateProductCommand("Pin", "", Decimal("0.001")))

        assert result.errors == ProductErrors.INVALID_PRICE_PRECISION.errors
        listing = await send(sql_provider, GetProductsQuery())
        assert listing.value.total_count == 3
        assert all(p.price > 0 for p in listing.value.products)

    @pytest.mark.asyncio
    async def test_ids_beyond_the_integer_column_are_not_found(
        self, sql_provider: SqlAlchemyStoreProvider
    ) -> None:
        huge = 2**64

        assert await send(sql_provider, GetProductByIdQuery(huge)) == ProductErrors.NOT_FOUND
        assert await send(sql_provider, GetProductByIdQuery(2**31)) == ProductErrors.NOT_FOUND
        assert await send(sql_provider, DeleteProductCommand(huge)) == ProductErrors.NOT_FOUND
        assert (
            await send(sql_provider, UpdateProductCommand(huge, "X", "", Decimal("1")))
            == ProductErrors.NOT_FOUND
        )
        assert (
            await send(sql_provider, AddItemToCartCommand("alice", huge, 1))
            == ProductErrors.NOT_FOUND
        )

    @pytest.mark.asyncio
    async def test_page_far_past_the_end_is_empty(
        self, sql_provider: SqlAlchemyStoreProvider
    ) -> None:
        result = await send(sql_provider, GetProductsQuery(page=2**62, page_size=100))

        assert result.value.products == []
        assert result.value.total_count == 3


class TestSqlCart:
    """Cart use cases against the SQL store."""

    @pytest.mark.asyncio
    async def test_add_merge_and_read_back(self, sql_provider: SqlAlchemyStoreProvider) -> None:
        await send(sql_provider, AddItemToCartCommand("alice", 2, 1))
        await send(sql_provider, AddItemToCartCommand("alice", 1, 2))
        await send(sql_provider, AddItemToCartCommand("alice", 1, 3))

        cart = (await send(sql_provider, GetCartQuery("alice"))).value

        assert [(i.product_id, i.quantity) for i in cart.items] == [(1, 5), (2, 1)]
        assert cart.total_items == 6
        assert cart.total_amount == Decimal("129.94")

    @pytest.mark.asyncio
    async def test_unknown_product_creates_no_cart(
        self, sql_provider: SqlAlchemyStoreProvider
    ) -> None:
        result = await send(sql_provider, AddItemToCartCommand("alice", 42, 1))

        assert result == ProductErrors.NOT_FOUND
        assert await send(sql_provider, GetCartQuery("alice")) == CartErrors.NOT_FOUND

    @pytest.mark.asyncio
    async def test_remove_item(self, sql_provider: SqlAlchemyStoreProvider) -> None:
        await send(sql_provider, AddItemToCartCommand("alice", 1, 1))
        await send(sql_provider, AddItemToCartCommand("alice", 3, 1))

        removed = await send(sql_provider, RemoveItemFromCartCommand("alice", 1))
        assert [i.product_id for i in removed.value.items] == [3]

        again = await send(sql_provider, RemoveItemFromCartCommand("alice", 1))
        assert again == CartErrors.ITEM_NOT_FOUND

        cart = (await send(sql_provider, GetCartQuery("alice"))).value
        assert [i.product_id for i in cart.items] == [3]

    @pytest.mark.asyncio
    async def test_clear_keeps_cart(self, sql_provider: SqlAlchemyStoreProvider) -> None:
        await send(sql_provider, AddItemToCartCommand("alice", 1, 2))

        assert await send(sql_provider, ClearCartCommand("alice")) == Success(None)

        cart = (await send(sql_provider, GetCartQuery("alice"))).value
        assert cart.items == []
        assert cart.total_items == 0
        assert cart.total_amount == Decimal("0")


def test_api_over_sql_backend(tmp_path) -> None:
    """The app wires the SQL backend from settings, creating and seeding tables."""
    app_settings = Settings(
        storage_backend="sql",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        db_schema="",
        rate_limit_enabled=False,
        log_level="WARNING",
    )
    app = create_app(app_settings)

    with TestClient(app, raise_server_exceptions=False) as client:
        created = client.post("/api/products", json={"name": "Kettle", "price": 25.5})
        assert created.status_code == 201

        added = client.post(
            "/api/cart/bob/items",
            json={"productId": created.json()["id"], "quantity": 2},
        )
        assert added.status_code == 200
        assert added.json()["totalAmount"] == 51.0

        listing = client.get("/api/products", params={"pageSize": 100})
        assert listing.json()["totalCount"] == 4

        huge = 2**64
        assert client.get(f"/api/products/{huge}").status_code == 404
        assert client.delete(f"/api/products/{huge}").status_code == 404
        assert client.delete(f"/api/cart/bob/items/{huge}").status_code == 404
        sub_cent = client.post("/api/products", json={"name": "Pin", "price": 0.001})
        assert sub_cent.status_code == 400
