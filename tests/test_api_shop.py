"""
Tests for the shop API routes.

Uses FastAPI's TestClient over an app backed by the seeded in-memory
store. Checks status codes, camelCase bodies and the error body shape.
"""

from fastapi.testclient import TestClient


class TestProductRoutes:
    """Tests for /api/products."""

    def test_create_product(self, client: TestClient) -> None:
        response = client.post(
            "/api/products",
            json={"name": "Mug", "description": "Ceramic", "price": 9.5},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["price"] == 9.5
        assert "createdAt" in body
        assert response.headers["location"] == "/api/products/4"

    def test_created_ids_are_unique(self, client: TestClient) -> None:
        ids = {
            client.post("/api/products", json={"name": f"P{n}", "price": 1}).json()["id"]
            for n in range(3)
        }
        assert len(ids) == 3

    def test_create_with_invalid_fields(self, client: TestClient) -> None:
        """Both rule failures come back in one 400 response."""
        response = client.post("/api/products", json={"name": "", "price": 0})

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "Validation Error"
        assert body["status"] == 400
        assert set(body["errors"]) == {"name", "price"}
        assert body["errors"]["price"] == ["Product price must be greater than zero."]

    def test_create_with_sub_cent_price(self, client: TestClient) -> None:
        response = client.post("/api/products", json={"name": "Pin", "price": 0.001})

        assert response.status_code == 400
        assert list(response.json()["errors"]) == ["price"]
        assert client.get("/api/products").json()["totalCount"] == 3

    def test_description_at_length_limit(self, client: TestClient) -> None:
        response = client.post(
            "/api/products", json={"name": "Mug", "description": "d" * 500, "price": 1}
        )
        assert response.status_code == 201

    def test_create_with_malformed_body(self, client: TestClient) -> None:
        response = client.post("/api/products", json={"price": "not a number"})

        assert response.status_code == 400
        body = response.json()
        assert body["title"] == "Validation Error"
        assert set(body["errors"]) == {"name", "price"}

    def test_get_product(self, client: TestClient) -> None:
        response = client.get("/api/products/1")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Sample Product 1"
        assert body["price"] == 19.99
        assert {"createdAt", "updatedAt"} <= set(body)

    def test_get_missing_product(self, client: TestClient) -> None:
        response = client.get("/api/products/999")

        assert response.status_code == 404
        body = response.json()
        assert body["title"] == "Not Found"
        assert body["status"] == 404
        assert body["detail"] == "Product was not found."
        assert "errors" not in body

    def test_list_products_page(self, client: TestClient) -> None:
        response = client.get("/api/products", params={"page": 2, "pageSize": 1})

        assert response.status_code == 200
        body = response.json()
        assert [p["id"] for p in body["products"]] == [2]
        assert body["totalCount"] == 3
        assert body["page"] == 2
        assert body["pageSize"] == 1

    def test_list_products_defaults(self, client: TestClient) -> None:
        body = client.get("/api/products").json()

        assert body["page"] == 1
        assert body["pageSize"] == 10
        assert len(body["products"]) == 3

    def test_list_products_invalid_paging(self, client: TestClient) -> None:
        response = client.get("/api/products", params={"page": 0, "pageSize": 500})

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"page", "pageSize"}

    def test_update_product(self, client: TestClient) -> None:
        response = client.put(
            "/api/products/2",
            json={"name": "Renamed", "description": "", "price": 12.25},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 2
        assert body["name"] == "Renamed"
        assert "updatedAt" in body
        assert client.get("/api/products/2").json()["price"] == 12.25

    def test_update_missing_product(self, client: TestClient) -> None:
        response = client.put("/api/products/999", json={"name": "X", "price": 1})
        assert response.status_code == 404

    def test_delete_product(self, client: TestClient) -> None:
        response = client.delete("/api/products/3")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/api/products/3").status_code == 404
        assert client.delete("/api/products/3").status_code == 404


class TestCartRoutes:
    """Tests for /api/cart."""

    def test_add_items(self, client: TestClient) -> None:
        client.post("/api/cart/alice/items", json={"productId": 1, "quantity": 2})
        response = client.post("/api/cart/alice/items", json={"productId": 1, "quantity": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["userId"] == "alice"
        assert len(body["items"]) == 1
        item = body["items"][0]
        assert item["productName"] == "Sample Product 1"
        assert item["quantity"] == 3
        assert item["unitPrice"] == 19.99
        assert item["totalPrice"] == 59.97
        assert body["totalAmount"] == 59.97
        assert body["totalItems"] == 3

    def test_add_unknown_product(self, client: TestClient) -> None:
        response = client.post("/api/cart/alice/items", json={"productId": 999, "quantity": 1})

        assert response.status_code == 404
        assert response.json()["title"] == "Not Found"

    def test_add_invalid_quantity(self, client: TestClient) -> None:
        response = client.post("/api/cart/alice/items", json={"productId": 1, "quantity": 0})

        assert response.status_code == 400
        assert response.json()["errors"] == {
            "quantity": ["Quantity must be greater than zero."]
        }

    def test_user_id_length_limit(self, client: TestClient) -> None:
        line = {"productId": 1, "quantity": 1}
        too_long = client.post(f"/api/cart/{'u' * 51}/items", json=line)
        at_limit = client.post(f"/api/cart/{'u' * 50}/items", json=line)

        assert too_long.status_code == 400
        assert list(too_long.json()["errors"]) == ["userId"]
        assert at_limit.status_code == 200
        assert at_limit.json()["userId"] == "u" * 50

    def test_get_cart(self, client: TestClient) -> None:
        client.post("/api/cart/alice/items", json={"productId": 2, "quantity": 1})

        response = client.get("/api/cart/alice")

        assert response.status_code == 200
        body = response.json()
        assert body["totalAmount"] == 29.99
        assert {"createdAt", "updatedAt"} <= set(body)

    def test_get_missing_cart(self, client: TestClient) -> None:
        response = client.get("/api/cart/nobody")

        assert response.status_code == 404
        assert response.json()["detail"] == "Cart was not found."

    def test_remove_item(self, client: TestClient) -> None:
        client.post("/api/cart/alice/items", json={"productId": 1, "quantity": 1})
        client.post("/api/cart/alice/items", json={"productId": 2, "quantity": 1})

        response = client.delete("/api/cart/alice/items/1")

        assert response.status_code == 200
        assert [i["productId"] for i in response.json()["items"]] == [2]

    def test_remove_item_not_in_cart(self, client: TestClient) -> None:
        client.post("/api/cart/alice/items", json={"productId": 1, "quantity": 1})

        response = client.delete("/api/cart/alice/items/3")

        assert response.status_code == 404
        assert response.json()["detail"] == "Item not found in cart."

    def test_clear_cart(self, client: TestClient) -> None:
        client.post("/api/cart/alice/items", json={"productId": 1, "quantity": 4})

        response = client.delete("/api/cart/alice")

        assert response.status_code == 204
        body = client.get("/api/cart/alice").json()
        assert body["items"] == []
        assert body["totalItems"] == 0
        assert body["totalAmount"] == 0

    def test_clear_missing_cart(self, client: TestClient) -> None:
        assert client.delete("/api/cart/nobody").status_code == 404


class TestHealthAndHeaders:
    """Tests for the health route and response middleware."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0"}

    def test_security_headers(self, client: TestClient) -> None:
        response = client.get("/api/products/1")

        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "DENY"
