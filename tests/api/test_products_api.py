"""Tests for product API endpoints."""

from fastapi.testclient import TestClient

import storefront.catalog.store as store_module
from storefront.catalog.store import CatalogStore, JsonFileSource

ENVELOPE_KEYS = {
    "items",
    "total_count",
    "total_pages",
    "current_page",
    "has_next",
    "has_prev",
    "page_size",
    "pages",
}


class TestListProducts:
    """Tests for GET /products."""

    def test_default_listing(self, client: TestClient) -> None:
        response = client.get("/products")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == ENVELOPE_KEYS
        assert [p["id"] for p in data["items"]] == [6, 5, 4, 3, 2, 1]
        assert data["total_count"] == 6
        assert data["total_pages"] == 1
        assert data["current_page"] == 1
        assert data["pages"] == [1]

    def test_filters_and_sort(self, client: TestClient) -> None:
        response = client.get(
            "/products",
            params={"category": "Electronics", "maxPrice": "75000", "sort": "price-desc"},
        )

        data = response.json()
        assert [p["id"] for p in data["items"]] == [2, 1, 4]
        assert data["total_count"] == 3

    def test_in_stock(self, client: TestClient) -> None:
        data = client.get("/products", params={"inStock": "true"}).json()
        assert 1 not in [p["id"] for p in data["items"]]

    def test_product_display_fields(self, client: TestClient) -> None:
        data = client.get("/products", params={"search": "keyboard"}).json()
        product = data["items"][0]

        assert product["final_price"] == 75000
        assert product["is_on_sale"] is True
        assert product["is_out_of_stock"] is False
        assert product["combined_slug"] == "2-product-00002"

    def test_malformed_params_fall_back(self, client: TestClient) -> None:
        response = client.get("/products", params={"page": "abc", "minPrice": "x", "sort": "?"})

        assert response.status_code == 200
        data = response.json()
        assert data["current_page"] == 1
        assert data["total_count"] == 6

    def test_oversized_page_falls_back(self, client: TestClient) -> None:
        response = client.get("/products", params={"page": "9" * 5000})

        assert response.status_code == 200
        assert response.json()["current_page"] == 1

    def test_page_out_of_range(self, client: TestClient) -> None:
        data = client.get("/products", params={"page": "5"}).json()

        assert data["items"] == []
        assert data["current_page"] == 5
        assert data["has_next"] is False
        assert data["has_prev"] is True

    def test_missing_catalog_returns_empty_listing(self, client: TestClient, tmp_path) -> None:
        store_module.set_catalog_store(CatalogStore(JsonFileSource(tmp_path / "missing.json")))

        response = client.get("/products")

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total_count"] == 0
        assert data["total_pages"] == 0
        assert data["has_next"] is False
        assert data["has_prev"] is False

    def test_request_id_header(self, client: TestClient) -> None:
        response = client.get("/products", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"


class TestProductDetail:
    """Tests for product detail endpoints."""

    def test_get_product(self, client: TestClient) -> None:
        response = client.get("/products/3-cotton-towels")

        assert response.status_code == 200
        assert response.json()["title"] == "Cotton Towels"

    def test_malformed_slug_is_404(self, client: TestClient) -> None:
        response = client.get("/products/cotton-towels")

        assert response.status_code == 404
        data = response.json()
        assert data["error_code"] == "PRODUCT_NOT_FOUND"
        assert "request_id" in data

    def test_unknown_product_is_404(self, client: TestClient) -> None:
        assert client.get("/products/999-nothing").status_code == 404

    def test_oversized_id_is_404(self, client: TestClient) -> None:
        assert client.get("/products/" + "9" * 5000 + "-x").status_code == 404

    def test_related_products(self, client: TestClient) -> None:
        response = client.get("/products/1-wireless-mouse/related", params={"limit": 2})

        assert response.status_code == 200
        data = response.json()
        assert data["product_id"] == 1
        assert [p["id"] for p in data["items"]] == [2, 4]

    def test_related_unknown_product_is_404(self, client: TestClient) -> None:
        assert client.get("/products/999-nothing/related").status_code == 404

    def test_slug_listing(self, client: TestClient) -> None:
        data = client.get("/products/slugs", params={"offset": 5, "limit": 10}).json()

        assert data == {"slugs": ["6-product-00006"], "has_more": False, "total": 6}


class TestReferenceData:
    """Tests for categories, brands and price range."""

    def test_categories(self, client: TestClient) -> None:
        categories = client.get("/categories").json()["categories"]
        assert len(categories) == 20
        assert categories[0] == "Electronics"

    def test_brands(self, client: TestClient) -> None:
        assert client.get("/brands").json() == {"brands": ["Acme", "HyperTech", "K-Home", "ProSound"]}

    def test_price_range(self, client: TestClient) -> None:
        assert client.get("/price-range").json() == {"min": 18000.0, "max": 150000.0}
