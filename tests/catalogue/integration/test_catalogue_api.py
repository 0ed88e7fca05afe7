"""Integration tests for Product and Category API endpoints via TestClient."""

import pytest
from support.api import build_client

from marketplace.catalogue.api.routes import category_router, product_router
from marketplace.shared.ids import new_object_id


@pytest.fixture()
def client():
    return build_client(product_router, category_router)


def _create_category(client, name="Kitchen"):
    response = client.post("/categories", json={"name": name})
    assert response.status_code == 201
    return response.json()["category_id"]


def _create_product(client, category_id, **overrides):
    payload = {
        "vendor_id": "vendor@example.com",
        "name": "Ceramic Mug",
        "price": 12.5,
        "category_id": category_id,
        "stock_quantity": 5,
    }
    payload.update(overrides)
    response = client.post("/products", json=payload)
    assert response.status_code == 201
    return response.json()["product_id"]


class TestCategoryEndpoints:
    def test_create_and_get(self, client):
        category_id = _create_category(client)
        response = client.get(f"/categories/{category_id}")
        assert response.status_code == 200
        assert response.json() == {"id": category_id, "name": "Kitchen", "is_active": True}

    def test_active_and_inactive_lists(self, client):
        active = _create_category(client, "Kitchen")
        inactive = _create_category(client, "Garden")
        client.patch(f"/categories/{inactive}/deactivate")

        assert [c["id"] for c in client.get("/categories/active").json()] == [active]
        assert [c["id"] for c in client.get("/categories/inactive").json()] == [inactive]
        assert len(client.get("/categories").json()) == 2

    def test_rename_updates_products(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        assert client.put(f"/categories/{category_id}", json={"name": "Cookware"}).status_code == 200
        assert client.get(f"/products/{product_id}").json()["category_name"] == "Cookware"

    def test_unknown_category_is_404(self, client):
        assert client.get(f"/categories/{new_object_id()}").status_code == 404

    def test_delete_category(self, client):
        category_id = _create_category(client)
        assert client.delete(f"/categories/{category_id}").status_code == 200
        assert client.get(f"/categories/{category_id}").status_code == 404


class TestProductEndpoints:
    def test_create_and_get(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        body = client.get(f"/products/{product_id}").json()
        assert body["name"] == "Ceramic Mug"
        assert body["category_name"] == "Kitchen"
        assert body["stock_quantity"] == 5

    def test_create_with_unknown_category_is_404(self, client):
        response = client.post(
            "/products",
            json={"vendor_id": "v@example.com", "name": "Mug", "price": 1.0, "category_id": new_object_id()},
        )
        assert response.status_code == 404

    def test_negative_price_is_400(self, client):
        category_id = _create_category(client)
        response = client.post(
            "/products",
            json={"vendor_id": "v@example.com", "name": "Mug", "price": -3.0, "category_id": category_id},
        )
        assert response.status_code == 400

    def test_update(self, client):
        category_id = _create_category(client)
        product_id = _create_product(client, category_id)

        response = client.put(
            f"/products/{product_id}",
            json={"name": "Tea Mug", "price": 9.0, "category_id": category_id},
        )
        assert response.status_code == 200
        body = client.get(f"/products/{product_id}").json()
        assert body["name"] == "Tea Mug"
        assert body["stock_quantity"] == 5

    def test_activation(self, client):
        product_id = _create_product(client, _create_category(client))
        client.patch(f"/products/{product_id}/deactivate")
        assert client.get(f"/products/{product_id}").json()["is_active"] is False
        client.patch(f"/products/{product_id}/activate")
        assert client.get(f"/products/{product_id}").json()["is_active"] is True

    def test_listings(self, client):
        category_id = _create_category(client)
        _create_product(client, category_id, name="In stock")
        _create_product(client, _create_category(client, "Other"), name="Sold out", stock_quantity=0)

        assert len(client.get("/products").json()) == 2
        assert [p["name"] for p in client.get("/products/available").json()] == ["In stock"]
        assert [p["name"] for p in client.get(f"/products/category/{category_id}").json()] == ["In stock"]
        assert len(client.get("/products/with-categories").json()) == 2

    def test_delete(self, client):
        product_id = _create_product(client, _create_category(client))
        assert client.delete(f"/products/{product_id}").status_code == 200
        assert client.get(f"/products/{product_id}").status_code == 404

    def test_malformed_id_is_400(self, client):
        assert client.get("/products/not-an-id").status_code == 400


class TestImageUpload:
    def test_upload_sets_image_path(self, client, upload_dir):
        product_id = _create_product(client, _create_category(client))

        response = client.post(
            "/products/upload-image",
            data={"product_id": product_id},
            files={"image_file": ("mug.png", b"\x89PNG-bytes", "image/png")},
        )

        assert response.status_code == 200
        image_path = response.json()["image_path"]
        assert image_path.startswith("/uploads/") and image_path.endswith("_mug.png")
        assert client.get(f"/products/{product_id}").json()["image_path"] == image_path
        assert (upload_dir / image_path.rsplit("/", 1)[1]).read_bytes() == b"\x89PNG-bytes"

    def test_missing_file_is_400(self, client, upload_dir):
        product_id = _create_product(client, _create_category(client))
        response = client.post("/products/upload-image", data={"product_id": product_id})
        assert response.status_code == 400

    def test_empty_file_is_400(self, client, upload_dir):
        product_id = _create_product(client, _create_category(client))
        response = client.post(
            "/products/upload-image",
            data={"product_id": product_id},
            files={"image_file": ("mug.png", b"", "image/png")},
        )
        assert response.status_code == 400
        assert client.get(f"/products/{product_id}").json()["image_path"] is None

    def test_missing_product_id_is_400(self, client, upload_dir):
        response = client.post("/products/upload-image", files={"image_file": ("mug.png", b"data", "image/png")})
        assert response.status_code == 400

    def test_unknown_product_is_404_and_nothing_stored(self, client, upload_dir):
        response = client.post(
            "/products/upload-image",
            data={"product_id": new_object_id()},
            files={"image_file": ("mug.png", b"data", "image/png")},
        )
        assert response.status_code == 404
        assert not upload_dir.exists()
