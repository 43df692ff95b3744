"""API tests for the product catalog routes."""

import unittest
from collections.abc import Generator
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from api_support import ApiTestCase
from catalog_api.core.database import get_db
from catalog_api.main import app
from catalog_api.models import Role

PRODUCTS = "/api/products"


def _product(**overrides: object) -> dict:
    """Build a minimal product body for tests."""
    body = {
        "name": "Espresso cup",
        "category": "kitchen",
        "price": 12.5,
        "image": "/img/cup.png",
        "description": "Porcelain, 80 ml.",
        "popular": True,
    }
    body.update(overrides)
    return body


class TestProductCrud(ApiTestCase):
    """Admin create/update/delete; public listing."""

    def setUp(self) -> None:
        super().setUp()
        self.headers = self.admin_headers()

    def _create(self, **overrides: object) -> dict:
        resp = self.client.post(PRODUCTS, json=_product(**overrides), headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        return resp.json()["product"]

    def test_list_is_public_and_empty_initially(self) -> None:
        resp = self.client.get(PRODUCTS)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [])

    def test_create_returns_stored_product(self) -> None:
        product = self._create()
        self.assertIsInstance(product["id"], int)
        self.assertEqual(product["name"], "Espresso cup")
        self.assertEqual(product["price"], 12.5)
        self.assertTrue(product["popular"])

    def test_optional_fields_default(self) -> None:
        resp = self.client.post(
            PRODUCTS,
            json={"name": "Plain", "category": "misc", "price": 1},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)
        product = resp.json()["product"]
        self.assertIsNone(product["image"])
        self.assertIsNone(product["description"])
        self.assertFalse(product["popular"])

    def test_create_requires_name_category_price(self) -> None:
        resp = self.client.post(PRODUCTS, json={"name": "X"}, headers=self.headers)
        self.assertEqual(resp.status_code, 422)

    def test_list_returns_products_in_id_order(self) -> None:
        first = self._create(name="First")
        second = self._create(name="Second")
        resp = self.client.get(PRODUCTS)
        self.assertEqual([p["id"] for p in resp.json()], [first["id"], second["id"]])

    def test_update_replaces_fields(self) -> None:
        product = self._create()
        resp = self.client.put(
            f"{PRODUCTS}/{product['id']}",
            json=_product(name="Mug", price=9.99, popular=False),
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200)
        updated = resp.json()["product"]
        self.assertEqual(updated["id"], product["id"])
        self.assertEqual(updated["name"], "Mug")
        self.assertEqual(updated["price"], 9.99)
        self.assertFalse(updated["popular"])

    def test_update_unknown_id_is_not_found(self) -> None:
        resp = self.client.put(f"{PRODUCTS}/999", json=_product(), headers=self.headers)
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"detail": "Product not found"})

    def test_delete_returns_removed_product(self) -> None:
        product = self._create()
        resp = self.client.delete(f"{PRODUCTS}/{product['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["product"]["id"], product["id"])
        self.assertEqual(self.client.get(PRODUCTS).json(), [])

    def test_delete_twice_is_not_found(self) -> None:
        product = self._create()
        self.client.delete(f"{PRODUCTS}/{product['id']}", headers=self.headers)
        resp = self.client.delete(f"{PRODUCTS}/{product['id']}", headers=self.headers)
        self.assertEqual(resp.status_code, 404)

    def test_non_integer_id(self) -> None:
        resp = self.client.delete(f"{PRODUCTS}/abc", headers=self.headers)
        self.assertEqual(resp.status_code, 422)


class TestProductStoreFailure(ApiTestCase):
    """Database errors become a generic 500 with no internal detail."""

    def setUp(self) -> None:
        super().setUp()
        self.session = MagicMock()
        self.session.query.side_effect = OperationalError(
            "SELECT * FROM products", {}, Exception("connection refused on 10.0.0.5")
        )

        def failing_get_db() -> Generator[MagicMock, None, None]:
            yield self.session

        app.dependency_overrides[get_db] = failing_get_db

    def test_list_failure_is_generic(self) -> None:
        with self.assertLogs("catalog_api.api.products", level="ERROR"):
            resp = self.client.get(PRODUCTS)
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"detail": "Internal server error"})
        self.assertNotIn("10.0.0.5", resp.text)

    def test_create_failure_rolls_back(self) -> None:
        self.session.commit.side_effect = OperationalError("INSERT", {}, Exception("disk full"))
        headers = self.auth_headers(1, Role.ADMIN)
        resp = self.client.post(PRODUCTS, json=_product(), headers=headers)
        self.assertEqual(resp.status_code, 500)
        self.session.rollback.assert_called_once()


if __name__ == "__main__":
    unittest.main()
