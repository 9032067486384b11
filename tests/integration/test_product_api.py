"""Integration tests for Product API endpoints.

Covers:
- POST/PUT/GET/DELETE round-trips via /api/v1/products/.
- Validation and domain error payloads ({name, message}).
- Opaque 500 on unexpected faults.
"""

from __future__ import annotations

import logging

import pytest

from modules.products.repositories.django_repository import ProductDjangoRepository

pytestmark = pytest.mark.integration

PRODUCTS_URL = "/api/v1/products/"


def _detail_url(sku) -> str:
    return f"{PRODUCTS_URL}{sku}/"


@pytest.fixture()
def sample_product(api_client, product_payload):
    """A product created through the API."""
    payload = product_payload(
        sku=43264,
        name="L'ORÉAL PROFESSIONNEL EXPERT ABSOLUT REPAIR",
        inventory={
            "warehouses": [
                {"locality": "SP", "quantity": 12, "type": "ECOMMERCE"},
                {"locality": "MOEMA", "quantity": 3, "type": "PHYSICAL_STORE"},
            ]
        },
    )
    response = api_client.post(PRODUCTS_URL, payload, format="json")
    assert response.status_code == 200
    return payload


# ===========================================================================
# CREATE
# ===========================================================================


class TestProductCreate:
    def test_create_success(self, api_client, product_payload):
        response = api_client.post(PRODUCTS_URL, product_payload(), format="json")

        assert response.status_code == 200
        assert response.json() == {
            "sku": 1,
            "name": "any_name",
            "inventory": {
                "quantity": 1,
                "warehouses": [
                    {"locality": "ANY_LOCALITY", "quantity": 1, "type": "ANY_TYPE"}
                ],
            },
            "is_marketable": True,
        }

    def test_create_logs_a_single_product_event(self, api_client, product_payload, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post(PRODUCTS_URL, product_payload(), format="json")

        events = [
            record.msg["event"]
            for record in caplog.records
            if isinstance(record.msg, dict)
        ]
        assert [e for e in events if e.startswith("product")] == ["product.created"]

    def test_duplicate_sku_returns_400(self, api_client, sample_product):
        response = api_client.post(PRODUCTS_URL, sample_product, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "name": "ProductAlreadyExistsError",
            "message": "Product already exists",
        }

    def test_missing_sku_returns_400(self, api_client):
        response = api_client.post(
            PRODUCTS_URL, {"name": "n", "inventory": {}}, format="json"
        )

        assert response.status_code == 400
        assert response.json() == {
            "name": "MissingParamError",
            "message": "Missing param: sku",
        }

    def test_empty_warehouses_returns_400(self, api_client, product_payload):
        response = api_client.post(
            PRODUCTS_URL,
            product_payload(inventory={"warehouses": []}),
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Missing param: warehouse"

    def test_non_numeric_quantity_returns_400(self, api_client, product_payload):
        payload = product_payload(
            inventory={"warehouses": [{"locality": "SP", "quantity": "x", "type": "T"}]}
        )
        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "name": "InvalidParamError",
            "message": "Invalid param: quantity must be a number",
        }

    def test_negative_sku_returns_400(self, api_client, product_payload):
        response = api_client.post(PRODUCTS_URL, product_payload(sku=-5), format="json")

        assert response.status_code == 400
        assert response.json() == {
            "name": "InvalidParamError",
            "message": "Invalid param: sku must be a positive number",
        }
        assert api_client.get(_detail_url(5)).status_code == 404

    def test_fractional_quantity_returns_400(self, api_client, product_payload):
        payload = product_payload(
            inventory={"warehouses": [{"locality": "SP", "quantity": 2.5, "type": "T"}]}
        )
        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 400
        assert response.json() == {
            "name": "InvalidParamError",
            "message": "Invalid param: quantity must be a whole number",
        }

    def test_integral_float_quantity_is_stored_as_int(self, api_client, product_payload):
        payload = product_payload(
            inventory={"warehouses": [{"locality": "SP", "quantity": 4.0, "type": "T"}]}
        )
        response = api_client.post(PRODUCTS_URL, payload, format="json")

        assert response.status_code == 200
        assert response.json()["inventory"]["quantity"] == 4

    def test_malformed_json_returns_400(self, api_client):
        response = api_client.post(
            PRODUCTS_URL, data="{", content_type="application/json"
        )
        assert response.status_code == 400

    def test_list_is_not_allowed(self, api_client):
        response = api_client.get(PRODUCTS_URL)
        assert response.status_code == 405


# ===========================================================================
# RETRIEVE
# ===========================================================================


class TestProductRetrieve:
    def test_retrieve_success(self, api_client, sample_product):
        response = api_client.get(_detail_url(43264))

        assert response.status_code == 200
        data = response.json()
        assert data["sku"] == 43264
        assert data["inventory"]["quantity"] == 15
        assert data["is_marketable"] is True
        assert [w["locality"] for w in data["inventory"]["warehouses"]] == [
            "SP",
            "MOEMA",
        ]

    def test_retrieve_not_found(self, api_client):
        response = api_client.get(_detail_url(999))

        assert response.status_code == 404
        assert response.json() == {
            "name": "ProductNotFoundError",
            "message": "Product not found",
        }

    def test_retrieve_invalid_sku(self, api_client):
        response = api_client.get(_detail_url("abc"))

        assert response.status_code == 400
        assert response.json()["name"] == "InvalidParamError"


# ===========================================================================
# UPDATE
# ===========================================================================


class TestProductUpdate:
    def test_update_success(self, api_client, sample_product):
        payload = {
            "name": "Renamed",
            "inventory": {
                "warehouses": [{"locality": "rj", "quantity": 7, "type": "ecommerce"}]
            },
        }
        response = api_client.put(_detail_url(43264), payload, format="json")

        assert response.status_code == 204
        data = api_client.get(_detail_url(43264)).json()
        assert data["name"] == "Renamed"
        assert data["inventory"] == {
            "quantity": 7,
            "warehouses": [{"locality": "RJ", "quantity": 7, "type": "ECOMMERCE"}],
        }

    def test_update_unknown_returns_400(self, api_client, product_payload):
        response = api_client.put(_detail_url(999), product_payload(), format="json")

        assert response.status_code == 400
        assert response.json()["name"] == "ProductNotFoundError"

    def test_update_missing_name(self, api_client, sample_product):
        response = api_client.put(
            _detail_url(43264),
            {"inventory": sample_product["inventory"]},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Missing param: name"


# ===========================================================================
# DESTROY
# ===========================================================================


class TestProductDestroy:
    def test_destroy_success(self, api_client, sample_product):
        response = api_client.delete(_detail_url(43264))

        assert response.status_code == 204
        assert api_client.get(_detail_url(43264)).status_code == 404

    def test_destroy_twice_returns_404(self, api_client, sample_product):
        api_client.delete(_detail_url(43264))

        response = api_client.delete(_detail_url(43264))

        assert response.status_code == 404

    def test_sku_reusable_after_destroy(self, api_client, sample_product):
        api_client.delete(_detail_url(43264))

        response = api_client.post(PRODUCTS_URL, sample_product, format="json")

        assert response.status_code == 200


# ===========================================================================
# Unexpected faults
# ===========================================================================


class TestUnexpectedFaults:
    def test_repository_failure_returns_opaque_500(self, api_client, monkeypatch):
        def _boom(self, sku):
            raise RuntimeError("db is on fire")

        monkeypatch.setattr(ProductDjangoRepository, "get_by_sku", _boom)

        response = api_client.get(_detail_url(1))

        assert response.status_code == 500
        assert response.json() == {"message": "internal"}

    def test_correlation_id_echoed(self, api_client_with_correlation):
        client, cid = api_client_with_correlation
        response = client.get(_detail_url(1))
        assert response["X-Request-ID"] == cid
