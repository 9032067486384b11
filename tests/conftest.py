import pytest

from rest_framework.test import APIClient


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def product_payload():
    """Factory for a valid Add/Edit request body; overrides replace keys."""

    def _make(**overrides):
        payload = {
            "sku": 1,
            "name": "any_name",
            "inventory": {
                "warehouses": [
                    {"locality": "any_locality", "quantity": 1, "type": "any_type"}
                ]
            },
        }
        payload.update(overrides)
        return payload

    return _make
