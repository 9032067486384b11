"""Unit tests for the error values."""

from __future__ import annotations

import dataclasses

import pytest

from modules.core.errors import InvalidParamError, MissingParamError
from modules.products.errors import ProductAlreadyExistsError, ProductNotFoundError

pytestmark = pytest.mark.unit


class TestMissingParamError:
    def test_name_and_message(self):
        error = MissingParamError("sku")
        assert error.name == "MissingParamError"
        assert error.message == "Missing param: sku"
        assert error.param_name == "sku"

    def test_to_dict(self):
        assert MissingParamError("name").to_dict() == {
            "name": "MissingParamError",
            "message": "Missing param: name",
        }

    def test_is_not_an_exception(self):
        assert not isinstance(MissingParamError("sku"), BaseException)


class TestInvalidParamError:
    def test_name_and_message(self):
        error = InvalidParamError("quantity", "number")
        assert error.name == "InvalidParamError"
        assert error.message == "Invalid param: quantity must be a number"


class TestProductErrors:
    def test_already_exists(self):
        error = ProductAlreadyExistsError()
        assert error.name == "ProductAlreadyExistsError"
        assert error.message == "Product already exists"

    def test_not_found(self):
        error = ProductNotFoundError()
        assert error.name == "ProductNotFoundError"
        assert str(error) == "Product not found"


class TestEquality:
    def test_same_kind_and_params_are_equal(self):
        assert MissingParamError("sku") == MissingParamError("sku")
        assert ProductNotFoundError() == ProductNotFoundError()

    def test_different_params_are_not_equal(self):
        assert MissingParamError("sku") != MissingParamError("name")

    def test_different_kinds_are_not_equal(self):
        assert ProductNotFoundError() != ProductAlreadyExistsError()

    def test_is_immutable(self):
        error = MissingParamError("sku")
        with pytest.raises(dataclasses.FrozenInstanceError):
            error.message = "changed"
