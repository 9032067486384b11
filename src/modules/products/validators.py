"""Payload validation for the product controllers.

Every check returns an ``Either``: ``right`` when the payload passes,
``left`` with the first error found otherwise.  Checks are fail-fast and
run in a fixed order, so a given payload always reports the same error.

A field counts as *missing* when it is absent, ``None``, ``False``, an
empty string or numeric zero.  Empty mappings and lists count as present;
the nested checks decide what to make of them.

Counts (``sku`` and warehouse ``quantity``) accept any JSON number without
a fractional part, so ``2.0`` passes and is read as ``2``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

from modules.core.errors import InvalidParamError, MissingParamError
from shared.domain.either import Either, left, right

ADD_PRODUCT_REQUIRED_PARAMS = ("sku", "name", "inventory")
EDIT_PRODUCT_REQUIRED_PARAMS = ("name", "inventory")
WAREHOUSE_REQUIRED_FIELDS = ("locality", "quantity", "type")

ParamError = Union[MissingParamError, InvalidParamError]


def is_missing(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        # NaN is the other falsy number.
        return value == 0 or value != value
    return False


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_whole(value: Any) -> bool:
    """True for ints and for floats with no fractional part (``3.0``)."""
    return isinstance(value, int) or value.is_integer()


def check_count(param: str, value: Any, minimum: int) -> Either[InvalidParamError, None]:
    """Numeric, whole and at least ``minimum``; the first failure is reported."""
    if not is_number(value):
        return left(InvalidParamError(param, "number"))
    if not is_whole(value):
        return left(InvalidParamError(param, "whole number"))
    if value < minimum:
        return left(InvalidParamError(param, "positive number"))
    return right()


def as_mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def validate_required(
    payload: Any, required_params: Sequence[str]
) -> Either[MissingParamError, None]:
    body = as_mapping(payload)
    for param in required_params:
        if is_missing(body.get(param)):
            return left(MissingParamError(param))
    return right()


def validate_product_fields(
    payload: Mapping, required_params: Sequence[str]
) -> Either[InvalidParamError, None]:
    if "sku" in required_params:
        result = check_count("sku", payload["sku"], minimum=1)
        if result.is_left():
            return result
    if not isinstance(payload["name"], str):
        return left(InvalidParamError("name", "string"))
    return right()


def validate_warehouse(warehouse: Any) -> Either[InvalidParamError, None]:
    if not isinstance(warehouse, Mapping):
        return left(InvalidParamError("warehouse", "warehouse"))
    for field in WAREHOUSE_REQUIRED_FIELDS:
        if is_missing(warehouse.get(field)):
            return left(InvalidParamError("warehouse", "warehouse"))

    result = check_count("quantity", warehouse["quantity"], minimum=0)
    if result.is_left():
        return result
    for field in ("locality", "type"):
        if not isinstance(warehouse[field], str):
            return left(InvalidParamError(field, "string"))
    return right()


def validate_inventory(payload: Mapping) -> Either[ParamError, None]:
    warehouses = as_mapping(payload.get("inventory")).get("warehouses")
    if is_missing(warehouses):
        return left(MissingParamError("warehouse"))
    if isinstance(warehouses, (str, bytes)) or not isinstance(warehouses, Sequence):
        return left(InvalidParamError("warehouse", "warehouse"))
    if len(warehouses) == 0:
        return left(MissingParamError("warehouse"))

    for warehouse in warehouses:
        result = validate_warehouse(warehouse)
        if result.is_left():
            return result
    return right()


def validate_product_payload(
    payload: Any, required_params: Sequence[str]
) -> Either[ParamError, None]:
    """Run every body check for Add/Edit in order."""
    result = validate_required(payload, required_params)
    if result.is_left():
        return result
    result = validate_product_fields(payload, required_params)
    if result.is_left():
        return result
    return validate_inventory(payload)


def parse_sku(params: Any) -> Either[ParamError, int]:
    """Extract the numeric SKU from the path parameters."""
    raw = as_mapping(params).get("sku")
    if raw is None or raw == "":
        return left(MissingParamError("sku"))
    if isinstance(raw, int) and not isinstance(raw, bool):
        return right(raw)
    if isinstance(raw, str) and raw.isascii() and raw.isdigit():
        return right(int(raw))
    return left(InvalidParamError("sku", "number"))
