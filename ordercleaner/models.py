"""Request, result and response models for order cleaning."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any


class FieldValidationError(Exception):
    """A request field failed one of its validation rules."""

    def __init__(
        self,
        field: str,
        tag: str,
        param: str = "",
        value: Any = None,
        namespace: str = "",
    ) -> None:
        self.field = field
        self.tag = tag
        self.param = param
        self.value = value
        self.namespace = namespace or field
        super().__init__(
            f"Key: '{self.namespace}' Error:Field validation for "
            f"'{field}' failed on the '{tag}' tag"
        )


def _non_empty(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value}


@dataclass
class Order:
    """One order line as sent by a sales platform."""

    platform_product_id: str
    qty: int
    unit_price: float
    total_price: float
    no: int = 0


@dataclass
class OrderRequest:
    """A batch of platform orders to be cleaned."""

    orders: list[Order] = field(default_factory=list)


@dataclass
class CleanedOrder:
    """One line of the cleaned order list."""

    no: int
    product_id: str
    qty: int
    unit_price: float
    total_price: float
    material_id: str = ""
    model_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "no": self.no,
            "productId": self.product_id,
            **_non_empty(materialId=self.material_id, modelId=self.model_id),
            "qty": self.qty,
            "unitPrice": self.unit_price,
            "totalPrice": self.total_price,
        }


@dataclass
class CleanedOrderResponse:
    """The result of cleaning an order request."""

    cleaned_orders: list[CleanedOrder] = field(default_factory=list)


@dataclass
class ValidateError:
    """Details of a rejected request."""

    error_code: str = ""
    field: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _non_empty(error_code=self.error_code, field=self.field, message=self.message)


@dataclass
class ValidateMessage:
    """Response body for a request that failed validation."""

    status_text: str = ""
    error: ValidateError | None = None

    def to_dict(self) -> dict[str, Any]:
        data = _non_empty(status_text=self.status_text)
        if self.error is not None:
            data["error"] = self.error.to_dict()
        return data


@dataclass
class ErrorDetail:
    """Error code and message carried by an error response."""

    error_code: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _non_empty(error_code=self.error_code, message=self.message)


@dataclass
class Message:
    """Response body for a failed request."""

    status_text: str = ""
    error: ErrorDetail | None = None
    description: Any = None

    def to_dict(self) -> dict[str, Any]:
        data = _non_empty(status_text=self.status_text)
        if self.error is not None:
            data["error"] = self.error.to_dict()
        if self.description is not None:
            data["description"] = self.description
        return data


_JSON_TYPES = ((bool, "bool"), ((int, float), "number"), (str, "string"), (list, "array"), (dict, "object"))
_TARGET_TYPES = {int: "int", float: "float64", str: "string"}


def _type_error(value: Any, target: str, name: str) -> ValueError:
    kind = next((label for types, label in _JSON_TYPES if isinstance(value, types)), type(value).__name__)
    return ValueError(f"json: cannot unmarshal {kind} into field {name} of type {target}")


def _get(raw: dict[str, Any], key: str, kind: type, prefix: str) -> Any:
    value = raw.get(key)
    if value is None:
        return kind()
    if kind is str:
        valid = isinstance(value, str)
    else:
        valid = not isinstance(value, bool) and isinstance(value, int if kind is int else (int, float))
    if not valid:
        raise _type_error(value, _TARGET_TYPES[kind], f"{prefix}.{key}")
    return kind(value)


def _decode_order(raw: Any, index: int) -> Order:
    raw = {} if raw is None else raw
    if not isinstance(raw, dict):
        raise _type_error(raw, "Order", f"Orders[{index}]")
    prefix = f"orders[{index}]"
    return Order(
        no=_get(raw, "no", int, prefix),
        platform_product_id=_get(raw, "platformProductId", str, prefix),
        qty=_get(raw, "qty", int, prefix),
        unit_price=_get(raw, "unitPrice", float, prefix),
        total_price=_get(raw, "totalPrice", float, prefix),
    )


def _validate_order(order: Order, index: int) -> None:
    base = f"OrderRequest.Orders[{index}]"
    if not order.platform_product_id:
        raise FieldValidationError("PlatformProductId", "required", namespace=f"{base}.PlatformProductId")
    checks = (
        ("Qty", order.qty, 1),
        ("UnitPrice", order.unit_price, 0),
        ("TotalPrice", order.total_price, 0),
    )
    for name, value, minimum in checks:
        if value == 0:
            raise FieldValidationError(name, "required", value=value, namespace=f"{base}.{name}")
        if value < minimum:
            raise FieldValidationError(name, "min", str(minimum), value, f"{base}.{name}")


def parse_order_request(data: Any) -> OrderRequest:
    """Decode and validate an order request from JSON text or a decoded mapping.

    Raises ValueError when the input is not of the expected shape and
    FieldValidationError when a field breaks a validation rule.
    """
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8")
    if isinstance(data, str):
        data = json.loads(data)
    if not isinstance(data, dict):
        raise _type_error(data, "OrderRequest", "request")

    raw_orders = data.get("orders")
    if raw_orders is None:
        raise FieldValidationError("Orders", "required", namespace="OrderRequest.Orders")
    if not isinstance(raw_orders, list):
        raise _type_error(raw_orders, "[]Order", "orders")

    orders = [_decode_order(raw, index) for index, raw in enumerate(raw_orders)]
    for index, order in enumerate(orders):
        _validate_order(order, index)
    return OrderRequest(orders=orders)