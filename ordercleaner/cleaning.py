"""Cleaning of raw platform orders into product, film and cleaner lines."""

from __future__ import annotations

import math
import re

from ordercleaner.models import CleanedOrder, CleanedOrderResponse, OrderRequest

FG = "FG"
FG0A = "FG0A"
FG05 = "FG05"
WIPING_CLOTH = "WIPING-CLOTH"
ETC = "ETC"

SEPARATOR = "-"
MULTIPLICATION = "*"
FORWARD_SLASH = "/"

CLEANER = "CLEANER"

ERR_INVALID_INPUT = "INVALID_INPUT"

_REPLACEMENTS = {
    FG0A: WIPING_CLOTH,
    FG05: ETC,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class InvalidInputError(ValueError):
    """A product identifier does not have the expected shape."""

    def __init__(self) -> None:
        super().__init__(ERR_INVALID_INPUT)


def direct_string_mapping(value: str) -> str:
    """Return the replacement product for a film type, or the value unchanged."""
    return _REPLACEMENTS.get(value, value)


def extract_material_id_and_model_id(product_id: str) -> tuple[str, str]:
    """Split a product id into its material id and model id.

    Raises InvalidInputError unless the id has three or four dash-separated parts.
    """
    parts = product_id.split(SEPARATOR)
    if not 3 <= len(parts) <= 4:
        raise InvalidInputError()
    return SEPARATOR.join(parts[:2]), SEPARATOR.join(parts[2:])


def _parse_int(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def clean_data(platform_product_ids: list[str]) -> tuple[list[str], list[int], int]:
    """Strip prefixes and quantity suffixes from raw platform product ids.

    Returns the cleaned ids, the quantity of each and the sum of quantities.
    Ids without "FG" or with more than one "*" are dropped.
    """
    cleaned: list[str] = []
    quantities: list[int] = []
    for raw in platform_product_ids:
        fg_index = raw.find(FG)
        if fg_index == -1:
            continue
        parts = raw[fg_index:].strip().split(MULTIPLICATION)
        if len(parts) > 2:
            continue
        cleaned.append(parts[0])
        qty = _parse_int(parts[1]) if len(parts) == 2 else None
        quantities.append(1 if qty is None else qty)
    return cleaned, quantities, sum(quantities)


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class CleanOrderUsecase:
    """Turns platform orders into cleaned product lines plus complementary items."""

    def clean_orders(self, request: OrderRequest) -> CleanedOrderResponse:
        cleaned_orders: list[CleanedOrder] = []
        film_quantities: dict[str, int] = {}
        texture_quantities: dict[str, int] = {}
        next_no = 1

        for order in request.orders:
            product_ids, quantities, total_quantity = clean_data(
                order.platform_product_id.split(FORWARD_SLASH)
            )
            unit_price_per_item = _divide(order.unit_price, float(total_quantity))
            total_price_per_item = _divide(order.total_price, float(total_quantity * order.qty))

            for product_id, item_qty in zip(product_ids, quantities):
                product_qty = item_qty * order.qty
                try:
                    material_id, model_id = extract_material_id_and_model_id(product_id)
                except InvalidInputError:
                    continue

                cleaned_orders.append(
                    CleanedOrder(
                        no=next_no,
                        product_id=product_id,
                        material_id=material_id,
                        model_id=model_id,
                        qty=product_qty,
                        unit_price=unit_price_per_item,
                        total_price=total_price_per_item * product_qty,
                    )
                )
                next_no += 1

                film_type, texture = material_id.split(SEPARATOR)[:2]
                film_quantities[film_type] = film_quantities.get(film_type, 0) + product_qty
                texture_quantities[texture] = texture_quantities.get(texture, 0) + product_qty

        for film_type, quantity in film_quantities.items():
            cleaned_orders.append(
                CleanedOrder(
                    no=next_no,
                    product_id=direct_string_mapping(film_type),
                    qty=quantity,
                    unit_price=0.0,
                    total_price=0.0,
                )
            )
            next_no += 1

        for texture, quantity in texture_quantities.items():
            cleaned_orders.append(
                CleanedOrder(
                    no=next_no,
                    product_id=texture.upper() + SEPARATOR + CLEANER,
                    qty=quantity,
                    unit_price=0.0,
                    total_price=0.0,
                )
            )
            next_no += 1

        return CleanedOrderResponse(cleaned_orders=cleaned_orders)