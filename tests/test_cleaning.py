import pytest

from ordercleaner.cleaning import (
    CleanOrderUsecase,
    InvalidInputError,
    clean_data,
    direct_string_mapping,
    extract_material_id_and_model_id,
)
from ordercleaner.models import CleanedOrder, Order, OrderRequest


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", ""),
        ("randomword", "randomword"),
        ("FG0A", "WIPING-CLOTH"),
        ("FG05", "ETC"),
    ],
)
def test_direct_string_mapping(value, expected):
    assert direct_string_mapping(value) == expected


@pytest.mark.parametrize("product_id", ["", "A-B-C-D-E", "A-B"])
def test_extract_rejects_wrong_part_count(product_id):
    with pytest.raises(InvalidInputError) as info:
        extract_material_id_and_model_id(product_id)
    assert str(info.value) == "INVALID_INPUT"


@pytest.mark.parametrize(
    "product_id, material_id, model_id",
    [
        ("FG0A-CLEAR-OPPOA3", "FG0A-CLEAR", "OPPOA3"),
        ("FG0A-CLEAR-OPPOA3-B", "FG0A-CLEAR", "OPPOA3-B"),
    ],
)
def test_extract_material_and_model(product_id, material_id, model_id):
    assert extract_material_id_and_model_id(product_id) == (material_id, model_id)


@pytest.mark.parametrize(
    "raw, ids, quantities, total",
    [
        ([], [], [], 0),
        (["  FG0A-CLEAR-OPPOA3 "], ["FG0A-CLEAR-OPPOA3"], [1], 1),
        (["FG0A-CLEAR-OPPOA3*3"], ["FG0A-CLEAR-OPPOA3"], [3], 3),
        (
            ["FG0A-CLEAR-OPPOA3", "FG0A-CLEAR-OPPOA4*5", "--FG0A-CLEAR-OPPOA6*2", "FG0A-CLEAR-OPPOA7*abc"],
            ["FG0A-CLEAR-OPPOA3", "FG0A-CLEAR-OPPOA4", "FG0A-CLEAR-OPPOA6", "FG0A-CLEAR-OPPOA7"],
            [1, 5, 2, 1],
            9,
        ),
        (["ABC123", "NOFHERE", "12345"], [], [], 0),
        (["FG123*2*3", "FG0A-CLEAR-OPPOA4*1"], ["FG0A-CLEAR-OPPOA4"], [1], 1),
    ],
)
def test_clean_data(raw, ids, quantities, total):
    assert clean_data(raw) == (ids, quantities, total)


def test_clean_data_quantity_with_sign_and_space():
    assert clean_data(["FG0A-CLEAR-X*+2", "FG0A-CLEAR-Y* 4"]) == (
        ["FG0A-CLEAR-X", "FG0A-CLEAR-Y"],
        [2, 1],
        3,
    )


def _request(*orders):
    return OrderRequest(
        orders=[
            Order(platform_product_id=pid, unit_price=unit, total_price=total, qty=qty)
            for pid, unit, total, qty in orders
        ]
    )


@pytest.mark.parametrize("product_id", ["AAAA", "AAAA-CLEAR-OPPOA3"])
def test_clean_orders_returns_empty(product_id):
    result = CleanOrderUsecase().clean_orders(_request((product_id, 10, 10, 1)))
    assert result.cleaned_orders == []


def test_clean_orders_single_product():
    result = CleanOrderUsecase().clean_orders(_request(("FG0A-CLEAR-IPHONE16PROMAX", 50, 100, 2)))
    assert result.cleaned_orders == [
        CleanedOrder(1, "FG0A-CLEAR-IPHONE16PROMAX", 2, 50, 100, "FG0A-CLEAR", "IPHONE16PROMAX"),
        CleanedOrder(2, "WIPING-CLOTH", 2, 0.0, 0.0),
        CleanedOrder(3, "CLEAR-CLEANER", 2, 0.0, 0.0),
    ]


def test_clean_orders_wrong_prefix():
    result = CleanOrderUsecase().clean_orders(
        _request(("x2-3&FG0A-CLEAR-IPHONE16PROMAX", 50, 100, 2))
    )
    assert result.cleaned_orders == [
        CleanedOrder(1, "FG0A-CLEAR-IPHONE16PROMAX", 2, 50, 100, "FG0A-CLEAR", "IPHONE16PROMAX"),
        CleanedOrder(2, "WIPING-CLOTH", 2, 0, 0),
        CleanedOrder(3, "CLEAR-CLEANER", 2, 0, 0),
    ]


def test_clean_orders_wrong_prefix_and_multiplication():
    result = CleanOrderUsecase().clean_orders(
        _request(("x2-3&FG0A-MATTE-IPHONE16PROMAX*3", 90, 90, 1))
    )
    assert result.cleaned_orders == [
        CleanedOrder(1, "FG0A-MATTE-IPHONE16PROMAX", 3, 30.0, 90.0, "FG0A-MATTE", "IPHONE16PROMAX"),
        CleanedOrder(2, "WIPING-CLOTH", 3, 0, 0),
        CleanedOrder(3, "MATTE-CLEANER", 3, 0, 0),
    ]


def test_clean_orders_bundle_split_by_slash():
    result = CleanOrderUsecase().clean_orders(
        _request(("FG0A-CLEAR-OPPOA3/%20xFG0A-CLEAR-OPPOA3-B", 80, 80, 1))
    )
    assert result.cleaned_orders == [
        CleanedOrder(1, "FG0A-CLEAR-OPPOA3", 1, 40.0, 40.0, "FG0A-CLEAR", "OPPOA3"),
        CleanedOrder(2, "FG0A-CLEAR-OPPOA3-B", 1, 40, 40, "FG0A-CLEAR", "OPPOA3-B"),
        CleanedOrder(3, "WIPING-CLOTH", 2, 0, 0),
        CleanedOrder(4, "CLEAR-CLEANER", 2, 0, 0),
    ]


def test_clean_orders_bundle_with_multiplication():
    result = CleanOrderUsecase().clean_orders(
        _request(("--FG0A-CLEAR-OPPOA3*2/FG0A-MATTE-OPPOA3", 120, 120, 1))
    )
    assert result.cleaned_orders == [
        CleanedOrder(1, "FG0A-CLEAR-OPPOA3", 2, 40, 80, "FG0A-CLEAR", "OPPOA3"),
        CleanedOrder(2, "FG0A-MATTE-OPPOA3", 1, 40, 40, "FG0A-MATTE", "OPPOA3"),
        CleanedOrder(3, "WIPING-CLOTH", 3, 0, 0),
        CleanedOrder(4, "CLEAR-CLEANER", 2, 0, 0),
        CleanedOrder(5, "MATTE-CLEANER", 1, 0, 0),
    ]


def test_clean_orders_bundle_and_single_product():
    result = CleanOrderUsecase().clean_orders(
        _request(
            ("--FG0A-CLEAR-OPPOA3*2/FG0A-MATTE-OPPOA3*2", 160, 160, 1),
            ("FG0A-PRIVACY-IPHONE16PROMAX", 50, 50, 1),
        )
    )
    assert result.cleaned_orders == [
        CleanedOrder(1, "FG0A-CLEAR-OPPOA3", 2, 40, 80, "FG0A-CLEAR", "OPPOA3"),
        CleanedOrder(2, "FG0A-MATTE-OPPOA3", 2, 40, 80, "FG0A-MATTE", "OPPOA3"),
        CleanedOrder(3, "FG0A-PRIVACY-IPHONE16PROMAX", 1, 50, 50, "FG0A-PRIVACY", "IPHONE16PROMAX"),
        CleanedOrder(4, "WIPING-CLOTH", 5, 0, 0),
        CleanedOrder(5, "CLEAR-CLEANER", 2, 0, 0),
        CleanedOrder(6, "MATTE-CLEANER", 2, 0, 0),
        CleanedOrder(7, "PRIVACY-CLEANER", 1, 0, 0),
    ]


def test_clean_orders_unmapped_film_type_and_lowercase_texture():
    result = CleanOrderUsecase().clean_orders(
        _request(("FG05-clear-X/FG99-matte-Y", 20, 20, 1))
    )
    assert [line.product_id for line in result.cleaned_orders] == [
        "FG05-clear-X",
        "FG99-matte-Y",
        "ETC",
        "FG99",
        "CLEAR-CLEANER",
        "MATTE-CLEANER",
    ]
    assert [line.no for line in result.cleaned_orders] == [1, 2, 3, 4, 5, 6]


def test_clean_orders_skips_invalid_part_of_bundle():
    result = CleanOrderUsecase().clean_orders(
        _request(("FG0A-CLEAR/FG0A-CLEAR-OPPOA3", 60, 60, 1))
    )
    assert result.cleaned_orders == [
        CleanedOrder(1, "FG0A-CLEAR-OPPOA3", 1, 30.0, 30.0, "FG0A-CLEAR", "OPPOA3"),
        CleanedOrder(2, "WIPING-CLOTH", 1, 0, 0),
        CleanedOrder(3, "CLEAR-CLEANER", 1, 0, 0),
    ]