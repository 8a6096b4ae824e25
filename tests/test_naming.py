from __future__ import annotations

import pytest

from modelgen.core.naming import camel_case, small_camel_case


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("user_id", "UserID"),
        ("id", "ID"),
        ("Id", "ID"),
        ("", ""),
        ("name", "Name"),
        ("created_at", "CreatedAt"),
        ("a_b", "AB"),
        ("order__line", "OrderLine"),
        ("_leading", "Leading"),
        ("trailing_", "Trailing"),
        ("userName", "UserName"),
        ("idx", "Idx"),
    ],
)
def test_camel_case(raw: str, expected: str):
    assert camel_case(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("user_name", "userName"),
        ("id", "id"),
        ("user_id", "userId"),
        ("Created_at", "CreatedAt"),
        ("", ""),
        ("order__line", "orderLine"),
        ("trailing_", "trailing"),
        ("_leading", "Leading"),
    ],
)
def test_small_camel_case(raw: str, expected: str):
    assert small_camel_case(raw) == expected


def test_camel_case_leaves_rest_of_segment_untouched():
    assert camel_case("hTTP_status") == "HTTPStatus"
    assert small_camel_case("http_sTATUS") == "httpSTATUS"
