import pytest

from event_schema_codegen.utils import (
    snake_to_pascal_case,
    split_words,
    to_camel_case,
    to_screaming_snake_case,
    to_snake_case,
    upper_first,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first_name", ["first", "name"]),
        ("userID", ["user", "ID"]),
        ("XMLHttpRequest", ["XML", "Http", "Request"]),
        ("2ndEmail", ["2", "nd", "Email"]),
        ("order-completed.v2", ["order", "completed", "v", "2"]),
        ("", []),
    ],
)
def test_split_words(text, expected):
    assert split_words(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first_name", "FirstName"),
        ("FIRST_NAME", "FirstName"),
        ("actionTemplate", "ActionTemplate"),
        ("Order Completed", "OrderCompleted"),
    ],
)
def test_snake_to_pascal_case(text, expected):
    assert snake_to_pascal_case(text) == expected


def test_to_camel_case():
    assert to_camel_case("Order Completed") == "orderCompleted"
    assert to_camel_case("first_name") == "firstName"
    assert to_camel_case("") == ""


def test_to_snake_case():
    assert to_snake_case("orderID") == "order_id"
    assert to_snake_case("Order Completed") == "order_completed"


def test_to_screaming_snake_case():
    assert to_screaming_snake_case("in progress") == "IN_PROGRESS"
    assert to_screaming_snake_case("inProgress") == "IN_PROGRESS"


def test_upper_first():
    assert upper_first("orderCompleted") == "OrderCompleted"
    assert upper_first("") == ""
