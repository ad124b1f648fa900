import pytest

from dbd_converter.utils import Inflector


@pytest.mark.parametrize("name, expected", [
    ("order_item", "OrderItem"),
    ("user-profile", "UserProfile"),
    ("users", "Users"),
    ("order__line_item", "OrderLineItem"),
    ("_private", "Private"),
    ("orderItem", "OrderItem"),
    ("admin/user_group", "Admin::UserGroup"),
    ("", ""),
    (None, ""),
])
def test_camelize(name, expected):
    assert Inflector.camelize(name) == expected


def test_pluralize_appends_s():
    assert Inflector.pluralize("OrderItem") == "OrderItems"
    assert Inflector.pluralize("Category") == "Categorys"


@pytest.mark.parametrize("local_column, expected", [
    ("author_id", "Author"),
    ("parent_category_id", "ParentCategory"),
    ("id", ""),
    ("uid", ""),
    ("", ""),
    (None, ""),
])
def test_relation_alias_drops_three_character_suffix(local_column, expected):
    assert Inflector.relation_alias(local_column) == expected
