"""Tests for slug derivation."""

import pytest

from storefront.utils.slug import derive_slug


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Gaming Laptop", "gaming-laptop"),
        ("  Padded   Trimmed  ", "padded-trimmed"),
        ("Café Crème", "cafe-creme"),
        ("T-Shirt (XL)", "t-shirt-xl"),
    ],
)
def test_derive_slug(name, expected):
    assert derive_slug(name) == expected


def test_derive_slug_is_stable():
    assert derive_slug("Noise Cancelling Headphones") == derive_slug("Noise Cancelling Headphones")


def test_derive_slug_is_fixed_point_on_its_output():
    slug = derive_slug("Smart Watch Pro 2")
    assert derive_slug(slug) == slug


def test_names_differing_only_in_case_collide():
    assert derive_slug("Gaming Laptop") == derive_slug("GAMING laptop")


def test_symbols_only_name_gives_empty_slug():
    assert derive_slug("!!!") == ""
