"""Tests for category management."""

import asyncpg
import pytest

from storefront.exceptions import ConflictError, NotFoundError, ValidationError
from storefront.services.category_service import CategoryService

from .conftest import category_row


@pytest.fixture
def service(db):
    return CategoryService(db)


class TestAddCategory:
    async def test_creates_with_slug(self, service, conn):
        conn.fetchval.return_value = False
        conn.fetchrow.return_value = category_row(name="Home Office", slug="home-office")

        category = await service.add_category("  Home Office ")

        assert category.slug == "home-office"
        assert conn.fetchrow.call_args.args[1:] == ("Home Office", "home-office", None)

    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_empty_name(self, service, conn, name):
        with pytest.raises(ValidationError) as exc:
            await service.add_category(name)

        assert exc.value.status == 400
        conn.fetchrow.assert_not_called()

    @pytest.mark.parametrize("name", ["A", "x" * 51])
    async def test_name_length_bounds(self, service, name):
        with pytest.raises(ValidationError):
            await service.add_category(name)

    async def test_name_length_limits_accepted(self, service, conn):
        conn.fetchval.return_value = False
        conn.fetchrow.return_value = category_row()

        await service.add_category("TV")
        await service.add_category("x" * 50)

        assert conn.fetchrow.call_count == 2

    async def test_slug_longer_than_column(self, service, conn, monkeypatch):
        monkeypatch.setattr("storefront.services.category_service.derive_slug", lambda name: "x" * 256)

        with pytest.raises(ValidationError) as exc:
            await service.add_category("Gadgets")

        assert exc.value.message == "Category name is too long to build a slug from"
        conn.fetchrow.assert_not_called()

    async def test_description_too_long(self, service):
        with pytest.raises(ValidationError):
            await service.add_category("Books", "d" * 501)

    async def test_case_insensitive_duplicate(self, service, conn):
        conn.fetchval.return_value = True

        with pytest.raises(ConflictError) as exc:
            await service.add_category("ELECTRONICS")

        assert exc.value.status == 409
        assert exc.value.message == "Category already exists"
        conn.fetchrow.assert_not_called()

    async def test_duplicate_caught_by_index(self, service, conn):
        conn.fetchval.return_value = False
        conn.fetchrow.side_effect = asyncpg.UniqueViolationError("categories_name_lower_key")

        with pytest.raises(ConflictError):
            await service.add_category("Electronics")


class TestUpdateCategory:
    async def test_renames_and_reslugs(self, service, conn):
        conn.fetchval.side_effect = [1, False]
        conn.fetchrow.return_value = category_row(name="Gadgets", slug="gadgets")

        category = await service.update_category("3", "Gadgets")

        assert category.slug == "gadgets"
        assert conn.fetchrow.call_args.args[1:] == ("Gadgets", "gadgets", 3)

    async def test_unknown_id(self, service, conn):
        conn.fetchval.return_value = None

        with pytest.raises(NotFoundError):
            await service.update_category(99, "Gadgets")

    async def test_name_required(self, service):
        with pytest.raises(ValidationError) as exc:
            await service.update_category(3, " ")

        assert exc.value.message == "Category name is required"

    async def test_name_taken_by_other_category(self, service, conn):
        conn.fetchval.side_effect = [1, True]

        with pytest.raises(ConflictError):
            await service.update_category(3, "Books")


class TestLookupAndDelete:
    async def test_get_by_slug(self, service, conn):
        conn.fetchrow.return_value = category_row()

        category = await service.get_category_by_slug("electronics")

        assert category.name == "Electronics"

    async def test_get_by_slug_missing(self, service, conn):
        with pytest.raises(NotFoundError):
            await service.get_category_by_slug("nope")

    async def test_list(self, service, conn):
        conn.fetch.return_value = [category_row(), category_row(category_id=4, name="Books", slug="books")]

        categories = await service.get_all_categories()

        assert [c.slug for c in categories] == ["electronics", "books"]

    async def test_delete(self, service, conn):
        conn.fetchval.return_value = 3

        await service.delete_category(3)

    async def test_delete_missing(self, service, conn):
        with pytest.raises(NotFoundError):
            await service.delete_category(3)
