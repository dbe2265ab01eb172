"""
Tests for the parts catalog service.
"""

from decimal import Decimal

import pytest

from catalog.services.part_service import (
    create_part,
    delete_part,
    get_part_by_id,
    get_part_categories,
    get_parts,
    update_part,
)


@pytest.fixture
def brake_pad():
    return {
        "id": "part-1",
        "part_number": "BP-100",
        "name_en": "Brake pad",
        "name_ru": "Тормозная колодка",
        "category": "Brakes",
        "price": 25.5,
        "qty": 4,
        "image_url": None,
    }


class TestGetParts:

    @pytest.mark.asyncio
    async def test_lists_parts_with_pagination(self, supabase_client, make_query, brake_pad):
        query = make_query([brake_pad])
        supabase_client.table.return_value = query

        parts = await get_parts(supabase_client, limit=10, offset=20)

        assert parts == [brake_pad]
        supabase_client.table.assert_called_with("catalog_parts")
        query.order.assert_called_once_with("part_number")
        query.range.assert_called_once_with(20, 29)
        query.eq.assert_not_called()
        query.or_.assert_not_called()

    @pytest.mark.asyncio
    async def test_category_filter(self, supabase_client, make_query):
        query = make_query([])
        supabase_client.table.return_value = query

        await get_parts(supabase_client, category="Brakes")

        query.eq.assert_called_once_with("category", "Brakes")

    @pytest.mark.asyncio
    async def test_search_matches_number_and_both_names(self, supabase_client, make_query):
        query = make_query([])
        supabase_client.table.return_value = query

        await get_parts(supabase_client, search="  pad ")

        filters = query.or_.call_args.args[0]
        assert 'part_number.ilike."%pad%"' in filters
        assert 'name_en.ilike."%pad%"' in filters
        assert 'name_ru.ilike."%pad%"' in filters

    @pytest.mark.asyncio
    async def test_search_with_parentheses_and_commas_is_quoted(self, supabase_client, make_query):
        query = make_query([])
        supabase_client.table.return_value = query

        await get_parts(supabase_client, search="filter (oil), 5W")

        filters = query.or_.call_args.args[0]
        assert filters == (
            'part_number.ilike."%filter (oil), 5W%",'
            'name_en.ilike."%filter (oil), 5W%",'
            'name_ru.ilike."%filter (oil), 5W%"'
        )

    @pytest.mark.asyncio
    async def test_search_escapes_wildcards_and_quotes(self, supabase_client, make_query):
        query = make_query([])
        supabase_client.table.return_value = query

        await get_parts(supabase_client, search='50%_off "x"')

        filters = query.or_.call_args.args[0]
        assert filters.startswith(r'part_number.ilike."%50\\%\\_off \"x\"%",')


class TestSinglePart:

    @pytest.mark.asyncio
    async def test_found(self, supabase_client, make_query, brake_pad):
        supabase_client.table.return_value = make_query([brake_pad])

        assert await get_part_by_id(supabase_client, "part-1") == brake_pad

    @pytest.mark.asyncio
    async def test_not_found(self, supabase_client, make_query):
        supabase_client.table.return_value = make_query([])

        assert await get_part_by_id(supabase_client, "missing") is None


@pytest.mark.asyncio
async def test_categories_are_distinct_and_sorted(supabase_client, make_query):
    supabase_client.table.return_value = make_query([
        {"category": "Engine"},
        {"category": "Brakes"},
        {"category": "Engine"},
        {"category": None},
    ])

    assert await get_part_categories(supabase_client) == ["Brakes", "Engine"]


class TestMaintainParts:

    @pytest.mark.asyncio
    async def test_create_sends_price_as_string(self, supabase_client, make_query, brake_pad):
        query = make_query([brake_pad])
        supabase_client.table.return_value = query

        await create_part(
            supabase_client,
            part_number="BP-100",
            name_en="Brake pad",
            name_ru="Тормозная колодка",
            category="Brakes",
            price=Decimal("25.50"),
            qty=4,
        )

        payload = query.insert.call_args.args[0]
        assert payload["price"] == "25.50"
        assert payload["qty"] == 4
        assert "image_url" not in payload

    @pytest.mark.asyncio
    async def test_create_rejects_negative_stock(self, supabase_client):
        with pytest.raises(ValueError):
            await create_part(
                supabase_client, "X", "x", "x", "Misc", price="1.00", qty=-1
            )

    @pytest.mark.asyncio
    async def test_update_stamps_updated_at(self, supabase_client, make_query, brake_pad):
        query = make_query([{**brake_pad, "qty": 10}])
        supabase_client.table.return_value = query

        result = await update_part(supabase_client, "part-1", qty=10)

        assert result["qty"] == 10
        payload = query.update.call_args.args[0]
        assert payload["qty"] == 10
        assert "updated_at" in payload

    @pytest.mark.asyncio
    async def test_update_missing_part(self, supabase_client, make_query):
        supabase_client.table.return_value = make_query([])

        assert await update_part(supabase_client, "missing", name_en="New") is None

    @pytest.mark.asyncio
    async def test_delete(self, supabase_client, make_query, brake_pad):
        supabase_client.table.return_value = make_query([brake_pad])

        assert await delete_part(supabase_client, "part-1") is True

    @pytest.mark.asyncio
    async def test_delete_missing(self, supabase_client, make_query):
        supabase_client.table.return_value = make_query([])

        assert await delete_part(supabase_client, "missing") is False
