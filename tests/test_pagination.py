"""Tests for jsonl_preview.pagination module."""

import math

import pytest

from conftest import make_jsonl
from jsonl_preview.pagination import compute_pagination, paginate_stream


async def _aiter(chunks):
    for chunk in chunks:
        yield chunk


def _chunked(text, size):
    data = text.encode("utf-8")
    return [data[i:i + size] for i in range(0, len(data), size)]


class TestComputePagination:
    """Tests for compute_pagination."""

    def test_first_of_three_pages(self):
        """25 items, page 1: three pages, next but no previous."""
        pagination = compute_pagination(25, 1, 10)

        assert pagination.total_pages == 3
        assert pagination.has_next is True
        assert pagination.has_previous is False

    def test_last_page(self):
        """25 items, page 3: no next, has previous."""
        pagination = compute_pagination(25, 3, 10)

        assert pagination.has_next is False
        assert pagination.has_previous is True

    def test_exact_multiple(self):
        """20 items fill exactly two pages."""
        pagination = compute_pagination(20, 2, 10)

        assert pagination.total_pages == 2
        assert pagination.has_next is False

    def test_zero_items(self):
        """No items means no pages."""
        pagination = compute_pagination(0, 1, 10)

        assert pagination.total_pages == 0
        assert pagination.has_next is False

    @pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 99, 100, 101])
    @pytest.mark.parametrize("page", [1, 2, 5, 11])
    def test_formulas(self, total, page):
        """Flags and page count follow from the total."""
        pagination = compute_pagination(total, page, 10)

        assert pagination.total_pages == math.ceil(total / 10)
        assert pagination.has_next == (total > page * 10)
        assert pagination.has_previous == (page > 1)
        assert pagination.page == page
        assert pagination.items_per_page == 10

    def test_rejects_zero_page_size(self):
        """page_size of zero is a caller error."""
        with pytest.raises(ValueError):
            compute_pagination(10, 1, 0)


class TestPaginateStream:
    """Tests for paginate_stream."""

    @pytest.mark.asyncio
    async def test_first_page(self):
        """Page 1 of 25 records holds the first ten."""
        result = await paginate_stream(_aiter(_chunked(make_jsonl(25), 64)), page=1, page_size=10)

        assert [item["id"] for item in result.items] == list(range(10))
        assert result.total_items == 25

    @pytest.mark.asyncio
    async def test_last_partial_page(self):
        """Page 3 of 25 records holds the last five."""
        result = await paginate_stream(_aiter(_chunked(make_jsonl(25), 64)), page=3, page_size=10)

        assert [item["id"] for item in result.items] == [20, 21, 22, 23, 24]
        assert result.total_items == 25

    @pytest.mark.asyncio
    @pytest.mark.parametrize("chunk_size", [1, 7, 4096])
    async def test_total_is_page_invariant(self, chunk_size):
        """Every page reports the same total, whatever the chunking."""
        text = make_jsonl(23)
        totals = set()
        collected = []

        for page in range(1, 5):
            result = await paginate_stream(_aiter(_chunked(text, chunk_size)), page, page_size=6)
            totals.add(result.total_items)
            collected.extend(item["id"] for item in result.items)

            expected = min(6, max(0, 23 - (page - 1) * 6))
            assert len(result.items) == expected

        assert totals == {23}
        assert collected == list(range(23))

    @pytest.mark.asyncio
    async def test_blank_lines_do_not_count(self):
        """Interspersed blank lines leave items and total unchanged."""
        clean = make_jsonl(12)
        padded = "\n\n" + clean.replace("\n", "\n  \n\n", 5) + "\n\t\n"

        expected = await paginate_stream(_aiter([clean.encode()]), page=2, page_size=5)
        result = await paginate_stream(_aiter(_chunked(padded, 11)), page=2, page_size=5)

        assert result.items == expected.items
        assert result.total_items == expected.total_items == 12

    @pytest.mark.asyncio
    async def test_no_trailing_newline(self):
        """The final unterminated line is counted and decoded."""
        text = make_jsonl(3).rstrip("\n")

        result = await paginate_stream(_aiter([text.encode()]), page=1, page_size=10)

        assert result.total_items == 3
        assert result.items[-1]["id"] == 2

    @pytest.mark.asyncio
    async def test_malformed_line_in_window(self):
        """A malformed record shrinks the page but still counts."""
        text = '{"id":0}\n{"id":1\n{"id":2}\n{"id":3}\n'

        result = await paginate_stream(_aiter([text.encode()]), page=1, page_size=3)

        assert [item["id"] for item in result.items] == [0, 2]
        assert result.total_items == 4
        assert [e.line_index for e in result.parse_errors] == [1]

    @pytest.mark.asyncio
    async def test_empty_stream(self):
        """An empty body has no items and no lines."""
        result = await paginate_stream(_aiter([]), page=1, page_size=10)

        assert result.items == []
        assert result.total_items == 0

    @pytest.mark.asyncio
    async def test_page_beyond_end(self):
        """A page past the end is empty but still reports the total."""
        result = await paginate_stream(_aiter([make_jsonl(5).encode()]), page=3, page_size=10)

        assert result.items == []
        assert result.total_items == 5
