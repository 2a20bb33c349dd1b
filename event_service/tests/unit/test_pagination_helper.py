from __future__ import annotations

import math

import pytest

from shared.helpers.json_response_helper import build_pagination


@pytest.mark.parametrize(
    "page,limit,total",
    [(1, 10, 0), (1, 10, 10), (1, 10, 11), (2, 10, 11), (3, 7, 20), (5, 100, 1000)],
)
def test_pagination_math_is_consistent(page: int, limit: int, total: int) -> None:
    pagination = build_pagination(page, limit, total)

    assert pagination.totalPages == math.ceil(total / limit)
    assert pagination.totalItems == total
    assert pagination.itemsPerPage == limit
    assert pagination.currentPage == page
    assert pagination.hasNextPage == (page < pagination.totalPages)
    assert pagination.hasPrevPage == (page > 1)


def test_empty_collection_has_no_pages() -> None:
    pagination = build_pagination(1, 10, 0)

    assert pagination.totalPages == 0
    assert pagination.hasNextPage is False
    assert pagination.hasPrevPage is False


def test_page_past_the_end_still_reports_previous_page() -> None:
    pagination = build_pagination(4, 10, 25)

    assert pagination.totalPages == 3
    assert pagination.hasNextPage is False
    assert pagination.hasPrevPage is True
