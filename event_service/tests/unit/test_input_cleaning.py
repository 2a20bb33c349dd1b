from __future__ import annotations

import pytest
from pydantic import ValidationError

from shared.core.schemas import CommonQueryParams
from shared.wrappers.empty_string_model_wrapper import deep_clean


def test_deep_clean_trims_and_blanks_to_none() -> None:
    cleaned = deep_clean({"a": "  hi  ", "b": "   ", "c": ["\u200ex", " "], "d": {"e": "\ufeffy"}, "n": 3})

    assert cleaned["a"] == "hi"
    assert cleaned["b"] is None
    assert cleaned["c"][0] == "x"
    assert cleaned["c"][1] is None
    assert cleaned["d"]["e"] == "y"
    assert cleaned["n"] == 3


def test_query_defaults() -> None:
    params = CommonQueryParams()

    assert params.page == 1
    assert params.limit == 10
    assert params.status is None
    assert params.sortBy == "created_at"
    assert params.sortOrder == "desc"


@pytest.mark.parametrize(
    "overrides",
    [
        {"page": 0},
        {"limit": 0},
        {"limit": 101},
        {"search": "x" * 101},
        {"sortBy": "password"},
        {"sortOrder": "sideways"},
    ],
)
def test_query_bounds_are_enforced(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        CommonQueryParams(**overrides)


def test_blank_search_is_ignored() -> None:
    assert CommonQueryParams(search="   ").search is None
