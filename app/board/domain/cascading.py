from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Any, Mapping

from board.domain.catalog import CATEGORY_CATALOG, REGION_CATALOG, BoardType
from board.domain.filter_state import (
    BOARD_TYPE_KEY,
    CATE1_KEY,
    CATE2_KEY,
    CITY1_KEY,
    CITY2_KEY,
    KEYWORD_KEY,
    FilterState,
)


class FilterField(str, Enum):
    """필터 패널에서 바꿀 수 있는 항목 (값은 URL 쿼리 키)"""

    REGION1 = CITY1_KEY
    REGION2 = CITY2_KEY
    CATEGORY1 = CATE1_KEY
    CATEGORY2 = CATE2_KEY
    KEYWORD = KEYWORD_KEY
    BOARD_TYPE = BOARD_TYPE_KEY


_ATTRS = {
    FilterField.REGION1: "region1",
    FilterField.REGION2: "region2",
    FilterField.CATEGORY1: "category1",
    FilterField.CATEGORY2: "category2",
    FilterField.KEYWORD: "keyword",
    FilterField.BOARD_TYPE: "board_type",
}

# 상위 필드 -> 하위 필드
_DEPENDENTS = {
    FilterField.REGION1: FilterField.REGION2,
    FilterField.CATEGORY1: FilterField.CATEGORY2,
}

# 상위 필드를 먼저 적용해야 함께 들어온 하위 값이 초기화되지 않음
_APPLY_ORDER = (
    FilterField.BOARD_TYPE,
    FilterField.REGION1,
    FilterField.CATEGORY1,
    FilterField.REGION2,
    FilterField.CATEGORY2,
    FilterField.KEYWORD,
)


def apply_change(current: FilterState, field: FilterField, new_value: Any) -> FilterState:
    """
    필터 한 항목을 변경한 새 상태를 반환합니다.

    - 1단계(지역/업종)가 바뀌면 2단계는 빈 값으로 초기화
    - 어떤 항목이든 변경되면 page는 1로 초기화 (게시판 변경 포함)
    """
    field = FilterField(field)
    attr = _ATTRS[field]

    if field is FilterField.BOARD_TYPE:
        value: Any = BoardType.parse(new_value)
    else:
        value = "" if new_value is None else str(new_value).strip()

    changes: dict[str, Any] = {attr: value, "page": 1}
    dependent = _DEPENDENTS.get(field)
    if dependent is not None and value != getattr(current, attr):
        changes[_ATTRS[dependent]] = ""

    # FilterState.__post_init__ 에서 상위 값이 빈 경우 하위 값을 비움
    return replace(current, **changes)


def apply_changes(current: FilterState, partial: Mapping[str, Any]) -> FilterState:
    """여러 항목을 한 번에 변경합니다. 알 수 없는 키는 무시합니다."""
    state = current
    for field in _APPLY_ORDER:
        if field.value in partial:
            state = apply_change(state, field, partial[field.value])
    return state


def level2_options(catalog: Mapping[str, tuple[str, ...]], level1: str) -> tuple[str, ...]:
    if not level1:
        return ()
    return catalog.get(level1, ())


def region2_options(region1: str) -> tuple[str, ...]:
    return level2_options(REGION_CATALOG, region1)


def category2_options(category1: str) -> tuple[str, ...]:
    return level2_options(CATEGORY_CATALOG, category1)
