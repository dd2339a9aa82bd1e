from __future__ import annotations

from typing import Any, Mapping

from board.domain.filter_state import (
    BOARD_TYPE_KEY,
    CATE1_KEY,
    CATE2_KEY,
    CITY1_KEY,
    CITY2_KEY,
    KEYWORD_KEY,
    PAGE_KEY,
    FilterState,
)

QUERY_KEYS = (
    CITY1_KEY,
    CITY2_KEY,
    CATE1_KEY,
    CATE2_KEY,
    KEYWORD_KEY,
    PAGE_KEY,
    BOARD_TYPE_KEY,
)


def to_query(state: FilterState) -> dict[str, str]:
    """
    상태를 URL 쿼리 매핑으로 변환합니다.

    빈 필터 값도 생략하지 않고 내보내 URL 형태를 일정하게 유지합니다.
    """
    return {
        CITY1_KEY: state.region1,
        CITY2_KEY: state.region2,
        CATE1_KEY: state.category1,
        CATE2_KEY: state.category2,
        KEYWORD_KEY: state.keyword,
        PAGE_KEY: str(state.page),
        BOARD_TYPE_KEY: state.board_type.value,
    }


def from_query(mapping: Mapping[str, Any] | None) -> FilterState:
    return FilterState.from_mapping(mapping)
