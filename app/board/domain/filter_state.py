from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from board.domain.catalog import DEFAULT_BOARD_TYPE, BoardType
from board.domain.pagination import clamp_page

# URL 쿼리 키 (기존 프론트엔드와 호환)
CITY1_KEY = "city1"
CITY2_KEY = "city2"
CATE1_KEY = "cate1"
CATE2_KEY = "cate2"
KEYWORD_KEY = "keyword"
PAGE_KEY = "page"
BOARD_TYPE_KEY = "board_type"


@dataclass(frozen=True, slots=True)
class FilterState:
    """
    목록 조회 상태.

    - region2/category2 는 상위(region1/category1) 값이 있을 때만 의미가 있으며,
      상위 값이 비어 있으면 생성 시점에 강제로 비웁니다.
    - page 는 항상 1 이상입니다.
    """

    region1: str = ""
    region2: str = ""
    category1: str = ""
    category2: str = ""
    keyword: str = ""
    board_type: BoardType = DEFAULT_BOARD_TYPE
    page: int = 1

    def __post_init__(self) -> None:
        if not self.region1 and self.region2:
            object.__setattr__(self, "region2", "")
        if not self.category1 and self.category2:
            object.__setattr__(self, "category2", "")
        if not isinstance(self.board_type, BoardType):
            object.__setattr__(self, "board_type", BoardType.parse(self.board_type))
        object.__setattr__(self, "page", clamp_page(self.page))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "FilterState":
        """
        URL 쿼리 등 임의의 key-value 매핑에서 상태를 만듭니다.

        없는 키는 기본값으로 채우고, 잘못된 값도 예외 없이 기본값으로 대체합니다.
        """
        raw = raw or {}
        return cls(
            region1=_text(raw, CITY1_KEY),
            region2=_text(raw, CITY2_KEY),
            category1=_text(raw, CATE1_KEY),
            category2=_text(raw, CATE2_KEY),
            keyword=_text(raw, KEYWORD_KEY),
            board_type=BoardType.parse(_text(raw, BOARD_TYPE_KEY)),
            page=clamp_page(_text(raw, PAGE_KEY)),
        )

    def with_page(self, page: object) -> "FilterState":
        return replace(self, page=clamp_page(page))

    @property
    def uses_location_filters(self) -> bool:
        return self.board_type.supports_location_filters


def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    # QueryDict.getlist / parse_qs 결과처럼 리스트로 들어오면 마지막 값을 사용
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else None
    if value is None:
        return ""
    if not isinstance(value, (str, int)) or isinstance(value, bool):
        return ""
    return str(value).strip()
