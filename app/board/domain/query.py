from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from board.domain.filter_state import FilterState
from board.domain.pagination import PAGE_SIZE, offset_for


class PostingField(str, Enum):
    ID = "id"
    TITLE = "title"
    UPDATED_TIME = "updated_time"
    REGION1 = "region1"
    REGION2 = "region2"
    CATEGORY1 = "category1"
    CATEGORY2 = "category2"
    BOARD_TYPE = "board_type"
    AD = "ad"


class Operator(str, Enum):
    EQ = "eq"
    ICONTAINS = "icontains"


@dataclass(frozen=True, slots=True)
class Predicate:
    field: PostingField
    op: Operator
    value: object


@dataclass(frozen=True, slots=True)
class OrderBy:
    field: PostingField
    descending: bool = True


# 최신 수정순, 같은 시각이면 id 역순으로 고정해 페이지 경계를 안정화
DEFAULT_ORDERING: tuple[OrderBy, ...] = (
    OrderBy(PostingField.UPDATED_TIME),
    OrderBy(PostingField.ID),
)


@dataclass(frozen=True, slots=True)
class CompiledQuery:
    """
    스토어에 전달되는 조회 요청.

    limit/offset 이 None 이면 범위 제한 없이 전체를 조회합니다.
    """

    predicates: tuple[Predicate, ...]
    ordering: tuple[OrderBy, ...] = DEFAULT_ORDERING
    limit: Optional[int] = None
    offset: Optional[int] = None
    with_count: bool = False

    def value_of(self, field: PostingField) -> object:
        for predicate in self.predicates:
            if predicate.field is field:
                return predicate.value
        return None


@dataclass(frozen=True, slots=True)
class ListingQueryPlan:
    regular: CompiledQuery
    advertisement: Optional[CompiledQuery]


def build_predicates(state: FilterState, *, advertisement: bool) -> tuple[Predicate, ...]:
    predicates = [
        Predicate(PostingField.BOARD_TYPE, Operator.EQ, state.board_type.value),
        Predicate(PostingField.AD, Operator.EQ, advertisement),
    ]

    # 지역/업종 조건은 구인·구직 게시판에서만 적용 (상태에 값이 남아 있어도 무시)
    if state.uses_location_filters:
        for field, value in (
            (PostingField.REGION1, state.region1),
            (PostingField.REGION2, state.region2),
            (PostingField.CATEGORY1, state.category1),
            (PostingField.CATEGORY2, state.category2),
        ):
            if value:
                predicates.append(Predicate(field, Operator.EQ, value))

    if state.keyword:
        predicates.append(
            Predicate(PostingField.TITLE, Operator.ICONTAINS, state.keyword)
        )
    return tuple(predicates)


def compile_regular(state: FilterState, page_size: int = PAGE_SIZE) -> CompiledQuery:
    return CompiledQuery(
        predicates=build_predicates(state, advertisement=False),
        limit=page_size,
        offset=offset_for(state.page, page_size),
        with_count=True,
    )


def compile_advertisement(state: FilterState) -> Optional[CompiledQuery]:
    """광고 공고는 첫 페이지에서만 조회합니다."""
    if state.page != 1:
        return None
    return CompiledQuery(predicates=build_predicates(state, advertisement=True))


def compile_listing(state: FilterState, page_size: int = PAGE_SIZE) -> ListingQueryPlan:
    return ListingQueryPlan(
        regular=compile_regular(state, page_size),
        advertisement=compile_advertisement(state),
    )
