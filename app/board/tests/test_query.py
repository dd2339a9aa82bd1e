"""
Tests for query compiler

상태 -> 스토어 조회 요청 변환 테스트
"""

import pytest
from board.domain.filter_state import FilterState
from board.domain.query import (
    DEFAULT_ORDERING,
    Operator,
    OrderBy,
    PostingField,
    Predicate,
    compile_advertisement,
    compile_listing,
    compile_regular,
)


def _fields(query):
    return {p.field for p in query.predicates}


class TestCompileRegular:
    def test_board_scenario(self):
        """?city1=서울&cate1=IT·디자인&page=2&board_type=0"""
        state = FilterState.from_mapping(
            {"city1": "서울", "cate1": "IT·디자인", "page": "2", "board_type": "0"}
        )

        plan = compile_listing(state)

        assert set(plan.regular.predicates) == {
            Predicate(PostingField.BOARD_TYPE, Operator.EQ, "0"),
            Predicate(PostingField.AD, Operator.EQ, False),
            Predicate(PostingField.REGION1, Operator.EQ, "서울"),
            Predicate(PostingField.CATEGORY1, Operator.EQ, "IT·디자인"),
        }
        assert plan.regular.offset == 50
        assert plan.regular.limit == 50
        assert plan.regular.with_count is True
        assert plan.advertisement is None

    def test_minimal_predicates(self):
        query = compile_regular(FilterState())

        assert query.predicates == (
            Predicate(PostingField.BOARD_TYPE, Operator.EQ, "0"),
            Predicate(PostingField.AD, Operator.EQ, False),
        )
        assert query.offset == 0

    @pytest.mark.parametrize("board_type", ["2", "3"])
    def test_market_and_real_estate_ignore_location_filters(self, board_type):
        """중고장터/부동산은 지역·업종 값이 있어도 조건에서 제외"""
        state = FilterState(
            region1="서울",
            region2="강남구",
            category1="IT·디자인",
            category2="개발",
            board_type=board_type,
        )

        plan = compile_listing(state)

        for query in (plan.regular, plan.advertisement):
            assert _fields(query).isdisjoint(
                {
                    PostingField.REGION1,
                    PostingField.REGION2,
                    PostingField.CATEGORY1,
                    PostingField.CATEGORY2,
                }
            )
            assert query.value_of(PostingField.BOARD_TYPE) == board_type

    @pytest.mark.parametrize("board_type", ["0", "1"])
    def test_job_boards_apply_all_location_filters(self, board_type):
        state = FilterState(
            region1="서울",
            region2="강남구",
            category1="IT·디자인",
            category2="개발",
            board_type=board_type,
        )

        query = compile_regular(state)

        assert query.value_of(PostingField.REGION2) == "강남구"
        assert query.value_of(PostingField.CATEGORY2) == "개발"

    def test_keyword_is_case_insensitive_title_match(self):
        query = compile_regular(FilterState(keyword="Python", board_type="2"))

        assert Predicate(PostingField.TITLE, Operator.ICONTAINS, "Python") in (
            query.predicates
        )

    def test_ordering_is_newest_first_with_id_tiebreak(self):
        query = compile_regular(FilterState())

        assert query.ordering == DEFAULT_ORDERING
        assert query.ordering == (
            OrderBy(PostingField.UPDATED_TIME, descending=True),
            OrderBy(PostingField.ID, descending=True),
        )

    def test_custom_page_size(self):
        query = compile_regular(FilterState(page=3), page_size=20)

        assert query.limit == 20
        assert query.offset == 40


class TestCompileAdvertisement:
    def test_only_on_first_page(self):
        assert compile_advertisement(FilterState(page=1)) is not None
        assert compile_advertisement(FilterState(page=2)) is None

    def test_unbounded_and_scoped_to_same_filters(self):
        state = FilterState(region1="부산", keyword="주방")

        ads = compile_advertisement(state)
        regular = compile_regular(state)

        assert ads.limit is None
        assert ads.offset is None
        assert ads.with_count is False
        assert ads.value_of(PostingField.AD) is True
        assert set(ads.predicates) - set(regular.predicates) == {
            Predicate(PostingField.AD, Operator.EQ, True)
        }
