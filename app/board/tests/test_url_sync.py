"""
Tests for URL <-> state synchronization
"""

from urllib.parse import parse_qs, urlencode

import pytest
from board.domain.catalog import BoardType
from board.domain.filter_state import FilterState
from board.domain.url_sync import QUERY_KEYS, from_query, to_query


class TestToQuery:
    def test_emits_every_key_including_empty(self):
        query = to_query(FilterState(region1="서울"))

        assert query == {
            "city1": "서울",
            "city2": "",
            "cate1": "",
            "cate2": "",
            "keyword": "",
            "page": "1",
            "board_type": "0",
        }
        assert tuple(query) == QUERY_KEYS


class TestRoundTrip:
    @pytest.mark.parametrize(
        "state",
        [
            FilterState(),
            FilterState(region1="서울", region2="강남구", page=3),
            FilterState(category1="IT·디자인", category2="개발", keyword="백엔드"),
            FilterState(board_type=BoardType.REAL_ESTATE, keyword="원룸", page=12),
            FilterState(
                region1="부산",
                region2="해운대구",
                category1="음식점·카페",
                category2="주방",
                keyword="Chef & Cook",
                board_type=BoardType.JOB_SEEK,
                page=2,
            ),
        ],
    )
    def test_state_round_trip(self, state):
        assert from_query(to_query(state)) == state

    def test_round_trip_through_encoded_url(self):
        """실제 URL 인코딩/디코딩을 거쳐도 동일한 상태"""
        state = FilterState(region1="서울", category1="IT·디자인", keyword="a&b=c", page=2)

        decoded = parse_qs(urlencode(to_query(state)), keep_blank_values=True)

        assert from_query(decoded) == state

    def test_query_round_trip_adds_missing_keys(self):
        """fromQuery -> toQuery 는 빠진 키를 빈 문자열로 채운 동일 매핑"""
        raw = {"city1": "서울", "cate1": "IT·디자인", "page": "2", "board_type": "0"}

        query = to_query(from_query(raw))

        assert {k: v for k, v in query.items() if k in raw} == raw
        assert query["city2"] == ""
        assert query["cate2"] == ""
        assert query["keyword"] == ""
