"""
Tests for DjangoJobPostingStore

CompiledQuery -> Django ORM 변환 테스트
"""

from datetime import timedelta
from unittest.mock import patch

import pytest
from board.domain.catalog import BoardType
from board.domain.filter_state import FilterState
from board.domain.posting import MISSING_INFO
from board.domain.query import compile_advertisement, compile_regular
from board.models import JobPosting, Uploader
from common.adapters.django_job_repo import (
    DjangoJobPostingStore,
    close_thread_connection,
)
from common.ports.job_repo import StoreError
from django.db import DatabaseError
from django.utils import timezone


def create_test_job_posting(**kwargs):
    """테스트용 JobPosting 객체를 생성하는 헬퍼 함수"""
    defaults = {
        "title": "주방 보조 구합니다",
        "region1": "서울",
        "region2": "강남구",
        "category1": "음식점·카페",
        "category2": "주방",
        "board_type": BoardType.JOB_OFFER.value,
        "ad": False,
    }
    defaults.update(kwargs)
    return JobPosting.objects.create(**defaults)


@pytest.mark.django_db
class TestDjangoJobPostingStoreFetch:
    def setup_method(self):
        self.store = DjangoJobPostingStore()
        self.now = timezone.now()

    def test_filters_by_board_type_and_ad_flag(self):
        # Given
        regular = create_test_job_posting(title="일반 공고")
        create_test_job_posting(title="광고 공고", ad=True)
        create_test_job_posting(title="구직 글", board_type="1")

        # When
        page = self.store.fetch(compile_regular(FilterState()))

        # Then
        assert [p.id for p in page.rows] == [regular.id]
        assert page.total_count == 1

    def test_orders_by_updated_time_then_id_desc(self):
        old = create_test_job_posting(updated_time=self.now - timedelta(days=1))
        tie_a = create_test_job_posting(updated_time=self.now)
        tie_b = create_test_job_posting(updated_time=self.now)

        page = self.store.fetch(compile_regular(FilterState()))

        assert [p.id for p in page.rows] == [tie_b.id, tie_a.id, old.id]

    def test_paginates_with_total_count(self):
        for i in range(5):
            create_test_job_posting(
                title=f"공고 {i}", updated_time=self.now - timedelta(minutes=i)
            )

        page = self.store.fetch(compile_regular(FilterState(page=2), page_size=2))

        assert [p.title for p in page.rows] == ["공고 2", "공고 3"]
        assert page.total_count == 5

    def test_page_beyond_last_returns_empty_rows(self):
        create_test_job_posting()

        page = self.store.fetch(compile_regular(FilterState(page=4)))

        assert page.rows == ()
        assert page.total_count == 1

    def test_huge_offset_skips_row_query(self):
        create_test_job_posting()

        page = self.store.fetch(compile_regular(FilterState(page=10**20)))

        assert page.rows == ()
        assert page.total_count == 1

    def test_keyword_is_case_insensitive(self):
        match = create_test_job_posting(title="Python Backend Developer")
        create_test_job_posting(title="홀서빙")

        page = self.store.fetch(compile_regular(FilterState(keyword="python")))

        assert [p.id for p in page.rows] == [match.id]

    def test_location_filters(self):
        gangnam = create_test_job_posting()
        create_test_job_posting(region2="마포구")
        create_test_job_posting(region1="부산", region2="해운대구")

        page = self.store.fetch(
            compile_regular(FilterState(region1="서울", region2="강남구"))
        )

        assert [p.id for p in page.rows] == [gangnam.id]

    def test_market_board_ignores_location_values(self):
        """중고장터는 상태에 지역 값이 있어도 지역으로 거르지 않음"""
        seoul = create_test_job_posting(board_type="2", region1="서울")
        busan = create_test_job_posting(board_type="2", region1="부산")

        page = self.store.fetch(
            compile_regular(FilterState(region1="서울", board_type="2"))
        )

        assert {p.id for p in page.rows} == {seoul.id, busan.id}

    def test_advertisement_query_is_unbounded(self):
        for i in range(3):
            create_test_job_posting(ad=True, title=f"광고 {i}")
        create_test_job_posting()

        page = self.store.fetch(compile_advertisement(FilterState()))

        assert len(page.rows) == 3
        assert all(p.ad for p in page.rows)
        assert page.total_count is None

    def test_database_error_is_wrapped(self):
        with patch.object(
            JobPosting.objects, "filter", side_effect=DatabaseError("db down")
        ):
            with pytest.raises(StoreError):
                self.store.fetch(compile_regular(FilterState()))


def test_close_thread_connection_closes_current_connection():
    with patch("common.adapters.django_job_repo.connection") as mock_connection:
        close_thread_connection()

    mock_connection.close.assert_called_once_with()


@pytest.mark.django_db
class TestDjangoJobPostingStoreDetail:
    def setup_method(self):
        self.store = DjangoJobPostingStore()

    def test_detail_with_uploader(self):
        uploader = Uploader.objects.create(
            company_name="한식당", name="김사장", number="821012345678"
        )
        posting = create_test_job_posting(contents="주 5일 근무", uploader=uploader)

        detail = self.store.get_detail(posting.id)

        assert detail.posting.id == posting.id
        assert detail.contents == "주 5일 근무"
        assert detail.uploader.company_name == "한식당"
        assert detail.uploader.number == "821012345678"

    def test_detail_without_uploader_uses_fallback(self):
        posting = create_test_job_posting()

        detail = self.store.get_detail(posting.id)

        assert detail.uploader.company_name == MISSING_INFO
        assert detail.uploader.name == MISSING_INFO

    def test_detail_blank_uploader_fields_use_fallback(self):
        uploader = Uploader.objects.create(company_name="", name="홍길동")
        posting = create_test_job_posting(uploader=uploader)

        detail = self.store.get_detail(posting.id)

        assert detail.uploader.company_name == MISSING_INFO
        assert detail.uploader.name == "홍길동"

    def test_missing_posting(self):
        assert self.store.get_detail(999999) is None
