# app/conftest.py
"""
pytest fixtures for board tests

저장소/네비게이터 포트의 테스트용 구현을 제공합니다.
"""
from datetime import datetime, timedelta, timezone

import pytest
from board.domain.catalog import BoardType
from board.domain.posting import Posting
from board.domain.query import PostingField
from common.ports.job_repo import StoreError, StorePage

BASE_TIME = datetime(2024, 10, 1, 9, 0, tzinfo=timezone.utc)


def make_posting(posting_id: int, **kwargs) -> Posting:
    """테스트용 Posting 생성 헬퍼 (id가 클수록 최신)"""
    defaults = {
        "id": posting_id,
        "title": f"공고 {posting_id}",
        "updated_time": BASE_TIME + timedelta(minutes=posting_id),
        "region1": "",
        "region2": "",
        "category1": "",
        "category2": "",
        "board_type": BoardType.JOB_OFFER,
        "ad": False,
    }
    defaults.update(kwargs)
    return Posting(**defaults)


class FakeJobPostingStore:
    """
    CompiledQuery를 기록하고, 광고 여부에 따라 미리 정해둔 결과를 돌려줍니다.
    """

    def __init__(self, *, regular=(), ads=(), total_count=None, fail=False):
        self.regular = tuple(regular)
        self.ads = tuple(ads)
        self.total_count = len(self.regular) if total_count is None else total_count
        self.fail = fail
        self.queries = []
        self.details = {}

    def fetch(self, query):
        self.queries.append(query)
        if self.fail:
            raise StoreError("connection refused")
        if query.value_of(PostingField.AD) is True:
            return StorePage(rows=self.ads, total_count=None)
        return StorePage(rows=self.regular, total_count=self.total_count)

    def get_detail(self, posting_id):
        if self.fail:
            raise StoreError("connection refused")
        return self.details.get(posting_id)


class FakeNavigator:
    def __init__(self, query=None):
        self.query = dict(query or {})
        self.history = []

    def read_query(self):
        return dict(self.query)

    def replace(self, query):
        self.history.append(("replace", dict(query)))
        self.query = dict(query)

    def push(self, query):
        self.history.append(("push", dict(query)))
        self.query = dict(query)


@pytest.fixture
def fake_store():
    return FakeJobPostingStore(
        regular=[make_posting(i) for i in (3, 2, 1)],
        ads=[make_posting(10, ad=True)],
    )


@pytest.fixture
def fake_navigator():
    return FakeNavigator()
