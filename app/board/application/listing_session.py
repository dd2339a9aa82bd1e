from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional

from board.application.usecases.fetch_listing import (
    STORE_FAILURE_MESSAGE,
    ListingPage,
)
from board.domain.cascading import apply_changes
from board.domain.filter_state import FilterState
from board.domain.pagination import PAGE_SIZE, PageWindow, build_page_window
from board.domain.posting import QueryResult
from board.domain.url_sync import from_query, to_query
from common.application.result import Err, Result
from common.ports.navigator import NavigatorPort

logger = logging.getLogger(__name__)

ListingFetcher = Callable[[FilterState], Awaitable[Result[ListingPage]]]


class ListingSession:
    """
    화면(프레젠테이션) 한 개가 사용하는 목록 상태.

    동기화 트리거
    - mount(): 최초 진입 시 현재 URL에서 상태 복원
    - on_url_change(): 뒤로/앞으로 가기 등 외부 URL 변경
    - on_filter_change(): 필터 패널 변경 -> URL replace
    - on_page_change(): 페이지 이동 -> URL push (페이지별 북마크 가능)

    조회마다 버전 번호를 부여하고, 가장 최근에 보낸 요청의 응답만 반영합니다.
    """

    def __init__(
        self,
        *,
        navigator: NavigatorPort,
        fetch_listing: ListingFetcher,
        page_size: int = PAGE_SIZE,
    ):
        self._navigator = navigator
        self._fetch_listing = fetch_listing
        self._page_size = page_size
        self._latest_version = 0

        self.state = FilterState()
        self.result = QueryResult()
        self.page_window: PageWindow = build_page_window(1, 0, page_size)
        self.is_loading = False
        self.error: Optional[str] = None

    @property
    def latest_version(self) -> int:
        return self._latest_version

    async def mount(self) -> bool:
        return await self._load(from_query(self._navigator.read_query()))

    async def on_url_change(self, query: Mapping[str, Any]) -> bool:
        state = from_query(query)
        # 자신이 기록한 URL이 다시 들어온 경우 재조회하지 않음
        if self._latest_version and state == self.state:
            return False
        return await self._load(state)

    async def on_filter_change(self, partial: Mapping[str, Any]) -> bool:
        state = apply_changes(self.state, partial)
        self._navigator.replace(to_query(state))
        return await self._load(state)

    async def on_page_change(self, page: object) -> bool:
        state = self.state.with_page(page)
        self._navigator.push(to_query(state))
        return await self._load(state)

    async def _load(self, state: FilterState) -> bool:
        """응답이 반영되었으면 True, 더 최신 요청에 밀려 버려졌으면 False."""
        self._latest_version += 1
        version = self._latest_version
        self.state = state
        self.is_loading = True

        try:
            outcome = await self._fetch_listing(state)
        except Exception as e:
            logger.error(f"Listing fetch raised unexpectedly: {str(e)}", exc_info=True)
            outcome = Err(
                code="STORE_FAILURE",
                message=STORE_FAILURE_MESSAGE,
                details={"error": str(e)},
            )

        if version != self._latest_version:
            logger.debug(
                f"Discarded stale listing response (version={version}, "
                f"latest={self._latest_version})"
            )
            return False

        self.is_loading = False
        if isinstance(outcome, Err):
            # 이전 결과는 그대로 두고 에러 메시지만 노출
            logger.warning(f"Listing fetch failed: {outcome.code}")
            self.error = outcome.message
            return True

        listing = outcome.value
        self.result = listing.result
        self.page_window = listing.page_window
        self.error = None
        return True
