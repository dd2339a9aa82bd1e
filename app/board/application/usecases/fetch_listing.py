from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from board.domain.filter_state import FilterState
from board.domain.pagination import PAGE_SIZE, PageWindow, build_page_window
from board.domain.posting import QueryResult
from board.domain.query import CompiledQuery, ListingQueryPlan, compile_listing
from common.application.result import Err, Ok, Result
from common.ports.job_repo import JobPostingStorePort, StoreError, StorePage

logger = logging.getLogger(__name__)

STORE_FAILURE_MESSAGE = "데이터를 불러오는 데 실패했습니다."


@dataclass(frozen=True, slots=True)
class ListingPage:
    state: FilterState
    result: QueryResult
    page_window: PageWindow


class FetchListingUseCase:
    """
    게시판 목록 조회 유스케이스.

    - 상태를 일반 공고 요청(페이지 범위 + 전체 건수)과 광고 공고 요청(1페이지만)으로 분리
    - 두 결과를 섞지 않고 QueryResult로 묶고 PageWindow 계산
    - 저장소 오류는 STORE_FAILURE 로 변환 (부분 결과를 반환하지 않음)
    """

    def __init__(
        self,
        *,
        store: JobPostingStorePort,
        page_size: int = PAGE_SIZE,
        release_connection: Optional[Callable[[], None]] = None,
    ):
        self._store = store
        self._page_size = page_size
        # execute_async 워커 스레드에서 조회가 끝날 때마다 호출
        self._release_connection = release_connection

    def execute(self, *, state: FilterState) -> Result[ListingPage]:
        plan = compile_listing(state, self._page_size)
        try:
            regular = self._store.fetch(plan.regular)
            ads = (
                self._store.fetch(plan.advertisement)
                if plan.advertisement is not None
                else None
            )
        except StoreError as e:
            return self._failure(state, e)
        return Ok(self._merge(state, regular, ads))

    async def execute_async(self, *, state: FilterState) -> Result[ListingPage]:
        """일반/광고 요청을 동시에 보냅니다. 두 요청은 상태를 공유하지 않습니다."""
        plan = compile_listing(state, self._page_size)
        try:
            regular, ads = await asyncio.gather(
                asyncio.to_thread(self._fetch_in_thread, plan.regular),
                self._fetch_ads(plan),
            )
        except StoreError as e:
            return self._failure(state, e)
        return Ok(self._merge(state, regular, ads))

    async def _fetch_ads(self, plan: ListingQueryPlan) -> StorePage | None:
        if plan.advertisement is None:
            return None
        return await asyncio.to_thread(self._fetch_in_thread, plan.advertisement)

    def _fetch_in_thread(self, query: CompiledQuery) -> StorePage:
        try:
            return self._store.fetch(query)
        finally:
            if self._release_connection is not None:
                self._release_connection()

    def _merge(
        self, state: FilterState, regular: StorePage, ads: StorePage | None
    ) -> ListingPage:
        total_count = regular.total_count or 0
        result = QueryResult(
            postings=tuple(regular.rows),
            advertisements=tuple(ads.rows) if ads is not None else (),
            total_count=total_count,
        )
        page_window = build_page_window(state.page, total_count, self._page_size)
        if page_window.is_out_of_range:
            logger.info(
                f"Requested page {state.page} is beyond last page "
                f"{page_window.total_pages} (board_type={state.board_type.value})"
            )
        return ListingPage(state=state, result=result, page_window=page_window)

    def _failure(self, state: FilterState, error: StoreError) -> Err:
        logger.error(
            f"Failed to fetch listing (board_type={state.board_type.value}, "
            f"page={state.page}): {error}",
            exc_info=True,
        )
        return Err(
            code="STORE_FAILURE",
            message=STORE_FAILURE_MESSAGE,
            details={"error": str(error)},
        )
