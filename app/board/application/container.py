from __future__ import annotations

from board.application.listing_session import ListingSession
from board.application.usecases.fetch_listing import FetchListingUseCase
from board.application.usecases.get_posting_detail import GetPostingDetailUseCase
from board.domain.pagination import PAGE_SIZE
from common.adapters.django_job_repo import (
    DjangoJobPostingStore,
    close_thread_connection,
)
from common.ports.navigator import NavigatorPort
from django.conf import settings


def _page_size() -> int:
    return int(getattr(settings, "BOARD_PAGE_SIZE", PAGE_SIZE))


def build_fetch_listing_usecase() -> FetchListingUseCase:
    """
    Board 유스케이스 조립(Dependency Injection).
    """
    return FetchListingUseCase(store=DjangoJobPostingStore(), page_size=_page_size())


def build_get_posting_detail_usecase() -> GetPostingDetailUseCase:
    return GetPostingDetailUseCase(store=DjangoJobPostingStore())


def build_listing_session(*, navigator: NavigatorPort) -> ListingSession:
    usecase = FetchListingUseCase(
        store=DjangoJobPostingStore(),
        page_size=_page_size(),
        release_connection=close_thread_connection,
    )

    async def fetch_listing(state):
        return await usecase.execute_async(state=state)

    return ListingSession(
        navigator=navigator, fetch_listing=fetch_listing, page_size=_page_size()
    )
