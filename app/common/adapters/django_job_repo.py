from __future__ import annotations

import logging
from typing import Optional

from board.domain.catalog import BoardType
from board.domain.posting import MISSING_INFO, Posting, PostingDetail, UploaderInfo
from board.domain.query import CompiledQuery, Operator, OrderBy, Predicate
from board.models import JobPosting
from common.ports.job_repo import JobPostingStorePort, StoreError, StorePage
from django.db import DatabaseError, connection

logger = logging.getLogger(__name__)

_LOOKUP_SUFFIX = {
    Operator.EQ: "",
    Operator.ICONTAINS: "__icontains",
}


class DjangoJobPostingStore(JobPostingStorePort):
    def fetch(self, query: CompiledQuery) -> StorePage:
        try:
            queryset = JobPosting.objects.filter(
                **_to_lookups(query.predicates)
            ).order_by(*_to_ordering(query.ordering))
            total_count = queryset.count() if query.with_count else None
            start = query.offset or 0
            if total_count is not None and start >= total_count:
                # 마지막 페이지 이후: DB가 표현할 수 없는 offset도 조회하지 않음
                rows = ()
            else:
                if query.limit is not None:
                    queryset = queryset[start : start + query.limit]
                rows = tuple(_to_domain(obj) for obj in queryset)
        except DatabaseError as e:
            raise StoreError(f"Failed to query job postings: {e}") from e

        return StorePage(rows=rows, total_count=total_count)

    def get_detail(self, posting_id: int) -> Optional[PostingDetail]:
        try:
            obj = (
                JobPosting.objects.select_related("uploader")
                .filter(id=posting_id)
                .first()
            )
        except DatabaseError as e:
            raise StoreError(f"Failed to load job posting {posting_id}: {e}") from e

        if obj is None:
            return None

        uploader = obj.uploader
        if uploader is None:
            logger.info(f"JobPosting {posting_id} has no uploader")
            uploader_info = UploaderInfo()
        else:
            uploader_info = UploaderInfo(
                company_name=uploader.company_name or MISSING_INFO,
                name=uploader.name or MISSING_INFO,
                number=uploader.number or "",
            )

        return PostingDetail(
            posting=_to_domain(obj),
            contents=obj.contents or "",
            uploader=uploader_info,
        )


def close_thread_connection() -> None:
    """
    현재 스레드의 DB 커넥션을 닫습니다.

    asyncio.to_thread 워커에서 연 커넥션은 요청 종료 시그널로 정리되지 않으므로
    조회가 끝날 때마다 호출합니다.
    """
    connection.close()


def _to_lookups(predicates: tuple[Predicate, ...]) -> dict:
    return {
        f"{predicate.field.value}{_LOOKUP_SUFFIX[predicate.op]}": predicate.value
        for predicate in predicates
    }


def _to_ordering(ordering: tuple[OrderBy, ...]) -> list[str]:
    return [f"-{o.field.value}" if o.descending else o.field.value for o in ordering]


def _to_domain(obj: JobPosting) -> Posting:
    return Posting(
        id=obj.id,
        title=obj.title,
        updated_time=obj.updated_time,
        region1=obj.region1,
        region2=obj.region2,
        category1=obj.category1,
        category2=obj.category2,
        board_type=BoardType.parse(obj.board_type),
        ad=obj.ad,
    )
