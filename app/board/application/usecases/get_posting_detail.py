from __future__ import annotations

import logging

from board.application.usecases.fetch_listing import STORE_FAILURE_MESSAGE
from board.domain.posting import PostingDetail
from common.application.result import Err, Ok, Result
from common.ports.job_repo import JobPostingStorePort, StoreError

logger = logging.getLogger(__name__)


class GetPostingDetailUseCase:
    def __init__(self, *, store: JobPostingStorePort):
        self._store = store

    def execute(self, *, posting_id: int) -> Result[PostingDetail]:
        try:
            detail = self._store.get_detail(posting_id)
        except StoreError as e:
            logger.error(f"Failed to load job posting {posting_id}: {e}", exc_info=True)
            return Err(code="STORE_FAILURE", message=STORE_FAILURE_MESSAGE)

        if detail is None:
            return Err(code="NOT_FOUND", message=f"JobPosting {posting_id} not found")
        return Ok(detail)
