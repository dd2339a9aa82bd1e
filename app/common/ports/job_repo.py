from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from board.domain.posting import Posting, PostingDetail
from board.domain.query import CompiledQuery


class StoreError(Exception):
    """채용 공고 저장소 조회 실패 (DB/네트워크 오류 등)"""


@dataclass(frozen=True, slots=True)
class StorePage:
    rows: tuple[Posting, ...]
    total_count: Optional[int] = None


class JobPostingStorePort(Protocol):
    def fetch(self, query: CompiledQuery) -> StorePage: ...

    def get_detail(self, posting_id: int) -> Optional[PostingDetail]: ...
