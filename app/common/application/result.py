"""
게시판 유스케이스 반환 타입

FetchListingUseCase 는 Ok(ListingPage), GetPostingDetailUseCase 는 Ok(PostingDetail)을
돌려주고, 실패는 Err 하나로 표현합니다. 뷰는 Err.code 로 HTTP 상태를 고르고
ListingSession 은 Err.message 를 화면 에러로 노출합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Err:
    """
    조회 실패.

    - code: "STORE_FAILURE"(저장소 오류, 500) 또는 "NOT_FOUND"(없는 공고, 404)
    - message: 사용자에게 보여줄 한국어 문구
    - details: 원본 예외 문자열 등 로그용 정보
    """

    code: str
    message: str
    details: Optional[dict] = None


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


Result = Ok[T] | Err
