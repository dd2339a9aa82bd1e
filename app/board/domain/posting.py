from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from board.domain.catalog import BoardType

MISSING_INFO = "정보 없음"


@dataclass(frozen=True, slots=True)
class Posting:
    id: int
    title: str
    updated_time: datetime
    region1: str
    region2: str
    category1: str
    category2: str
    board_type: BoardType
    ad: bool


@dataclass(frozen=True, slots=True)
class UploaderInfo:
    company_name: str = MISSING_INFO
    name: str = MISSING_INFO
    number: str = ""


@dataclass(frozen=True, slots=True)
class PostingDetail:
    posting: Posting
    contents: str
    uploader: UploaderInfo = field(default_factory=UploaderInfo)


@dataclass(frozen=True, slots=True)
class QueryResult:
    """
    한 번의 조회 결과.

    광고 공고와 일반 공고는 섞지 않고 각각의 순서를 유지합니다.
    광고 공고는 1페이지에서만 채워집니다.
    """

    postings: tuple[Posting, ...] = ()
    advertisements: tuple[Posting, ...] = ()
    total_count: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.postings and not self.advertisements


def format_phone_number(number: Optional[str]) -> str:
    """
    국가코드(82)로 저장된 12자리 번호를 010-1234-5678 형태로 바꿉니다.
    그 외 형식은 그대로 반환합니다.
    """
    if not number:
        return ""
    if len(number) == 12 and number.startswith("82"):
        local = f"0{number[2:]}"
        return f"{local[:3]}-{local[3:7]}-{local[7:]}"
    return number
