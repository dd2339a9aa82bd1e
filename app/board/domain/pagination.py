from __future__ import annotations

import math
from dataclasses import dataclass

PAGE_SIZE = 50


def clamp_page(value: object) -> int:
    """
    페이지 번호를 양의 정수로 정규화합니다.

    - 숫자로 변환할 수 없거나 1 미만이면 1
    - 스토어에 음수 offset이 전달되는 일이 없도록 보장
    """
    if value is None or isinstance(value, bool):
        return 1
    if isinstance(value, int):
        page = value
    else:
        try:
            page = int(str(value).strip())
        except (TypeError, ValueError):
            return 1
    return page if page >= 1 else 1


def total_pages(total_count: int | None, page_size: int = PAGE_SIZE) -> int:
    if not total_count or total_count < 0:
        return 0
    return math.ceil(total_count / page_size)


def offset_for(page: int, page_size: int = PAGE_SIZE) -> int:
    return (clamp_page(page) - 1) * page_size


@dataclass(frozen=True, slots=True)
class PageWindow:
    current_page: int
    total_pages: int
    page_size: int
    requested_page: int

    @property
    def is_out_of_range(self) -> bool:
        return self.requested_page > max(self.total_pages, 1)

    @property
    def has_results(self) -> bool:
        return self.total_pages > 0


def build_page_window(
    requested_page: object, total_count: int | None, page_size: int = PAGE_SIZE
) -> PageWindow:
    """
    전체 건수와 요청 페이지로 PageWindow를 계산합니다.

    범위를 벗어난 페이지 요청은 에러가 아니며, current_page만 마지막 페이지로 고정됩니다.
    """
    requested = clamp_page(requested_page)
    pages = total_pages(total_count, page_size)
    return PageWindow(
        current_page=min(requested, max(pages, 1)),
        total_pages=pages,
        page_size=page_size,
        requested_page=requested,
    )
