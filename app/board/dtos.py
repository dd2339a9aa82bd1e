from __future__ import annotations

from datetime import datetime

from board.application.usecases.fetch_listing import ListingPage
from board.domain.posting import Posting, PostingDetail, format_phone_number
from board.domain.url_sync import to_query
from pydantic import BaseModel, Field


class PostingDTO(BaseModel):
    id: int = Field(description="공고 ID")
    title: str = Field(description="제목")
    updated_time: datetime = Field(description="최종 수정 시각")
    region1: str = Field(description="지역(시/도)")
    region2: str = Field(description="지역(시/군/구)")
    category1: str = Field(description="업종 대분류")
    category2: str = Field(description="업종 소분류")
    board_type: str = Field(description="게시판 종류 (0~3)")
    ad: bool = Field(description="광고 공고 여부")

    @classmethod
    def from_domain(cls, posting: Posting) -> "PostingDTO":
        return cls(
            id=posting.id,
            title=posting.title,
            updated_time=posting.updated_time,
            region1=posting.region1,
            region2=posting.region2,
            category1=posting.category1,
            category2=posting.category2,
            board_type=posting.board_type.value,
            ad=posting.ad,
        )


class FilterStateDTO(BaseModel):
    region1: str
    region2: str
    category1: str
    category2: str
    keyword: str
    board_type: str
    page: int


class PageWindowDTO(BaseModel):
    current_page: int
    total_pages: int
    page_size: int
    requested_page: int
    is_out_of_range: bool


class ListingResponseDTO(BaseModel):
    query: dict[str, str] = Field(description="정규화된 URL 쿼리")
    state: FilterStateDTO
    advertisements: list[PostingDTO] = Field(
        default_factory=list, description="1페이지 상단 광고 공고"
    )
    postings: list[PostingDTO] = Field(default_factory=list, description="일반 공고")
    total_count: int = Field(description="조건에 맞는 일반 공고 수")
    page_window: PageWindowDTO

    @classmethod
    def from_listing(cls, listing: ListingPage) -> "ListingResponseDTO":
        state = listing.state
        window = listing.page_window
        return cls(
            query=to_query(state),
            state=FilterStateDTO(
                region1=state.region1,
                region2=state.region2,
                category1=state.category1,
                category2=state.category2,
                keyword=state.keyword,
                board_type=state.board_type.value,
                page=state.page,
            ),
            advertisements=[
                PostingDTO.from_domain(p) for p in listing.result.advertisements
            ],
            postings=[PostingDTO.from_domain(p) for p in listing.result.postings],
            total_count=listing.result.total_count,
            page_window=PageWindowDTO(
                current_page=window.current_page,
                total_pages=window.total_pages,
                page_size=window.page_size,
                requested_page=window.requested_page,
                is_out_of_range=window.is_out_of_range,
            ),
        )


class UploaderDTO(BaseModel):
    company_name: str
    name: str
    number: str
    formatted_number: str


class PostingDetailDTO(PostingDTO):
    contents: str
    uploader: UploaderDTO

    @classmethod
    def from_detail(cls, detail: PostingDetail) -> "PostingDetailDTO":
        base = PostingDTO.from_domain(detail.posting).model_dump()
        return cls(
            **base,
            contents=detail.contents,
            uploader=UploaderDTO(
                company_name=detail.uploader.company_name,
                name=detail.uploader.name,
                number=detail.uploader.number,
                formatted_number=format_phone_number(detail.uploader.number),
            ),
        )


class FilterOptionsDTO(BaseModel):
    board_types: list[dict[str, str]]
    regions: list[str]
    region2_options: list[str]
    categories: list[str]
    category2_options: list[str]
    uses_location_filters: bool
