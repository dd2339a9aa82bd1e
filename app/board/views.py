"""
Board Views

게시판 목록/상세/필터 옵션 API (Thin Controller)
"""

import logging

from board.application.container import (
    build_fetch_listing_usecase,
    build_get_posting_detail_usecase,
)
from board.domain.cascading import category2_options, region2_options
from board.domain.catalog import CATEGORY_CATALOG, REGION_CATALOG, BoardType
from board.domain.url_sync import from_query
from board.dtos import FilterOptionsDTO, ListingResponseDTO, PostingDetailDTO
from common.application.result import Err
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STORE_FAILURE": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(err: Err) -> Response:
    return Response(
        {"error": err.message, "error_code": err.code},
        status=_ERROR_STATUS.get(err.code, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


def _query_parameter(name: str, description: str, param_type=OpenApiTypes.STR):
    return OpenApiParameter(
        name=name, description=description, required=False, type=param_type
    )


LISTING_PARAMETERS = [
    _query_parameter("city1", "지역(시/도)"),
    _query_parameter("city2", "지역(시/군/구), city1 이 있을 때만 적용"),
    _query_parameter("cate1", "업종 대분류"),
    _query_parameter("cate2", "업종 소분류, cate1 이 있을 때만 적용"),
    _query_parameter("keyword", "제목 검색어 (대소문자 무시 부분 일치)"),
    _query_parameter("page", "페이지 번호 (기본 1)", OpenApiTypes.INT),
    _query_parameter("board_type", "0=구인, 1=구직, 2=중고장터, 3=부동산 (기본 0)"),
]


class JobListingView(APIView):
    """
    게시판 목록 조회

    잘못된 쿼리 파라미터는 에러 없이 기본값으로 처리합니다.
    광고 공고는 1페이지에서만 함께 반환됩니다.
    """

    permission_classes = [AllowAny]

    @extend_schema(
        parameters=LISTING_PARAMETERS,
        responses={200: OpenApiTypes.OBJECT},
        summary="Board Listing",
        description="List job postings filtered by region, category, board type and keyword.",
    )
    def get(self, request):
        state = from_query(request.query_params)
        try:
            outcome = build_fetch_listing_usecase().execute(state=state)
        except Exception as e:
            logger.error(f"Failed to list board postings: {str(e)}", exc_info=True)
            return Response(
                {"error": "Failed to retrieve job postings"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        if isinstance(outcome, Err):
            return _error_response(outcome)

        dto = ListingResponseDTO.from_listing(outcome.value)
        return Response(dto.model_dump(mode="json"))


class JobPostingDetailView(APIView):
    """
    공고 상세 조회

    작성자 정보가 없으면 "정보 없음"으로 채웁니다.
    """

    permission_classes = [AllowAny]

    @extend_schema(
        responses={200: OpenApiTypes.OBJECT, 404: OpenApiTypes.OBJECT},
        summary="Job Posting Detail",
    )
    def get(self, request, posting_id: int):
        try:
            outcome = build_get_posting_detail_usecase().execute(posting_id=posting_id)
        except Exception as e:
            logger.error(
                f"Failed to retrieve job posting {posting_id}: {str(e)}", exc_info=True
            )
            return Response(
                {"error": "Failed to retrieve job posting"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        if isinstance(outcome, Err):
            return _error_response(outcome)

        dto = PostingDetailDTO.from_detail(outcome.value)
        return Response(dto.model_dump(mode="json"))


class FilterOptionsView(APIView):
    """필터 패널 선택지 (1단계 목록 + 선택된 1단계에 따른 2단계 목록)"""

    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            _query_parameter("city1", "지역(시/도)"),
            _query_parameter("cate1", "업종 대분류"),
            _query_parameter("board_type", "게시판 종류 (기본 0)"),
        ],
        responses={200: OpenApiTypes.OBJECT},
        summary="Board Filter Options",
    )
    def get(self, request):
        state = from_query(request.query_params)
        dto = FilterOptionsDTO(
            board_types=[{"value": b.value, "label": b.label} for b in BoardType],
            regions=list(REGION_CATALOG),
            region2_options=list(region2_options(state.region1)),
            categories=list(CATEGORY_CATALOG),
            category2_options=list(category2_options(state.category1)),
            uses_location_filters=state.uses_location_filters,
        )
        return Response(dto.model_dump(mode="json"))
