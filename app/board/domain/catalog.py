from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class BoardType(str, Enum):
    """
    게시판 종류.

    값은 URL의 board_type 파라미터와 jd.board_type 컬럼에 그대로 저장되는 문자열입니다.
    """

    JOB_OFFER = "0"
    JOB_SEEK = "1"
    MARKET = "2"
    REAL_ESTATE = "3"

    @property
    def label(self) -> str:
        return _BOARD_TYPE_LABELS[self]

    @property
    def supports_location_filters(self) -> bool:
        # 중고장터/부동산은 지역·업종 필터를 쓰지 않음
        return self in (BoardType.JOB_OFFER, BoardType.JOB_SEEK)

    @classmethod
    def parse(cls, value: object) -> "BoardType":
        """알 수 없는 값은 기본 게시판(구인정보)으로 처리합니다."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip())
        except ValueError:
            return DEFAULT_BOARD_TYPE


DEFAULT_BOARD_TYPE = BoardType.JOB_OFFER

_BOARD_TYPE_LABELS = MappingProxyType(
    {
        BoardType.JOB_OFFER: "구인정보",
        BoardType.JOB_SEEK: "구직정보",
        BoardType.MARKET: "중고장터",
        BoardType.REAL_ESTATE: "부동산",
    }
)


def _freeze(table: dict[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType(dict(table))


REGION_CATALOG: Mapping[str, tuple[str, ...]] = _freeze(
    {
        "서울": (
            "강남구",
            "강동구",
            "강북구",
            "강서구",
            "관악구",
            "광진구",
            "구로구",
            "금천구",
            "노원구",
            "도봉구",
            "동대문구",
            "동작구",
            "마포구",
            "서대문구",
            "서초구",
            "성동구",
            "성북구",
            "송파구",
            "양천구",
            "영등포구",
            "용산구",
            "은평구",
            "종로구",
            "중구",
            "중랑구",
        ),
        "경기": (
            "수원시",
            "성남시",
            "고양시",
            "용인시",
            "부천시",
            "안산시",
            "안양시",
            "남양주시",
            "화성시",
            "평택시",
            "의정부시",
            "시흥시",
            "파주시",
            "김포시",
            "광명시",
        ),
        "인천": (
            "중구",
            "동구",
            "미추홀구",
            "연수구",
            "남동구",
            "부평구",
            "계양구",
            "서구",
            "강화군",
        ),
        "부산": (
            "중구",
            "서구",
            "동구",
            "영도구",
            "부산진구",
            "동래구",
            "남구",
            "북구",
            "해운대구",
            "사하구",
            "금정구",
            "강서구",
            "연제구",
            "수영구",
            "사상구",
            "기장군",
        ),
        "대구": ("중구", "동구", "서구", "남구", "북구", "수성구", "달서구", "달성군"),
        "광주": ("동구", "서구", "남구", "북구", "광산구"),
        "대전": ("동구", "중구", "서구", "유성구", "대덕구"),
        "울산": ("중구", "남구", "동구", "북구", "울주군"),
        "세종": ("세종시",),
        "강원": ("춘천시", "원주시", "강릉시", "속초시"),
        "충북": ("청주시", "충주시", "제천시"),
        "충남": ("천안시", "아산시", "서산시", "당진시"),
        "전북": ("전주시", "군산시", "익산시"),
        "전남": ("목포시", "여수시", "순천시", "광양시"),
        "경북": ("포항시", "경주시", "구미시", "안동시"),
        "경남": ("창원시", "김해시", "진주시", "양산시", "거제시"),
        "제주": ("제주시", "서귀포시"),
    }
)

CATEGORY_CATALOG: Mapping[str, tuple[str, ...]] = _freeze(
    {
        "IT·디자인": ("개발", "디자인", "기획·PM", "데이터", "QA"),
        "음식점·카페": ("주방", "홀서빙", "배달", "바리스타"),
        "생산·건설": ("생산직", "건설현장", "물류·창고", "기술직"),
        "사무·회계": ("사무보조", "회계·경리", "인사·총무", "통번역"),
        "운전·운송": ("택배", "화물", "대리운전", "운송"),
        "서비스": ("매장관리", "미용", "청소", "경비"),
        "교육·강사": ("학원강사", "과외", "어학강사"),
        "의료·간병": ("간호·간병", "요양보호", "병원사무"),
        "기타": ("기타",),
    }
)
