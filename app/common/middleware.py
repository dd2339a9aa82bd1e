from __future__ import annotations

import uuid
from typing import Callable

from common.request_id import reset_request_id, set_request_id
from django.http import HttpRequest, HttpResponse

# 헤더 값을 그대로 로그에 남기므로 길이를 제한
MAX_REQUEST_ID_LENGTH = 64


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성/전파하고
    - response에 X-Request-ID 헤더를 포함합니다.
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = str(request.META.get(self.header_name) or "").strip()
        request_id = incoming[:MAX_REQUEST_ID_LENGTH] or str(uuid.uuid4())

        request.request_id = request_id  # type: ignore[attr-defined]
        token = set_request_id(request_id)
        try:
            response = self.get_response(request)
        finally:
            reset_request_id(token)

        response[self.response_header] = request_id
        return response
