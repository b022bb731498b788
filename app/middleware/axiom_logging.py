"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data for the payment, account and bank APIs and
sends structured events to Axiom.
Logs: API endpoint, method, data (body/params), status code, error reason.
Account identifiers (IBAN, account number) and credentials are masked.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

logger = logging.getLogger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and query params
_SENSITIVE_KEYS = re.compile(
    r"(iban|account_number|password|secret|token|authorization|api_key|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_ERROR_LENGTH = 500


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return data


def _error_reason(body: bytes) -> str:
    """에러 응답 body에서 사유 추출 — Extract the error reason from a response body.

    ``detail`` may be a string, a validation dict or a list of pydantic errors.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_ERROR_LENGTH]

    detail = data.get("detail", data) if isinstance(data, dict) else data
    reason: str = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    if len(reason) > _MAX_ERROR_LENGTH:
        reason = reason[:_MAX_ERROR_LENGTH] + "..."
    return reason


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    Does nothing unless AXIOM_API_TOKEN and AXIOM_DATASET are configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS or not self._client:
            return await call_next(request)

        start_time = time.time()
        method = request.method
        path = request.url.path
        query_params = dict(request.query_params) if request.query_params else None

        # Request body 읽기 — Read request body (only for methods with body)
        request_body: Any = None
        if method in ("POST", "PUT", "PATCH"):
            try:
                body_bytes = await request.body()
                if body_bytes:
                    request_body = _mask_dict(json.loads(body_bytes))
            except (json.JSONDecodeError, UnicodeDecodeError):
                request_body = "(non-json body)"

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_reason(resp_body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            log_event: dict[str, Any] = {
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            }
            if query_params:
                log_event["query_params"] = _mask_dict(query_params)
            if request_body is not None:
                log_event["request_body"] = request_body
            if error_detail:
                log_event["error"] = error_detail

            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception:
                logger.warning("Failed to send request log to Axiom", exc_info=True)

        return response
