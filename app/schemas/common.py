"""공통 Pydantic 요청/응답 스키마 정의.

Common Pydantic request/response schema definitions.
Includes the skip/take list filter and the generic paged result wrapper
shared by the payment, account and bank APIs.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from app.config import settings
from app.models.constants import MAX_ID

T = TypeVar("T")


class Filter(BaseModel):
    """목록 조회 공통 필터 스키마.

    Common list filter: keyword search plus skip/take paging.
    Bound from the query string on list endpoints.

    Attributes:
        keywords: 검색어 — 대소문자 무시 부분 일치 (Case-insensitive substring search)
        skip_count: 건너뛸 항목 수 (Items to skip before the page starts)
        max_result_count: 페이지 크기 (Maximum items in the page)
    """

    keywords: str | None = None  # 검색어 (Search keywords, optional)
    # 음수 검사는 paginate()에서 400으로 처리 (Negative values rejected by paginate() with 400)
    skip_count: int = Field(default=0, le=MAX_ID)
    max_result_count: int = Field(
        default=settings.DEFAULT_RESULT_COUNT, ge=1, le=settings.MAX_RESULT_COUNT
    )


class PagedResult(BaseModel, Generic[T]):
    """페이지 결과 스키마.

    Paged result: the requested page of items and the total number of
    items matching the filter, regardless of paging.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total_count: 필터 조건에 맞는 전체 항목 수 (Total matching items)
    """

    items: list[T]  # 현재 페이지 항목 (Page items)
    total_count: int  # 전체 항목 수 (Total matching items)
