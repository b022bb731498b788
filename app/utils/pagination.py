"""페이지네이션 유틸리티 모듈.

Pagination utility module for SQLAlchemy async queries.
Uses skip/take semantics: ``skip_count`` rows are skipped and at most
``max_result_count`` rows are returned, together with the total number
of rows matching the filtered query.
"""

from typing import Any, Sequence

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.utils.exceptions import BadRequestError


async def paginate(
    db: AsyncSession,
    query: Select[Any],
    skip_count: int = 0,
    max_result_count: int = 10,
) -> tuple[Sequence[Any], int]:
    """SQLAlchemy 쿼리에 대한 페이지네이션을 수행합니다.

    Execute a paginated SQLAlchemy query, returning items and total count.
    Runs two queries: one for the total count (via subquery) and one for
    the actual page of results with OFFSET/LIMIT.

    Args:
        db: 비동기 DB 세션 (Async database session)
        query: SQLAlchemy Select 쿼리 — 필터 적용 완료 (Filtered base query)
        skip_count: 건너뛸 행 수 (Rows to skip, must be >= 0)
        max_result_count: 최대 반환 행 수 (Maximum rows to return)

    Returns:
        tuple[Sequence[Any], int]: (항목 목록, 전체 개수) 튜플
            (Tuple of page items and total count)

    Raises:
        BadRequestError: skip_count가 음수일 때 (Negative skip count)
    """
    if skip_count < 0:
        raise BadRequestError("Skip count cannot be less than zero.")

    # 전체 개수 조회 — 서브쿼리로 감싸서 COUNT 실행 (Count total via subquery)
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total: int = (await db.execute(count_query)).scalar() or 0

    # 페이지 항목 조회 — OFFSET/LIMIT 적용 (Fetch page items with offset/limit)
    result = await db.execute(query.offset(skip_count).limit(max_result_count))
    items: Sequence[Any] = result.scalars().all()

    return items, total


def contains_keyword(keywords: str) -> str:
    """LIKE 패턴 생성 — 대소문자 무시 부분 일치용.

    Build an ``ILIKE`` pattern for a case-insensitive substring match,
    escaping the LIKE wildcards contained in the user input.
    """
    escaped: str = (
        keywords.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )
    return f"%{escaped}%"
