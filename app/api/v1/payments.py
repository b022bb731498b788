"""결제 라우터 — 결제 목록/상세/생성 엔드포인트.

Payment Router — List, detail and creation endpoints for payments.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.constants import MAX_ID
from app.schemas.common import PagedResult
from app.schemas.payment import (
    PaymentCreate,
    PaymentFilter,
    PaymentListItem,
    PaymentResponse,
)
from app.services.payment_service import payment_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("", response_model=PagedResult[PaymentListItem])
async def list_payments(
    db: Annotated[AsyncSession, Depends(get_db)],
    payment_filter: Annotated[PaymentFilter, Query()],
) -> PagedResult[PaymentListItem]:
    """결제 목록을 최신순으로 조회합니다.

    List payments, newest first. Supports keywords, account and date filters.
    """
    return await payment_service.list_payments(db, payment_filter)


@router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(
    payment_id: Annotated[int, Path(le=MAX_ID)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PaymentResponse:
    """결제 상세 정보를 조회합니다 (Retrieve a payment with both accounts)."""
    result: PaymentResponse | None = await payment_service.get_payment(db, payment_id)
    if result is None:
        raise NotFoundError(f"Payment with ID {payment_id} not found.")
    return result


@router.post("", response_model=PaymentResponse, status_code=201)
async def create_payment(
    data: PaymentCreate,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PaymentResponse:
    """새 결제를 생성합니다.

    Create a payment. Originator and beneficiary accounts are reused when
    an identical account exists, otherwise they are created.
    """
    result: PaymentResponse = await payment_service.create_payment(db, data)
    await db.commit()
    response.headers["Location"] = f"/api/v1/payments/{result.id}"
    return result
