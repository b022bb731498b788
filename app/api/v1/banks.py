"""은행 라우터 — 은행 목록/상세/생성 엔드포인트.

Bank Router — List, detail and creation endpoints for banks.
A bank's accounts are the accounts sharing its BIC.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.constants import MAX_ID
from app.schemas.bank import BankCreate, BankFilter, BankResponse
from app.schemas.common import PagedResult
from app.services.bank_service import bank_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("", response_model=PagedResult[BankResponse])
async def list_banks(
    db: Annotated[AsyncSession, Depends(get_db)],
    bank_filter: Annotated[BankFilter, Query()],
) -> PagedResult[BankResponse]:
    """은행 목록을 조회합니다 (List banks matching name or BIC keywords)."""
    return await bank_service.list_banks(db, bank_filter)


@router.get("/{bank_id}", response_model=BankResponse)
async def get_bank(
    bank_id: Annotated[int, Path(le=MAX_ID)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BankResponse:
    """은행 상세 정보를 계좌와 함께 조회합니다 (Retrieve a bank and its accounts)."""
    result: BankResponse | None = await bank_service.get_bank(db, bank_id)
    if result is None:
        raise NotFoundError(f"Bank with ID {bank_id} not found.")
    return result


@router.post("", response_model=BankResponse, status_code=201)
async def create_bank(
    data: BankCreate,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BankResponse:
    """새 은행을 생성합니다. BIC는 고유해야 합니다 (Create a bank with a unique BIC)."""
    result: BankResponse = await bank_service.create_bank(db, data)
    await db.commit()
    response.headers["Location"] = f"/api/v1/banks/{result.id}"
    return result
