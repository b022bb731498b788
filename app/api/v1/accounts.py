"""계좌 라우터 — 계좌 목록/상세/생성 엔드포인트.

Account Router — List, detail and creation endpoints for accounts.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.constants import MAX_ID
from app.schemas.account import AccountCreate, AccountFilter, AccountResponse
from app.schemas.common import PagedResult
from app.services.account_service import account_service
from app.utils.exceptions import NotFoundError

router: APIRouter = APIRouter()


@router.get("", response_model=PagedResult[AccountResponse])
async def list_accounts(
    db: Annotated[AsyncSession, Depends(get_db)],
    account_filter: Annotated[AccountFilter, Query()],
) -> PagedResult[AccountResponse]:
    """계좌 목록을 조회합니다 (List accounts matching the keywords)."""
    return await account_service.list_accounts(db, account_filter)


@router.get("/{account_id}", response_model=AccountResponse)
async def get_account(
    account_id: Annotated[int, Path(le=MAX_ID)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AccountResponse:
    """계좌 상세 정보를 주소와 함께 조회합니다 (Retrieve an account with its address)."""
    result: AccountResponse | None = await account_service.get_account(db, account_id)
    if result is None:
        raise NotFoundError(f"Account with ID {account_id} not found.")
    return result


@router.post("", response_model=AccountResponse, status_code=201)
async def create_account(
    data: AccountCreate,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AccountResponse:
    """새 계좌를 주소와 함께 생성합니다 (Create an account with its address)."""
    result: AccountResponse = await account_service.create_account(db, data)
    await db.commit()
    response.headers["Location"] = f"/api/v1/accounts/{result.id}"
    return result
