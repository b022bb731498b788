"""은행 관련 Pydantic 요청/응답 스키마 정의.

Bank Pydantic request/response schema definitions.
"""

from pydantic import BaseModel, Field

from app.models.constants import MAX_LENGTH_OF_BANK_NAME, MAX_LENGTH_OF_BIC
from app.schemas.account import AccountResponse
from app.schemas.common import Filter


class BankCreate(BaseModel):
    """은행 생성 요청 스키마.

    Bank creation request schema.

    Attributes:
        name: 은행 이름 (Bank name)
        bic: 은행 식별 코드 — 고유 (Bank Identifier Code, unique)
    """

    name: str = Field(..., min_length=1, max_length=MAX_LENGTH_OF_BANK_NAME)
    bic: str = Field(..., min_length=8, max_length=MAX_LENGTH_OF_BIC)


class BankResponse(BaseModel):
    """은행 응답 스키마 — BIC가 일치하는 계좌 포함.

    Bank response schema including the accounts that share its BIC.
    """

    id: int
    name: str
    bic: str
    accounts: list[AccountResponse] = []  # 소속 계좌 (Accounts with this BIC)


class BankFilter(Filter):
    """은행 목록 필터 — 이름과 BIC를 검색 (Keywords match name and BIC)."""
