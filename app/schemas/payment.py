"""결제 관련 Pydantic 요청/응답 스키마 정의.

Payment Pydantic request/response schema definitions.
Covers payment creation (with inline originator/beneficiary accounts),
the detail and list views, and the list filter.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field

from app.models.constants import (
    DECIMAL_PLACES_OF_AMOUNT,
    MAX_DIGITS_OF_AMOUNT,
    MAX_ID,
    MAX_LENGTH_OF_DETAILS,
    MAX_LENGTH_OF_REFERENCE_NUMBER,
)
from app.models.payment import ChargesBearer
from app.schemas.account import AccountCreate, AccountResponse
from app.schemas.common import Filter

# NUMERIC(18, 2)에 맞는 금액 — JSON에서는 정확한 10진 문자열로 직렬화
# Amount fitting NUMERIC(18, 2); serialized to JSON as an exact decimal string
Amount = Annotated[
    Decimal, Field(max_digits=MAX_DIGITS_OF_AMOUNT, decimal_places=DECIMAL_PLACES_OF_AMOUNT)
]


class MoneySchema(BaseModel):
    """금액 스키마.

    Amount of money and its ISO 4217 currency code.

    Attributes:
        value: 금액 — 0보다 커야 함 (Amount, must be positive)
        currency: 통화 코드 (3-letter currency code)
    """

    value: Amount = Decimal("0")  # 양수 검사는 검증 규칙에서 (Positivity checked by rules)
    currency: str = ""  # 3자리 검사는 검증 규칙에서 (Length checked by rules)


class PaymentCreate(BaseModel):
    """결제 생성 요청 스키마.

    Payment creation request schema. Accounts are given in full; the
    service reuses an existing identical account or creates a new one.

    Attributes:
        originator_account: 송금인 계좌 (Originator account)
        beneficiary_account: 수취인 계좌 (Beneficiary account)
        amount: 금액 (Amount and currency)
        date: 결제 일시 — 생략 시 현재 시각 (Payment date, defaults to now)
        charges_bearer: 수수료 부담 주체 — 생략 시 SHARED (Defaults to SHARED)
        details: 결제 메모 (Payment details)
        reference_number: 참조 번호 (Reference number)
    """

    originator_account: AccountCreate | None = None
    beneficiary_account: AccountCreate | None = None
    amount: MoneySchema | None = None
    date: datetime | None = None
    charges_bearer: ChargesBearer | None = None
    details: str | None = Field(default=None, max_length=MAX_LENGTH_OF_DETAILS)
    reference_number: str | None = Field(default=None, max_length=MAX_LENGTH_OF_REFERENCE_NUMBER)


class PaymentResponse(BaseModel):
    """결제 상세 응답 스키마 — 양측 계좌와 주소 포함.

    Payment detail response with both accounts and their addresses.
    """

    id: int
    originator_account: AccountResponse
    beneficiary_account: AccountResponse
    amount: MoneySchema
    date: datetime
    charges_bearer: ChargesBearer
    details: str | None
    reference_number: str | None


class PaymentListItem(BaseModel):
    """결제 목록 항목 스키마.

    Payment list row. Accounts are flattened to their names.

    Attributes:
        originator: 송금인 계좌명 (Originator account name)
        beneficiary: 수취인 계좌명 (Beneficiary account name)
    """

    id: int
    originator: str
    beneficiary: str
    amount: MoneySchema
    date: datetime
    charges_bearer: ChargesBearer
    details: str | None
    reference_number: str | None


class PaymentFilter(Filter):
    """결제 목록 필터.

    Payment list filter. Keywords match the reference number and details.

    Attributes:
        originator_account_id: 송금인 계좌 ID (Only payments from this account)
        beneficiary_account_id: 수취인 계좌 ID (Only payments to this account)
        date_from: 시작 일시 포함 (Inclusive lower bound on payment date)
        date_to: 종료 일시 포함 (Inclusive upper bound on payment date)
    """

    originator_account_id: int | None = Field(default=None, le=MAX_ID)
    beneficiary_account_id: int | None = Field(default=None, le=MAX_ID)
    date_from: datetime | None = None
    date_to: datetime | None = None
