"""결제 관련 SQLAlchemy ORM 모델 정의.

Payment SQLAlchemy ORM model definitions.
Includes the Money value object (stored inline as two columns via a
composite) and the ChargesBearer enumeration (stored as an integer).

Tables:
    - payments: 계좌 간 결제 (Payments between two accounts)
"""

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, DateTime, Integer, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from app.database import Base
from app.models.constants import (
    DECIMAL_PLACES_OF_AMOUNT,
    LENGTH_OF_CURRENCY,
    MAX_DIGITS_OF_AMOUNT,
    MAX_LENGTH_OF_DETAILS,
    MAX_LENGTH_OF_REFERENCE_NUMBER,
)


class ChargesBearer(enum.IntEnum):
    """수수료 부담 주체 (Party responsible for the transaction charges)."""

    ORIGINATOR = 0
    BENEFICIARY = 1
    SHARED = 2


@dataclass
class Money:
    """금액 값 객체 — 금액과 ISO 4217 통화 코드.

    Amount of money and its currency.
    """

    value: Decimal
    currency: str


class Payment(Base):
    """결제 모델 — 송금인 계좌에서 수취인 계좌로의 이체.

    Payment model — Transfer from an originator account to a beneficiary account.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        originator_account_id: 송금인 계좌 FK (Originator account foreign key)
        beneficiary_account_id: 수취인 계좌 FK (Beneficiary account foreign key)
        amount: 금액 — amount_value + amount_currency 컬럼 (Money composite)
        date: 결제 일시 UTC (Payment timestamp)
        charges_bearer: 수수료 부담 주체 정수값 (ChargesBearer as int)
        details: 결제 메모 (Free-text remarks, optional)
        reference_number: 참조 번호 (Reference for tracking, optional)

    Relationships:
        originator_account: 송금인 계좌 (Sender account)
        beneficiary_account: 수취인 계좌 (Receiver account)
    """

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    originator_account_id: Mapped[int] = mapped_column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    beneficiary_account_id: Mapped[int] = mapped_column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    # 금액 — Money composite (NUMERIC(18,2) + VARCHAR(3))
    amount: Mapped[Money] = composite(
        mapped_column("amount_value", Numeric(MAX_DIGITS_OF_AMOUNT, DECIMAL_PLACES_OF_AMOUNT), nullable=False),
        mapped_column("amount_currency", String(LENGTH_OF_CURRENCY), nullable=False),
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    charges_bearer: Mapped[int] = mapped_column(Integer, nullable=False, default=int(ChargesBearer.SHARED))
    details: Mapped[str | None] = mapped_column(String(MAX_LENGTH_OF_DETAILS), nullable=True)
    reference_number: Mapped[str | None] = mapped_column(String(MAX_LENGTH_OF_REFERENCE_NUMBER), nullable=True, index=True)

    originator_account = relationship("Account", foreign_keys=[originator_account_id])
    beneficiary_account = relationship("Account", foreign_keys=[beneficiary_account_id])
