"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for schema creation and
relationship resolution.

Modules:
    account: 주소 및 계좌 (Address and Account)
    bank: 은행 (Bank, accounts resolved by BIC)
    payment: 결제, 금액, 수수료 부담 주체 (Payment, Money, ChargesBearer)
"""

from app.models.account import Address, Account
from app.models.bank import Bank
from app.models.payment import ChargesBearer, Money, Payment

__all__ = [
    "Address", "Account",
    "Bank",
    "ChargesBearer", "Money", "Payment",
]
