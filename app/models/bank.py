"""은행 SQLAlchemy ORM 모델 정의.

Bank SQLAlchemy ORM model definition.
Accounts are not linked to banks by foreign key; a bank "owns" every
account whose BIC equals its own.

Tables:
    - banks: 금융 기관 (Financial institutions identified by BIC)
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.constants import MAX_LENGTH_OF_BANK_NAME, MAX_LENGTH_OF_BIC


class Bank(Base):
    """은행 모델.

    Bank model — Name and Business Identifier Code of an institution.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        name: 은행 이름 (Bank display name)
        bic: 은행 식별 코드 — 고유 (Bank Identifier Code, unique)

    Relationships:
        accounts: BIC가 일치하는 계좌 목록 (Accounts sharing this BIC, read-only)
    """

    __tablename__ = "banks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_LENGTH_OF_BANK_NAME), nullable=False, index=True)
    bic: Mapped[str] = mapped_column(String(MAX_LENGTH_OF_BIC), nullable=False, unique=True)

    accounts = relationship(
        "Account",
        primaryjoin="Bank.bic == foreign(Account.bic)",
        viewonly=True,
        order_by="Account.id",
    )
