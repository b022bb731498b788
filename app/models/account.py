"""계좌 및 주소 관련 SQLAlchemy ORM 모델 정의.

Account and Address SQLAlchemy ORM model definitions.
An account always points at exactly one postal address; addresses are
not shared between accounts by the application, but the schema allows it.

Tables:
    - addresses: 우편 주소 (Postal addresses)
    - accounts: 은행 계좌 (Bank accounts: name, IBAN, BIC, account number)
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.constants import (
    LENGTH_OF_COUNTRY_CODE,
    MAX_LENGTH_OF_ACCOUNT_NAME,
    MAX_LENGTH_OF_ACCOUNT_NUMBER,
    MAX_LENGTH_OF_ADDRESS_LINE,
    MAX_LENGTH_OF_BIC,
    MAX_LENGTH_OF_CITY,
    MAX_LENGTH_OF_IBAN,
    MAX_LENGTH_OF_POST_CODE,
)


class Address(Base):
    """주소 모델 — 계좌 소유자의 우편 주소.

    Address model — Physical or mailing address of an account holder.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        address_line1: 주소 1행 — 필수 (Primary street line, required)
        address_line2: 주소 2행 (Secondary line, optional)
        address_line3: 주소 3행 (Tertiary line, optional)
        city: 도시 (City, optional)
        post_code: 우편번호 (Postal code, optional)
        country_code: ISO 3166-1 alpha-2 국가 코드 (Two-letter country code, required)
    """

    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address_line1: Mapped[str] = mapped_column(String(MAX_LENGTH_OF_ADDRESS_LINE), nullable=False, index=True)
    address_line2: Mapped[str | None] = mapped_column(String(MAX_LENGTH_OF_ADDRESS_LINE), nullable=True)
    address_line3: Mapped[str | None] = mapped_column(String(MAX_LENGTH_OF_ADDRESS_LINE), nullable=True)
    city: Mapped[str | None] = mapped_column(String(MAX_LENGTH_OF_CITY), nullable=True, index=True)
    post_code: Mapped[str | None] = mapped_column(String(MAX_LENGTH_OF_POST_CODE), nullable=True, index=True)
    country_code: Mapped[str] = mapped_column(String(LENGTH_OF_COUNTRY_CODE), nullable=False, index=True)


class Account(Base):
    """계좌 모델 — 결제의 송금인/수취인 계좌.

    Account model — Originator or beneficiary side of a payment.

    Attributes:
        id: 고유 식별자 (Auto-increment primary key)
        address_id: 주소 FK (Address foreign key, required)
        name: 계좌명 (Account holder name)
        account_number: 계좌 번호 (Domestic account number)
        iban: 국제 은행 계좌 번호 (International Bank Account Number)
        bic: 은행 식별 코드 (Bank Identifier Code)

    Relationships:
        address: 계좌 주소 (Many-to-one, loaded explicitly by repositories)
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address_id: Mapped[int] = mapped_column(Integer, ForeignKey("addresses.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(MAX_LENGTH_OF_ACCOUNT_NAME), nullable=False, index=True)
    account_number: Mapped[str] = mapped_column(String(MAX_LENGTH_OF_ACCOUNT_NUMBER), nullable=False, index=True)
    iban: Mapped[str] = mapped_column(String(MAX_LENGTH_OF_IBAN), nullable=False, index=True)
    bic: Mapped[str] = mapped_column(String(MAX_LENGTH_OF_BIC), nullable=False, index=True)

    address = relationship("Address")
