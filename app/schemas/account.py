"""계좌 및 주소 관련 Pydantic 요청/응답 스키마 정의.

Account and Address Pydantic request/response schema definitions.
Create schemas only enforce types and column lengths; the "required"
business rules are checked by ``app.services.validators`` so that all
violations are reported together.
"""

from pydantic import BaseModel, Field

from app.models.constants import (
    MAX_LENGTH_OF_ACCOUNT_NAME,
    MAX_LENGTH_OF_ACCOUNT_NUMBER,
    MAX_LENGTH_OF_ADDRESS_LINE,
    MAX_LENGTH_OF_BIC,
    MAX_LENGTH_OF_CITY,
    MAX_LENGTH_OF_IBAN,
    MAX_LENGTH_OF_POST_CODE,
)
from app.schemas.common import Filter


# === 주소 (Address) 스키마 ===

class AddressCreate(BaseModel):
    """주소 생성 요청 스키마.

    Address creation request schema, nested inside AccountCreate.

    Attributes:
        address_line1: 주소 1행 (Primary line, required by validation rules)
        address_line2: 주소 2행 (Secondary line, optional)
        address_line3: 주소 3행 (Tertiary line, optional)
        city: 도시 (City, optional)
        post_code: 우편번호 (Postal code, optional)
        country_code: 국가 코드 (ISO 3166-1 alpha-2, required by validation rules)
    """

    address_line1: str = Field(default="", max_length=MAX_LENGTH_OF_ADDRESS_LINE)
    address_line2: str | None = Field(default=None, max_length=MAX_LENGTH_OF_ADDRESS_LINE)
    address_line3: str | None = Field(default=None, max_length=MAX_LENGTH_OF_ADDRESS_LINE)
    city: str | None = Field(default=None, max_length=MAX_LENGTH_OF_CITY)
    post_code: str | None = Field(default=None, max_length=MAX_LENGTH_OF_POST_CODE)
    country_code: str = ""  # 길이 검사는 검증 규칙에서 (Length checked by validation rules)


class AddressResponse(BaseModel):
    """주소 응답 스키마.

    Address response schema.
    """

    id: int  # 주소 ID (Address identifier)
    address_line1: str
    address_line2: str | None
    address_line3: str | None
    city: str | None
    post_code: str | None
    country_code: str


# === 계좌 (Account) 스키마 ===

class AccountCreate(BaseModel):
    """계좌 생성 요청 스키마.

    Account creation request schema. Also used for the originator and
    beneficiary parts of a payment creation request.

    Attributes:
        name: 계좌명 (Account holder name)
        iban: IBAN (International Bank Account Number)
        bic: BIC (Bank Identifier Code)
        account_number: 계좌 번호 (Domestic account number)
        address: 계좌 주소 (Holder address)
    """

    name: str = Field(default="", max_length=MAX_LENGTH_OF_ACCOUNT_NAME)
    iban: str = Field(default="", max_length=MAX_LENGTH_OF_IBAN)
    bic: str = Field(default="", max_length=MAX_LENGTH_OF_BIC)
    account_number: str = Field(default="", max_length=MAX_LENGTH_OF_ACCOUNT_NUMBER)
    address: AddressCreate | None = None  # 필수 — 검증 규칙에서 확인 (Required, checked by rules)


class AccountResponse(BaseModel):
    """계좌 응답 스키마.

    Account response schema with the nested address.

    Attributes:
        id: 계좌 ID (Account identifier)
        address_id: 주소 ID (Address identifier)
        name: 계좌명 (Account holder name)
        account_number: 계좌 번호 (Account number)
        iban: IBAN
        bic: BIC
        address: 주소 (Nested address, may be null if not loaded)
    """

    id: int
    address_id: int
    name: str
    account_number: str
    iban: str
    bic: str
    address: AddressResponse | None = None


class AccountFilter(Filter):
    """계좌 목록 필터 — 이름, IBAN, 계좌 번호, 주소 필드를 검색.

    Account list filter. Keywords match name, IBAN, account number and
    every address field.
    """
