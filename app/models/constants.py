"""필드 길이 제한 상수 — 모델, 스키마, 검증기가 공유.

Field length and numeric limits shared by ORM models, pydantic schemas and validators.
"""

# 주소 (Address)
MAX_LENGTH_OF_ADDRESS_LINE = 100
MAX_LENGTH_OF_CITY = 50
MAX_LENGTH_OF_POST_CODE = 10
LENGTH_OF_COUNTRY_CODE = 2  # ISO 3166-1 alpha-2

# 계좌 (Account)
MAX_LENGTH_OF_ACCOUNT_NAME = 50
MAX_LENGTH_OF_ACCOUNT_NUMBER = 11
MAX_LENGTH_OF_IBAN = 34
MAX_LENGTH_OF_BIC = 11

# 은행 (Bank)
MAX_LENGTH_OF_BANK_NAME = 100

# 결제 (Payment)
MAX_LENGTH_OF_REFERENCE_NUMBER = 50
MAX_LENGTH_OF_DETAILS = 100
LENGTH_OF_CURRENCY = 3  # ISO 4217
MAX_DIGITS_OF_AMOUNT = 18  # NUMERIC(18, 2)
DECIMAL_PLACES_OF_AMOUNT = 2

# 정수 기본 키 상한 (INTEGER primary keys)
MAX_ID = 2_147_483_647
