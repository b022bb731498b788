"""요청 검증 규칙 — 계좌/주소/금액/결제 생성 데이터.

Validation rules for account, address, money and payment creation payloads.
Each ``*_errors`` function returns every rule violation it finds, so the
client receives the complete list in one response. ``validate_*``
helpers raise ``ValidationError`` when the list is not empty.
"""

from decimal import Decimal

from app.models.constants import LENGTH_OF_COUNTRY_CODE, LENGTH_OF_CURRENCY
from app.schemas.account import AccountCreate, AddressCreate
from app.schemas.payment import MoneySchema, PaymentCreate
from app.utils.exceptions import ValidationError


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _is_letters(value: str, length: int) -> bool:
    return len(value) == length and value.isascii() and value.isalpha()


def address_errors(address: AddressCreate | None) -> list[str]:
    """주소 규칙 위반 목록 (Address rule violations)."""
    if address is None:
        return ["Account address cannot be null."]

    errors: list[str] = []
    if _is_blank(address.address_line1):
        errors.append("Address Line1 cannot be null or empty.")
    if _is_blank(address.country_code):
        errors.append("Address country code cannot be null or empty.")
    elif not _is_letters(address.country_code, LENGTH_OF_COUNTRY_CODE):
        errors.append("Address country code must be 2 letters.")
    return errors


def account_errors(account: AccountCreate | None, role: str = "Account") -> list[str]:
    """계좌 규칙 위반 목록.

    Account rule violations. ``role`` prefixes the "cannot be null"
    message (e.g. "Payment originator account").
    """
    if account is None:
        return [f"{role} cannot be null."]

    errors: list[str] = []
    if _is_blank(account.name):
        errors.append("Account name cannot be null or empty.")
    if _is_blank(account.iban):
        errors.append("Account IBAN cannot be null or empty.")
    if _is_blank(account.bic):
        errors.append("Account BIC cannot be null or empty.")
    if _is_blank(account.account_number):
        errors.append("Account number cannot be null or empty.")
    errors.extend(address_errors(account.address))
    return errors


def money_errors(money: MoneySchema | None) -> list[str]:
    """금액 규칙 위반 목록 (Money rule violations)."""
    if money is None:
        return ["Payment amount cannot be null."]

    errors: list[str] = []
    if money.value is None or money.value == Decimal("0"):
        errors.append("Money value cannot be null or empty.")
    elif money.value < 0:
        errors.append("Money value must be greater than zero.")
    if _is_blank(money.currency):
        errors.append("Money currency cannot be null or empty.")
    elif not _is_letters(money.currency, LENGTH_OF_CURRENCY):
        errors.append("Money currency must be 3 letters.")
    return errors


def payment_errors(payment: PaymentCreate) -> list[str]:
    """결제 생성 규칙 위반 목록 (Payment creation rule violations)."""
    errors: list[str] = []
    if _is_blank(payment.reference_number):
        errors.append("Payment reference number cannot be null or empty.")
    if _is_blank(payment.details):
        errors.append("Payment details cannot be null or empty.")
    errors.extend(money_errors(payment.amount))
    errors.extend(account_errors(payment.beneficiary_account, "Payment beneficiary account"))
    errors.extend(account_errors(payment.originator_account, "Payment originator account"))
    return errors


def validate_account(account: AccountCreate) -> None:
    """계좌 생성 데이터를 검증합니다.

    Raises:
        ValidationError: 규칙 위반이 하나라도 있을 때 (Any rule violated)
    """
    errors: list[str] = account_errors(account)
    if errors:
        raise ValidationError(errors)


def validate_payment(payment: PaymentCreate) -> None:
    """결제 생성 데이터를 검증합니다.

    Raises:
        ValidationError: 규칙 위반이 하나라도 있을 때 (Any rule violated)
    """
    errors: list[str] = payment_errors(payment)
    if errors:
        raise ValidationError(errors)
