"""결제 서비스 — 결제 조회/검색/생성 비즈니스 로직.

Payment Service — Business logic for payment retrieval, search and creation.

Payment creation runs in the request's session:
    1. 검증 (Validate every rule, reporting all violations at once)
    2. 송금인 → 수취인 계좌 재사용 또는 생성 (Find-or-create originator, then beneficiary)
    3. 결제 저장 (Insert the payment; date defaults to now, charges to SHARED)
    4. 관계 포함 재조회 후 응답 변환 (Reload with relations and map)

The service only flushes. The router commits on success; on a database
error the service rolls the session back before raising.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.account import Account
from app.models.payment import ChargesBearer, Money, Payment
from app.repositories.payment_repository import payment_repository
from app.schemas.common import PagedResult
from app.schemas.payment import (
    MoneySchema,
    PaymentCreate,
    PaymentFilter,
    PaymentListItem,
    PaymentResponse,
)
from app.services.account_service import account_service
from app.services.validators import validate_payment
from app.utils.exceptions import PaymentAlreadyExistsError, PaymentError, is_unique_violation
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)


class PaymentService:
    """결제 관련 비즈니스 로직을 처리하는 서비스.

    Service handling payment business logic.
    Database failures are logged and wrapped in PaymentError.
    """

    def _money(self, payment: Payment) -> MoneySchema:
        return MoneySchema(value=payment.amount.value, currency=payment.amount.currency)

    def _to_response(self, payment: Payment) -> PaymentResponse:
        """결제 모델을 상세 응답으로 변환합니다 (Map a fully loaded payment)."""
        return PaymentResponse(
            id=payment.id,
            originator_account=account_service.to_response(payment.originator_account),
            beneficiary_account=account_service.to_response(payment.beneficiary_account),
            amount=self._money(payment),
            date=payment.date,
            charges_bearer=ChargesBearer(payment.charges_bearer),
            details=payment.details,
            reference_number=payment.reference_number,
        )

    def _to_list_item(self, payment: Payment) -> PaymentListItem:
        return PaymentListItem(
            id=payment.id,
            originator=payment.originator_account.name,
            beneficiary=payment.beneficiary_account.name,
            amount=self._money(payment),
            date=payment.date,
            charges_bearer=ChargesBearer(payment.charges_bearer),
            details=payment.details,
            reference_number=payment.reference_number,
        )

    async def get_payment(
        self,
        db: AsyncSession,
        payment_id: int,
    ) -> PaymentResponse | None:
        """결제 상세 정보를 조회합니다.

        Retrieve a payment with both accounts and their addresses.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            payment_id: 결제 ID (Payment primary key)

        Returns:
            PaymentResponse | None: 결제 응답, 없으면 None (Payment response or None)

        Raises:
            PaymentError: DB 오류 발생 시 (Database failure)
        """
        logger.info("Retrieving payment with ID %s", payment_id)
        try:
            payment: Payment | None = await payment_repository.get_detail(db, payment_id)
        except SQLAlchemyError as exc:
            logger.exception("Database error while retrieving payment with ID %s", payment_id)
            raise PaymentError(
                f"Could not retrieve payment with ID {payment_id} due to a database error."
            ) from exc

        if payment is None:
            logger.warning("Payment with ID %s not found.", payment_id)
            return None

        logger.info("Successfully retrieved payment with ID %s", payment_id)
        return self._to_response(payment)

    async def list_payments(
        self,
        db: AsyncSession,
        payment_filter: PaymentFilter,
    ) -> PagedResult[PaymentListItem]:
        """필터 조건으로 결제 목록을 최신순으로 조회합니다.

        List payments matching the filter, newest first.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            payment_filter: 결제 필터 (Keywords, account IDs, date range and paging)

        Returns:
            PagedResult[PaymentListItem]: 페이지 항목과 전체 개수 (Page and total count)

        Raises:
            BadRequestError: skip_count가 음수일 때 (Negative skip count)
            PaymentError: DB 오류 발생 시 (Database failure)
        """
        logger.info(
            "Retrieving payments with filter: keywords=%r, skip=%s, take=%s",
            payment_filter.keywords, payment_filter.skip_count, payment_filter.max_result_count,
        )
        query: Select = payment_repository.build_search_query(payment_filter)
        try:
            payments, total = await paginate(
                db, query, payment_filter.skip_count, payment_filter.max_result_count
            )
        except SQLAlchemyError as exc:
            logger.exception("Database error while retrieving payments")
            raise PaymentError("Could not retrieve payments due to a database error.") from exc

        logger.info("Retrieved %s payments out of %s total payments.", len(payments), total)
        return PagedResult[PaymentListItem](
            items=[self._to_list_item(p) for p in payments],
            total_count=total,
        )

    async def create_payment(
        self,
        db: AsyncSession,
        data: PaymentCreate,
    ) -> PaymentResponse:
        """새 결제를 생성합니다.

        Validate the request, resolve both accounts (reusing identical
        existing ones) and insert the payment.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 결제 생성 데이터 (Payment creation data)

        Returns:
            PaymentResponse: 생성된 결제 응답 (Created payment with relations)

        Raises:
            ValidationError: 검증 규칙 위반 시 (Rule violations, nothing is written)
            PaymentAlreadyExistsError: 유일성 위반 시 (Uniqueness violation)
            PaymentError: 그 외 DB 오류 시 (Other database failure)
        """
        logger.info("Starting validation for payment: %s", data.reference_number)
        validate_payment(data)
        logger.info("Validation passed for payment: %s", data.reference_number)

        try:
            originator: Account = await account_service.find_or_create_account(
                db, data.originator_account
            )
            beneficiary: Account = await account_service.find_or_create_account(
                db, data.beneficiary_account
            )

            payment_data: dict[str, Any] = {
                "originator_account_id": originator.id,
                "beneficiary_account_id": beneficiary.id,
                "amount": Money(value=data.amount.value, currency=data.amount.currency),
                "date": data.date or datetime.now(timezone.utc),
                "charges_bearer": int(
                    data.charges_bearer if data.charges_bearer is not None else ChargesBearer.SHARED
                ),
                "details": data.details,
                "reference_number": data.reference_number,
            }
            payment: Payment = await payment_repository.create(db, payment_data)
            logger.info("Payment entity created and flushed with ID %s", payment.id)

            reloaded: Payment | None = await payment_repository.get_detail(db, payment.id)
        except IntegrityError as exc:
            await db.rollback()
            logger.exception(
                "Database update error while saving payment with reference number %s",
                data.reference_number,
            )
            if is_unique_violation(exc):
                raise PaymentAlreadyExistsError(
                    "A payment with this reference number exists."
                ) from exc
            raise PaymentError(
                f"Could not save payment with reference number {data.reference_number} "
                "due to a database update error."
            ) from exc
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception(
                "Database error while saving payment with reference number %s",
                data.reference_number,
            )
            raise PaymentError(
                "A database error occurred while saving payment with reference number "
                f"{data.reference_number}."
            ) from exc

        logger.info("Payment created successfully with ID %s", payment.id)
        return self._to_response(reloaded)


# 싱글턴 인스턴스 — Singleton instance
payment_service: PaymentService = PaymentService()
