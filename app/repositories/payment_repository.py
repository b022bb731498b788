"""결제 레포지토리 — 결제 조회 및 필터링 쿼리.

Payment Repository — Lookup and filtered list queries for payments.
Both accounts are always loaded; the detail query also loads their addresses.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.account import Account
from app.models.payment import Payment
from app.repositories.base import BaseRepository
from app.schemas.payment import PaymentFilter
from app.utils.pagination import contains_keyword


class PaymentRepository(BaseRepository[Payment]):
    """결제 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the payments table.
    """

    def __init__(self) -> None:
        super().__init__(Payment)

    async def get_detail(
        self,
        db: AsyncSession,
        payment_id: int,
    ) -> Payment | None:
        """결제를 양측 계좌 및 주소와 함께 조회합니다.

        Retrieve a payment with originator/beneficiary accounts and their
        addresses eagerly loaded. Also used to reload a payment right after
        it has been flushed.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            payment_id: 결제 ID (Payment primary key)

        Returns:
            Payment | None: 관계가 로드된 결제 또는 None (Payment with relations, or None)
        """
        query: Select = (
            select(Payment)
            .options(
                selectinload(Payment.originator_account).selectinload(Account.address),
                selectinload(Payment.beneficiary_account).selectinload(Account.address),
            )
            .where(Payment.id == payment_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    def build_search_query(self, payment_filter: PaymentFilter) -> Select:
        """결제 목록 쿼리를 생성합니다.

        Build the payment list query from a filter. Newest payments first.

        Args:
            payment_filter: 결제 필터 (Keywords, account IDs and date range)

        Returns:
            Select: 필터가 적용된 쿼리 (Filtered, ordered query)
        """
        query: Select = (
            select(Payment)
            .options(
                selectinload(Payment.originator_account),
                selectinload(Payment.beneficiary_account),
            )
            .order_by(Payment.date.desc(), Payment.id.desc())
        )

        if payment_filter.keywords:
            pattern: str = contains_keyword(payment_filter.keywords)
            query = query.where(
                or_(
                    Payment.reference_number.ilike(pattern, escape="\\"),
                    Payment.details.ilike(pattern, escape="\\"),
                )
            )
        if payment_filter.originator_account_id is not None:
            query = query.where(Payment.originator_account_id == payment_filter.originator_account_id)
        if payment_filter.beneficiary_account_id is not None:
            query = query.where(Payment.beneficiary_account_id == payment_filter.beneficiary_account_id)
        if payment_filter.date_from is not None:
            query = query.where(Payment.date >= payment_filter.date_from)
        if payment_filter.date_to is not None:
            query = query.where(Payment.date <= payment_filter.date_to)

        return query


# 싱글턴 인스턴스 — Singleton instance
payment_repository: PaymentRepository = PaymentRepository()
