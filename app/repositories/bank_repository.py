"""은행 레포지토리 — 은행 CRUD 및 관련 쿼리.

Bank Repository — CRUD and related queries for banks.
Extends BaseRepository with eager loading of the accounts sharing a BIC.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.account import Account
from app.models.bank import Bank
from app.repositories.base import BaseRepository
from app.utils.pagination import contains_keyword


class BankRepository(BaseRepository[Bank]):
    """은행 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the banks table.
    """

    def __init__(self) -> None:
        super().__init__(Bank)

    def _with_accounts(self) -> Select:
        return select(Bank).options(
            selectinload(Bank.accounts).selectinload(Account.address)
        )

    async def get_detail(
        self,
        db: AsyncSession,
        bank_id: int,
    ) -> Bank | None:
        """은행을 계좌 및 주소와 함께 조회합니다.

        Retrieve a bank with its accounts (and their addresses) loaded.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            bank_id: 은행 ID (Bank primary key)

        Returns:
            Bank | None: 계좌가 로드된 은행 또는 None (Bank with accounts, or None)
        """
        query: Select = (
            self._with_accounts()
            .where(Bank.id == bank_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    def build_search_query(self, keywords: str | None) -> Select:
        """이름/BIC 키워드 검색 쿼리를 생성합니다 (Name/BIC keyword query, ordered by id)."""
        query: Select = self._with_accounts().order_by(Bank.id)
        if keywords:
            pattern: str = contains_keyword(keywords)
            query = query.where(
                or_(
                    Bank.name.ilike(pattern, escape="\\"),
                    Bank.bic.ilike(pattern, escape="\\"),
                )
            )
        return query


# 싱글턴 인스턴스 — Singleton instance
bank_repository: BankRepository = BankRepository()
