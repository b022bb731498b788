"""계좌 레포지토리 — 계좌/주소 CRUD 및 검색 쿼리.

Account Repository — CRUD and search queries for accounts and their addresses.
Extends BaseRepository with address eager loading, keyword search and
the identity lookup used by payment creation.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.account import Account, Address
from app.repositories.base import BaseRepository
from app.utils.pagination import contains_keyword


class AddressRepository(BaseRepository[Address]):
    """주소 테이블 레포지토리 (Repository for the addresses table)."""

    def __init__(self) -> None:
        super().__init__(Address)


class AccountRepository(BaseRepository[Account]):
    """계좌 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the accounts table.
    Accounts are always returned with their address loaded.
    """

    def __init__(self) -> None:
        """AccountRepository를 초기화합니다.

        Initialize the AccountRepository with the Account model.
        """
        super().__init__(Account)

    async def get_detail(
        self,
        db: AsyncSession,
        account_id: int,
    ) -> Account | None:
        """계좌를 주소와 함께 조회합니다.

        Retrieve an account with its address eagerly loaded.
        Populates existing identity-map instances so a freshly flushed
        account is returned with its relations.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            account_id: 계좌 ID (Account primary key)

        Returns:
            Account | None: 주소가 로드된 계좌 또는 None (Account with address, or None)
        """
        query: Select = (
            select(Account)
            .options(selectinload(Account.address))
            .where(Account.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()

    def build_search_query(self, keywords: str | None) -> Select:
        """키워드 검색 쿼리를 생성합니다.

        Build the account list query. Keywords match (case-insensitive,
        substring) the name, IBAN, account number and every address field.

        Args:
            keywords: 검색어 (Search keywords, optional)

        Returns:
            Select: ID 순으로 정렬된 쿼리 (Query ordered by id)
        """
        query: Select = (
            select(Account)
            .join(Account.address)
            .options(selectinload(Account.address))
            .order_by(Account.id)
        )

        if keywords:
            pattern: str = contains_keyword(keywords)
            query = query.where(
                or_(
                    Account.name.ilike(pattern, escape="\\"),
                    Account.iban.ilike(pattern, escape="\\"),
                    Account.account_number.ilike(pattern, escape="\\"),
                    Address.address_line1.ilike(pattern, escape="\\"),
                    Address.address_line2.ilike(pattern, escape="\\"),
                    Address.address_line3.ilike(pattern, escape="\\"),
                    Address.city.ilike(pattern, escape="\\"),
                    Address.post_code.ilike(pattern, escape="\\"),
                    Address.country_code.ilike(pattern, escape="\\"),
                )
            )

        return query

    async def find_by_identity(
        self,
        db: AsyncSession,
        name: str,
        iban: str,
        bic: str,
        account_number: str,
    ) -> Account | None:
        """식별 필드가 모두 일치하는 기존 계좌를 조회합니다.

        Find an existing account whose name, IBAN, BIC and account number
        all match (BIC compared upper-cased). Returns the oldest one when
        several match.

        Returns:
            Account | None: 일치하는 계좌 또는 None (Matching account or None)
        """
        query: Select = (
            select(Account)
            .options(selectinload(Account.address))
            .where(
                Account.name == name,
                Account.iban == iban,
                Account.bic == bic.upper(),
                Account.account_number == account_number,
            )
            .order_by(Account.id)
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instances
address_repository: AddressRepository = AddressRepository()
account_repository: AccountRepository = AccountRepository()
