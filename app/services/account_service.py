"""계좌 서비스 — 계좌 조회/검색/생성 비즈니스 로직.

Account Service — Business logic for account retrieval, search and creation.
Also provides the find-or-create step used by payment creation.
"""

import logging

from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.account import Account, Address
from app.repositories.account_repository import account_repository, address_repository
from app.schemas.account import AccountCreate, AccountFilter, AccountResponse, AddressResponse
from app.schemas.common import PagedResult
from app.services.validators import validate_account
from app.utils.exceptions import AccountAlreadyExistsError, AccountError, is_unique_violation
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)


class AccountService:
    """계좌 관련 비즈니스 로직을 처리하는 서비스.

    Service handling account business logic.
    Database failures are logged and wrapped in AccountError.
    """

    def _address_to_response(self, address: Address) -> AddressResponse:
        return AddressResponse(
            id=address.id,
            address_line1=address.address_line1,
            address_line2=address.address_line2,
            address_line3=address.address_line3,
            city=address.city,
            post_code=address.post_code,
            country_code=address.country_code,
        )

    def to_response(self, account: Account) -> AccountResponse:
        """계좌 모델을 응답 스키마로 변환합니다.

        Convert an Account (with its address loaded) to an AccountResponse.

        Args:
            account: 계좌 모델 (Account model instance)

        Returns:
            AccountResponse: 계좌 응답 (Account response)
        """
        return AccountResponse(
            id=account.id,
            address_id=account.address_id,
            name=account.name,
            account_number=account.account_number,
            iban=account.iban,
            bic=account.bic,
            address=self._address_to_response(account.address) if account.address else None,
        )

    async def get_account(
        self,
        db: AsyncSession,
        account_id: int,
    ) -> AccountResponse | None:
        """계좌 상세 정보를 조회합니다.

        Retrieve an account with its address.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            account_id: 계좌 ID (Account primary key)

        Returns:
            AccountResponse | None: 계좌 응답, 없으면 None (Account response or None)

        Raises:
            AccountError: DB 오류 발생 시 (Database failure)
        """
        logger.info("Retrieving account with ID %s", account_id)
        try:
            account: Account | None = await account_repository.get_detail(db, account_id)
        except SQLAlchemyError as exc:
            logger.exception("Database error while retrieving account with ID %s", account_id)
            raise AccountError(
                f"Could not retrieve account with ID {account_id} due to a database error."
            ) from exc

        if account is None:
            logger.warning("Account with ID %s not found.", account_id)
            return None
        return self.to_response(account)

    async def list_accounts(
        self,
        db: AsyncSession,
        account_filter: AccountFilter,
    ) -> PagedResult[AccountResponse]:
        """키워드와 페이지 조건으로 계좌 목록을 조회합니다.

        List accounts matching the filter keywords, one page at a time.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            account_filter: 검색어 및 페이지 조건 (Keywords and paging)

        Returns:
            PagedResult[AccountResponse]: 페이지 항목과 전체 개수 (Page and total count)

        Raises:
            BadRequestError: skip_count가 음수일 때 (Negative skip count)
            AccountError: DB 오류 발생 시 (Database failure)
        """
        logger.info(
            "Retrieving accounts with filter: keywords=%r, skip=%s, take=%s",
            account_filter.keywords, account_filter.skip_count, account_filter.max_result_count,
        )
        query: Select = account_repository.build_search_query(account_filter.keywords)
        try:
            accounts, total = await paginate(
                db, query, account_filter.skip_count, account_filter.max_result_count
            )
        except SQLAlchemyError as exc:
            logger.exception("Database error while retrieving accounts")
            raise AccountError("Could not retrieve accounts due to a database error.") from exc

        logger.info("Retrieved %s accounts out of %s total accounts.", len(accounts), total)
        return PagedResult[AccountResponse](
            items=[self.to_response(a) for a in accounts],
            total_count=total,
        )

    async def create_account(
        self,
        db: AsyncSession,
        data: AccountCreate,
    ) -> AccountResponse:
        """새 계좌를 주소와 함께 생성합니다.

        Validate and create a new account together with its address.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 계좌 생성 데이터 (Account creation data)

        Returns:
            AccountResponse: 생성된 계좌 응답 (Created account response)

        Raises:
            ValidationError: 검증 규칙 위반 시 (Rule violations)
            AccountAlreadyExistsError: 유일성 위반 시 (Uniqueness violation)
            AccountError: 그 외 DB 오류 시 (Other database failure)
        """
        logger.info("Starting validation for account: %s", data.name)
        validate_account(data)

        try:
            account: Account = await self._insert_account(db, data)
            reloaded: Account | None = await account_repository.get_detail(db, account.id)
        except IntegrityError as exc:
            await db.rollback()
            logger.exception("Database update error while saving account with name %s", data.name)
            if is_unique_violation(exc):
                raise AccountAlreadyExistsError("An account with this name exists.") from exc
            raise AccountError(
                f"Could not save account with name {data.name} due to a database update error."
            ) from exc
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("Database error while saving account with name %s", data.name)
            raise AccountError(
                f"A database error occurred while saving account with name {data.name}."
            ) from exc

        logger.info("Account created successfully with ID %s", account.id)
        return self.to_response(reloaded or account)

    async def find_or_create_account(
        self,
        db: AsyncSession,
        data: AccountCreate,
    ) -> Account:
        """동일한 계좌가 있으면 재사용하고, 없으면 새로 생성합니다.

        Return the existing account with the same name, IBAN, BIC and
        account number, or insert a new one. The caller validates ``data``
        and handles SQLAlchemy errors.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 계좌 데이터 (Validated account data)

        Returns:
            Account: 기존 또는 신규 계좌 (Existing or newly created account)
        """
        existing: Account | None = await account_repository.find_by_identity(
            db, data.name, data.iban, data.bic, data.account_number
        )
        if existing is not None:
            logger.debug("Reusing account %s for IBAN %s", existing.id, data.iban)
            return existing
        return await self._insert_account(db, data)

    async def _insert_account(self, db: AsyncSession, data: AccountCreate) -> Account:
        address: Address = await address_repository.create(
            db, data.address.model_dump()
        )
        return await account_repository.create(
            db,
            {
                "address_id": address.id,
                "name": data.name,
                "account_number": data.account_number,
                "iban": data.iban,
                "bic": data.bic.upper(),
            },
        )


# 싱글턴 인스턴스 — Singleton instance
account_service: AccountService = AccountService()
