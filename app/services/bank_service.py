"""은행 서비스 — 은행 조회/생성 비즈니스 로직.

Bank Service — Business logic for bank retrieval and creation.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.bank import Bank
from app.repositories.bank_repository import bank_repository
from app.schemas.bank import BankCreate, BankFilter, BankResponse
from app.schemas.common import PagedResult
from app.services.account_service import account_service
from app.utils.exceptions import BankAlreadyExistsError, BankError, is_unique_violation
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)


class BankService:
    """은행 관련 비즈니스 로직을 처리하는 서비스.

    Service handling bank business logic.
    """

    def _to_response(self, bank: Bank) -> BankResponse:
        return BankResponse(
            id=bank.id,
            name=bank.name,
            bic=bank.bic,
            accounts=[account_service.to_response(a) for a in bank.accounts],
        )

    async def get_bank(
        self,
        db: AsyncSession,
        bank_id: int,
    ) -> BankResponse | None:
        """은행 상세 정보를 계좌와 함께 조회합니다.

        Retrieve a bank with the accounts that share its BIC.

        Raises:
            BankError: DB 오류 발생 시 (Database failure)
        """
        try:
            bank: Bank | None = await bank_repository.get_detail(db, bank_id)
        except SQLAlchemyError as exc:
            logger.exception("Database error while retrieving bank with ID %s", bank_id)
            raise BankError(f"Could not retrieve bank with ID {bank_id} due to a database error.") from exc

        if bank is None:
            logger.warning("Bank with ID %s not found.", bank_id)
            return None
        return self._to_response(bank)

    async def list_banks(
        self,
        db: AsyncSession,
        bank_filter: BankFilter,
    ) -> PagedResult[BankResponse]:
        """은행 목록을 조회합니다 (List banks matching the filter)."""
        query = bank_repository.build_search_query(bank_filter.keywords)
        try:
            banks, total = await paginate(
                db, query, bank_filter.skip_count, bank_filter.max_result_count
            )
        except SQLAlchemyError as exc:
            logger.exception("Database error while retrieving banks")
            raise BankError("Could not retrieve banks due to a database error.") from exc

        return PagedResult[BankResponse](
            items=[self._to_response(b) for b in banks],
            total_count=total,
        )

    async def create_bank(
        self,
        db: AsyncSession,
        data: BankCreate,
    ) -> BankResponse:
        """새 은행을 생성합니다.

        Create a new bank. The BIC must not be registered yet.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 은행 생성 데이터 (Bank creation data)

        Returns:
            BankResponse: 생성된 은행 응답 (Created bank response)

        Raises:
            BankAlreadyExistsError: 같은 BIC의 은행이 이미 존재할 때
                                    (When a bank with the same BIC already exists)
            BankError: 그 외 DB 오류 시 (Other database failure)
        """
        bic: str = data.bic.upper()
        # BIC 중복 확인 — Check BIC uniqueness
        if await bank_repository.exists(db, {"bic": bic}):
            raise BankAlreadyExistsError(f"A bank with BIC {bic} already exists.")

        try:
            bank: Bank = await bank_repository.create(db, {"name": data.name, "bic": bic})
            reloaded: Bank | None = await bank_repository.get_detail(db, bank.id)
        except IntegrityError as exc:
            await db.rollback()
            logger.exception("Database update error while saving bank %s", bic)
            if is_unique_violation(exc):
                raise BankAlreadyExistsError(f"A bank with BIC {bic} already exists.") from exc
            raise BankError(f"Could not save bank {bic} due to a database update error.") from exc
        except SQLAlchemyError as exc:
            await db.rollback()
            logger.exception("Database error while saving bank %s", bic)
            raise BankError(f"A database error occurred while saving bank {bic}.") from exc

        logger.info("Bank created successfully with ID %s", bank.id)
        return self._to_response(reloaded)


# 싱글턴 인스턴스 — Singleton instance
bank_service: BankService = BankService()
