"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session, and httpx client fixtures.
Every test gets a fresh schema on a single shared aiosqlite connection.
"""

import os

os.environ.setdefault("AUTO_CREATE_SCHEMA", "false")

from collections.abc import AsyncGenerator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

PAYMENTS_URL = "/api/v1/payments"
ACCOUNTS_URL = "/api/v1/accounts"
BANKS_URL = "/api/v1/banks"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 요청 데이터 헬퍼 — Request payload helpers
# ---------------------------------------------------------------------------
def address_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "address_line1": "1 Main Street",
        "address_line2": "Floor 2",
        "address_line3": None,
        "city": "London",
        "post_code": "EC1A 1BB",
        "country_code": "GB",
    }
    data.update(overrides)
    return data


def account_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": "Alice Smith",
        "iban": "GB29NWBK60161331926819",
        "bic": "NWBKGB2L",
        "account_number": "31926819",
        "address": address_payload(),
    }
    data.update(overrides)
    return data


def beneficiary_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = account_payload(
        name="Bob Jones",
        iban="DE89370400440532013000",
        bic="COBADEFFXXX",
        account_number="532013000",
        address=address_payload(
            address_line1="Unter den Linden 5", city="Berlin", post_code="10117", country_code="DE"
        ),
    )
    data.update(overrides)
    return data


def payment_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "originator_account": account_payload(),
        "beneficiary_account": beneficiary_payload(),
        "amount": {"value": 100.5, "currency": "EUR"},
        "date": "2024-03-01T10:00:00Z",
        "charges_bearer": 0,
        "details": "Invoice 42",
        "reference_number": "REF-001",
    }
    data.update(overrides)
    return data


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def bank(client: AsyncClient) -> dict[str, Any]:
    """BIC가 NWBKGB2L인 은행을 생성합니다."""
    res = await client.post(BANKS_URL, json={"name": "NatWest", "bic": "NWBKGB2L"})
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def account(client: AsyncClient) -> dict[str, Any]:
    """기본 계좌를 생성합니다."""
    res = await client.post(ACCOUNTS_URL, json=account_payload())
    assert res.status_code == 201
    return res.json()


@pytest_asyncio.fixture
async def payment(client: AsyncClient) -> dict[str, Any]:
    """기본 결제를 생성합니다."""
    res = await client.post(PAYMENTS_URL, json=payment_payload())
    assert res.status_code == 201
    return res.json()


@pytest.fixture
def errors_of():
    """400 검증 응답에서 오류 목록을 꺼냅니다."""
    def _errors(response) -> list[str]:
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail["message"] == "Validation failed."
        return detail["errors"]

    return _errors
