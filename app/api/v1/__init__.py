"""v1 API 라우터 패키지 — 결제/계좌/은행 엔드포인트 통합.

v1 API Router package — Aggregates the payment, account and bank
endpoints into a single router mounted under ``/api/v1``.

Included routers:
    - payments: 결제 조회/생성 (Payment list, detail and creation)
    - accounts: 계좌 조회/생성 (Account list, detail and creation)
    - banks: 은행 조회/생성 (Bank list, detail and creation)
"""

from fastapi import APIRouter

from app.api.v1.accounts import router as accounts_router
from app.api.v1.banks import router as banks_router
from app.api.v1.payments import router as payments_router

v1_router: APIRouter = APIRouter()

v1_router.include_router(payments_router, prefix="/payments", tags=["Payments"])
v1_router.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
v1_router.include_router(banks_router, prefix="/banks", tags=["Banks"])
