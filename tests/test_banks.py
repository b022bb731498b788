"""은행 API 테스트.

Bank API tests — Creation, BIC uniqueness, and BIC-based account lookup.
"""

from httpx import AsyncClient

from tests.conftest import (
    ACCOUNTS_URL,
    BANKS_URL,
    PAYMENTS_URL,
    account_payload,
    beneficiary_payload,
    payment_payload,
)


class TestBankCreate:
    """은행 생성 테스트."""

    async def test_create_bank(self, client: AsyncClient):
        res = await client.post(BANKS_URL, json={"name": "Commerzbank", "bic": "cobadeffxxx"})
        assert res.status_code == 201
        data = res.json()
        assert res.headers["location"] == f"{BANKS_URL}/{data['id']}"
        assert data["name"] == "Commerzbank"
        assert data["bic"] == "COBADEFFXXX"
        assert data["accounts"] == []

    async def test_create_bank_duplicate_bic(self, client: AsyncClient, bank):
        """같은 BIC의 은행은 409."""
        res = await client.post(BANKS_URL, json={"name": "Other", "bic": "nwbkgb2l"})
        assert res.status_code == 409

    async def test_create_bank_invalid_bic(self, client: AsyncClient):
        """BIC 길이가 8~11자가 아니면 422."""
        res = await client.post(BANKS_URL, json={"name": "Short", "bic": "ABC"})
        assert res.status_code == 422


class TestBankRead:
    """은행 조회 테스트."""

    async def test_get_bank_with_accounts(self, client: AsyncClient, bank, account):
        """BIC가 일치하는 계좌만 포함됩니다."""
        await client.post(ACCOUNTS_URL, json=beneficiary_payload())

        res = await client.get(f"{BANKS_URL}/{bank['id']}")
        assert res.status_code == 200
        data = res.json()
        assert [a["id"] for a in data["accounts"]] == [account["id"]]
        assert data["accounts"][0]["address"]["city"] == "London"

    async def test_get_nonexistent_bank(self, client: AsyncClient):
        res = await client.get(f"{BANKS_URL}/999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Bank with ID 999 not found."

    async def test_list_banks_by_keyword(self, client: AsyncClient, bank):
        await client.post(BANKS_URL, json={"name": "Commerzbank", "bic": "COBADEFFXXX"})

        res = await client.get(BANKS_URL, params={"keywords": "natw"})
        data = res.json()
        assert data["total_count"] == 1
        assert data["items"][0]["bic"] == "NWBKGB2L"

        res = await client.get(BANKS_URL, params={"keywords": "COBA"})
        assert res.json()["items"][0]["name"] == "Commerzbank"

        res = await client.get(BANKS_URL)
        assert res.json()["total_count"] == 2

    async def test_account_with_lowercase_bic_belongs_to_bank(self, client: AsyncClient, bank):
        """소문자 BIC로 생성한 계좌도 은행에 포함됩니다."""
        res = await client.post(ACCOUNTS_URL, json=account_payload(bic="nwbkgb2l"))
        assert res.status_code == 201
        created = res.json()
        assert created["bic"] == "NWBKGB2L"

        res = await client.get(f"{BANKS_URL}/{bank['id']}")
        assert [a["id"] for a in res.json()["accounts"]] == [created["id"]]

    async def test_payment_reuses_account_regardless_of_bic_case(self, client: AsyncClient, account):
        """BIC 대소문자만 다른 계좌는 결제 생성 시 재사용됩니다."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(
            originator_account=account_payload(bic="nwbkgb2l"),
        ))
        assert res.status_code == 201
        assert res.json()["originator_account"]["id"] == account["id"]

    async def test_get_bank_id_out_of_range(self, client: AsyncClient):
        res = await client.get(f"{BANKS_URL}/99999999999")
        assert res.status_code == 422
