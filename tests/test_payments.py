"""결제 API 테스트.

Payment API tests — Creation workflow, account reuse, validation,
detail lookup, and the filtered/paged list.
"""

from decimal import Decimal

from httpx import AsyncClient

from tests.conftest import (
    ACCOUNTS_URL,
    PAYMENTS_URL,
    account_payload,
    beneficiary_payload,
    payment_payload,
)


class TestPaymentCreate:
    """결제 생성 테스트."""

    async def test_create_payment(self, client: AsyncClient):
        """결제 생성 성공 — 양측 계좌와 주소 포함."""
        res = await client.post(PAYMENTS_URL, json=payment_payload())
        assert res.status_code == 201
        data = res.json()
        assert res.headers["location"] == f"{PAYMENTS_URL}/{data['id']}"
        assert data["reference_number"] == "REF-001"
        assert data["details"] == "Invoice 42"
        assert Decimal(data["amount"]["value"]) == Decimal("100.5")
        assert data["amount"]["currency"] == "EUR"
        assert data["charges_bearer"] == 0
        assert data["date"].startswith("2024-03-01T10:00:00")
        assert data["originator_account"]["name"] == "Alice Smith"
        assert data["originator_account"]["address"]["city"] == "London"
        assert data["beneficiary_account"]["name"] == "Bob Jones"
        assert data["beneficiary_account"]["address"]["country_code"] == "DE"

    async def test_create_payment_defaults(self, client: AsyncClient):
        """일시와 수수료 부담 주체 생략 시 기본값."""
        payload = payment_payload()
        del payload["date"]
        del payload["charges_bearer"]
        res = await client.post(PAYMENTS_URL, json=payload)
        assert res.status_code == 201
        data = res.json()
        assert data["charges_bearer"] == 2
        assert data["date"]

    async def test_create_payment_reuses_existing_accounts(self, client: AsyncClient, payment):
        """동일한 계좌는 재사용됩니다."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(reference_number="REF-002"))
        assert res.status_code == 201
        data = res.json()
        assert data["originator_account"]["id"] == payment["originator_account"]["id"]
        assert data["beneficiary_account"]["id"] == payment["beneficiary_account"]["id"]

        accounts = await client.get(ACCOUNTS_URL)
        assert accounts.json()["total_count"] == 2

    async def test_create_payment_reuses_account_created_via_api(self, client: AsyncClient, account):
        """계좌 API로 생성한 계좌도 재사용됩니다."""
        res = await client.post(PAYMENTS_URL, json=payment_payload())
        assert res.status_code == 201
        assert res.json()["originator_account"]["id"] == account["id"]

    async def test_create_payment_new_account_when_identity_differs(self, client: AsyncClient, payment):
        """IBAN이 다르면 새 계좌를 생성합니다."""
        originator = account_payload(iban="GB82WEST12345698765432")
        res = await client.post(PAYMENTS_URL, json=payment_payload(originator_account=originator))
        assert res.status_code == 201
        assert res.json()["originator_account"]["id"] != payment["originator_account"]["id"]

    async def test_create_payment_same_account_both_sides(self, client: AsyncClient):
        """송금인과 수취인이 같은 계좌이면 하나의 계좌만 생성됩니다."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(
            beneficiary_account=account_payload(),
        ))
        assert res.status_code == 201
        data = res.json()
        assert data["originator_account"]["id"] == data["beneficiary_account"]["id"]

        accounts = await client.get(ACCOUNTS_URL)
        assert accounts.json()["total_count"] == 1

    async def test_create_payment_empty_body(self, client: AsyncClient, errors_of):
        """빈 요청은 모든 필수 항목 오류를 함께 반환합니다."""
        res = await client.post(PAYMENTS_URL, json={})
        errors = errors_of(res)
        assert "Payment reference number cannot be null or empty." in errors
        assert "Payment details cannot be null or empty." in errors
        assert "Payment amount cannot be null." in errors
        assert "Payment beneficiary account cannot be null." in errors
        assert "Payment originator account cannot be null." in errors
        assert len(errors) == 5

    async def test_create_payment_invalid_money(self, client: AsyncClient, errors_of):
        """금액 규칙 위반."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(
            amount={"value": -5, "currency": "EURO"},
        ))
        errors = errors_of(res)
        assert "Money value must be greater than zero." in errors
        assert "Money currency must be 3 letters." in errors

    async def test_create_payment_invalid_nested_account(self, client: AsyncClient, errors_of):
        """계좌와 주소 규칙 위반이 함께 보고됩니다."""
        originator = account_payload(name="", address=None)
        res = await client.post(PAYMENTS_URL, json=payment_payload(originator_account=originator))
        errors = errors_of(res)
        assert "Account name cannot be null or empty." in errors
        assert "Account address cannot be null." in errors

    async def test_create_payment_validation_writes_nothing(self, client: AsyncClient):
        """검증 실패 시 계좌도 저장되지 않습니다."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(reference_number=""))
        assert res.status_code == 400

        accounts = await client.get(ACCOUNTS_URL)
        assert accounts.json()["total_count"] == 0

    async def test_create_payment_details_too_long(self, client: AsyncClient):
        """결제 메모 최대 길이 초과 시 422."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(details="x" * 101))
        assert res.status_code == 422

    async def test_create_payment_invalid_charges_bearer(self, client: AsyncClient):
        """정의되지 않은 수수료 부담 주체는 422."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(charges_bearer=7))
        assert res.status_code == 422

    async def test_create_payment_sub_cent_amount(self, client: AsyncClient):
        """소수점 둘째 자리를 넘는 금액은 422 — 0.00으로 반올림되어 저장되지 않습니다."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(
            amount={"value": "0.001", "currency": "EUR"},
        ))
        assert res.status_code == 422

        res = await client.get(PAYMENTS_URL)
        assert res.json()["total_count"] == 0

    async def test_create_payment_amount_too_large(self, client: AsyncClient):
        """NUMERIC(18, 2) 범위를 넘는 금액은 422."""
        res = await client.post(PAYMENTS_URL, json=payment_payload(
            amount={"value": "12345678901234567", "currency": "EUR"},
        ))
        assert res.status_code == 422


class TestPaymentRead:
    """결제 조회 테스트."""

    async def test_get_payment(self, client: AsyncClient, payment):
        """결제 상세 조회."""
        res = await client.get(f"{PAYMENTS_URL}/{payment['id']}")
        assert res.status_code == 200
        data = res.json()
        assert data["id"] == payment["id"]
        assert data["originator_account"]["iban"] == "GB29NWBK60161331926819"
        assert data["beneficiary_account"]["address"]["address_line1"] == "Unter den Linden 5"

    async def test_get_nonexistent_payment(self, client: AsyncClient):
        """존재하지 않는 결제 조회 시 404."""
        res = await client.get(f"{PAYMENTS_URL}/999")
        assert res.status_code == 404
        assert res.json()["detail"] == "Payment with ID 999 not found."

    async def test_get_payment_id_out_of_range(self, client: AsyncClient):
        """정수 키 범위를 넘는 ID는 422."""
        res = await client.get(f"{PAYMENTS_URL}/99999999999")
        assert res.status_code == 422


class TestPaymentList:
    """결제 목록 테스트."""

    async def _create(self, client: AsyncClient, **overrides):
        res = await client.post(PAYMENTS_URL, json=payment_payload(**overrides))
        assert res.status_code == 201
        return res.json()

    async def test_list_empty(self, client: AsyncClient):
        res = await client.get(PAYMENTS_URL)
        assert res.status_code == 200
        assert res.json() == {"items": [], "total_count": 0}

    async def test_list_newest_first(self, client: AsyncClient):
        """결제 목록은 최신순입니다."""
        old = await self._create(client, reference_number="OLD", date="2024-01-01T09:00:00Z")
        new = await self._create(client, reference_number="NEW", date="2024-06-01T09:00:00Z")

        res = await client.get(PAYMENTS_URL)
        data = res.json()
        assert data["total_count"] == 2
        assert [p["id"] for p in data["items"]] == [new["id"], old["id"]]
        assert data["items"][0]["originator"] == "Alice Smith"
        assert data["items"][0]["beneficiary"] == "Bob Jones"

    async def test_list_paging(self, client: AsyncClient):
        """skip/max_result_count 페이지네이션 — 전체 개수는 유지."""
        for day in range(1, 6):
            await self._create(client, reference_number=f"REF-{day}", date=f"2024-02-0{day}T09:00:00Z")

        res = await client.get(PAYMENTS_URL, params={"skip_count": 1, "max_result_count": 2})
        data = res.json()
        assert data["total_count"] == 5
        assert [p["reference_number"] for p in data["items"]] == ["REF-4", "REF-3"]

    async def test_list_keywords(self, client: AsyncClient):
        """참조 번호와 메모를 대소문자 무시로 검색합니다."""
        await self._create(client, reference_number="RENT-JAN", details="Rent January")
        await self._create(client, reference_number="SAL-01", details="Salary")

        res = await client.get(PAYMENTS_URL, params={"keywords": "rent"})
        data = res.json()
        assert data["total_count"] == 1
        assert data["items"][0]["reference_number"] == "RENT-JAN"

        res = await client.get(PAYMENTS_URL, params={"keywords": "salary"})
        assert res.json()["total_count"] == 1

    async def test_list_keywords_wildcards_are_literal(self, client: AsyncClient):
        """검색어의 % 와 _ 는 문자 그대로 일치합니다."""
        await self._create(client, reference_number="A_1", details="Fee")
        await self._create(client, reference_number="AB1", details="Fee")

        res = await client.get(PAYMENTS_URL, params={"keywords": "a_1"})
        data = res.json()
        assert data["total_count"] == 1
        assert data["items"][0]["reference_number"] == "A_1"

    async def test_list_by_account(self, client: AsyncClient):
        """송금인/수취인 계좌로 필터링합니다."""
        first = await self._create(client, reference_number="P1")
        await self._create(
            client,
            reference_number="P2",
            originator_account=beneficiary_payload(),
            beneficiary_account=account_payload(),
        )

        originator_id = first["originator_account"]["id"]
        res = await client.get(PAYMENTS_URL, params={"originator_account_id": originator_id})
        data = res.json()
        assert data["total_count"] == 1
        assert data["items"][0]["reference_number"] == "P1"

        res = await client.get(PAYMENTS_URL, params={"beneficiary_account_id": originator_id})
        data = res.json()
        assert data["total_count"] == 1
        assert data["items"][0]["reference_number"] == "P2"

    async def test_list_by_date_range(self, client: AsyncClient):
        """결제 일시 범위로 필터링합니다 (양 끝 포함)."""
        await self._create(client, reference_number="JAN", date="2024-01-15T12:00:00Z")
        await self._create(client, reference_number="FEB", date="2024-02-15T12:00:00Z")
        await self._create(client, reference_number="MAR", date="2024-03-15T12:00:00Z")

        res = await client.get(PAYMENTS_URL, params={
            "date_from": "2024-02-01T00:00:00Z",
            "date_to": "2024-03-15T12:00:00Z",
        })
        data = res.json()
        assert data["total_count"] == 2
        assert [p["reference_number"] for p in data["items"]] == ["MAR", "FEB"]

    async def test_list_negative_skip(self, client: AsyncClient):
        """skip_count가 음수이면 400."""
        res = await client.get(PAYMENTS_URL, params={"skip_count": -1})
        assert res.status_code == 400
        assert res.json()["detail"] == "Skip count cannot be less than zero."

    async def test_list_max_result_count_out_of_range(self, client: AsyncClient):
        """페이지 크기 범위를 벗어나면 422."""
        res = await client.get(PAYMENTS_URL, params={"max_result_count": 0})
        assert res.status_code == 422
        res = await client.get(PAYMENTS_URL, params={"max_result_count": 1000})
        assert res.status_code == 422

    async def test_list_paging_and_ids_out_of_range(self, client: AsyncClient):
        """skip_count와 계좌 ID가 정수 범위를 넘으면 422."""
        res = await client.get(PAYMENTS_URL, params={"skip_count": 10**12})
        assert res.status_code == 422
        res = await client.get(PAYMENTS_URL, params={"originator_account_id": 10**12})
        assert res.status_code == 422
