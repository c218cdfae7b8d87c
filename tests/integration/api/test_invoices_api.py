"""API tests for the invoice routes"""

import base64
import pytest
from decimal import Decimal

MEMBER = {"X-Account-Id": "acct_1"}
GUEST = {"X-Guest": "true"}


def invoice_body(**overrides):
    body = {
        "issue_date": "2026-01-15",
        "due_date": "2026-02-15",
        "items": [{"description": "Website design", "quantity": 1, "price": "1000"}],
        "vat_enabled": True,
        "levies_enabled": True,
        "covid_levy_enabled": True,
        "client": {"name": "Ama Mensah", "email": "ama@example.com"},
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
class TestInvoiceRoutes:

    async def test_create_invoice(self, client):
        response = await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)

        assert response.status_code == 201
        data = response.json()
        assert data["invoice_number"] == "INV-2026-001"
        assert data["status"] == "Pending"
        assert Decimal(data["subtotal"]) == Decimal("1000")
        assert Decimal(data["vat_amount"]) == Decimal("150")
        assert Decimal(data["levies_amount"]) == Decimal("50")
        assert Decimal(data["covid_amount"]) == Decimal("10")
        assert Decimal(data["total"]) == Decimal("1210")
        assert data["client"]["id"] == "new"

    async def test_caller_total_is_ignored(self, client):
        response = await client.post(
            "/api/invoices", json=invoice_body(total="5", vat_enabled=False, levies_enabled=False,
                                               covid_levy_enabled=False),
            headers=MEMBER,
        )

        assert response.status_code == 201
        assert Decimal(response.json()["total"]) == Decimal("1000")

    async def test_missing_client_name_is_rejected(self, client):
        response = await client.post(
            "/api/invoices", json=invoice_body(client={"name": "  "}), headers=MEMBER
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_CLIENT_NAME"

    async def test_missing_item_description_is_rejected(self, client):
        response = await client.post(
            "/api/invoices",
            json=invoice_body(items=[{"description": "", "quantity": 1, "price": "10"}]),
            headers=MEMBER,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MISSING_ITEM_DESCRIPTION"

    async def test_identity_is_required(self, client):
        response = await client.get("/api/invoices")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "MISSING_IDENTITY"

    async def test_get_missing_invoice(self, client):
        response = await client.get("/api/invoices/does-not-exist", headers=MEMBER)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    async def test_accounts_are_isolated(self, client):
        created = (await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)).json()

        response = await client.get(
            f"/api/invoices/{created['invoice_id']}", headers={"X-Account-Id": "acct_2"}
        )

        assert response.status_code == 404

    async def test_list_with_status_filter(self, client):
        await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)
        await client.post("/api/invoices", json=invoice_body(status="Draft"), headers=MEMBER)

        everything = (await client.get("/api/invoices", headers=MEMBER)).json()
        drafts = (await client.get("/api/invoices", params={"status": "Draft"}, headers=MEMBER)).json()

        assert everything["total"] == 2
        assert drafts["total"] == 1
        assert drafts["invoices"][0]["status"] == "Draft"

    async def test_edit_recomputes_total(self, client):
        created = (await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)).json()

        response = await client.patch(
            f"/api/invoices/{created['invoice_id']}",
            json={"items": [{"description": "Logo", "quantity": 2, "price": "50"}]},
            headers=MEMBER,
        )

        assert response.status_code == 200
        assert Decimal(response.json()["total"]) == Decimal("121")
        assert response.json()["status"] == "Pending"

    async def test_mark_paid_then_again(self, client):
        created = (await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)).json()
        url = f"/api/invoices/{created['invoice_id']}/mark-paid"

        first = await client.post(url, headers=MEMBER)
        second = await client.post(url, headers=MEMBER)

        assert first.status_code == 200
        assert first.json()["invoice"]["status"] == "Paid"
        assert first.json()["payment"]["invoice_id"] == "INV-2026-001"
        assert first.json()["payment"]["status"] == "Verified"
        assert Decimal(first.json()["payment"]["amount"]) == Decimal("1210")
        assert second.status_code == 409
        assert second.json()["error"]["code"] == "INVOICE_ALREADY_PAID"

        payments = (await client.get("/api/payments", headers=MEMBER)).json()
        assert payments["total"] == 1

    async def test_delete_keeps_payments(self, client):
        created = (await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)).json()
        await client.post(f"/api/invoices/{created['invoice_id']}/mark-paid", headers=MEMBER)

        response = await client.delete(f"/api/invoices/{created['invoice_id']}", headers=MEMBER)

        assert response.status_code == 200
        assert response.json()["deleted"] is True
        assert (await client.get("/api/payments", headers=MEMBER)).json()["total"] == 1

    async def test_pdf_download(self, client):
        created = (await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)).json()

        encoded = await client.get(f"/api/invoices/{created['invoice_id']}/pdf", headers=MEMBER)
        download = await client.get(f"/api/invoices/{created['invoice_id']}/pdf/download", headers=MEMBER)

        assert encoded.status_code == 200
        assert base64.b64decode(encoded.json()["pdf_base64"]).startswith(b"%PDF")
        assert download.status_code == 200
        assert download.headers["content-type"] == "application/pdf"
        assert download.content.startswith(b"%PDF")

    async def test_csv_export(self, client):
        await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)

        response = await client.get("/api/invoices/export/csv", headers=MEMBER)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        lines = response.text.strip().split("\n")
        assert len(lines) == 2
        assert "INV-2026-001" in lines[1]

    async def test_csv_export_without_invoices(self, client):
        response = await client.get("/api/invoices/export/csv", headers=MEMBER)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NO_DATA_TO_EXPORT"


@pytest.mark.asyncio
class TestGuestQuota:

    async def test_eighth_guest_invoice_is_locked(self, client):
        for _ in range(7):
            response = await client.post("/api/invoices", json=invoice_body(), headers=GUEST)
            assert response.status_code == 201

        locked = await client.post("/api/invoices", json=invoice_body(), headers=GUEST)

        assert locked.status_code == 403
        assert locked.json()["error"]["code"] == "GUEST_INVOICE_LIMIT_REACHED"

        quota = (await client.get("/api/quota", headers=GUEST)).json()
        assert quota["is_guest"] is True
        assert quota["invoices"] == {"count": 7, "limit": 7, "remaining": 0, "locked": True}
        assert quota["exports"]["locked"] is False

    async def test_invalid_guest_invoice_does_not_consume_quota(self, client, counter_store):
        response = await client.post(
            "/api/invoices", json=invoice_body(client={"name": ""}), headers=GUEST
        )

        assert response.status_code == 400
        quota = (await client.get("/api/quota", headers=GUEST)).json()
        assert quota["invoices"]["count"] == 0

    async def test_registered_user_is_never_locked(self, client, counter_store):
        counter_store.set("kvoice_guest_invoice_count", "7")

        response = await client.post("/api/invoices", json=invoice_body(), headers=MEMBER)
        quota = (await client.get("/api/quota", headers=MEMBER)).json()

        assert response.status_code == 201
        assert quota["invoices"]["locked"] is False

    async def test_guest_pdf_exports_are_limited(self, client):
        created = (await client.post("/api/invoices", json=invoice_body(), headers=GUEST)).json()
        url = f"/api/invoices/{created['invoice_id']}/pdf"

        for _ in range(7):
            assert (await client.get(url, headers=GUEST)).status_code == 200

        locked = await client.get(url, headers=GUEST)

        assert locked.status_code == 403
        assert locked.json()["error"]["code"] == "GUEST_EXPORT_LIMIT_REACHED"


def components_sum(data):
    return (
        Decimal(data["subtotal"])
        + Decimal(data["vat_amount"])
        + Decimal(data["levies_amount"])
        + Decimal(data["covid_amount"])
    )


@pytest.mark.asyncio
class TestStoredTotals:

    FRACTIONAL = invoice_body(
        vat_rate="12.5",
        items=[
            {"description": "Notebooks", "quantity": 3, "price": "19.99"},
            {"description": "Pens", "quantity": 2, "price": "0.45"},
        ],
    )

    async def test_total_matches_components_after_save_and_read(self, client):
        created = await client.post("/api/invoices", json=self.FRACTIONAL, headers=MEMBER)

        assert created.status_code == 201
        fetched = await client.get(f"/api/invoices/{created.json()['invoice_id']}", headers=MEMBER)

        for data in (created.json(), fetched.json()):
            assert Decimal(data["vat_rate"]) == Decimal("12.5")
            assert Decimal(data["effective_rate"]) == Decimal("18.5")
            assert Decimal(data["subtotal"]) == Decimal("60.87")
            assert Decimal(data["total"]) == Decimal("72.13095")
            assert components_sum(data) == Decimal(data["total"])

    async def test_edited_rate_keeps_total_consistent(self, client):
        created = (await client.post("/api/invoices", json=self.FRACTIONAL, headers=MEMBER)).json()

        await client.patch(f"/api/invoices/{created['invoice_id']}", json={"vat_rate": "7.5"}, headers=MEMBER)
        fetched = (await client.get(f"/api/invoices/{created['invoice_id']}", headers=MEMBER)).json()

        assert Decimal(fetched["total"]) == Decimal("69.08745")
        assert components_sum(fetched) == Decimal(fetched["total"])

    async def test_paid_amount_equals_stored_total(self, client):
        created = (await client.post("/api/invoices", json=self.FRACTIONAL, headers=MEMBER)).json()

        paid = await client.post(f"/api/invoices/{created['invoice_id']}/mark-paid", headers=MEMBER)

        assert Decimal(paid.json()["payment"]["amount"]) == Decimal("72.13095")

    async def test_rate_beyond_column_precision_is_rejected(self, client):
        response = await client.post("/api/invoices", json=invoice_body(vat_rate="12.345"), headers=MEMBER)

        assert response.status_code == 422
        assert (await client.get("/api/invoices", headers=MEMBER)).json()["total"] == 0

    async def test_price_beyond_two_decimals_is_rejected(self, client):
        response = await client.post(
            "/api/invoices",
            json=invoice_body(items=[{"description": "Pens", "quantity": 3, "price": "0.1234567"}]),
            headers=MEMBER,
        )

        assert response.status_code == 422
