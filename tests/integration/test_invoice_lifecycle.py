"""Integration tests for the invoice lifecycle against a real database"""

import pytest
from datetime import date
from decimal import Decimal

from src.adapter.repositories import (
    SqlAlchemyInvoiceRepository,
    SqlAlchemyClientRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyBusinessProfileRepository,
)
from src.app.services.quota_gate import QuotaGate, GUEST_INVOICE_COUNT_KEY
from src.app.use_cases.invoicing import (
    CreateInvoice,
    UpdateInvoice,
    MarkInvoicePaid,
    CreateInvoiceCommandDTO,
    UpdateInvoiceCommandDTO,
)
from src.app.use_cases.invoicing.dtos import ClientDetailsDTO, LineItemDTO
from src.domain.identity import ActingIdentity
from src.domain.invoice import InvoiceStatus
from src.domain.payment import PaymentStatus

MEMBER = ActingIdentity(account_id="acct_1", is_guest=False)
GUEST = ActingIdentity(account_id="guest", is_guest=True)


def command(**overrides):
    data = dict(
        issue_date=date(2026, 1, 15),
        items=[LineItemDTO(description="Website design", quantity=1, price=Decimal("1000"))],
        vat_enabled=True,
        levies_enabled=True,
        covid_levy_enabled=True,
        client=ClientDetailsDTO(name="Ama Mensah"),
    )
    data.update(overrides)
    return CreateInvoiceCommandDTO(**data)


@pytest.fixture
def create_invoice(db_session, uow, counter_store):
    return CreateInvoice(
        uow,
        SqlAlchemyInvoiceRepository(db_session),
        SqlAlchemyClientRepository(db_session),
        SqlAlchemyBusinessProfileRepository(db_session),
        QuotaGate(counter_store, GUEST_INVOICE_COUNT_KEY, limit=7),
    )


@pytest.mark.asyncio
class TestInvoiceLifecycle:

    async def test_numbers_increment_per_account(self, create_invoice):
        first = await create_invoice.execute(command(), MEMBER)
        second = await create_invoice.execute(command(), MEMBER)

        assert first.value.invoice_number == "INV-2026-001"
        assert second.value.invoice_number == "INV-2026-002"

    async def test_mark_paid_writes_invoice_and_payment(self, create_invoice, db_session, uow):
        created = await create_invoice.execute(command(), MEMBER)
        assert created.value.total == Decimal("1210")

        mark_paid = MarkInvoicePaid(
            uow, SqlAlchemyInvoiceRepository(db_session), SqlAlchemyPaymentRepository(db_session)
        )
        result = await mark_paid.execute("acct_1", created.value.invoice_id)

        assert result.is_ok()
        invoice = await SqlAlchemyInvoiceRepository(db_session).get_by_id("acct_1", created.value.invoice_id)
        assert invoice.status == InvoiceStatus.PAID

        payments = await SqlAlchemyPaymentRepository(db_session).list_by_account("acct_1")
        assert len(payments) == 1
        assert Decimal(payments[0].amount) == Decimal("1210")
        assert payments[0].status == PaymentStatus.VERIFIED
        assert payments[0].invoice_id == created.value.invoice_number

    async def test_edit_items_keeps_status(self, create_invoice, db_session, uow):
        created = await create_invoice.execute(command(status=InvoiceStatus.SENT), MEMBER)

        result = await UpdateInvoice(uow, SqlAlchemyInvoiceRepository(db_session)).execute(
            "acct_1",
            created.value.invoice_id,
            UpdateInvoiceCommandDTO(items=[LineItemDTO(description="Logo", quantity=1, price=Decimal("100"))]),
        )

        assert result.value.status == "Sent"
        assert result.value.total == Decimal("121")

    async def test_guest_quota_end_to_end(self, create_invoice, counter_store):
        for _ in range(7):
            assert (await create_invoice.execute(command(), GUEST)).is_ok()

        locked = await create_invoice.execute(command(), GUEST)

        assert locked.error.code == "GUEST_INVOICE_LIMIT_REACHED"
        assert counter_store.get(GUEST_INVOICE_COUNT_KEY) == "7"
