"""Unit tests for GetInvoice, ListInvoices and DeleteInvoice"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.invoicing import GetInvoice, ListInvoices, DeleteInvoice
from src.domain.invoice import InvoiceStatus
from tests.unit.factories import make_invoice


@pytest.fixture
def mock_invoice_repo():
    return MagicMock()


@pytest.fixture
def stored_invoices():
    return [
        make_invoice(invoice_id="inv_3", invoice_number="INV-2026-003", status=InvoiceStatus.PAID,
                     client_name="Kwame Boateng"),
        make_invoice(invoice_id="inv_2", invoice_number="INV-2026-002", status=InvoiceStatus.PENDING,
                     due_date=date(2026, 1, 31), client_name="Ama Mensah"),
        make_invoice(invoice_id="inv_1", invoice_number="INV-2026-001", status=InvoiceStatus.DRAFT,
                     client_name="Efua Asante"),
    ]


@pytest.mark.asyncio
class TestGetInvoice:

    async def test_found(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=make_invoice())

        result = await GetInvoice(mock_invoice_repo).execute("acct_1", "inv_1")

        assert result.value.invoice_id == "inv_1"
        mock_invoice_repo.get_by_id.assert_called_once_with("acct_1", "inv_1")

    async def test_missing_returns_none(self, mock_invoice_repo):
        mock_invoice_repo.get_by_id = AsyncMock(return_value=None)

        result = await GetInvoice(mock_invoice_repo).execute("acct_1", "missing")

        assert result.is_ok()
        assert result.value is None


@pytest.mark.asyncio
class TestListInvoices:

    async def test_lists_all_in_repository_order(self, mock_invoice_repo, stored_invoices):
        mock_invoice_repo.list_by_account = AsyncMock(return_value=stored_invoices)

        result = await ListInvoices(mock_invoice_repo).execute("acct_1", today=date(2026, 1, 20))

        assert result.value.total == 3
        assert [i.invoice_id for i in result.value.invoices] == ["inv_3", "inv_2", "inv_1"]

    async def test_overdue_filter_uses_projection(self, mock_invoice_repo, stored_invoices):
        mock_invoice_repo.list_by_account = AsyncMock(return_value=stored_invoices)

        result = await ListInvoices(mock_invoice_repo).execute(
            "acct_1", status=InvoiceStatus.OVERDUE, today=date(2026, 2, 1)
        )

        assert [i.invoice_id for i in result.value.invoices] == ["inv_2"]
        assert result.value.invoices[0].status == "Pending"
        assert result.value.invoices[0].effective_status == "Overdue"

    async def test_pending_filter_excludes_overdue(self, mock_invoice_repo, stored_invoices):
        mock_invoice_repo.list_by_account = AsyncMock(return_value=stored_invoices)

        result = await ListInvoices(mock_invoice_repo).execute(
            "acct_1", status=InvoiceStatus.PENDING, today=date(2026, 2, 1)
        )

        assert result.value.total == 0

    async def test_search_matches_client_or_number(self, mock_invoice_repo, stored_invoices):
        mock_invoice_repo.list_by_account = AsyncMock(return_value=stored_invoices)
        use_case = ListInvoices(mock_invoice_repo)

        by_name = await use_case.execute("acct_1", search="kwame")
        by_number = await use_case.execute("acct_1", search="inv-2026-001")

        assert [i.invoice_id for i in by_name.value.invoices] == ["inv_3"]
        assert [i.invoice_id for i in by_number.value.invoices] == ["inv_1"]


@pytest.mark.asyncio
class TestDeleteInvoice:

    async def test_delete_existing(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.delete = AsyncMock(return_value=True)

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute("acct_1", "inv_1")

        assert result.value.deleted is True
        mock_uow.commit.assert_called_once()

    async def test_delete_missing_is_noop(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.delete = AsyncMock(return_value=False)

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute("acct_1", "missing")

        assert result.is_ok()
        assert result.value.deleted is False

    async def test_delete_failure(self, mock_uow, mock_invoice_repo):
        mock_invoice_repo.delete = AsyncMock(side_effect=Exception("permission denied"))

        result = await DeleteInvoice(mock_uow, mock_invoice_repo).execute("acct_1", "inv_1")

        assert result.error.code == "DELETE_INVOICE_FAILED"
        mock_uow.rollback.assert_called_once()
