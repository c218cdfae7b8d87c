import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.counter_store import InMemoryCounterStore
from src.app.services.quota_gate import QuotaGate, GUEST_INVOICE_COUNT_KEY, GUEST_EXPORT_COUNT_KEY


@pytest.fixture
def mock_uow():
    """Unit of work whose commit/rollback can be awaited and asserted"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def counter_store():
    return InMemoryCounterStore()


@pytest.fixture
def invoice_gate(counter_store):
    return QuotaGate(counter_store, GUEST_INVOICE_COUNT_KEY, limit=7)


@pytest.fixture
def export_gate(counter_store):
    return QuotaGate(counter_store, GUEST_EXPORT_COUNT_KEY, limit=7)
