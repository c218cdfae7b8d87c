from typing import Optional
from fastapi import Depends, Header, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.counter_store import JsonFileCounterStore
from src.api.error import ClientError
from src.app.services.counter_store import CounterStore
from src.app.services.quota_gate import QuotaGate, GUEST_INVOICE_COUNT_KEY, GUEST_EXPORT_COUNT_KEY
from src.domain.business_profile import Preferences
from src.domain.identity import ActingIdentity

GUEST_ACCOUNT_ID = "guest"

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

counter_store = JsonFileCounterStore(ApplicationConfig.GUEST_COUNTER_STORE_PATH)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_counter_store() -> CounterStore:
    return counter_store


def get_invoice_quota_gate(store: CounterStore = Depends(get_counter_store)) -> QuotaGate:
    return QuotaGate(store, GUEST_INVOICE_COUNT_KEY, int(ApplicationConfig.GUEST_INVOICE_LIMIT))


def get_export_quota_gate(store: CounterStore = Depends(get_counter_store)) -> QuotaGate:
    return QuotaGate(store, GUEST_EXPORT_COUNT_KEY, int(ApplicationConfig.GUEST_EXPORT_LIMIT))


def get_default_preferences() -> Preferences:
    return Preferences(
        default_currency=ApplicationConfig.DEFAULT_CURRENCY,
        default_tax_rate=ApplicationConfig.DEFAULT_TAX_RATE,
        invoice_prefix=ApplicationConfig.DEFAULT_INVOICE_PREFIX,
    )


def get_identity(
    x_account_id: Optional[str] = Header(default=None),
    x_guest: bool = Header(default=False),
) -> ActingIdentity:
    """
    Resolve the acting identity from request headers

    Authentication happens upstream; this service trusts X-Account-Id.
    Guests may omit the account id and share the local guest account.
    """
    if x_guest:
        return ActingIdentity(account_id=x_account_id or GUEST_ACCOUNT_ID, is_guest=True)
    if not x_account_id:
        raise ClientError(
            Error(
                code="MISSING_IDENTITY",
                message="X-Account-Id header is required",
                reason="No account id and not a guest",
            ),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return ActingIdentity(account_id=x_account_id, is_guest=False)
