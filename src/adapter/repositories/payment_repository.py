"""SQLAlchemy Payment Repository Implementation

Implements payment record persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payment_repository import PaymentRepository
from src.domain.payment import PaymentRecord


class SqlAlchemyPaymentRepository(PaymentRepository):
    """
    SQLAlchemy implementation of PaymentRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: PaymentRecord) -> PaymentRecord:
        """
        Create a new payment record

        Args:
            payment: PaymentRecord entity to persist

        Returns:
            Created PaymentRecord
        """
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_id(self, account_id: str, payment_id: str) -> Optional[PaymentRecord]:
        statement = (
            select(PaymentRecord)
            .where(PaymentRecord.account_id == account_id)
            .where(PaymentRecord.id == payment_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_account(
        self, account_id: str, client_name: Optional[str] = None
    ) -> List[PaymentRecord]:
        """
        Retrieve an account's payments

        Args:
            account_id: Owning account
            client_name: Optional exact match on the paying client's name

        Returns:
            List of payments, most recent payment date first
        """
        statement = select(PaymentRecord).where(PaymentRecord.account_id == account_id)

        if client_name:
            statement = statement.where(PaymentRecord.client_name == client_name)

        statement = statement.order_by(PaymentRecord.date.desc())

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, payment: PaymentRecord) -> PaymentRecord:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def delete(self, account_id: str, payment_id: str) -> bool:
        payment = await self.get_by_id(account_id, payment_id)
        if payment is None:
            return False
        await self.session.delete(payment)
        await self.session.flush()
        return True
