"""SQLAlchemy Client Repository Implementation"""

from typing import Optional, List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import ClientRecord


class SqlAlchemyClientRepository(ClientRepository):
    """SQLAlchemy implementation of ClientRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: ClientRecord) -> ClientRecord:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_id(self, account_id: str, client_id: str) -> Optional[ClientRecord]:
        statement = (
            select(ClientRecord)
            .where(ClientRecord.account_id == account_id)
            .where(ClientRecord.id == client_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_by_account(self, account_id: str) -> List[ClientRecord]:
        statement = (
            select(ClientRecord)
            .where(ClientRecord.account_id == account_id)
            .order_by(ClientRecord.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, client: ClientRecord) -> ClientRecord:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def delete(self, account_id: str, client_id: str) -> bool:
        client = await self.get_by_id(account_id, client_id)
        if client is None:
            return False
        await self.session.delete(client)
        await self.session.flush()
        return True
