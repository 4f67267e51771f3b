"""FastAPI dependencies: one gateway and one manager per request, bound to the request's session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.gateway import PersistenceGateway
from app.db.session import get_db
from app.services.record_manager import RecordManager


async def get_gateway(db: AsyncSession = Depends(get_db)) -> PersistenceGateway:
    return PersistenceGateway(db)


async def get_manager(gateway: PersistenceGateway = Depends(get_gateway)) -> RecordManager:
    return RecordManager(gateway)
