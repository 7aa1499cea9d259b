from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from src.fleet_readiness.fleet.schemas import Load, Truck


class IFleetRepository(ABC):
    @abstractmethod
    async def list_trucks(
        self, db_session: AsyncSession, company_id: str
    ) -> List[Truck]: ...

    @abstractmethod
    async def list_loads_overlapping(
        self,
        db_session: AsyncSession,
        company_id: str,
        start: datetime,
        end: datetime,
    ) -> List[Load]:
        """
        Non-deleted, truck-assigned loads of the company that touch the window:
        pickup or delivery inside it, or picked up before and delivered after it.
        """
        ...
