from datetime import datetime
from typing import List

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.fleet_readiness.fleet.models import LoadModel, TruckModel
from src.fleet_readiness.fleet.repositories.interface import IFleetRepository
from src.fleet_readiness.fleet.schemas import Load, Truck


class FleetRepository(IFleetRepository):
    async def list_trucks(
        self, db_session: AsyncSession, company_id: str
    ) -> List[Truck]:
        stmt = (
            select(TruckModel)
            .where(TruckModel.company_id == company_id)
            .order_by(TruckModel.unit_number, TruckModel.id)
        )
        result = await db_session.execute(stmt)
        records = result.scalars().all()

        return [Truck.model_validate(r) for r in records]

    async def list_loads_overlapping(
        self,
        db_session: AsyncSession,
        company_id: str,
        start: datetime,
        end: datetime,
    ) -> List[Load]:
        stmt = select(
            LoadModel.id,
            LoadModel.truck_id,
            LoadModel.pickup_date,
            LoadModel.delivery_date,
        ).where(
            LoadModel.company_id == company_id,
            LoadModel.is_soft_deleted.is_(False),
            LoadModel.truck_id.is_not(None),
            or_(
                LoadModel.pickup_date.between(start, end),
                LoadModel.delivery_date.between(start, end),
                and_(LoadModel.pickup_date <= start, LoadModel.delivery_date >= end),
            ),
        )
        result = await db_session.execute(stmt)

        return [Load.model_validate(row) for row in result.all()]
