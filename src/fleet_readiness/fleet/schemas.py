from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.fleet_readiness.fleet.enums import TruckStatus


class Truck(BaseModel):
    id: str
    unit_number: str = Field(..., max_length=50)
    status: TruckStatus = TruckStatus.active

    model_config = ConfigDict(from_attributes=True)


class Load(BaseModel):
    """A load as seen by utilization analytics: only the truck and its dates."""

    id: str
    truck_id: Optional[str] = None
    pickup_date: Optional[datetime] = None
    delivery_date: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
