from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    String,
    func,
)

from src.fleet_readiness.database.database import Base
from src.fleet_readiness.fleet.enums import TruckStatus


class TruckModel(Base):
    __tablename__ = "trucks"

    id = Column(String(64), primary_key=True)
    company_id = Column(String(64), index=True, nullable=False)
    unit_number = Column(String(50), nullable=False)
    status = Column(
        Enum(
            TruckStatus,
            name="truck_status",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
        default=TruckStatus.active,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class LoadModel(Base):
    __tablename__ = "loads"

    id = Column(String(64), primary_key=True)
    company_id = Column(String(64), nullable=False)
    truck_id = Column(String(64), ForeignKey("trucks.id"), nullable=True)
    pickup_date = Column(DateTime(timezone=True), nullable=True)
    delivery_date = Column(DateTime(timezone=True), nullable=True)
    is_soft_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (
        Index("ix_loads_company_truck", "company_id", "truck_id"),
        Index("ix_loads_company_pickup", "company_id", "pickup_date"),
        Index("ix_loads_company_delivery", "company_id", "delivery_date"),
    )
