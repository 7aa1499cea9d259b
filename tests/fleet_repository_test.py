from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from src.fleet_readiness.fleet.enums import TruckStatus
from src.fleet_readiness.fleet.repositories.fleet import FleetRepository
from src.fleet_readiness.fleet.schemas import Load, Truck
from tests.mocks.fleet_mocks import utc

pytestmark = pytest.mark.asyncio(loop_scope="function")

COMPANY = "company_123"


@pytest.fixture
def repo():
    return FleetRepository()


@pytest.fixture
def db_session():
    return AsyncMock()


def _compiled(db_session):
    stmt = db_session.execute.await_args.args[0]
    return stmt.compile(dialect=postgresql.dialect())


async def test_list_trucks_scoped_to_company(repo, db_session):
    result = MagicMock()
    result.scalars.return_value.all.return_value = [
        SimpleNamespace(id="truck_a", unit_number="101", status=TruckStatus.active),
        SimpleNamespace(id="truck_b", unit_number="102", status=TruckStatus.in_shop),
    ]
    db_session.execute.return_value = result

    trucks = await repo.list_trucks(db_session, COMPANY)

    assert trucks == [
        Truck(id="truck_a", unit_number="101", status=TruckStatus.active),
        Truck(id="truck_b", unit_number="102", status=TruckStatus.in_shop),
    ]
    compiled = _compiled(db_session)
    sql = str(compiled)
    assert "FROM trucks" in sql
    assert "trucks.company_id =" in sql
    assert "ORDER BY trucks.unit_number, trucks.id" in sql
    assert COMPANY in compiled.params.values()


async def test_list_trucks_empty(repo, db_session):
    result = MagicMock()
    result.scalars.return_value.all.return_value = []
    db_session.execute.return_value = result

    assert await repo.list_trucks(db_session, COMPANY) == []


async def test_list_loads_overlapping_filters(repo, db_session):
    start = utc(2025, 1, 1)
    end = utc(2025, 1, 31, 23, 59)
    result = MagicMock()
    result.all.return_value = [
        SimpleNamespace(
            id="load_1",
            truck_id="truck_a",
            pickup_date=utc(2025, 1, 3),
            delivery_date=None,
        )
    ]
    db_session.execute.return_value = result

    loads = await repo.list_loads_overlapping(db_session, COMPANY, start, end)

    assert loads == [
        Load(
            id="load_1",
            truck_id="truck_a",
            pickup_date=utc(2025, 1, 3),
            delivery_date=None,
        )
    ]
    compiled = _compiled(db_session)
    sql = str(compiled)
    assert "FROM loads" in sql
    assert "loads.company_id =" in sql
    assert "loads.is_soft_deleted IS" in sql
    assert "loads.truck_id IS NOT NULL" in sql
    assert "loads.pickup_date BETWEEN" in sql
    assert "loads.delivery_date BETWEEN" in sql
    assert "loads.pickup_date <=" in sql
    assert "loads.delivery_date >=" in sql
    assert " OR " in sql

    params = list(compiled.params.values())
    assert COMPANY in params
    assert start in params
    assert end in params
