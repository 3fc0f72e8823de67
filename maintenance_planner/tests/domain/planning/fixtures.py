"""
Test fixtures and factories for maintenance planning.

Provides reusable machines and work orders plus configurable factory
functions for larger fleets.
"""

from datetime import date
from itertools import count

import pytest

from maintenance_planner.domain.planning.value_objects import (
    Criticality,
    Machine,
    MachineModel,
    MonthPeriod,
    WorkOrder,
    WorkOrderStatus,
)

_ids = count(1)


class MachineFactory:
    """Factory for creating test machines with various configurations."""

    @staticmethod
    def create_machine(
        serial: str | None = None,
        alias: str | None = None,
        location: str | None = "Plant A",
        manufacturer: str | None = "Haas",
        model_name: str | None = "VF-2",
        active: bool = True,
        machine_id: int | None = None,
    ) -> Machine:
        """Create a machine with specified parameters."""
        machine_id = machine_id if machine_id is not None else next(_ids)
        model = None
        if model_name is not None:
            model = MachineModel(manufacturer=manufacturer, name=model_name)

        return Machine(
            id=machine_id,
            serial=serial or f"SN-{machine_id:04d}",
            alias=alias,
            location=location,
            model=model,
            active=active,
        )

    @staticmethod
    def create_fleet(
        size: int,
        locations: list[str | None] | None = None,
    ) -> list[Machine]:
        """Create machines spread round-robin over the given locations."""
        if locations is None:
            locations = ["Plant A"]

        return [
            MachineFactory.create_machine(
                serial=f"SN-{i:04d}",
                location=locations[i % len(locations)],
                machine_id=i + 1,
            )
            for i in range(size)
        ]


class WorkOrderFactory:
    """Factory for creating test work orders."""

    @staticmethod
    def create_order(
        machine_id: int = 1,
        scheduled_date: date | str = date(2024, 3, 10),
        estimated_hours: float | None = 8.0,
        order_id: int | None = None,
        title: str = "Preventive maintenance",
        maintenance_type: str | None = "preventive",
        criticality: Criticality = Criticality.MEDIUM,
        status: WorkOrderStatus = WorkOrderStatus.PENDING,
    ) -> WorkOrder:
        """Create a work order with specified parameters."""
        return WorkOrder(
            id=order_id if order_id is not None else next(_ids),
            title=title,
            machine_id=machine_id,
            scheduled_date=scheduled_date,
            estimated_hours=estimated_hours,
            maintenance_type=maintenance_type,
            criticality=criticality,
            status=status,
        )


@pytest.fixture
def march_2024() -> MonthPeriod:
    return MonthPeriod(year=2024, month=3)


@pytest.fixture
def lathe() -> Machine:
    return MachineFactory.create_machine(
        serial="LT-100",
        alias="Big lathe",
        location="Plant B",
        manufacturer="Mazak",
        model_name="QT-250",
        machine_id=100,
    )


@pytest.fixture
def mill() -> Machine:
    return MachineFactory.create_machine(
        serial="ML-200",
        location="Plant A",
        manufacturer="Haas",
        model_name="VF-2",
        machine_id=200,
    )


@pytest.fixture
def press() -> Machine:
    return MachineFactory.create_machine(
        serial="PR-300",
        location=None,
        manufacturer=None,
        model_name=None,
        active=False,
        machine_id=300,
    )


@pytest.fixture
def machines(lathe, mill, press) -> list[Machine]:
    return [lathe, mill, press]
