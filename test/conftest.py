"""공통 테스트 fixture."""

import pytest

from cargo_fleet.domain.entities.fleet import Fleet
from cargo_fleet.domain.entities.truck import Truck
from cargo_fleet.domain.entities.vehicle import Vehicle
from cargo_fleet.domain.value_objects.cargo import Cargo
from cargo_fleet.domain.value_objects.cargo_type import (
    Bulk,
    Fragile,
    Perishable,
)
from cargo_fleet.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)


@pytest.fixture
def publisher():
    return InMemoryEventPublisher()


@pytest.fixture
def events(publisher):
    """publisher로 발행된 모든 이벤트 목록."""
    received = []
    publisher.subscribe_all(received.append)
    return received


@pytest.fixture
def ford():
    return Vehicle(
        make="Ford",
        model="Transit",
        year=2019,
        capacity=1000,
        fuel_tank_capacity=80,
        allowed_cargo_types=[Fragile(in_hardcase=False), Bulk(in_bricks=True)],
    )


@pytest.fixture
def skoda():
    return Vehicle(
        make="Skoda",
        model="Octavia",
        year=2019,
        capacity=300,
        fuel_tank_capacity=60,
    )


@pytest.fixture
def volvo():
    return Truck(
        make="Volvo",
        model="FH",
        year=2020,
        capacity=5000,
        fuel_tank_capacity=200,
        allowed_cargo_types=[
            Fragile(in_hardcase=True), Perishable(temperature_c=-10),
        ],
        trailer_attached=True,
        trailer_capacity=2000,
        trailer_allowed_cargo_types=[Bulk(in_bricks=False)],
    )


@pytest.fixture
def toyota():
    return Truck(
        make="Toyota",
        model="Tacoma",
        year=2018,
        capacity=1500,
        fuel_tank_capacity=100,
        allowed_cargo_types=[Bulk(in_bricks=False)],
        trailer_attached=False,
        trailer_capacity=None,
    )


@pytest.fixture
def musical_equipment():
    return Cargo("Musical equipment", 300, Fragile(in_hardcase=True))


@pytest.fixture
def medicines():
    return Cargo("Medicines", 200, Perishable(temperature_c=-10))


@pytest.fixture
def sand():
    return Cargo("Sand", 1000, Bulk(in_bricks=False))


@pytest.fixture
def cocoa_powder():
    return Cargo("Cocoa powder", 50, Bulk(in_bricks=True))


@pytest.fixture
def sample_cargo(musical_equipment, medicines, sand, cocoa_powder):
    return [musical_equipment, medicines, sand, cocoa_powder]


@pytest.fixture
def sample_fleet(publisher, ford, skoda, volvo, toyota):
    return Fleet([ford, skoda, volvo, toyota], event_publisher=publisher)
