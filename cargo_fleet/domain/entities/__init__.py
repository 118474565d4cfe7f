"""Cargo Fleet 도메인 엔티티."""

from cargo_fleet.domain.entities.carrier import CargoCarrier
from cargo_fleet.domain.entities.fleet import FeasibilityReport, Fleet
from cargo_fleet.domain.entities.truck import TrailerSpec, Truck
from cargo_fleet.domain.entities.vehicle import (
    KM_PER_LITER,
    USABLE_TANK_FRACTION,
    Vehicle,
)

__all__ = [
    'CargoCarrier',
    'FeasibilityReport',
    'Fleet',
    'KM_PER_LITER',
    'TrailerSpec',
    'Truck',
    'USABLE_TANK_FRACTION',
    'Vehicle',
]
