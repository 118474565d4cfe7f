"""Cargo Fleet 값 객체 (불변, 동등성 기반 비교)."""

from cargo_fleet.domain.value_objects.cargo import Cargo
from cargo_fleet.domain.value_objects.cargo_type import (
    Bulk,
    CargoType,
    Fragile,
    Perishable,
    describe_cargo_types,
)

__all__ = [
    'Bulk',
    'Cargo',
    'CargoType',
    'Fragile',
    'Perishable',
    'describe_cargo_types',
]
