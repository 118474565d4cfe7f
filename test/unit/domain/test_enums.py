"""도메인 열거형 단위 테스트."""

from cargo_fleet.domain.enums import (
    CargoKind,
    Compartment,
    RejectionReason,
    VehicleKind,
)


class TestCargoKind:
    def test_all_kinds_exist(self):
        expected = {'FRAGILE', 'PERISHABLE', 'BULK'}
        actual = {k.value for k in CargoKind}
        assert actual == expected


class TestCompartment:
    def test_all_compartments_exist(self):
        assert {c.value for c in Compartment} == {'MAIN', 'TRAILER'}


class TestRejectionReason:
    def test_all_reasons_exist(self):
        expected = {'EMPTY_CARGO', 'UNSUPPORTED_TYPE',
                    'OVER_CAPACITY', 'TRAILER_OVER_CAPACITY'}
        actual = {r.value for r in RejectionReason}
        assert actual == expected


class TestVehicleKind:
    def test_from_string(self):
        assert VehicleKind('truck') is VehicleKind.TRUCK
        assert VehicleKind('vehicle') is VehicleKind.VEHICLE
