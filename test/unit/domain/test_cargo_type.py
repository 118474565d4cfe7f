"""화물 유형 값 객체 단위 테스트."""

import pytest

from cargo_fleet.domain.enums import CargoKind
from cargo_fleet.domain.value_objects.cargo_type import (
    Bulk,
    CargoType,
    Fragile,
    Perishable,
    describe_cargo_types,
)


class TestEquality:
    def test_same_variant_same_payload_equal(self):
        assert Perishable(temperature_c=-10) == Perishable(temperature_c=-10)

    def test_same_variant_different_payload_not_equal(self):
        assert Fragile(in_hardcase=True) != Fragile(in_hardcase=False)
        assert Perishable(temperature_c=-10) != Perishable(temperature_c=4)

    def test_different_variant_same_payload_not_equal(self):
        assert Fragile(in_hardcase=True) != Bulk(in_bricks=True)

    def test_set_membership_is_structural(self):
        allowed = frozenset({Fragile(in_hardcase=True), Bulk()})
        assert Fragile(in_hardcase=True) in allowed
        assert Bulk(in_bricks=False) in allowed
        assert Bulk(in_bricks=True) not in allowed

    def test_frozen(self):
        t = Fragile(in_hardcase=True)
        with pytest.raises(AttributeError):
            t.in_hardcase = False


class TestKindAndLabel:
    def test_base_type_cannot_be_created(self):
        with pytest.raises(TypeError):
            CargoType()

    def test_kinds(self):
        assert Fragile().kind is CargoKind.FRAGILE
        assert Perishable().kind is CargoKind.PERISHABLE
        assert Bulk().kind is CargoKind.BULK

    @pytest.mark.parametrize(
        "cargo_type, label",
        [
            (Fragile(in_hardcase=True), "fragile in hardcase"),
            (Fragile(in_hardcase=False), "fragile"),
            (Perishable(temperature_c=-10), "perishable (-10 degrees)"),
            (Bulk(in_bricks=True), "bulk in bricks"),
            (Bulk(in_bricks=False), "bulk"),
        ],
    )
    def test_label(self, cargo_type, label):
        assert cargo_type.label == label


class TestDescribeCargoTypes:
    def test_none_uses_default(self):
        assert describe_cargo_types(None, "all") == "all"

    def test_joined_sorted(self):
        types = frozenset({Perishable(temperature_c=-10), Fragile(True)})
        assert describe_cargo_types(types, "all") == (
            "fragile in hardcase, perishable (-10 degrees)"
        )

    def test_empty_set(self):
        assert describe_cargo_types(frozenset(), "all") == ""
