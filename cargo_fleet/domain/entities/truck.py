"""트럭 엔티티.

주 적재함과 독립적으로 제약되는 두 번째 구획(트레일러)을 가진다.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cargo_fleet.domain.entities.vehicle import Vehicle, to_cargo_type_set
from cargo_fleet.domain.enums import Compartment, RejectionReason
from cargo_fleet.domain.value_objects.cargo import Cargo
from cargo_fleet.domain.value_objects.cargo_type import CargoType


@dataclass(frozen=True)
class TrailerSpec:
    """연결된 트레일러의 현재 정보.

    Args:
        capacity: 트레일러 용량 (kg).
        current_load: 트레일러 적재량 (kg).
        allowed_cargo_types: 허용 유형. None이면 아무 것도 허용하지 않음.
    """

    capacity: int
    current_load: int
    allowed_cargo_types: frozenset[CargoType] | None


@dataclass(eq=False)
class Truck(Vehicle):
    """트레일러를 연결할 수 있는 차량.

    주 적재함의 allowed_cargo_types가 None이면 전부 허용하지만,
    trailer_allowed_cargo_types가 None이면 아무 유형도 허용하지 않는다.

    Args:
        trailer_attached: 트레일러 연결 여부.
        trailer_capacity: 트레일러 용량 (kg). 연결 시에만 의미가 있으며
            None이면 0으로 취급한다.
        trailer_allowed_cargo_types: 트레일러 허용 유형.
    """

    trailer_attached: bool = False
    trailer_capacity: int | None = None
    trailer_allowed_cargo_types: frozenset[CargoType] | None = None
    trailer_current_load: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.trailer_allowed_cargo_types = to_cargo_type_set(
            self.trailer_allowed_cargo_types
        )

    @property
    def trailer_capable(self) -> bool:
        return True

    def trailer_accepts(self, cargo_type: CargoType) -> bool:
        """트레일러가 해당 유형을 허용하는지 확인한다."""
        if self.trailer_allowed_cargo_types is None:
            return False
        return cargo_type in self.trailer_allowed_cargo_types

    def load_cargo(self, cargo: Cargo | None) -> bool:
        """화물을 주 적재함 또는 트레일러에 적재한다.

        주 적재함이 유형을 허용하고 공간이 있으면 항상 주 적재함을 먼저 쓴다.
        트레일러는 주 적재함이 유형을 거부하거나 가득 찬 경우에만 사용하며,
        트레일러 용량 초과는 주 적재함으로 되돌아가지 않고 즉시 실패한다.

        Args:
            cargo: 적재할 화물. None이면 실패.

        Returns:
            적재 성공 여부.
        """
        if cargo is None:
            self._reject(None, RejectionReason.EMPTY_CARGO)
            return False

        supported_by_truck = self.accepts(cargo.type)
        supported_by_trailer = self.trailer_accepts(cargo.type)

        if supported_by_truck and (
            self.current_load + cargo.weight <= self.capacity
        ):
            self.current_load += cargo.weight
            self._loaded(cargo, Compartment.MAIN)
            return True

        if self.trailer_attached and supported_by_trailer:
            if self.trailer_current_load + cargo.weight <= (
                self._trailer_capacity
            ):
                self.trailer_current_load += cargo.weight
                self._loaded(cargo, Compartment.TRAILER)
                return True
            self._reject(cargo, RejectionReason.TRAILER_OVER_CAPACITY)
            return False

        if supported_by_truck:
            self._reject(cargo, RejectionReason.OVER_CAPACITY)
        else:
            self._reject(cargo, RejectionReason.UNSUPPORTED_TYPE)
        return False

    def total_capacity(self) -> int:
        return self.capacity + self._trailer_capacity

    def total_current_load(self) -> int:
        return self.current_load + self.trailer_current_load

    def trailer(self) -> TrailerSpec | None:
        if not self.trailer_attached:
            return None
        return TrailerSpec(
            capacity=self._trailer_capacity,
            current_load=self.trailer_current_load,
            allowed_cargo_types=self.trailer_allowed_cargo_types,
        )

    @property
    def _trailer_capacity(self) -> int:
        if not self.trailer_attached:
            return 0
        return self.trailer_capacity or 0

    def _reset_loads(self) -> None:
        super()._reset_loads()
        self.trailer_current_load = 0
