"""차량 엔티티."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging
import math

from cargo_fleet.domain.entities.carrier import CargoCarrier
from cargo_fleet.domain.enums import Compartment, RejectionReason
from cargo_fleet.domain.events.fleet_events import (
    CargoLoadedEvent,
    CargoRejectedEvent,
    DomainEvent,
    VehicleUnloadedEvent,
)
from cargo_fleet.domain.events.publisher import EventPublisher
from cargo_fleet.domain.value_objects.cargo import Cargo
from cargo_fleet.domain.value_objects.cargo_type import CargoType

logger = logging.getLogger(__name__)

KM_PER_LITER = 14.0
USABLE_TANK_FRACTION = 0.5


def to_cargo_type_set(
    cargo_types: Iterable[CargoType] | None,
) -> frozenset[CargoType] | None:
    """허용 유형 목록을 frozenset으로 정규화한다. None은 그대로 둔다."""
    if cargo_types is None:
        return None
    return frozenset(cargo_types)


@dataclass(eq=False)
class Vehicle(CargoCarrier):
    """적재 용량과 주행 거리 제약을 가진 운송 차량.

    allowed_cargo_types가 None이면 모든 화물 유형을 허용한다.
    적재량은 load_cargo / unload_cargo 로만 변경된다.

    Args:
        make: 제조사.
        model: 모델명.
        year: 연식.
        capacity: 최대 적재 중량 (kg).
        fuel_tank_capacity: 연료 탱크 용량 (L).
        allowed_cargo_types: 허용 화물 유형. None이면 전부 허용.
        event_publisher: 적재 이벤트 발행자.
    """

    make: str
    model: str
    year: int
    capacity: int
    fuel_tank_capacity: float
    allowed_cargo_types: frozenset[CargoType] | None = None
    event_publisher: EventPublisher | None = field(
        default=None, repr=False,
    )
    current_load: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.allowed_cargo_types = to_cargo_type_set(self.allowed_cargo_types)

    @property
    def name(self) -> str:
        return f'{self.make} {self.model}'

    @property
    def max_distance(self) -> int:
        """탱크 절반의 연료로 주행 가능한 최대 거리."""
        return math.floor(
            self.fuel_tank_capacity * USABLE_TANK_FRACTION * KM_PER_LITER
        )

    def accepts(self, cargo_type: CargoType) -> bool:
        if self.allowed_cargo_types is None:
            return True
        return cargo_type in self.allowed_cargo_types

    def load_cargo(self, cargo: Cargo | None) -> bool:
        """주 적재함에 화물을 적재한다.

        Args:
            cargo: 적재할 화물. None이면 실패.

        Returns:
            적재 성공 여부. 실패 시 적재량은 변하지 않는다.
        """
        if cargo is None:
            self._reject(None, RejectionReason.EMPTY_CARGO)
            return False

        if not self.accepts(cargo.type):
            self._reject(cargo, RejectionReason.UNSUPPORTED_TYPE)
            return False

        if self.current_load + cargo.weight > self.capacity:
            self._reject(cargo, RejectionReason.OVER_CAPACITY)
            return False

        self.current_load += cargo.weight
        self._loaded(cargo, Compartment.MAIN)
        return True

    def unload_cargo(self) -> None:
        unloaded = self.total_current_load()
        self._reset_loads()
        logger.debug("%s unloaded (%d kg)", self.name, unloaded)
        self._publish(
            VehicleUnloadedEvent(
                vehicle_name=self.name, unloaded_weight=unloaded,
            )
        )

    def can_go(self, path: int) -> bool:
        return path <= self.max_distance

    def total_capacity(self) -> int:
        return self.capacity

    def total_current_load(self) -> int:
        return self.current_load

    def trailer(self) -> None:
        return None

    def _reset_loads(self) -> None:
        """적재량 초기화. 구획이 추가된 하위 클래스가 확장한다."""
        self.current_load = 0

    def _loaded(self, cargo: Cargo, compartment: Compartment) -> None:
        logger.debug(
            "%s loaded %r into %s (%d kg)",
            self.name, cargo.description, compartment, cargo.weight,
        )
        self._publish(
            CargoLoadedEvent(
                vehicle_name=self.name,
                cargo_description=cargo.description,
                weight=cargo.weight,
                compartment=compartment,
                is_truck=self.trailer_capable,
            )
        )

    def _reject(self, cargo: Cargo | None, reason: RejectionReason) -> None:
        description = cargo.description if cargo is not None else ''
        logger.debug(
            "%s rejected %r: %s", self.name, description, reason,
        )
        self._publish(
            CargoRejectedEvent(
                vehicle_name=self.name,
                cargo_description=description,
                cargo_type=cargo.type.label if cargo is not None else '',
                reason=reason,
            )
        )

    @property
    def trailer_capable(self) -> bool:
        """트레일러를 가질 수 있는 차량(트럭) 여부."""
        return False

    def _publish(self, event: DomainEvent) -> None:
        if self.event_publisher is not None:
            self.event_publisher.publish(event)
