"""화물 운반체 인터페이스.

Fleet은 구체 차량 타입이 아닌 이 인터페이스만 사용한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cargo_fleet.domain.entities.truck import TrailerSpec
    from cargo_fleet.domain.events.publisher import EventPublisher
    from cargo_fleet.domain.value_objects.cargo import Cargo
    from cargo_fleet.domain.value_objects.cargo_type import CargoType


class CargoCarrier(ABC):
    """용량/주행 거리 제약을 가진 화물 운반체.

    구현체는 다음 속성을 제공해야 한다.

    Attributes:
        capacity: 주 적재함 용량 (kg).
        current_load: 주 적재함 현재 적재량 (kg).
        allowed_cargo_types: 주 적재함 허용 유형. None이면 전부 허용.
        event_publisher: 적재 이벤트를 받을 발행자. None이면 발행하지 않음.
    """

    capacity: int
    current_load: int
    allowed_cargo_types: frozenset[CargoType] | None
    event_publisher: EventPublisher | None

    @property
    @abstractmethod
    def name(self) -> str:
        """차량 표시 이름."""

    @property
    @abstractmethod
    def max_distance(self) -> int:
        """주행 가능한 최대 거리."""

    @abstractmethod
    def accepts(self, cargo_type: CargoType) -> bool:
        """주 적재함이 해당 유형을 허용하는지 확인한다."""

    @abstractmethod
    def load_cargo(self, cargo: Cargo | None) -> bool:
        """화물을 적재한다. 실패 시 상태를 바꾸지 않고 False를 반환한다."""

    @abstractmethod
    def unload_cargo(self) -> None:
        """모든 구획의 적재량을 0으로 만든다."""

    @abstractmethod
    def can_go(self, path: int) -> bool:
        """해당 거리를 주행할 수 있는지 확인한다."""

    @abstractmethod
    def total_capacity(self) -> int:
        """모든 구획의 용량 합계."""

    @abstractmethod
    def total_current_load(self) -> int:
        """모든 구획의 적재량 합계."""

    @abstractmethod
    def trailer(self) -> TrailerSpec | None:
        """연결된 트레일러 정보. 없으면 None."""
