"""플릿 애그리거트.

여러 차량의 총 용량 집계와 화물 배정/주행 가능성 검사를 담당한다.
차량 삽입 순서가 first-fit 배정의 우선순위가 된다.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
import logging
import threading

from cargo_fleet.domain.entities.carrier import CargoCarrier
from cargo_fleet.domain.events.fleet_events import (
    CargoUnplacedEvent,
    DomainEvent,
    FeasibilityCheckedEvent,
    FeasibilityCheckStartedEvent,
    FleetSummaryEvent,
    RangeExceededEvent,
    VehicleAddedEvent,
    VehicleRemovedEvent,
)
from cargo_fleet.domain.events.publisher import (
    EventPublisher,
    NullEventPublisher,
    is_silent,
)
from cargo_fleet.domain.exceptions import VehicleNotFoundError
from cargo_fleet.domain.value_objects.cargo import Cargo
from cargo_fleet.domain.value_objects.cargo_type import describe_cargo_types

logger = logging.getLogger(__name__)


@dataclass
class FeasibilityReport:
    """주행 가능성 검사 결과.

    Args:
        path: 요청 경로 거리.
        feasible: 모든 화물이 배정되고 적재 차량이 모두 주행 가능한지 여부.
        assignments: (화물, 차량 이름) 배정 목록 (배정 순서).
        unplaced_cargo: 배정에 실패한 첫 화물. 없으면 None.
        out_of_range: 주행 거리가 부족한 첫 적재 차량 이름. 없으면 None.
    """

    path: int
    feasible: bool = False
    assignments: list[tuple[Cargo, str]] = field(default_factory=list)
    unplaced_cargo: Cargo | None = None
    out_of_range: str | None = None

    @property
    def loaded_vehicle_names(self) -> list[str]:
        """화물을 받은 차량 이름 (첫 적재 순서, 중복 없음)."""
        return list(dict.fromkeys(name for _, name in self.assignments))


class Fleet:
    """차량의 순서 있는 모음.

    배정 알고리즘은 진행하면서 적재를 확정하며, 실패해도 이미 적재된
    차량을 되돌리지 않는다. 하역은 호출자의 책임이다.
    검사/구성 변경은 플릿 단위 락으로 직렬화된다.

    Args:
        vehicles: 초기 차량 목록.
        event_publisher: 플릿 이벤트 발행자. None이면 NullEventPublisher.
    """

    def __init__(
        self,
        vehicles: Iterable[CargoCarrier] | None = None,
        event_publisher: EventPublisher | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._vehicles: list[CargoCarrier] = []
        self._event_publisher = (
            event_publisher if event_publisher is not None
            else NullEventPublisher()
        )
        for vehicle in vehicles or ():
            self.add_vehicle(vehicle)

    # -- 구성 --

    @property
    def vehicles(self) -> Sequence[CargoCarrier]:
        """현재 차량 목록의 스냅샷."""
        with self._lock:
            return tuple(self._vehicles)

    def __len__(self) -> int:
        with self._lock:
            return len(self._vehicles)

    def __iter__(self) -> Iterator[CargoCarrier]:
        return iter(self.vehicles)

    def __getitem__(self, index: int) -> CargoCarrier:
        with self._lock:
            return self._vehicles[index]

    def add_vehicle(self, vehicle: CargoCarrier) -> None:
        """차량을 플릿 끝에 추가한다.

        차량에 실제 발행자가 없고 플릿에는 있으면 플릿의 발행자를 연결한다.
        플릿에 발행자가 없으면 차량의 발행자는 건드리지 않는다.
        """
        with self._lock:
            if (is_silent(vehicle.event_publisher)
                    and not is_silent(self._event_publisher)):
                vehicle.event_publisher = self._event_publisher
            self._vehicles.append(vehicle)

        trailer = vehicle.trailer()
        logger.info("Vehicle added to fleet: %s", vehicle.name)
        self._publish(
            VehicleAddedEvent(
                vehicle_name=vehicle.name,
                cargo_types=describe_cargo_types(
                    vehicle.allowed_cargo_types, 'all'
                ),
                capacity=vehicle.capacity,
                trailer_capacity=(
                    trailer.capacity if trailer is not None else None
                ),
                trailer_cargo_types=(
                    describe_cargo_types(trailer.allowed_cargo_types, 'none')
                    if trailer is not None else ''
                ),
            )
        )

    def remove_vehicle(self, vehicle: CargoCarrier) -> None:
        """차량을 플릿에서 제거한다.

        Raises:
            VehicleNotFoundError: 플릿에 없는 차량일 때.
        """
        with self._lock:
            for i, candidate in enumerate(self._vehicles):
                if candidate is vehicle:
                    del self._vehicles[i]
                    break
            else:
                raise VehicleNotFoundError(
                    f"차량 [{vehicle.name}]이 플릿에 없습니다."
                )
        self._removed(vehicle)

    def remove_at(self, index: int) -> CargoCarrier:
        """해당 위치의 차량을 제거하여 반환한다.

        Raises:
            VehicleNotFoundError: 인덱스가 범위를 벗어났을 때.
        """
        with self._lock:
            try:
                vehicle = self._vehicles.pop(index)
            except IndexError:
                raise VehicleNotFoundError(
                    f"인덱스 [{index}]에 차량이 없습니다."
                ) from None
        self._removed(vehicle)
        return vehicle

    # -- 집계 --

    def total_capacity(self) -> int:
        """주 적재함 용량 합계. 트레일러는 포함하지 않는다."""
        return sum(v.capacity for v in self.vehicles)

    def total_current_load(self) -> int:
        """주 적재함 적재량 합계. 트레일러는 포함하지 않는다."""
        return sum(v.current_load for v in self.vehicles)

    def info(self) -> FleetSummaryEvent:
        """총 용량/적재량 요약을 발행한다."""
        summary = FleetSummaryEvent(
            total_capacity=self.total_capacity(),
            total_current_load=self.total_current_load(),
        )
        self._publish(summary)
        return summary

    def unload_all(self) -> None:
        """모든 차량을 하역한다."""
        for vehicle in self.vehicles:
            vehicle.unload_cargo()

    # -- 주행 가능성 검사 --

    def can_go(
        self, cargo_list: Iterable[Cargo | None], path: int,
    ) -> bool:
        """화물 전체를 싣고 해당 거리를 주행할 수 있는지 판정한다."""
        return self.check(cargo_list, path).feasible

    def check(
        self, cargo_list: Iterable[Cargo | None], path: int,
    ) -> FeasibilityReport:
        """화물을 first-fit으로 배정하고 적재 차량의 주행 거리를 검사한다.

        1. 화물마다 플릿 순서대로 차량을 훑는다. 주 적재함 허용 유형이
           화물을 제외하는 차량은 건너뛰고, 처음 load_cargo에 성공한
           차량에 배정한다.
        2. 어느 차량도 받지 못한 화물이 있으면 즉시 실패한다. 화물 자리에
           None(Cargo.create 실패)이 있으면 그 지점에서 실패하며,
           unplaced_cargo는 None으로 남는다.
        3. 화물을 받은 모든 차량이 path를 주행할 수 있어야 성공이다.

        어느 경로로 실패하든 이미 적재된 화물은 되돌리지 않는다.

        Args:
            cargo_list: 배정할 화물 목록 (순서대로 처리).
            path: 경로 거리.

        Returns:
            검사 결과.
        """
        cargo_list = list(cargo_list)
        report = FeasibilityReport(path=path)

        with self._lock:
            self._publish(
                FeasibilityCheckStartedEvent(
                    path=path, cargo_count=len(cargo_list),
                )
            )

            loaded: list[CargoCarrier] = []
            for cargo in cargo_list:
                if cargo is None:
                    logger.info("Absent cargo in list, no vehicle can carry it")
                    self._publish(
                        CargoUnplacedEvent(
                            path=path, cargo_description='',
                            cargo_type='none',
                        )
                    )
                    return self._finish(report)

                vehicle = self._place(cargo)
                if vehicle is None:
                    logger.info(
                        "No vehicle can carry %r (%s)",
                        cargo.description, cargo.type.label,
                    )
                    report.unplaced_cargo = cargo
                    self._publish(
                        CargoUnplacedEvent(
                            path=path,
                            cargo_description=cargo.description,
                            cargo_type=cargo.type.label,
                        )
                    )
                    return self._finish(report)

                report.assignments.append((cargo, vehicle.name))
                if not any(v is vehicle for v in loaded):
                    loaded.append(vehicle)

            for vehicle in loaded:
                if not vehicle.can_go(path):
                    logger.info(
                        "%s can not ride %d km route", vehicle.name, path,
                    )
                    report.out_of_range = vehicle.name
                    self._publish(
                        RangeExceededEvent(
                            vehicle_name=vehicle.name,
                            path=path,
                            max_distance=vehicle.max_distance,
                        )
                    )
                    return self._finish(report)

            report.feasible = True
            return self._finish(report)

    def _place(self, cargo: Cargo) -> CargoCarrier | None:
        """첫 번째로 화물을 받는 차량을 찾아 적재한다."""
        for vehicle in self._vehicles:
            if not vehicle.accepts(cargo.type):
                continue
            if vehicle.load_cargo(cargo):
                return vehicle
        return None

    def _finish(self, report: FeasibilityReport) -> FeasibilityReport:
        logger.debug(
            "Feasibility for %d km: %s", report.path, report.feasible,
        )
        self._publish(
            FeasibilityCheckedEvent(path=report.path, feasible=report.feasible)
        )
        return report

    def _removed(self, vehicle: CargoCarrier) -> None:
        logger.info("Vehicle removed from fleet: %s", vehicle.name)
        self._publish(VehicleRemovedEvent(vehicle_name=vehicle.name))

    def _publish(self, event: DomainEvent) -> None:
        self._event_publisher.publish(event)
