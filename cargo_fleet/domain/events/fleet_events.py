"""Cargo Fleet 도메인 이벤트 정의.

적재 시도, 플릿 구성 변경, 주행 가능성 판정 결과를 이벤트로 표현한다.
presentation/infra 레이어에서 이벤트를 구독하여 출력/기록을 처리한다.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from cargo_fleet.domain.enums import Compartment, RejectionReason


@dataclass(frozen=True)
class DomainEvent:
    """도메인 이벤트 기본 클래스.

    Args:
        timestamp: 이벤트 발생 시각 (UTC).
    """

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class VehicleAddedEvent(DomainEvent):
    """플릿에 차량이 추가된 이벤트.

    Args:
        vehicle_name: 차량 이름 (make model).
        cargo_types: 주 적재함이 허용하는 유형 설명 ('all' 포함).
        capacity: 주 적재함 용량 (kg).
        trailer_capacity: 연결된 트레일러 용량. 없으면 None.
        trailer_cargo_types: 트레일러가 허용하는 유형 설명.
    """

    vehicle_name: str = ''
    cargo_types: str = ''
    capacity: int = 0
    trailer_capacity: int | None = None
    trailer_cargo_types: str = ''


@dataclass(frozen=True)
class VehicleRemovedEvent(DomainEvent):
    """플릿에서 차량이 제거된 이벤트."""

    vehicle_name: str = ''


@dataclass(frozen=True)
class CargoLoadedEvent(DomainEvent):
    """화물 적재 성공 이벤트.

    Args:
        vehicle_name: 차량 이름.
        cargo_description: 화물 설명.
        weight: 화물 중량 (kg).
        compartment: 적재된 구획.
        is_truck: 트럭 여부 (메시지 구분용).
    """

    vehicle_name: str = ''
    cargo_description: str = ''
    weight: int = 0
    compartment: Compartment = Compartment.MAIN
    is_truck: bool = False


@dataclass(frozen=True)
class CargoRejectedEvent(DomainEvent):
    """화물 적재 실패 이벤트.

    Args:
        vehicle_name: 차량 이름.
        cargo_description: 화물 설명 (빈 화물이면 '').
        cargo_type: 화물 유형 설명.
        reason: 거부 사유.
    """

    vehicle_name: str = ''
    cargo_description: str = ''
    cargo_type: str = ''
    reason: RejectionReason = RejectionReason.EMPTY_CARGO


@dataclass(frozen=True)
class VehicleUnloadedEvent(DomainEvent):
    """차량 하역 이벤트.

    Args:
        vehicle_name: 차량 이름.
        unloaded_weight: 하역 전 총 적재량 (kg).
    """

    vehicle_name: str = ''
    unloaded_weight: int = 0


@dataclass(frozen=True)
class FeasibilityCheckStartedEvent(DomainEvent):
    """주행 가능성 검사 시작 이벤트."""

    path: int = 0
    cargo_count: int = 0


@dataclass(frozen=True)
class CargoUnplacedEvent(DomainEvent):
    """어느 차량도 화물을 받지 못한 이벤트."""

    path: int = 0
    cargo_description: str = ''
    cargo_type: str = ''


@dataclass(frozen=True)
class RangeExceededEvent(DomainEvent):
    """적재된 차량의 연료로 경로를 주행할 수 없는 이벤트.

    Args:
        vehicle_name: 차량 이름.
        path: 요청 경로 거리.
        max_distance: 차량 최대 주행 거리.
    """

    vehicle_name: str = ''
    path: int = 0
    max_distance: int = 0


@dataclass(frozen=True)
class FeasibilityCheckedEvent(DomainEvent):
    """주행 가능성 판정 결과 이벤트."""

    path: int = 0
    feasible: bool = False


@dataclass(frozen=True)
class FleetSummaryEvent(DomainEvent):
    """플릿 총 용량/적재량 요약 이벤트."""

    total_capacity: int = 0
    total_current_load: int = 0
