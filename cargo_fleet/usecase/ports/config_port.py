"""설정 포트 인터페이스.

플릿 정의, 화물 목록, 검사 경로 설정의 로딩을 추상화한다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from cargo_fleet.domain.enums import VehicleKind
from cargo_fleet.domain.value_objects.cargo_type import CargoType


@dataclass(frozen=True)
class VehicleConfig:
    """차량 한 대의 설정.

    Args:
        kind: 차량 종류 (vehicle / truck).
        make: 제조사.
        model: 모델명.
        year: 연식.
        capacity: 주 적재함 용량 (kg).
        fuel_tank_capacity: 연료 탱크 용량 (L).
        allowed_cargo_types: 주 적재함 허용 유형. None이면 전부 허용.
        trailer_attached: 트레일러 연결 여부 (truck 전용).
        trailer_capacity: 트레일러 용량 (truck 전용).
        trailer_allowed_cargo_types: 트레일러 허용 유형 (truck 전용).
            None이면 아무 것도 허용하지 않음.
    """

    kind: VehicleKind
    make: str
    model: str
    year: int
    capacity: int
    fuel_tank_capacity: float
    allowed_cargo_types: tuple[CargoType, ...] | None = None
    trailer_attached: bool = False
    trailer_capacity: int | None = None
    trailer_allowed_cargo_types: tuple[CargoType, ...] | None = None


@dataclass(frozen=True)
class CargoConfig:
    """화물 한 건의 설정 (중량은 아직 검증되지 않음)."""

    description: str
    weight: int
    type: CargoType


@dataclass(frozen=True)
class CheckerConfig:
    """주행 가능성 검사 설정.

    Args:
        unload_after_success: 검사 성공 후 전체 차량을 하역할지 여부.
    """

    unload_after_success: bool = True


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 전체 설정."""

    fleet_name: str = 'cargo_fleet'
    vehicles: tuple[VehicleConfig, ...] = ()
    cargo: tuple[CargoConfig, ...] = ()
    routes: tuple[int, ...] = ()
    checker: CheckerConfig = field(default_factory=CheckerConfig)


class ConfigPort(ABC):
    """설정 로더 인터페이스."""

    @abstractmethod
    def load(self) -> AppConfig:
        """설정을 로드한다.

        Returns:
            로드된 AppConfig.

        Raises:
            FleetConfigError: 설정 정의가 잘못되었을 때.
        """
