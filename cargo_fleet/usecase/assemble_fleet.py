"""플릿 구성 유스케이스.

설정(AppConfig)의 차량/화물 정의를 도메인 객체로 변환한다.
"""

import logging

from cargo_fleet.domain.entities.carrier import CargoCarrier
from cargo_fleet.domain.entities.fleet import Fleet
from cargo_fleet.domain.entities.truck import Truck
from cargo_fleet.domain.entities.vehicle import Vehicle
from cargo_fleet.domain.enums import VehicleKind
from cargo_fleet.domain.events.publisher import EventPublisher
from cargo_fleet.domain.exceptions import FleetConfigError
from cargo_fleet.domain.value_objects.cargo import Cargo
from cargo_fleet.usecase.ports.config_port import AppConfig, VehicleConfig

logger = logging.getLogger(__name__)


class AssembleFleet:
    """플릿 구성 유스케이스.

    설정 → Vehicle/Truck 생성 → Fleet 등록.

    Args:
        event_publisher: 플릿과 차량이 공유할 이벤트 발행자.
    """

    def __init__(self, event_publisher: EventPublisher | None = None) -> None:
        self._event_publisher = event_publisher

    def build_fleet(self, config: AppConfig) -> Fleet:
        """설정의 차량 목록으로 플릿을 만든다.

        Args:
            config: 애플리케이션 설정.

        Returns:
            설정 순서대로 차량이 등록된 Fleet.

        Raises:
            FleetConfigError: 알 수 없는 차량 종류일 때.
        """
        fleet = Fleet(event_publisher=self._event_publisher)
        for vehicle_config in config.vehicles:
            fleet.add_vehicle(self.build_vehicle(vehicle_config))
        logger.info(
            "Fleet '%s' assembled with %d vehicles",
            config.fleet_name, len(fleet),
        )
        return fleet

    def build_vehicle(self, config: VehicleConfig) -> CargoCarrier:
        """차량 설정 하나로 Vehicle 또는 Truck을 만든다."""
        if config.kind == VehicleKind.VEHICLE:
            return Vehicle(
                make=config.make,
                model=config.model,
                year=config.year,
                capacity=config.capacity,
                fuel_tank_capacity=config.fuel_tank_capacity,
                allowed_cargo_types=config.allowed_cargo_types,
                event_publisher=self._event_publisher,
            )
        if config.kind == VehicleKind.TRUCK:
            return Truck(
                make=config.make,
                model=config.model,
                year=config.year,
                capacity=config.capacity,
                fuel_tank_capacity=config.fuel_tank_capacity,
                allowed_cargo_types=config.allowed_cargo_types,
                event_publisher=self._event_publisher,
                trailer_attached=config.trailer_attached,
                trailer_capacity=config.trailer_capacity,
                trailer_allowed_cargo_types=(
                    config.trailer_allowed_cargo_types
                ),
            )
        raise FleetConfigError(f"알 수 없는 차량 종류입니다: {config.kind}")

    def build_cargo(self, config: AppConfig) -> list[Cargo]:
        """설정의 화물 목록을 Cargo로 변환한다.

        중량이 유효하지 않은 화물은 제외된다.
        """
        cargo_list = []
        for item in config.cargo:
            cargo = Cargo.create(item.description, item.weight, item.type)
            if cargo is None:
                logger.warning(
                    "Skipping cargo with invalid weight: %r", item.description,
                )
                continue
            cargo_list.append(cargo)
        return cargo_list
