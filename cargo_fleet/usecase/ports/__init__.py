"""유스케이스 포트 인터페이스 (ABC).

infra 레이어에서 구현해야 하는 추상 인터페이스를 정의한다.
"""

from cargo_fleet.domain.events.publisher import EventPublisher
from cargo_fleet.usecase.ports.config_port import (
    AppConfig,
    CargoConfig,
    CheckerConfig,
    ConfigPort,
    VehicleConfig,
)

__all__ = [
    "AppConfig",
    "CargoConfig",
    "CheckerConfig",
    "ConfigPort",
    "EventPublisher",
    "VehicleConfig",
]
