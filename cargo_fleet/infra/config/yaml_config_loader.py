"""YAML 파일 기반 설정 로더 구현체."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from cargo_fleet.domain.enums import VehicleKind
from cargo_fleet.domain.exceptions import FleetConfigError
from cargo_fleet.infra.config.cargo_type_parser import (
    parse_cargo_type,
    parse_cargo_types,
)
from cargo_fleet.usecase.ports.config_port import (
    AppConfig,
    CargoConfig,
    CheckerConfig,
    ConfigPort,
    VehicleConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = (
    Path(__file__).resolve().parent.parent.parent
    / "config"
    / "default_fleet.yaml"
)

_REQUIRED_VEHICLE_KEYS = (
    "make", "model", "year", "capacity", "fuel_tank_capacity",
)


def _as_bool(value: Any, key: str) -> bool:
    """YAML 불리언 값만 허용한다. 'false' 같은 문자열은 거부한다."""
    if not isinstance(value, bool):
        raise FleetConfigError(
            f"{key} 값은 true/false 여야 합니다: {value!r}"
        )
    return value


class YamlConfigLoader(ConfigPort):
    """ConfigPort의 YAML 파일 구현체.

    YAML 파일에서 플릿/화물/경로 설정을 읽어 AppConfig로 변환한다.
    파일이 없거나 매핑이 아니면 기본값을 사용한다.

    Args:
        config_path: YAML 설정 파일 경로. None이면 기본 경로 사용.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self._path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    def load(self) -> AppConfig:
        """YAML 파일에서 설정을 로드한다."""
        raw = self._read_yaml()
        params = self._extract_params(raw)

        checker_data = params.get("checker") or {}
        if not isinstance(checker_data, dict):
            raise FleetConfigError("checker 항목은 매핑이어야 합니다.")

        try:
            config = AppConfig(
                fleet_name=params.get("fleet_name", "cargo_fleet"),
                vehicles=tuple(
                    self._parse_vehicle(i, item)
                    for i, item in enumerate(params.get("vehicles") or [])
                ),
                cargo=tuple(
                    self._parse_cargo(i, item)
                    for i, item in enumerate(params.get("cargo") or [])
                ),
                routes=tuple(int(r) for r in params.get("routes") or []),
                checker=CheckerConfig(
                    unload_after_success=_as_bool(
                        checker_data.get("unload_after_success", True),
                        "checker.unload_after_success",
                    ),
                ),
            )
        except (TypeError, ValueError) as exc:
            raise FleetConfigError(
                f"설정 값을 변환할 수 없습니다 ({self._path}): {exc}"
            ) from exc

        logger.info(
            "Config loaded from %s (%d vehicles, %d cargo items)",
            self._path, len(config.vehicles), len(config.cargo),
        )
        return config

    def _read_yaml(self) -> dict[str, Any]:
        """YAML 파일을 dict로 읽는다."""
        if not self._path.exists():
            logger.warning(
                "Config file not found: %s, using defaults", self._path
            )
            return {}

        with open(self._path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            logger.warning("Invalid YAML format, using defaults")
            return {}

        return data

    def _extract_params(self, raw: dict[str, Any]) -> dict[str, Any]:
        """최상위 cargo_fleet 섹션이 있으면 그 안을 사용한다."""
        node_data = raw.get("cargo_fleet", raw)
        if isinstance(node_data, dict):
            return node_data
        return {}

    def _parse_vehicle(self, index: int, data: Any) -> VehicleConfig:
        """차량 항목 하나를 VehicleConfig로 변환한다."""
        if not isinstance(data, dict):
            raise FleetConfigError(
                f"vehicles[{index}] 항목은 매핑이어야 합니다."
            )
        missing = [k for k in _REQUIRED_VEHICLE_KEYS if k not in data]
        if missing:
            raise FleetConfigError(
                f"vehicles[{index}]에 필수 키가 없습니다: {', '.join(missing)}"
            )

        try:
            kind = VehicleKind(str(data.get("kind", "vehicle")).lower())
        except ValueError:
            raise FleetConfigError(
                f"vehicles[{index}] 알 수 없는 차량 종류: {data.get('kind')}"
            ) from None

        trailer_capacity = data.get("trailer_capacity")
        return VehicleConfig(
            kind=kind,
            make=str(data["make"]),
            model=str(data["model"]),
            year=int(data["year"]),
            capacity=int(data["capacity"]),
            fuel_tank_capacity=float(data["fuel_tank_capacity"]),
            allowed_cargo_types=parse_cargo_types(
                data.get("allowed_cargo_types")
            ),
            trailer_attached=_as_bool(
                data.get("trailer_attached", False),
                f"vehicles[{index}].trailer_attached",
            ),
            trailer_capacity=(
                int(trailer_capacity) if trailer_capacity is not None
                else None
            ),
            trailer_allowed_cargo_types=parse_cargo_types(
                data.get("trailer_allowed_cargo_types")
            ),
        )

    def _parse_cargo(self, index: int, data: Any) -> CargoConfig:
        """화물 항목 하나를 CargoConfig로 변환한다."""
        if not isinstance(data, dict) or "type" not in data:
            raise FleetConfigError(
                f"cargo[{index}] 항목에는 type이 있어야 합니다."
            )
        return CargoConfig(
            description=str(data.get("description", "")),
            weight=int(data.get("weight", 0)),
            type=parse_cargo_type(data["type"]),
        )
