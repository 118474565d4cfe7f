"""설정 파일의 화물 유형 표기를 CargoType으로 변환한다.

지원하는 표기:
    문자열: 'fragile', 'fragile:hardcase', 'perishable:-10',
            'bulk', 'bulk:bricks'
    매핑:   {'fragile': {'in_hardcase': True}},
            {'perishable': {'temperature_c': -10}},
            {'bulk': {'in_bricks': True}}
"""

from __future__ import annotations

from typing import Any

from cargo_fleet.domain.enums import CargoKind
from cargo_fleet.domain.exceptions import FleetConfigError
from cargo_fleet.domain.value_objects.cargo_type import (
    Bulk,
    CargoType,
    Fragile,
    Perishable,
)

_FLAG_TOKENS = {
    CargoKind.FRAGILE: {'': False, 'soft': False, 'hardcase': True},
    CargoKind.BULK: {'': False, 'loose': False, 'bricks': True},
}


def parse_cargo_type(raw: Any) -> CargoType:
    """화물 유형 표기 하나를 변환한다.

    Args:
        raw: 문자열 또는 단일 키 매핑.

    Returns:
        변환된 CargoType.

    Raises:
        FleetConfigError: 표기를 해석할 수 없을 때.
    """
    if isinstance(raw, str):
        return _parse_token(raw)
    if isinstance(raw, dict) and len(raw) == 1:
        name, params = next(iter(raw.items()))
        return _parse_mapping(str(name), params or {})
    raise FleetConfigError(f"화물 유형 표기를 해석할 수 없습니다: {raw!r}")


def parse_cargo_types(raw: Any) -> tuple[CargoType, ...] | None:
    """화물 유형 목록을 변환한다. None은 그대로 None을 반환한다."""
    if raw is None:
        return None
    if not isinstance(raw, list):
        raise FleetConfigError(
            f"화물 유형 목록은 리스트여야 합니다: {raw!r}"
        )
    return tuple(parse_cargo_type(item) for item in raw)


def _parse_kind(name: str) -> CargoKind:
    try:
        return CargoKind(name.strip().upper())
    except ValueError:
        raise FleetConfigError(
            f"알 수 없는 화물 유형입니다: {name!r}"
        ) from None


def _parse_token(token: str) -> CargoType:
    name, _, qualifier = token.partition(':')
    kind = _parse_kind(name)
    qualifier = qualifier.strip().lower()

    if kind == CargoKind.PERISHABLE:
        try:
            return Perishable(temperature_c=int(qualifier or 0))
        except ValueError:
            raise FleetConfigError(
                f"보관 온도는 정수여야 합니다: {token!r}"
            ) from None

    flags = _FLAG_TOKENS[kind]
    if qualifier not in flags:
        raise FleetConfigError(
            f"알 수 없는 화물 유형 한정자입니다: {token!r}"
        )
    if kind == CargoKind.FRAGILE:
        return Fragile(in_hardcase=flags[qualifier])
    return Bulk(in_bricks=flags[qualifier])


def _parse_mapping(name: str, params: Any) -> CargoType:
    if not isinstance(params, dict):
        raise FleetConfigError(
            f"화물 유형 [{name}] 파라미터는 매핑이어야 합니다: {params!r}"
        )
    kind = _parse_kind(name)
    if kind == CargoKind.FRAGILE:
        return Fragile(in_hardcase=bool(params.get('in_hardcase', False)))
    if kind == CargoKind.PERISHABLE:
        return Perishable(temperature_c=int(params.get('temperature_c', 0)))
    return Bulk(in_bricks=bool(params.get('in_bricks', False)))
