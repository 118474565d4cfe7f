"""Cargo Fleet 도메인 열거형 정의."""

from enum import StrEnum


class CargoKind(StrEnum):
    """화물 유형 태그."""

    FRAGILE = 'FRAGILE'
    PERISHABLE = 'PERISHABLE'
    BULK = 'BULK'


class Compartment(StrEnum):
    """적재 구획."""

    MAIN = 'MAIN'
    TRAILER = 'TRAILER'


class RejectionReason(StrEnum):
    """적재 거부 사유."""

    EMPTY_CARGO = 'EMPTY_CARGO'
    UNSUPPORTED_TYPE = 'UNSUPPORTED_TYPE'
    OVER_CAPACITY = 'OVER_CAPACITY'
    TRAILER_OVER_CAPACITY = 'TRAILER_OVER_CAPACITY'


class VehicleKind(StrEnum):
    """설정 파일의 차량 종류."""

    VEHICLE = 'vehicle'
    TRUCK = 'truck'
