"""Cargo Fleet 도메인 예외 정의."""


class DomainError(Exception):
    """도메인 계층 기본 예외."""


class CargoValidationError(DomainError):
    """화물 생성 값이 유효하지 않을 때 (중량 <= 0)."""


class VehicleNotFoundError(DomainError):
    """플릿에 없는 차량을 제거하려 할 때."""


class FleetConfigError(DomainError):
    """플릿/화물 설정 정의가 잘못되었을 때."""
