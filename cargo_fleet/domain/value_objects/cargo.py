"""화물 값 객체."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from cargo_fleet.domain.exceptions import CargoValidationError
from cargo_fleet.domain.value_objects.cargo_type import CargoType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Cargo:
    """운송할 화물.

    생성 후 변경할 수 없다. 필드 외의 식별자는 없다.

    Args:
        description: 화물 설명.
        weight: 중량 (kg). 0보다 커야 한다.
        type: 화물 유형.

    Raises:
        CargoValidationError: weight가 0 이하일 때.
    """

    description: str
    weight: int
    type: CargoType

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise CargoValidationError(
                f'화물 [{self.description}] 중량은 0보다 커야 합니다: '
                f'{self.weight}'
            )

    @classmethod
    def create(
        cls, description: str, weight: int, type: CargoType,
    ) -> Cargo | None:
        """화물을 생성한다. 중량이 유효하지 않으면 None을 반환한다."""
        try:
            return cls(description=description, weight=weight, type=type)
        except CargoValidationError:
            logger.warning(
                "Cargo weight should be greater than 0: %r (%d)",
                description, weight,
            )
            return None
