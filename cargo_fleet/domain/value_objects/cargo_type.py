"""화물 유형 값 객체.

Fragile / Perishable / Bulk 세 가지 닫힌 변형으로 구성된다.
동등성은 변형 종류와 페이로드가 모두 같을 때만 성립한다.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from cargo_fleet.domain.enums import CargoKind


@dataclass(frozen=True)
class CargoType(ABC):
    """화물 유형 기본 클래스. 직접 생성할 수 없다."""

    kind: ClassVar[CargoKind]

    @property
    @abstractmethod
    def label(self) -> str:
        """사람이 읽을 수 있는 유형 이름."""


@dataclass(frozen=True)
class Fragile(CargoType):
    """파손 주의 화물.

    Args:
        in_hardcase: 하드케이스 포장 여부.
    """

    kind: ClassVar[CargoKind] = CargoKind.FRAGILE

    in_hardcase: bool = False

    @property
    def label(self) -> str:
        return 'fragile in hardcase' if self.in_hardcase else 'fragile'


@dataclass(frozen=True)
class Perishable(CargoType):
    """온도 관리가 필요한 화물.

    Args:
        temperature_c: 보관 온도 (°C).
    """

    kind: ClassVar[CargoKind] = CargoKind.PERISHABLE

    temperature_c: int = 0

    @property
    def label(self) -> str:
        return f'perishable ({self.temperature_c} degrees)'


@dataclass(frozen=True)
class Bulk(CargoType):
    """벌크 화물.

    Args:
        in_bricks: 브릭(블록) 포장 여부.
    """

    kind: ClassVar[CargoKind] = CargoKind.BULK

    in_bricks: bool = False

    @property
    def label(self) -> str:
        return 'bulk in bricks' if self.in_bricks else 'bulk'


def describe_cargo_types(
    cargo_types: frozenset[CargoType] | None, default: str,
) -> str:
    """유형 집합을 쉼표로 연결한 문자열로 만든다.

    Args:
        cargo_types: 유형 집합. None이면 default를 반환.
        default: 집합이 없을 때 사용할 문자열.
    """
    if cargo_types is None:
        return default
    return ', '.join(sorted(t.label for t in cargo_types))
