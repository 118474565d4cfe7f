"""Cargo Fleet 유스케이스 레이어.

도메인 로직을 포트를 통해 조율하는 애플리케이션 서비스를 정의한다.
domain 레이어만 의존하며, infra 레이어 의존성은 없다.
"""

from cargo_fleet.usecase.assemble_fleet import AssembleFleet
from cargo_fleet.usecase.check_route_feasibility import CheckRouteFeasibility

__all__ = [
    "AssembleFleet",
    "CheckRouteFeasibility",
]
