"""경로 주행 가능성 검사 유스케이스.

플릿에 화물을 배정하고 경로를 주행할 수 있는지 판정한 뒤,
성공 시 차량을 하역하는 기본 흐름을 담당한다.
"""

from collections.abc import Iterable, Sequence

from cargo_fleet.domain.entities.fleet import FeasibilityReport, Fleet
from cargo_fleet.domain.value_objects.cargo import Cargo


class CheckRouteFeasibility:
    """경로 주행 가능성 검사 유스케이스.

    화물 배정 → 주행 거리 검사 → (성공 시) 전체 하역.
    실패 시에는 적재 상태를 그대로 남긴다.

    Args:
        fleet: 검사할 플릿.
        unload_after_success: 성공 후 전체 차량을 하역할지 여부.
    """

    def __init__(self, fleet: Fleet, unload_after_success: bool = True) -> None:
        self._fleet = fleet
        self._unload_after_success = unload_after_success

    def execute(
        self, cargo_list: Iterable[Cargo], path: int,
    ) -> FeasibilityReport:
        """한 경로에 대해 검사한다.

        Args:
            cargo_list: 배정할 화물 목록.
            path: 경로 거리.

        Returns:
            검사 결과.
        """
        report = self._fleet.check(cargo_list, path)
        if report.feasible and self._unload_after_success:
            self._fleet.unload_all()
        return report

    def execute_many(
        self, cargo_list: Sequence[Cargo], paths: Iterable[int],
    ) -> list[FeasibilityReport]:
        """여러 경로를 차례로 검사한다.

        각 검사는 빈 플릿에서 시작한다. 마지막 검사 뒤의 적재 상태는
        execute와 같은 규칙을 따른다.
        """
        reports: list[FeasibilityReport] = []
        loaded = False
        for path in paths:
            if loaded:
                self._fleet.unload_all()
            report = self.execute(cargo_list, path)
            loaded = not (report.feasible and self._unload_after_success)
            reports.append(report)
        return reports
