"""CheckRouteFeasibility 유스케이스 단위 테스트."""

from unittest.mock import MagicMock

from cargo_fleet.domain.entities.fleet import FeasibilityReport
from cargo_fleet.usecase.check_route_feasibility import CheckRouteFeasibility


class TestExecute:
    def test_success_unloads_fleet(self, sample_fleet, sample_cargo):
        usecase = CheckRouteFeasibility(sample_fleet)

        report = usecase.execute(sample_cargo, 100)

        assert report.feasible is True
        assert all(v.total_current_load() == 0 for v in sample_fleet)

    def test_success_keeps_loads_when_disabled(self, sample_fleet,
                                               sample_cargo):
        usecase = CheckRouteFeasibility(
            sample_fleet, unload_after_success=False,
        )

        usecase.execute(sample_cargo, 100)

        assert sample_fleet.total_current_load() == 1550

    def test_failure_keeps_loads(self, sample_fleet, sample_cargo):
        usecase = CheckRouteFeasibility(sample_fleet)

        report = usecase.execute(sample_cargo, 700)

        assert report.feasible is False
        assert sample_fleet.total_current_load() == 1550


class TestExecuteMany:
    def test_reference_routes(self, sample_fleet, sample_cargo):
        usecase = CheckRouteFeasibility(sample_fleet)

        reports = usecase.execute_many(sample_cargo, [100, 300, 700])

        assert [r.feasible for r in reports] == [True, True, False]
        assert [r.path for r in reports] == [100, 300, 700]

    def test_each_route_starts_empty(self, sample_fleet, sample_cargo):
        usecase = CheckRouteFeasibility(sample_fleet)

        reports = usecase.execute_many(sample_cargo, [700, 100])

        assert reports[0].feasible is False
        assert reports[1].feasible is True
        assert reports[1].assignments == reports[0].assignments

    def test_each_route_starts_empty_without_unload(self, sample_fleet,
                                                    sample_cargo):
        usecase = CheckRouteFeasibility(
            sample_fleet, unload_after_success=False,
        )

        reports = usecase.execute_many(sample_cargo, [100, 100])

        assert [r.feasible for r in reports] == [True, True]
        assert sample_fleet.total_current_load() == 1550

    def test_unloads_between_runs(self):
        fleet = MagicMock()
        fleet.check.side_effect = [
            FeasibilityReport(path=1, feasible=False),
            FeasibilityReport(path=2, feasible=True),
        ]
        usecase = CheckRouteFeasibility(fleet)

        usecase.execute_many([], [1, 2])

        assert fleet.unload_all.call_count == 2

    def test_no_paths(self, sample_fleet, sample_cargo):
        usecase = CheckRouteFeasibility(sample_fleet)
        assert usecase.execute_many(sample_cargo, []) == []
