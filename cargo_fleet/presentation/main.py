"""Cargo Fleet 진입점.

실행: cargo_fleet -c fleet.yaml -p 100 -p 300
"""

from __future__ import annotations

import argparse
import logging
import sys

from cargo_fleet.domain.exceptions import FleetConfigError
from cargo_fleet.infra.config.yaml_config_loader import YamlConfigLoader
from cargo_fleet.infra.event.in_memory_event_publisher import (
    InMemoryEventPublisher,
)
from cargo_fleet.presentation.event_formatter import make_log_handler
from cargo_fleet.usecase.assemble_fleet import AssembleFleet
from cargo_fleet.usecase.check_route_feasibility import CheckRouteFeasibility

logger = logging.getLogger(__name__)

EXIT_FEASIBLE = 0
EXIT_INFEASIBLE = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """CLI 인자 파서를 만든다."""
    parser = argparse.ArgumentParser(
        prog='cargo_fleet',
        description='Check whether a fleet can carry cargo over a route',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to the fleet YAML file (default: bundled sample fleet)',
    )
    parser.add_argument(
        '-p', '--path', type=int, action='append', default=None,
        help='Route distance to check; repeat for several routes '
             '(default: routes from the config file)',
    )
    parser.add_argument(
        '--keep-loaded', action='store_true',
        help='Do not unload vehicles after a successful check',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """플릿 주행 가능성 검사를 실행한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외).

    Returns:
        모든 경로가 가능하면 0, 하나라도 불가능하면 1, 설정 오류면 2.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    # 1. 설정 로드
    try:
        config = YamlConfigLoader(args.config_file).load()
    except FleetConfigError as exc:
        logger.error("Invalid fleet config: %s", exc)
        return EXIT_CONFIG_ERROR

    # 2. 이벤트 출력 연결
    publisher = InMemoryEventPublisher()
    publisher.subscribe_all(
        make_log_handler(logging.getLogger('cargo_fleet.events'))
    )

    # 3. 플릿/화물 구성
    assembler = AssembleFleet(publisher)
    try:
        fleet = assembler.build_fleet(config)
    except FleetConfigError as exc:
        logger.error("Invalid fleet config: %s", exc)
        return EXIT_CONFIG_ERROR
    cargo_list = assembler.build_cargo(config)
    fleet.info()

    paths = args.path or list(config.routes)
    if not paths:
        logger.error("No route distance given (use -p or 'routes')")
        return EXIT_CONFIG_ERROR

    # 4. 경로별 검사
    usecase = CheckRouteFeasibility(
        fleet,
        unload_after_success=(
            config.checker.unload_after_success and not args.keep_loaded
        ),
    )
    reports = usecase.execute_many(cargo_list, paths)

    feasible = all(r.feasible for r in reports)
    logger.info(
        "%d/%d routes feasible",
        sum(1 for r in reports if r.feasible), len(reports),
    )
    return EXIT_FEASIBLE if feasible else EXIT_INFEASIBLE


if __name__ == '__main__':
    sys.exit(main())
