"""도메인 이벤트를 사람이 읽을 수 있는 문장으로 변환한다."""

from __future__ import annotations

from collections.abc import Callable
import functools
import logging

from cargo_fleet.domain.enums import Compartment, RejectionReason
from cargo_fleet.domain.events.fleet_events import (
    CargoLoadedEvent,
    CargoRejectedEvent,
    CargoUnplacedEvent,
    DomainEvent,
    FeasibilityCheckedEvent,
    FeasibilityCheckStartedEvent,
    FleetSummaryEvent,
    RangeExceededEvent,
    VehicleAddedEvent,
    VehicleRemovedEvent,
    VehicleUnloadedEvent,
)


@functools.singledispatch
def format_event(event: DomainEvent) -> str:
    """이벤트 한 건을 한 줄 메시지로 만든다."""
    return type(event).__name__


@format_event.register
def _(event: VehicleAddedEvent) -> str:
    text = (
        f"'{event.vehicle_name}' that can carry '{event.cargo_types}' "
        f"cargos with total weight of {event.capacity} kg"
    )
    if event.trailer_capacity is not None:
        text += (
            " and has a trailer with additional capacity of "
            f"{event.trailer_capacity} kg for "
            f"'{event.trailer_cargo_types}' cargo types"
        )
    return f"{text} added to fleet"


@format_event.register
def _(event: VehicleRemovedEvent) -> str:
    return f"'{event.vehicle_name}' removed from fleet"


@format_event.register
def _(event: CargoLoadedEvent) -> str:
    if event.compartment == Compartment.TRAILER:
        return (
            f"Cargo loaded to trailer of '{event.vehicle_name}': "
            f"'{event.cargo_description}'"
        )
    target = 'truck ' if event.is_truck else ''
    return (
        f"Cargo loaded to {target}'{event.vehicle_name}': "
        f"'{event.cargo_description}'"
    )


@format_event.register
def _(event: CargoRejectedEvent) -> str:
    if event.reason == RejectionReason.EMPTY_CARGO:
        return "Failed to load empty cargo on the vehicle"
    if event.reason == RejectionReason.UNSUPPORTED_TYPE:
        return (
            f"'{event.vehicle_name}' can not handle "
            f"'{event.cargo_type}' cargo"
        )
    if event.reason == RejectionReason.TRAILER_OVER_CAPACITY:
        return (
            f"Trailer of '{event.vehicle_name}' can't handle the weight "
            f"of '{event.cargo_description}'"
        )
    return (
        f"'{event.vehicle_name}' can not handle weight of "
        f"'{event.cargo_description}'"
    )


@format_event.register
def _(event: VehicleUnloadedEvent) -> str:
    return (
        f"'{event.vehicle_name}' unloaded ({event.unloaded_weight} kg)"
    )


@format_event.register
def _(event: FeasibilityCheckStartedEvent) -> str:
    return f"Can the fleet carry cargos on {event.path} km route?"


@format_event.register
def _(event: CargoUnplacedEvent) -> str:
    return (
        f"Could not find vehicle to carry '{event.cargo_description}', "
        f"'{event.cargo_type}' cargo"
    )


@format_event.register
def _(event: RangeExceededEvent) -> str:
    return (
        f"'{event.vehicle_name}' can not ride {event.path} km route "
        f"due to fuel amounts (max {event.max_distance} km)"
    )


@format_event.register
def _(event: FeasibilityCheckedEvent) -> str:
    if event.feasible:
        return f"Cargo can be carried on {event.path} km route"
    return f"Cargo can not be carried on {event.path} km route"


@format_event.register
def _(event: FleetSummaryEvent) -> str:
    return (
        f"Fleet's weight capacity: {event.total_capacity} kg, "
        f"current load: {event.total_current_load} kg"
    )


def make_log_handler(
    logger: logging.Logger, level: int = logging.INFO,
) -> Callable[[DomainEvent], None]:
    """이벤트를 포맷하여 logger로 출력하는 핸들러를 만든다.

    Args:
        logger: 출력 대상 logger.
        level: 로그 레벨.
    """
    def handle(event: DomainEvent) -> None:
        logger.log(level, "%s", format_event(event))
    return handle
