"""Cargo Fleet 도메인 이벤트."""

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
from cargo_fleet.domain.events.publisher import (
    EventPublisher,
    NullEventPublisher,
    is_silent,
)

__all__ = [
    "CargoLoadedEvent",
    "CargoRejectedEvent",
    "CargoUnplacedEvent",
    "DomainEvent",
    "EventPublisher",
    "FeasibilityCheckStartedEvent",
    "FeasibilityCheckedEvent",
    "FleetSummaryEvent",
    "NullEventPublisher",
    "RangeExceededEvent",
    "VehicleAddedEvent",
    "VehicleRemovedEvent",
    "VehicleUnloadedEvent",
    "is_silent",
]
