"""도메인 이벤트 발행 포트 인터페이스.

엔티티는 이벤트를 발행만 한다. 구독 방식은 구현체가 정한다.
"""

from abc import ABC, abstractmethod

from cargo_fleet.domain.events.fleet_events import DomainEvent


class EventPublisher(ABC):
    """도메인 이벤트 발행자 인터페이스."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """도메인 이벤트를 발행한다.

        Args:
            event: 발행할 도메인 이벤트.
        """


class NullEventPublisher(EventPublisher):
    """아무 것도 하지 않는 발행자. 싱크가 주입되지 않았을 때 사용한다."""

    def publish(self, event: DomainEvent) -> None:
        pass


def is_silent(publisher: EventPublisher | None) -> bool:
    """발행해도 아무 데도 전달되지 않는 발행자인지 확인한다."""
    return publisher is None or isinstance(publisher, NullEventPublisher)
