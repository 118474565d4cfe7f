"""인메모리 도메인 이벤트 발행자 구현체."""

import logging
import threading
from collections import defaultdict
from collections.abc import Callable

from cargo_fleet.domain.events.fleet_events import DomainEvent
from cargo_fleet.domain.events.publisher import EventPublisher

logger = logging.getLogger(__name__)


class InMemoryEventPublisher(EventPublisher):
    """EventPublisher의 인메모리 구현체.

    동기 방식으로 이벤트를 핸들러에 전달한다.
    핸들러는 이벤트 타입별로 등록/호출되며,
    subscribe_all 핸들러는 모든 이벤트를 받는다.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._handlers: dict[
            type[DomainEvent], list[Callable[[DomainEvent], None]]
        ] = defaultdict(list)
        self._catch_all: list[Callable[[DomainEvent], None]] = []

    def publish(self, event: DomainEvent) -> None:
        """도메인 이벤트를 발행한다.

        타입별 핸들러를 먼저, 전체 구독 핸들러를 나중에 호출한다.
        개별 핸들러의 예외는 로깅 후 무시하여
        다른 핸들러 실행에 영향을 주지 않는다.
        """
        event_type = type(event)
        with self._lock:
            handlers = list(self._handlers.get(event_type, []))
            handlers.extend(self._catch_all)

        logger.debug(
            "Publishing event: %s (handlers=%d)",
            event_type.__name__, len(handlers),
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Error in event handler for %s", event_type.__name__
                )

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: Callable[[DomainEvent], None],
    ) -> None:
        """특정 타입의 도메인 이벤트를 구독한다."""
        with self._lock:
            self._handlers[event_type].append(handler)
        logger.debug(
            "Subscribed to event: %s", event_type.__name__
        )

    def subscribe_all(
        self, handler: Callable[[DomainEvent], None],
    ) -> None:
        """모든 도메인 이벤트를 구독한다."""
        with self._lock:
            self._catch_all.append(handler)
        logger.debug("Subscribed to all events")
