"""Subscriptions to topic filters and the notifications they deliver."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Protocol

from .topicfilter import TopicFilter
from .types import ReasonCode, UserProperties

__all__ = ["SubscriptionState", "Subscription"]


class SubscriptionState(IntEnum):
    """The states a subscription can be in."""

    UNSUBSCRIBED = 0
    SUBSCRIPTION_PENDING = 1
    SUBSCRIBED = 2
    UNSUBSCRIPTION_PENDING = 3
    ERROR = 4


class _Client(Protocol):
    def unsubscribe(self, topic: TopicFilter) -> Any: ...


class _Signal:
    """A list of callbacks invoked in order of connection."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        self._slots.remove(slot)

    def emit(self, *args: Any) -> None:
        for slot in list(self._slots):
            slot(*args)


class Subscription:
    """Receives notifications from a broker about a topic filter.

    ``state_changed`` fires with the new state whenever it changes,
    ``qos_changed`` when the broker grants a different QoS than requested,
    and ``message_received`` with each incoming message.
    """

    def __init__(
        self,
        topic: TopicFilter | str = "",
        client: _Client | None = None,
        qos: int = 0,
        *,
        shared: bool = False,
        shared_subscription_name: str = "",
    ) -> None:
        self.topic = TopicFilter(topic) if isinstance(topic, str) else topic
        self.client = client
        self.qos = qos
        self.is_shared_subscription = bool(shared)
        self.shared_subscription_name = shared_subscription_name
        self.reason = ""
        self.reason_code = ReasonCode.SUCCESS
        self.user_properties = UserProperties()
        self._state = SubscriptionState.UNSUBSCRIBED
        self.state_changed = _Signal()
        self.qos_changed = _Signal()
        self.message_received = _Signal()

    def __repr__(self) -> str:
        return (
            f"Subscription(topic={self.topic.filter!r}, qos={self.qos}, "
            f"state={self._state.name})"
        )

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def state(self) -> SubscriptionState:
        """The current state of the subscription."""
        return self._state

    def set_state(self, state: SubscriptionState) -> None:
        """Change the state, notifying listeners if it differs."""
        state = SubscriptionState(state)
        if state == self._state:
            return
        self._state = state
        self.state_changed.emit(state)

    def unsubscribe(self) -> None:
        """Ask the client to unsubscribe from the topic filter."""
        if self.client is None:
            raise RuntimeError("Subscription is not attached to a client.")
        self.client.unsubscribe(self.topic)

    def close(self) -> None:
        """Release the subscription, unsubscribing if still subscribed."""
        if self._state == SubscriptionState.SUBSCRIBED:
            self.unsubscribe()