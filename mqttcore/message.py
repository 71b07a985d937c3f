"""Messages received from a broker through a subscription."""

from __future__ import annotations

from dataclasses import dataclass, field

from .publishproperties import PublishProperties
from .topicname import TopicName

__all__ = ["Message"]


@dataclass(frozen=True, eq=False)
class Message:
    """A message received from a broker for one of the client's subscriptions.

    Two messages compare equal only when they are the same object, so a
    message passed around keeps its identity, while two deliveries with the
    same content stay distinct.
    """

    topic: TopicName = field(default_factory=TopicName)
    payload: bytes = b""
    id: int = 0
    qos: int = 0
    duplicate: bool = False
    retain: bool = False
    publish_properties: PublishProperties = field(default_factory=PublishProperties)

    def __post_init__(self) -> None:
        if isinstance(self.topic, str):
            object.__setattr__(self, "topic", TopicName(self.topic))
        object.__setattr__(self, "payload", bytes(self.payload))
        object.__setattr__(self, "duplicate", bool(self.duplicate))
        object.__setattr__(self, "retain", bool(self.retain))