"""Properties passed to the server when subscribing and unsubscribing."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import UserProperties

__all__ = ["SubscriptionProperties", "UnsubscriptionProperties"]


@dataclass
class SubscriptionProperties:
    """Options a client passes when subscribing to a topic filter.

    ``no_local`` asks the server not to send back messages this client
    published itself.
    """

    user_properties: UserProperties = field(default_factory=UserProperties)
    subscription_identifier: int = 0
    no_local: bool = False


@dataclass
class UnsubscriptionProperties:
    """Options a client passes when unsubscribing from a topic filter."""

    user_properties: UserProperties = field(default_factory=UserProperties)