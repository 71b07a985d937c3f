"""Properties sent or received along with a published message."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterable

from .types import PayloadFormatIndicator, ReasonCode, StringPair, UserProperties

__all__ = ["PublishPropertyDetail", "PublishProperties", "MessageStatusProperties"]


class PublishPropertyDetail(IntFlag):
    """Flags naming the publish properties that have been set explicitly."""

    NONE = 0x00000000
    PAYLOAD_FORMAT_INDICATOR = 0x00000001
    MESSAGE_EXPIRY_INTERVAL = 0x00000002
    TOPIC_ALIAS = 0x00000004
    RESPONSE_TOPIC = 0x00000008
    CORRELATION_DATA = 0x00000010
    USER_PROPERTY = 0x00000020
    SUBSCRIPTION_IDENTIFIER = 0x00000040
    CONTENT_TYPE = 0x00000080


class PublishProperties:
    """Options for sending a message, or those received with one.

    Every property that is assigned is recorded in ``available_properties``.
    """

    def __init__(self) -> None:
        self._details = PublishPropertyDetail.NONE
        self._payload_format_indicator = PayloadFormatIndicator.UNSPECIFIED
        self._message_expiry_interval = 0
        self._topic_alias = 0
        self._response_topic = ""
        self._correlation_data = b""
        self._user_properties = UserProperties()
        self._subscription_identifiers: list[int] = []
        self._content_type = ""

    def __repr__(self) -> str:
        return (
            f"PublishProperties(available={self._details!r}, "
            f"payload_format_indicator={self._payload_format_indicator!r}, "
            f"message_expiry_interval={self._message_expiry_interval}, "
            f"topic_alias={self._topic_alias}, "
            f"response_topic={self._response_topic!r}, "
            f"correlation_data={self._correlation_data!r}, "
            f"user_properties={self._user_properties!r}, "
            f"subscription_identifiers={self._subscription_identifiers!r}, "
            f"content_type={self._content_type!r})"
        )

    @property
    def available_properties(self) -> PublishPropertyDetail:
        """The properties that have been set explicitly."""
        return self._details

    @property
    def payload_format_indicator(self) -> PayloadFormatIndicator:
        """The format of the message payload."""
        return self._payload_format_indicator

    @payload_format_indicator.setter
    def payload_format_indicator(self, indicator: PayloadFormatIndicator) -> None:
        self._payload_format_indicator = PayloadFormatIndicator(indicator)
        self._details |= PublishPropertyDetail.PAYLOAD_FORMAT_INDICATOR

    @property
    def message_expiry_interval(self) -> int:
        """Seconds the server is allowed to forward the message."""
        return self._message_expiry_interval

    @message_expiry_interval.setter
    def message_expiry_interval(self, interval: int) -> None:
        self._message_expiry_interval = interval
        self._details |= PublishPropertyDetail.MESSAGE_EXPIRY_INTERVAL

    @property
    def topic_alias(self) -> int:
        """The topic alias used for publishing; zero is not allowed."""
        return self._topic_alias

    @topic_alias.setter
    def topic_alias(self, alias: int) -> None:
        if alias == 0:
            raise ValueError("A topic alias with value 0 is not allowed.")
        self._topic_alias = alias
        self._details |= PublishPropertyDetail.TOPIC_ALIAS

    @property
    def response_topic(self) -> str:
        """The topic a receiver should respond to."""
        return self._response_topic

    @response_topic.setter
    def response_topic(self, topic: str) -> None:
        self._response_topic = topic
        self._details |= PublishPropertyDetail.RESPONSE_TOPIC

    @property
    def correlation_data(self) -> bytes:
        """Data identifying the request a response belongs to."""
        return self._correlation_data

    @correlation_data.setter
    def correlation_data(self, correlation: bytes) -> None:
        self._correlation_data = bytes(correlation)
        self._details |= PublishPropertyDetail.CORRELATION_DATA

    @property
    def user_properties(self) -> UserProperties:
        """Additional name-value pairs set by the user."""
        return self._user_properties

    @user_properties.setter
    def user_properties(self, properties: Iterable[StringPair]) -> None:
        self._user_properties = UserProperties(properties)
        self._details |= PublishPropertyDetail.USER_PROPERTY

    @property
    def subscription_identifiers(self) -> list[int]:
        """Identifiers of the subscriptions matching the message."""
        return self._subscription_identifiers

    @subscription_identifiers.setter
    def subscription_identifiers(self, ids: Iterable[int]) -> None:
        ids = list(ids)
        if 0 in ids:
            raise ValueError("A subscription identifier with value 0 is not allowed.")
        self._subscription_identifiers = ids
        self._details |= PublishPropertyDetail.SUBSCRIPTION_IDENTIFIER

    @property
    def content_type(self) -> str:
        """A description of the message content."""
        return self._content_type

    @content_type.setter
    def content_type(self, content_type: str) -> None:
        self._content_type = content_type
        self._details |= PublishPropertyDetail.CONTENT_TYPE


@dataclass(frozen=True)
class MessageStatusProperties:
    """Extra information the server reports while delivering a message."""

    reason_code: ReasonCode = ReasonCode.SUCCESS
    reason: str = ""
    user_properties: UserProperties = field(default_factory=UserProperties)