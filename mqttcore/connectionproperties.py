"""Connection, last will and server connection properties (MQTT 5.0)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Iterable

from .types import PayloadFormatIndicator, ReasonCode, StringPair, UserProperties

__all__ = [
    "ServerPropertyDetail",
    "LastWillProperties",
    "ConnectionProperties",
    "ServerConnectionProperties",
]

_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF


def _check_unsigned(value: int, maximum: int, what: str) -> int:
    if not 0 <= value <= maximum:
        raise ValueError(f"{what} must be between 0 and {maximum}, got {value}")
    return value


class ServerPropertyDetail(IntFlag):
    """Flags naming the properties the server reported on connecting."""

    NONE = 0x00000000
    SESSION_EXPIRY_INTERVAL = 0x00000001
    MAXIMUM_RECEIVE = 0x00000002
    MAXIMUM_QOS = 0x00000004
    RETAIN_AVAILABLE = 0x00000010
    MAXIMUM_PACKET_SIZE = 0x00000020
    ASSIGNED_CLIENT_ID = 0x00000040
    MAXIMUM_TOPIC_ALIAS = 0x00000080
    REASON_STRING = 0x00000100
    USER_PROPERTY = 0x00000200
    WILDCARD_SUPPORTED = 0x00000400
    SUBSCRIPTION_IDENTIFIER_SUPPORT = 0x00000800
    SHARED_SUBSCRIPTION_SUPPORT = 0x00001000
    SERVER_KEEP_ALIVE = 0x00002000
    RESPONSE_INFORMATION = 0x00004000
    SERVER_REFERENCE = 0x00008000
    AUTHENTICATION_METHOD = 0x00010000
    AUTHENTICATION_DATA = 0x00020000


@dataclass
class LastWillProperties:
    """Options passed to the server with the last will on connecting.

    ``will_delay_interval`` is the delay in seconds before the last will is
    sent; ``message_expiry_interval`` its lifetime after that delay.
    """

    will_delay_interval: int = 0
    payload_format_indicator: PayloadFormatIndicator = PayloadFormatIndicator.UNSPECIFIED
    message_expiry_interval: int = 0
    content_type: str = ""
    response_topic: str = ""
    correlation_data: bytes = b""
    user_properties: UserProperties = field(default_factory=UserProperties)


class ConnectionProperties:
    """Options a client passes to the server when connecting."""

    def __init__(self) -> None:
        self._session_expiry_interval = 0
        self._maximum_receive = _UINT16_MAX
        self._maximum_packet_size = _UINT32_MAX
        self._maximum_topic_alias = 0
        self._request_response_information = False
        self._request_problem_information = True
        self._user_properties = UserProperties()
        self._authentication_method = ""
        self._authentication_data = b""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"session_expiry_interval={self._session_expiry_interval}, "
            f"maximum_receive={self._maximum_receive}, "
            f"maximum_packet_size={self._maximum_packet_size}, "
            f"maximum_topic_alias={self._maximum_topic_alias}, "
            f"request_response_information={self._request_response_information}, "
            f"request_problem_information={self._request_problem_information}, "
            f"user_properties={self._user_properties!r}, "
            f"authentication_method={self._authentication_method!r})"
        )

    @property
    def session_expiry_interval(self) -> int:
        """Seconds the server keeps the session after the connection closes.

        Zero ends the session with the connection; the 32-bit maximum means
        the session never expires.
        """
        return self._session_expiry_interval

    @session_expiry_interval.setter
    def session_expiry_interval(self, expiry: int) -> None:
        self._session_expiry_interval = _check_unsigned(
            expiry, _UINT32_MAX, "Session expiry interval"
        )

    @property
    def maximum_receive(self) -> int:
        """How many QoS 1 and 2 publications may be processed concurrently."""
        return self._maximum_receive

    @maximum_receive.setter
    def maximum_receive(self, maximum: int) -> None:
        if maximum == 0:
            raise ValueError("Maximum Receive is not allowed to be 0.")
        self._maximum_receive = _check_unsigned(maximum, _UINT16_MAX, "Maximum Receive")

    @property
    def maximum_packet_size(self) -> int:
        """The largest packet accepted, header and properties included."""
        return self._maximum_packet_size

    @maximum_packet_size.setter
    def maximum_packet_size(self, size: int) -> None:
        if size == 0:
            raise ValueError("Packet size is not allowed to be 0.")
        self._maximum_packet_size = _check_unsigned(size, _UINT32_MAX, "Packet size")

    @property
    def maximum_topic_alias(self) -> int:
        """The highest topic alias accepted; zero accepts none."""
        return self._maximum_topic_alias

    @maximum_topic_alias.setter
    def maximum_topic_alias(self, alias: int) -> None:
        self._maximum_topic_alias = _check_unsigned(alias, _UINT16_MAX, "Topic alias")

    @property
    def request_response_information(self) -> bool:
        """Whether the server is asked to return response information."""
        return self._request_response_information

    @request_response_information.setter
    def request_response_information(self, response: bool) -> None:
        self._request_response_information = bool(response)

    @property
    def request_problem_information(self) -> bool:
        """Whether the server is asked to return problem information."""
        return self._request_problem_information

    @request_problem_information.setter
    def request_problem_information(self, problem: bool) -> None:
        self._request_problem_information = bool(problem)

    @property
    def user_properties(self) -> UserProperties:
        """User properties sent with the connection."""
        return self._user_properties

    @user_properties.setter
    def user_properties(self, properties: Iterable[StringPair]) -> None:
        self._user_properties = UserProperties(properties)

    @property
    def authentication_method(self) -> str:
        """The authentication method."""
        return self._authentication_method

    @authentication_method.setter
    def authentication_method(self, method: str) -> None:
        self._authentication_method = method

    @property
    def authentication_data(self) -> bytes:
        """Authentication data; only meaningful with an authentication method."""
        return self._authentication_data

    @authentication_data.setter
    def authentication_data(self, data: bytes) -> None:
        self._authentication_data = bytes(data)


class ServerConnectionProperties(ConnectionProperties):
    """Connection properties reported by the server.

    Properties the server did not send keep their defaults;
    ``available_properties`` tells which ones it did send.
    """

    def __init__(
        self,
        *,
        details: ServerPropertyDetail = ServerPropertyDetail.NONE,
        valid: bool = False,
        maximum_qos: int = 2,
        retain_available: bool = True,
        reason: str = "",
        reason_code: ReasonCode = ReasonCode.SUCCESS,
        wildcard_supported: bool = True,
        subscription_identifier_supported: bool = True,
        shared_subscription_supported: bool = True,
        server_keep_alive: int = 0,
        response_information: str = "",
        server_reference: str = "",
    ) -> None:
        super().__init__()
        if not 0 <= maximum_qos <= 2:
            raise ValueError(f"Maximum QoS must be 0, 1 or 2, got {maximum_qos}")
        self._details = ServerPropertyDetail(details)
        self._valid = bool(valid)
        self._maximum_qos = maximum_qos
        self._retain_available = bool(retain_available)
        self._reason = reason
        self._reason_code = ReasonCode(reason_code)
        self._wildcard_supported = bool(wildcard_supported)
        self._subscription_identifier_supported = bool(subscription_identifier_supported)
        self._shared_subscription_supported = bool(shared_subscription_supported)
        self._server_keep_alive = _check_unsigned(
            server_keep_alive, _UINT16_MAX, "Server keep alive"
        )
        self._response_information = response_information
        self._server_reference = server_reference

    @property
    def available_properties(self) -> ServerPropertyDetail:
        """The properties the server specified."""
        return self._details

    def is_valid(self) -> bool:
        """Return whether the server sent properties with its acknowledgment."""
        return self._valid

    @property
    def maximum_qos(self) -> int:
        """The highest QoS level the server supports for publishing."""
        return self._maximum_qos

    @property
    def retain_available(self) -> bool:
        """Whether the server accepts retained messages."""
        return self._retain_available

    @property
    def client_id_assigned(self) -> bool:
        """Whether the server assigned a client identifier."""
        return bool(self._details & ServerPropertyDetail.ASSIGNED_CLIENT_ID)

    @property
    def reason(self) -> str:
        """The reason string of the response."""
        return self._reason

    @property
    def reason_code(self) -> ReasonCode:
        """The reason code of the response."""
        return self._reason_code

    @property
    def wildcard_supported(self) -> bool:
        """Whether subscriptions may contain wildcards."""
        return self._wildcard_supported

    @property
    def subscription_identifier_supported(self) -> bool:
        """Whether subscription identifiers are accepted."""
        return self._subscription_identifier_supported

    @property
    def shared_subscription_supported(self) -> bool:
        """Whether shared subscriptions are accepted."""
        return self._shared_subscription_supported

    @property
    def server_keep_alive(self) -> int:
        """Keep alive in seconds requested by the server, overriding the client's."""
        return self._server_keep_alive

    @property
    def response_information(self) -> str:
        """The response information."""
        return self._response_information

    @property
    def server_reference(self) -> str:
        """An alternative server address the client may connect to."""
        return self._server_reference