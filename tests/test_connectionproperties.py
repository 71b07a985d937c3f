import pytest

from mqttcore.connectionproperties import (
    ConnectionProperties,
    LastWillProperties,
    ServerConnectionProperties,
    ServerPropertyDetail,
)
from mqttcore.types import PayloadFormatIndicator, ReasonCode, StringPair, UserProperties


def test_user_properties_get_set():
    p = ConnectionProperties()
    assert len(p.user_properties) == 0
    properties = UserProperties([StringPair("someKey", "someValue")])
    p.user_properties = properties
    assert p.user_properties == properties


def test_authentication_get_set():
    p = ConnectionProperties()
    assert p.authentication_method == ""
    p.authentication_method = "SomeAuthentication"
    assert p.authentication_method == "SomeAuthentication"

    assert p.authentication_data == b""
    p.authentication_data = b"AuthData123"
    assert p.authentication_data == b"AuthData123"


def test_session_expiry_interval():
    p = ConnectionProperties()
    assert p.session_expiry_interval == 0
    p.session_expiry_interval = 1000
    assert p.session_expiry_interval == 1000


def test_maximum_packet_size():
    p = ConnectionProperties()
    assert p.maximum_packet_size == 0xFFFFFFFF
    with pytest.raises(ValueError):
        p.maximum_packet_size = 0
    assert p.maximum_packet_size == 0xFFFFFFFF
    p.maximum_packet_size = 500
    assert p.maximum_packet_size == 500


def test_maximum_receive():
    p = ConnectionProperties()
    assert p.maximum_receive == 65535
    with pytest.raises(ValueError):
        p.maximum_receive = 0
    assert p.maximum_receive == 65535
    p.maximum_receive = 30
    assert p.maximum_receive == 30


def test_maximum_topic_alias():
    p = ConnectionProperties()
    assert p.maximum_topic_alias == 0
    p.maximum_topic_alias = 5
    assert p.maximum_topic_alias == 5


def test_request_information_flags():
    p = ConnectionProperties()
    assert p.request_response_information is False
    p.request_response_information = True
    assert p.request_response_information is True

    assert p.request_problem_information is True
    p.request_problem_information = False
    assert p.request_problem_information is False


@pytest.mark.parametrize("value", [-1, 0x10000])
def test_maximum_receive_out_of_range(value):
    p = ConnectionProperties()
    with pytest.raises(ValueError):
        p.maximum_receive = value
    assert p.maximum_receive == 65535


def test_last_will_defaults_and_assignment():
    will = LastWillProperties()
    assert will.will_delay_interval == 0
    assert will.payload_format_indicator == PayloadFormatIndicator.UNSPECIFIED
    assert will.message_expiry_interval == 0
    assert will.content_type == ""
    assert will.response_topic == ""
    assert will.correlation_data == b""
    assert will.user_properties == []

    will.will_delay_interval = 30
    will.user_properties.append(StringPair("k", "v"))
    assert will.will_delay_interval == 30
    assert will.user_properties == [StringPair("k", "v")]


def test_last_will_user_properties_not_shared():
    first = LastWillProperties()
    second = LastWillProperties()
    first.user_properties.append(StringPair("a", "b"))
    assert second.user_properties == []


def test_server_defaults():
    server = ServerConnectionProperties()
    assert server.is_valid() is False
    assert server.available_properties == ServerPropertyDetail.NONE
    assert server.maximum_qos == 2
    assert server.retain_available is True
    assert server.client_id_assigned is False
    assert server.reason == ""
    assert server.reason_code == ReasonCode.SUCCESS
    assert server.wildcard_supported is True
    assert server.subscription_identifier_supported is True
    assert server.shared_subscription_supported is True
    assert server.response_information == ""
    assert server.server_reference == ""
    assert server.maximum_packet_size == 0xFFFFFFFF


def test_server_client_id_assigned_follows_details():
    server = ServerConnectionProperties(
        details=ServerPropertyDetail.ASSIGNED_CLIENT_ID | ServerPropertyDetail.MAXIMUM_QOS,
        valid=True,
        maximum_qos=1,
    )
    assert server.is_valid() is True
    assert server.client_id_assigned is True
    assert server.maximum_qos == 1
    assert server.available_properties & ServerPropertyDetail.MAXIMUM_QOS


def test_server_reported_values():
    server = ServerConnectionProperties(
        reason="moved",
        reason_code=ReasonCode.SERVER_MOVED,
        server_keep_alive=60,
        server_reference="other.example.com",
    )
    assert server.reason == "moved"
    assert server.reason_code == ReasonCode.SERVER_MOVED
    assert server.server_keep_alive == 60
    assert server.server_reference == "other.example.com"


def test_server_rejects_invalid_qos():
    with pytest.raises(ValueError):
        ServerConnectionProperties(maximum_qos=3)


def test_server_inherits_connection_setters():
    server = ServerConnectionProperties()
    server.maximum_topic_alias = 10
    assert server.maximum_topic_alias == 10
    with pytest.raises(ValueError):
        server.maximum_packet_size = 0


def test_detail_flag_values_reported_by_server():
    retain = ServerConnectionProperties(details=ServerPropertyDetail.RETAIN_AVAILABLE)
    assert retain.available_properties == 0x10

    auth = ServerConnectionProperties(details=ServerPropertyDetail.AUTHENTICATION_DATA)
    assert auth.available_properties == 0x20000
    assert auth.client_id_assigned is False