from mqttcore.subscriptionproperties import (
    SubscriptionProperties,
    UnsubscriptionProperties,
)
from mqttcore.types import StringPair, UserProperties


def _two_pairs():
    props = UserProperties()
    props.append(StringPair("UserName1", "SomeValue"))
    props.append(StringPair("UserName2", "OtherValue"))
    return props


def test_subscription_identifier():
    properties = SubscriptionProperties()
    assert properties.subscription_identifier == 0
    properties.subscription_identifier = 123
    assert properties.subscription_identifier == 123


def test_no_local():
    properties = SubscriptionProperties()
    assert properties.no_local is False
    properties.no_local = True
    assert properties.no_local is True


def test_subscription_user_properties():
    properties = SubscriptionProperties()
    assert properties.user_properties == UserProperties()
    expected = _two_pairs()
    properties.user_properties = expected
    assert properties.user_properties == expected
    assert properties.user_properties[1].value == "OtherValue"


def test_defaults_are_independent():
    first = SubscriptionProperties()
    second = SubscriptionProperties()
    first.user_properties.append(StringPair("a", "b"))
    assert second.user_properties == []


def test_subscription_equality():
    a = SubscriptionProperties(_two_pairs(), 10, True)
    b = SubscriptionProperties(_two_pairs(), 10, True)
    assert a == b
    b.no_local = False
    assert not a == b


def test_unsubscription_user_properties():
    properties = UnsubscriptionProperties()
    assert properties.user_properties == []
    properties.user_properties = _two_pairs()
    assert properties.user_properties == _two_pairs()
    assert properties.user_properties[0].name == "UserName1"