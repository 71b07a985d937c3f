# mqttcore

mqttcore holds the data types an MQTT client is built from. It has no dependencies outside the standard library and does not tie you to any networking stack.

| Module | Contents |
| --- | --- |
| `mqttcore.topicname` | `TopicName` |
| `mqttcore.topicfilter` | `TopicFilter`, `MatchOption` |
| `mqttcore.controlpacket` | `ControlPacket`, `PacketType`, `encode_variable_integer` |
| `mqttcore.types` | `PayloadFormatIndicator`, `MessageStatus`, `ReasonCode`, `StringPair`, `UserProperties` |
| `mqttcore.publishproperties` | `PublishProperties`, `PublishPropertyDetail`, `MessageStatusProperties` |
| `mqttcore.subscriptionproperties` | `SubscriptionProperties`, `UnsubscriptionProperties` |
| `mqttcore.connectionproperties` | `ConnectionProperties`, `ServerConnectionProperties`, `ServerPropertyDetail`, `LastWillProperties` |
| `mqttcore.message` | `Message` |
| `mqttcore.subscription` | `Subscription`, `SubscriptionState` |

## Installation

```
pip install mqttcore
```

To install with the test dependencies:

```
pip install "mqttcore[test]"
```

## Topic names and filters

`TopicName.is_valid()` and `TopicFilter.is_valid()` check a topic against section 4.7 of the MQTT standard. Both reject:

- empty topics,
- topics longer than 65535 UTF-16 code units,
- topics that contain NUL.

A topic name is also invalid if it contains a wildcard.

For a filter, the rules are:

- `#` must be the last level.
- `+` must occupy a level of its own.
- A shared subscription, `$share/<name>/<filter>`, needs a non-empty share name.

```python
from mqttcore.topicfilter import TopicFilter, MatchOption
from mqttcore.topicname import TopicName

TopicFilter("sport/tennis/player1/#").match(TopicName("sport/tennis/player1/ranking"))  # True
TopicFilter("sport/#").match("sport")                                                   # True
TopicFilter("sport/+").match(TopicName("sport"))                                        # False
TopicFilter("#").match(TopicName("$SYS/foo"))                                           # True
TopicFilter("#").match(TopicName("$SYS/foo"),
                       MatchOption.WILDCARDS_DONT_MATCH_DOLLAR_TOPIC)                   # False

TopicFilter("$share/group/topic").shared_subscription_name()                            # "group"
TopicFilter("a+").is_valid()                                                            # False

name = TopicName("a/b/c")
name.level_count()  # 3
name.levels()       # ["a", "b", "c"]
```

`match()` accepts either a `TopicName` or a plain string. It returns `False` whenever the name or the filter is invalid.

Both classes are frozen dataclasses. They are hashable and ordered by their text, so you can use them as dictionary keys or sort them.

## Control packets

`ControlPacket` holds a header byte and a payload. The payload is built with these methods:

- `append_byte`
- `append_uint16` and `append_uint32`, both big-endian
- `append_string`, which adds a 16-bit length prefix
- `append_raw`
- `append_variable_integer`

`serialize()` returns the header byte, then the remaining length as a variable byte integer, then the payload.

```python
from mqttcore.controlpacket import ControlPacket, PacketType, encode_variable_integer

packet = ControlPacket(PacketType.SUBACK)
packet.append_uint16(1)
packet.append_byte(1)
packet.serialize()              # b"\x90\x03\x00\x01\x01"

encode_variable_integer(128)    # b"\x80\x01"
```

`set_header()` replaces the header with `PacketType.UNKNOWN` in either case:

- the value lies outside `CONNECT`..`DISCONNECT`,
- the low nibble is set.

The append methods raise `ValueError` for a value that does not fit its width. `encode_variable_integer` raises `ValueError` for a negative value.

## MQTT 5.0 properties

In `PublishProperties`, every property you assign is recorded in `available_properties`:

```python
from mqttcore.publishproperties import PublishProperties, PublishPropertyDetail
from mqttcore.types import PayloadFormatIndicator, StringPair

props = PublishProperties()
props.payload_format_indicator = PayloadFormatIndicator.UTF8_ENCODED
props.message_expiry_interval = 60
props.user_properties = [StringPair("key", "value")]
PublishPropertyDetail.MESSAGE_EXPIRY_INTERVAL in props.available_properties  # True
```

`ConnectionProperties` starts with these defaults:

| Property | Default |
| --- | --- |
| `maximum_receive` | 65535 |
| `maximum_packet_size` | 4294967295 |
| `maximum_topic_alias` | 0 |
| `session_expiry_interval` | 0 |
| `request_response_information` | `False` |
| `request_problem_information` | `True` |

`ServerConnectionProperties` is filled in through keyword arguments to its constructor, and its server-side fields are read-only. It also inherits every property of `ConnectionProperties`.

The other property types are plain dataclasses:

- `LastWillProperties`
- `SubscriptionProperties`
- `UnsubscriptionProperties`
- `MessageStatusProperties`

### Invalid values

Some values are forbidden by the protocol. Setting one of them raises `ValueError` and leaves the previous value unchanged:

- a topic alias of 0,
- a subscription identifier list that contains 0,
- a maximum receive of 0,
- a maximum packet size of 0,
- a connection property outside its 16- or 32-bit range.

## Messages and subscriptions

`Message` is a frozen record of a received publication. It holds:

- the topic,
- the payload,
- the id,
- the QoS,
- the duplicate and retain flags,
- the publish properties.

Two messages compare equal only if they are the same object.

`Subscription` tracks the state of one topic filter. It offers three callback lists, each with `connect` and `disconnect`:

- `state_changed`
- `qos_changed`
- `message_received`

```python
from mqttcore.subscription import Subscription, SubscriptionState

class Client:
    def unsubscribe(self, topic):
        print("unsubscribe", topic)

with Subscription("sport/#", Client(), qos=1) as sub:
    sub.state_changed.connect(lambda state: print("state:", state.name))
    sub.set_state(SubscriptionState.SUBSCRIBED)
# leaving the block calls unsubscribe() because the subscription is still subscribed
```

`unsubscribe()` raises `RuntimeError` when no client is attached.

## What this package does not do

mqttcore contains no MQTT client. It does not:

- open network connections,
- talk to a broker,
- parse incoming packets,
- run a keep-alive or retransmission loop.

The `Subscription` and `ServerConnectionProperties` states and the `Message` objects are meant to be filled in by a client you write on top of these types.

## Running the tests

```
pytest
```