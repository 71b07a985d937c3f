"""MQTT building blocks: topic names and filters, control packets, MQTT 5.0 property types, messages and subscriptions."""

__version__ = "0.1.0"

__all__ = [
    "types",
    "topicname",
    "topicfilter",
    "controlpacket",
    "publishproperties",
    "subscriptionproperties",
    "connectionproperties",
    "message",
    "subscription",
]