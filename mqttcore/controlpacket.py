"""Building and serializing MQTT control packets."""

from __future__ import annotations

import logging
from enum import IntEnum

__all__ = ["PacketType", "ControlPacket", "encode_variable_integer"]

logger = logging.getLogger(__name__)

_MAX_VARIABLE_INTEGER = 268435455


class PacketType(IntEnum):
    """Control packet types, stored in the high nibble of the header byte."""

    UNKNOWN = 0x00
    CONNECT = 0x10
    CONNACK = 0x20
    PUBLISH = 0x30
    PUBACK = 0x40
    PUBREC = 0x50
    PUBREL = 0x60
    PUBCOMP = 0x70
    SUBSCRIBE = 0x80
    SUBACK = 0x90
    UNSUBSCRIBE = 0xA0
    UNSUBACK = 0xB0
    PINGREQ = 0xC0
    PINGRESP = 0xD0
    DISCONNECT = 0xE0
    AUTH = 0xF0


def encode_variable_integer(value: int) -> bytes:
    """Encode ``value`` as an MQTT variable byte integer."""
    if value < 0:
        raise ValueError("variable integer must not be negative")
    if value > _MAX_VARIABLE_INTEGER:
        logger.debug("Attempting to write variable integer overflow.")
    out = bytearray()
    while True:
        byte = value % 128
        value //= 128
        if value > 0:
            byte |= 0x80
        out.append(byte)
        if value == 0:
            return bytes(out)


def _check_range(value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"value {value} does not fit in {bits} unsigned bits")


class ControlPacket:
    """A control packet: one header byte followed by a payload."""

    def __init__(self, header: int = 0, payload: bytes = b"") -> None:
        self.header = header
        self.payload = bytearray(payload)

    def __repr__(self) -> str:
        return f"ControlPacket(header=0x{self.header:02x}, payload={bytes(self.payload)!r})"

    def clear(self) -> None:
        """Reset header and payload."""
        self.header = 0
        self.payload.clear()

    def set_header(self, header: int) -> None:
        """Set the header, falling back to UNKNOWN for invalid values."""
        if (
            header < PacketType.CONNECT
            or header > PacketType.DISCONNECT
            or header & 0x0F
        ):
            self.header = PacketType.UNKNOWN
        else:
            self.header = header

    def append_byte(self, value: int | bytes) -> None:
        """Append a single byte."""
        if isinstance(value, (bytes, bytearray)):
            if len(value) != 1:
                raise ValueError("expected exactly one byte")
            self.payload += value
            return
        if -128 <= value < 0:
            value &= 0xFF
        _check_range(value, 8)
        self.payload.append(value)

    def append_uint16(self, value: int) -> None:
        """Append a big-endian 16-bit unsigned integer."""
        _check_range(value, 16)
        self.payload += value.to_bytes(2, "big")

    def append_uint32(self, value: int) -> None:
        """Append a big-endian 32-bit unsigned integer."""
        _check_range(value, 32)
        self.payload += value.to_bytes(4, "big")

    def append_string(self, data: bytes) -> None:
        """Append ``data`` prefixed by its 16-bit length."""
        self.append_uint16(len(data))
        self.payload += data

    def append_raw(self, data: bytes) -> None:
        """Append ``data`` without a length prefix."""
        self.payload += data

    def append_variable_integer(self, value: int) -> None:
        """Append ``value`` as a variable byte integer."""
        self.append_raw(encode_variable_integer(value))

    def serialize(self) -> bytes:
        """Return the whole packet: header, remaining length and payload."""
        return bytes([self.header & 0xFF]) + self.serialize_payload()

    def serialize_payload(self) -> bytes:
        """Return the remaining length followed by the payload."""
        size = len(self.payload)
        if size > _MAX_VARIABLE_INTEGER:
            logger.debug("Publishing a message bigger than maximum size.")
        return encode_variable_integer(size) + bytes(self.payload)