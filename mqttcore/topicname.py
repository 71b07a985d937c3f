"""MQTT topic names."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["TopicName"]

_MAX_TOPIC_LENGTH = 65535


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


@dataclass(frozen=True, order=True)
class TopicName:
    """A topic name as used when publishing; it never holds wildcards."""

    name: str = ""

    def __str__(self) -> str:
        return self.name

    def is_valid(self) -> bool:
        """Return whether the name is valid per section 4.7 of the standard."""
        size = _utf16_length(self.name)
        return (
            0 < size <= _MAX_TOPIC_LENGTH
            and "#" not in self.name
            and "+" not in self.name
            and "\0" not in self.name
        )

    def level_count(self) -> int:
        """Return the total number of topic levels."""
        if not self.name:
            return 0
        return self.name.count("/") + 1

    def levels(self) -> list[str]:
        """Return the topic levels, keeping empty ones."""
        return self.name.split("/")