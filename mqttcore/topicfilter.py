"""MQTT topic filters and matching of topic names against them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from .topicname import TopicName

__all__ = ["MatchOption", "TopicFilter"]

_MAX_FILTER_LENGTH = 65535
_SHARE_PREFIX = "$share/"


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


class MatchOption(IntFlag):
    """Options that change how a filter matches topic names."""

    NO_MATCH_OPTION = 0x0000
    WILDCARDS_DONT_MATCH_DOLLAR_TOPIC = 0x0001


@dataclass(frozen=True, order=True)
class TopicFilter:
    """A topic filter as used when subscribing; it may hold wildcards."""

    filter: str = ""

    def __str__(self) -> str:
        return self.filter

    def shared_subscription_name(self) -> str:
        """Return the share name of a ``$share/name/filter`` filter, else ''."""
        if self.filter.startswith(_SHARE_PREFIX):
            return self.filter.split("/")[1]
        return ""

    def is_valid(self) -> bool:
        """Return whether the filter is valid per section 4.7 of the standard."""
        text = self.filter
        size = _utf16_length(text)
        if size == 0 or size > _MAX_FILTER_LENGTH or "\0" in text:
            return False
        if size == 1:
            return True

        length = len(text)
        # '#' must be last, on its own level, and appear at most once.
        multi = text.find("#")
        if multi != -1 and (multi != length - 1 or text[length - 2] != "/"):
            return False

        # '+' must occupy a level of its own.
        single = text.find("+")
        while single != -1:
            if (single != 0 and text[single - 1] != "/") or (
                single < length - 1 and text[single + 1] != "/"
            ):
                return False
            single = text.find("#", single + 1)

        # $share/shareName/filter needs a non-empty share name and a second '/'.
        if text.startswith(_SHARE_PREFIX):
            index = text.find("/", len(_SHARE_PREFIX))
            if index in (-1, len(_SHARE_PREFIX)):
                return False
        return True

    def match(
        self,
        name: TopicName | str,
        options: MatchOption = MatchOption.NO_MATCH_OPTION,
    ) -> bool:
        """Return whether the filter matches the topic name ``name``."""
        if isinstance(name, str):
            name = TopicName(name)
        if not name.is_valid() or not self.is_valid():
            return False

        topic = name.name
        text = self.filter
        if topic == text:
            return True

        if (
            options & MatchOption.WILDCARDS_DONT_MATCH_DOLLAR_TOPIC
            and topic.startswith("$")
            and (text.startswith("+") or text in ("#", "/#"))
        ):
            return False

        if text.endswith("#"):
            root = text[:-1]
            if not root:
                return True
            # '#' also matches the parent level.
            if root.endswith("/"):
                root = root[:-1]
            filter_levels = root.split("/")
            topic_levels = topic.split("/")
            if len(topic_levels) < len(filter_levels):
                return False
            return all(f == t for f, t in zip(filter_levels, topic_levels))

        if "+" in text:
            filter_levels = text.split("/")
            topic_levels = topic.split("/")
            if len(filter_levels) != len(topic_levels):
                return False
            return all(
                f == "+" or f == t for f, t in zip(filter_levels, topic_levels)
            )

        return False