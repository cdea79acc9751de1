"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum


class MessageStatus(IntEnum):
    """Bridge message status as stored by the destination bridge contract."""

    NEW = 0
    RETRIABLE = 1
    DONE = 2
    FAILED = 3


def parse_message_status(value: int) -> MessageStatus | int:
    """Return the matching ``MessageStatus``, or ``value`` itself when it is unknown."""

    try:
        return MessageStatus(value)
    except ValueError:
        return value
