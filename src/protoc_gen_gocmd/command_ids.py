"""
Command identifier allocation.

Identifiers are derived from the application id and the sorted message list
only, so every run over the same schema assigns the same numbers and every
target sees the same table.
"""
from typing import Dict, Iterable

from .errors import AllocationError

APP_ID_STRIDE = 0x1000
SHIFT_BITS = 4


def base_offset(app_id: int, message_count: int) -> int:
    """First free identifier block for a file.

    Starts at ``0x1000 * app_id`` and moves one hex digit to the left until
    the block is at least as wide as the number of messages in the file.
    """
    if app_id < 0:
        raise AllocationError(f"application id must not be negative: {app_id}")
    base = APP_ID_STRIDE * app_id
    while base < message_count:
        # app id 0 would never grow past the message count
        base = (base << SHIFT_BITS) or 1
    return base


def number_messages(names: Iterable[str], base: int) -> Dict[str, int]:
    """Give ``names`` consecutive identifiers starting at ``base + 1``."""
    ids = {}
    next_id = base + 1
    for name in names:
        ids[name] = next_id
        next_id += 1
    return ids


def allocate_command_ids(file) -> Dict[str, int]:
    """Map every command-type message of ``file`` to its identifier.

    ``file.messages`` is already sorted by name; non-command messages count
    towards the block width but do not consume an identifier.
    """
    base = base_offset(file.app_id, len(file.messages))
    return number_messages((m.name for m in file.command_messages), base)
