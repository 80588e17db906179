"""
Type guard utilities for external log records.

The causal-tracking subsystem that produces log records is not a
dependency of loggraph. These functions recognise its records by shape
instead of importing anything.
"""

from __future__ import annotations

from typing import Any

ACTION_FLAG_ATTRIBUTES = ("is_action", "isAction")


def read_action_flag(descriptor: Any) -> Any:
    """
    Return the descriptor's action discriminator, or None if it has none.

    Both the snake_case and camelCase spellings are accepted.
    """
    for attribute_name in ACTION_FLAG_ATTRIBUTES:
        if hasattr(descriptor, attribute_name):
            return getattr(descriptor, attribute_name)
    return None


def is_descriptor(candidate: Any) -> bool:
    """
    Check if the object looks like a record descriptor.

    Parameters
    ----------
    candidate : Any
        Object to check.

    Returns
    -------
    bool
        True if it has a string `name` and an action flag attribute.
    """
    has_name = isinstance(getattr(candidate, "name", None), str)
    has_flag = any(hasattr(candidate, attr) for attr in ACTION_FLAG_ATTRIBUTES)
    return has_name and has_flag


def is_descriptor_record(candidate: Any) -> bool:
    """
    Check if the object is a causal record carrying a descriptor.

    Such records expose `cause` (possibly None) and `proto`, the
    descriptor holding the display name and the action flag.
    """
    return hasattr(candidate, "cause") and is_descriptor(getattr(candidate, "proto", None))
