"""
Shared utility functions.
"""

from loggraph.utils.type_guards import (
    is_descriptor,
    is_descriptor_record,
    read_action_flag,
)

__all__ = [
    "is_descriptor",
    "is_descriptor_record",
    "read_action_flag",
]
