"""
Adapters that turn producer records into LogSequence objects.
"""

from loggraph.core.adapters.base_adapter import (
    AdapterCompatibilityError,
    BaseEntryAdapter,
)
from loggraph.core.adapters.descriptor_adapter import DescriptorRecordAdapter

__all__ = [
    "AdapterCompatibilityError",
    "BaseEntryAdapter",
    "DescriptorRecordAdapter",
]
