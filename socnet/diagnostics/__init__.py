"""Diagnostics and debugging utilities for socnet."""

from .core import (
    assert_partition,
    assert_symmetric,
    assert_valid_labeling,
    assert_valid_triangle_counts,
    is_partition,
    is_symmetric,
    is_valid_labeling,
    is_valid_triangle_counts,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_mode,
    set_debug_enabled,
)

__all__ = [
    "is_valid_labeling",
    "assert_valid_labeling",
    "is_partition",
    "assert_partition",
    "is_symmetric",
    "assert_symmetric",
    "is_valid_triangle_counts",
    "assert_valid_triangle_counts",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_mode",
    "debug_context",
]
