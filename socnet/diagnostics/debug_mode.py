"""
Debug mode for socnet.

When debug mode is on, every analysis re-checks its own result before
returning it:

- ``shortest_path_distances``: :func:`~socnet.diagnostics.core.assert_valid_labeling`
- ``connected_components``: :func:`~socnet.diagnostics.core.assert_partition`
- ``mutual_friends``: :func:`~socnet.diagnostics.core.assert_symmetric`
- ``triangle_counts``: :func:`~socnet.diagnostics.core.assert_valid_triangle_counts`

A failed check raises ``ValueError``. The initial state comes from the
``SOCNET_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "SOCNET_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(name: str) -> bool:
    """Parse a boolean environment flag; unset or unrecognised means False."""
    return os.getenv(name, "").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """
    Return whether the self-checks run after each analysis.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable the self-checks.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_mode() -> bool:
    """
    Re-read ``SOCNET_DEBUG`` and apply it, discarding manual overrides.

    Returns
    -------
    bool
        The resulting debug state.
    """
    set_debug_enabled(_flag_from_env(_DEBUG_ENV_VAR))
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily enable or disable the self-checks.

    The previous state is restored on exit, also when the block raises.

    Example
    -------
    >>> with debug_context(True):
    ...     labels = shortest_path_distances(G, 'A')  # checked
    """
    prev = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(prev)
