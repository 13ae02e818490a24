"""
Frontier observers for BFS progress.

Observers receive ``(labels, frontier)`` snapshots from
:func:`~socnet.graphs.traversal.shortest_path_distances` and
:func:`~socnet.graphs.components.connected_components`. They are meant for
logging or for feeding an external renderer; they never influence the
traversal.
"""

import logging
from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Tuple

from ..logging import get_logger
from .traversal import UNREACHED, DistanceLabeling


@dataclass
class FrontierRecorder:
    """
    Observer that stores every snapshot it receives.

    Useful for step-through rendering after the fact: ``snapshots[k]`` is the
    state after the k-th frontier was built (per traversal, in call order).

    Example:
        >>> recorder = FrontierRecorder()
        >>> dist = shortest_path_distances(G, 'A', observer=recorder)
        >>> recorder.frontiers()[0]
        ['A']
    """

    snapshots: List[Tuple[DistanceLabeling, List[Hashable]]] = field(default_factory=list)

    def __call__(self, labels: DistanceLabeling, frontier: List[Hashable]) -> None:
        self.snapshots.append((labels, frontier))

    def frontiers(self) -> List[List[Hashable]]:
        """Return the recorded frontiers in order."""
        return [frontier for _, frontier in self.snapshots]

    def clear(self) -> None:
        """Drop all recorded snapshots so the recorder can be reused."""
        self.snapshots.clear()


class LoggingObserver:
    """
    Observer that logs each frontier through the socnet logger.

    Args:
        level: Logging level for frontier messages (default: INFO).
        logger: Logger to use; defaults to this module's socnet logger.
    """

    def __init__(self, level: int = logging.INFO, logger: Optional[logging.Logger] = None):
        self.level = level
        self.logger = logger or get_logger(__name__)
        self._round = 0

    def __call__(self, labels: DistanceLabeling, frontier: List[Hashable]) -> None:
        # A frontier holding only a distance-0 node starts a new traversal
        if len(frontier) == 1 and labels.get(frontier[0]) == 0:
            self._round = 0
        reached = sum(1 for d in labels.values() if d != UNREACHED)
        self.logger.log(
            self.level,
            "round %d: frontier=%s (%d/%d reached)",
            self._round,
            frontier,
            reached,
            len(labels),
        )
        self._round += 1
