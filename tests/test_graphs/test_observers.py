"""Tests for frontier observers."""

import logging
from io import StringIO

from socnet.graphs import FrontierRecorder, LoggingObserver, UNREACHED, shortest_path_distances


def test_recorder_collects_snapshots(friends_graph):
    """Test that the recorder keeps every (labels, frontier) pair."""
    recorder = FrontierRecorder()
    dist = shortest_path_distances(friends_graph, 1, observer=recorder)

    assert recorder.frontiers() == [[1], [2, 3, 4], [5], [6, 7], [8, 9], []]
    final_labels, final_frontier = recorder.snapshots[-1]
    assert final_frontier == []
    assert final_labels == dist


def test_recorder_snapshots_are_independent(friends_graph):
    """Test that later rounds do not rewrite earlier snapshots."""
    recorder = FrontierRecorder()
    shortest_path_distances(friends_graph, 1, observer=recorder)

    first_labels, _ = recorder.snapshots[0]
    assert first_labels[5] == UNREACHED
    assert recorder.snapshots[2][0][5] == 2


def test_recorder_clear(friends_graph):
    """Test resetting the recorder."""
    recorder = FrontierRecorder()
    shortest_path_distances(friends_graph, 9, observer=recorder)
    recorder.clear()
    assert recorder.snapshots == []


def test_logging_observer_output(friends_graph):
    """Test that each round is logged with its frontier."""
    stream = StringIO()
    logger = logging.getLogger("socnet.tests.observer")
    logger.handlers.clear()
    logger.addHandler(logging.StreamHandler(stream))
    logger.setLevel(logging.INFO)
    logger.propagate = False

    observer = LoggingObserver(level=logging.INFO, logger=logger)
    shortest_path_distances(friends_graph, 1, observer=observer)

    lines = stream.getvalue().splitlines()
    assert len(lines) == 6
    assert lines[0] == "round 0: frontier=[1] (1/9 reached)"
    assert lines[1] == "round 1: frontier=[2, 3, 4] (4/9 reached)"
    assert lines[-1] == "round 5: frontier=[] (9/9 reached)"


def test_logging_observer_restarts_round_count(components_graph):
    """Test that a new traversal restarts the round counter."""
    stream = StringIO()
    logger = logging.getLogger("socnet.tests.observer_restart")
    logger.handlers.clear()
    logger.addHandler(logging.StreamHandler(stream))
    logger.setLevel(logging.INFO)
    logger.propagate = False

    observer = LoggingObserver(logger=logger)
    shortest_path_distances(components_graph, 10, observer=observer)
    shortest_path_distances(components_graph, 7, observer=observer)

    lines = stream.getvalue().splitlines()
    assert lines[0].startswith("round 0: frontier=[10]")
    assert "round 0: frontier=[7] (1/11 reached)" in lines


def test_recorder_reuse_after_clear(friends_graph, components_graph):
    """Test that a cleared recorder only holds the next traversal."""
    recorder = FrontierRecorder()
    shortest_path_distances(friends_graph, 1, observer=recorder)
    recorder.clear()
    shortest_path_distances(components_graph, 10, observer=recorder)
    assert recorder.frontiers() == [[10], [11], []]
