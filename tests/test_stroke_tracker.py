import pytest

from core.geometry import Point
from core.repaint import RepaintScheduler
from core.stroke_tracker import StrokeTracker


def make_tracker(tolerance=5.0):
    committed = []
    repaint = RepaintScheduler()
    tracker = StrokeTracker(tolerance, on_segment=committed.append, request_repaint=repaint.request)
    return tracker, committed, repaint


def test_jitter_below_tolerance_is_ignored():
    tracker, committed, repaint = make_tracker(5.0)
    tracker.on_start(10, 10)
    assert tracker.on_move(12, 11) is None
    assert tracker.on_move(14.9, 5.1) is None
    assert committed == []
    assert tracker.anchor == Point(10, 10)
    assert tracker.path.is_empty
    assert not repaint.pending


def test_first_accepted_move_commits_half_step_curve():
    tracker, committed, repaint = make_tracker(5.0)
    tracker.on_start(10, 10)
    tracker.on_move(12, 11)
    segment = tracker.on_move(20, 10)

    assert committed == [segment]
    assert segment.start == Point(10, 10)
    assert segment.control == Point(10, 10)
    assert segment.end == Point(15, 10)
    assert tracker.anchor == Point(20, 10)
    assert repaint.pending


def test_segments_chain_from_previous_end():
    tracker, committed, _ = make_tracker(5.0)
    tracker.on_start(10, 10)
    tracker.on_move(20, 10)
    second = tracker.on_move(30, 20)

    assert len(committed) == 2
    assert second.start == committed[0].end
    assert second.control == Point(20, 10)
    assert second.end == Point(25, 15)
    assert len(tracker.path) == 2


def test_displacement_equal_to_tolerance_is_accepted():
    tracker, committed, _ = make_tracker(5.0)
    tracker.on_start(0, 0)
    tracker.on_move(5, 0)
    assert len(committed) == 1


def test_one_axis_over_tolerance_is_enough():
    tracker, committed, _ = make_tracker(5.0)
    tracker.on_start(0, 0)
    tracker.on_move(1, 7)
    assert len(committed) == 1
    assert tracker.anchor == Point(1, 7)


def test_start_then_end_commits_nothing():
    tracker, committed, repaint = make_tracker()
    tracker.on_start(3, 4)
    tracker.on_end()
    assert committed == []
    assert repaint.request_count == 0
    assert tracker.path.is_empty
    assert not tracker.is_active


def test_end_clears_path_without_repaint():
    tracker, committed, repaint = make_tracker()
    tracker.on_start(0, 0)
    tracker.on_move(10, 10)
    repaint.consume()
    tracker.on_end()
    assert tracker.path.is_empty
    assert len(committed) == 1
    assert not repaint.pending


def test_restart_discards_path_without_committing():
    tracker, committed, _ = make_tracker()
    tracker.on_start(0, 0)
    tracker.on_move(10, 0)
    tracker.on_move(20, 0)
    assert len(committed) == 2

    tracker.on_start(100, 100)
    assert len(committed) == 2
    assert tracker.path.is_empty
    assert tracker.anchor == Point(100, 100)
    assert tracker.path.current_point == Point(100, 100)

    segment = tracker.on_move(110, 100)
    assert segment.start == Point(100, 100)


def test_move_outside_a_stroke_is_ignored():
    tracker, committed, _ = make_tracker()
    assert tracker.on_move(50, 50) is None
    tracker.on_start(0, 0)
    tracker.on_end()
    assert tracker.on_move(50, 50) is None
    assert committed == []


def test_tracker_without_sinks_still_tracks():
    tracker = StrokeTracker(1.0)
    tracker.on_start(0, 0)
    assert tracker.on_move(4, 0) is not None
    assert tracker.anchor == Point(4, 0)


@pytest.mark.parametrize("tolerance", [0, -1.5])
def test_tolerance_must_be_positive(tolerance):
    with pytest.raises(ValueError):
        StrokeTracker(tolerance)
