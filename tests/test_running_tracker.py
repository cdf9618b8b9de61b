import logging
import threading

from gridglide.running_tracker import RUNNING_TRACKER, RunningTracker


def test_new_tracker_is_running():
    assert RunningTracker().is_running() is True


def test_quit_stops_running():
    tracker = RunningTracker()
    tracker.quit("window closed")
    assert tracker.is_running() is False


def test_quit_is_idempotent():
    tracker = RunningTracker()
    tracker.quit("first")
    tracker.quit("second")
    assert tracker.is_running() is False


def test_quit_logs_reason(caplog):
    tracker = RunningTracker()
    with caplog.at_level(logging.INFO, logger="gridglide.running_tracker"):
        tracker.quit("window closed")
    assert "Quit window closed" in caplog.text


def test_quit_from_another_thread_is_seen():
    tracker = RunningTracker()
    worker = threading.Thread(target=tracker.quit, args=("worker",))
    worker.start()
    worker.join()
    assert tracker.is_running() is False


def test_trackers_are_independent():
    tracker = RunningTracker()
    tracker.quit("local")
    assert RUNNING_TRACKER is not tracker
    assert RunningTracker().is_running() is True