import pytest

from chonk.app import FrameStats, InputState, main


def test_first_frame_weights_by_frequency():
    stats = FrameStats()
    stats.update(0.25)
    assert stats.fps == pytest.approx(1.0 / 0.25)
    assert stats.avg_fps == pytest.approx(stats.fps * stats.frequency)
    assert stats.avg_frame_time == pytest.approx(stats.frame_time * stats.frequency)


def test_frame_time_in_milliseconds():
    stats = FrameStats()
    stats.update(0.25)
    assert stats.frame_time == pytest.approx(250.0)


def test_averages_converge_for_steady_frames():
    stats = FrameStats()
    dt = 1.0 / 60.0
    for _ in range(1000):
        stats.update(dt)
    assert stats.avg_fps == pytest.approx(1.0 / dt, rel=1e-3)
    assert stats.avg_frame_time == pytest.approx(dt * 1000.0, rel=1e-3)


def test_averages_stay_between_old_and_new():
    stats = FrameStats()
    stats.update(0.01)
    before = stats.avg_fps
    stats.update(0.5)
    assert stats.fps < stats.avg_fps or stats.avg_fps < before


@pytest.mark.parametrize("dt", [0.0, -0.1])
def test_non_positive_frame_time_rejected(dt):
    stats = FrameStats()
    with pytest.raises(ValueError):
        stats.update(dt)


def test_lines_format():
    stats = FrameStats()
    stats.update(0.5)
    lines = stats.lines()
    assert lines[0] == "FPS: 2"
    assert lines[2] == "Frame Time: 500.000"
    assert len(lines) == 4


def test_toggle_mouse_lock_flips():
    state = InputState()
    assert state.toggle_mouse_lock() is True
    assert state.mouse_locked is True
    assert state.toggle_mouse_lock() is False
    assert state.mouse_locked is False


def test_camera_lock_releases_mouse():
    state = InputState()
    assert state.toggle_camera_lock() is True
    assert state.mouse_locked is False
    assert state.toggle_camera_lock() is False
    assert state.mouse_locked is True


def test_camera_lock_overrides_mouse_lock():
    state = InputState()
    state.toggle_mouse_lock()
    state.toggle_camera_lock()
    assert state.camera_locked is True
    assert state.mouse_locked is False


def test_main_rejects_bad_size():
    with pytest.raises(SystemExit) as excinfo:
        main(["--width", "0"])
    assert excinfo.value.code == 2