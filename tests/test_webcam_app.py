import numpy as np
import pytest

pytest.importorskip("tkinter")
pytest.importorskip("PIL.ImageTk")

from detectobject.detection.config import with_overrides
from detectobject.detection.rect import Rect
from detectobject.realtime import app


def test_detect_frame_modes(fake_cascade):
    frame = np.zeros((10, 10, 3), dtype=np.uint8)
    boxes = [(1, 1, 3, 3), (5, 5, 2, 2)]
    assert app.detect_frame(fake_cascade(boxes), frame, "largest", 320) == [Rect(1, 1, 3, 3)]
    assert app.detect_frame(fake_cascade(boxes), frame, "many", 320) == [Rect(1, 1, 3, 3), Rect(5, 5, 2, 2)]
    assert app.detect_frame(fake_cascade(), frame, "largest", 320) == []
    with pytest.raises(ValueError):
        app.detect_frame(fake_cascade(boxes), frame, "all", 320)


def test_detect_frame_mode_is_case_insensitive(fake_cascade):
    frame = np.zeros((10, 10, 3), dtype=np.uint8)
    cascade = fake_cascade([(1, 1, 3, 3), (5, 5, 2, 2)])
    assert app.detect_frame(cascade, frame, "Largest", 320) == [Rect(1, 1, 3, 3)]


def test_run_webcam_camera_unavailable(mocker):
    mocker.patch.object(app, "HaarDetector")
    cap = mocker.patch.object(app.cv2, "VideoCapture").return_value
    cap.isOpened.return_value = False
    with pytest.raises(RuntimeError):
        app.run_webcam(with_overrides(camera_index=3))


def test_run_webcam_rejects_mode():
    with pytest.raises(ValueError):
        app.run_webcam(with_overrides(mode="all"))


@pytest.fixture
def tk_window(mocker):
    """Tk root whose after() runs the next frame callback right away; mainloop does nothing."""
    root = mocker.patch.object(app.tk, "Tk").return_value
    root.after.side_effect = lambda delay, fn: fn()
    mocker.patch.object(app.tk, "Label")
    mocker.patch.object(app, "ImageTk")
    return root


def _scripted_camera(mocker, n_frames):
    frame = np.zeros((240, 320, 3), dtype=np.uint8)
    cap = mocker.patch.object(app.cv2, "VideoCapture").return_value
    cap.isOpened.return_value = True
    cap.read.side_effect = [(True, frame.copy()) for _ in range(n_frames)] + [(False, None)]
    return cap


def test_run_webcam_detects_every_n_frames_and_caches(mocker, tk_window, fake_cascade):
    cascade = fake_cascade([(10, 10, 40, 40), (100, 50, 30, 30)])
    mocker.patch.object(app, "HaarDetector", return_value=cascade)
    cap = _scripted_camera(mocker, 5)
    draw = mocker.patch.object(app, "draw_boxes_with_labels")

    app.run_webcam(with_overrides(mode="many", detect_every_n=2, scaled_width=320))

    # frames 0, 2 and 4 run the detector, 1 and 3 reuse the cached boxes
    assert len(cascade.calls) == 3
    assert draw.call_count == 5
    expected = [Rect(10, 10, 40, 40), Rect(100, 50, 30, 30)]
    assert all(c.args[1] == expected for c in draw.call_args_list)

    # the failed read closes the window and the camera is released
    tk_window.destroy.assert_called_once()
    cap.release.assert_called_once()


def test_run_webcam_largest_mode_draws_one_box(mocker, tk_window, fake_cascade):
    cascade = fake_cascade([(10, 10, 40, 40), (100, 50, 30, 30)])
    mocker.patch.object(app, "HaarDetector", return_value=cascade)
    cap = _scripted_camera(mocker, 1)
    draw = mocker.patch.object(app, "draw_boxes_with_labels")

    app.run_webcam(with_overrides(mode="Largest", detect_every_n=1))

    assert draw.call_args.args[1] == [Rect(10, 10, 40, 40)]
    cap.release.assert_called_once()
