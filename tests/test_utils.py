import cv2
import numpy as np
import pytest

from detectobject.detection.rect import INVALID_RECT, Rect
from detectobject.utils.io import load_image, save_image
from detectobject.utils.time_measure import measure_time
from detectobject.utils.viz import draw_boxes_with_labels, to_bgr


def test_save_and_load_keeps_channels(tmp_path):
    gray = np.full((10, 12), 77, dtype=np.uint8)
    path = str(tmp_path / "nested" / "gray.png")
    save_image(path, gray)
    back = load_image(path)
    assert back.shape == (10, 12)

    bgra = np.zeros((10, 12, 4), dtype=np.uint8)
    path = str(tmp_path / "bgra.png")
    save_image(path, bgra)
    assert load_image(path).shape == (10, 12, 4)


def test_load_missing_image(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_image(str(tmp_path / "missing.png"))


def test_draw_boxes_skips_invalid():
    img = np.zeros((50, 50, 3), dtype=np.uint8)
    draw_boxes_with_labels(img, [INVALID_RECT])
    assert not img.any()

    draw_boxes_with_labels(img, [Rect(5, 5, 20, 20)], ["face"], color=(0, 0, 255))
    assert tuple(img[5, 5]) == (0, 0, 255)


def test_to_bgr():
    assert to_bgr(np.zeros((4, 4), dtype=np.uint8)).shape == (4, 4, 3)
    assert to_bgr(np.zeros((4, 4, 4), dtype=np.uint8)).shape == (4, 4, 3)
    src = np.zeros((4, 4, 3), dtype=np.uint8)
    assert to_bgr(src) is not src


def test_measure_time():
    assert measure_time(0.25) == "250 ms"
    assert measure_time(45) == "45s"
    assert measure_time(83) == "1m 23s"
    assert measure_time(3600 + 83) == "1h 1m 23s"


def test_load_16bit_image_as_uint8(tmp_path):
    deep = np.tile(np.linspace(0, 65535, 64).astype(np.uint16), (8, 1))
    path = str(tmp_path / "deep.png")
    cv2.imwrite(path, deep)
    img = load_image(path)
    assert img.dtype == np.uint8
    assert img.shape == (8, 64)
    assert img.min() == 0 and img.max() == 255


def test_measure_time_keeps_zero_middle_unit():
    assert measure_time(3605) == "1h 0m 5s"
