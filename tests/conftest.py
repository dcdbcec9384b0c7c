"""
Shared fixtures: a scripted stand-in for cv2.CascadeClassifier and a few synthetic images.
"""
import numpy as np
import pytest


class FakeCascade:
    """
    Records every detectMultiScale call and replays fixed boxes,
    in the working image's coordinate space.
    """

    def __init__(self, boxes=()):
        self.boxes = [tuple(b) for b in boxes]
        self.calls = []

    def detectMultiScale(self, image, scaleFactor=1.1, minNeighbors=3, flags=0, minSize=(0, 0)):
        self.calls.append({
            "image": image.copy(),
            "scaleFactor": scaleFactor,
            "minNeighbors": minNeighbors,
            "flags": flags,
            "minSize": minSize,
        })
        return np.array(self.boxes, dtype=np.int32).reshape(-1, 4) if self.boxes else ()


@pytest.fixture
def fake_cascade():
    return FakeCascade


@pytest.fixture
def bgr_400x300():
    rng = np.random.default_rng(1337)
    return rng.integers(0, 256, size=(300, 400, 3), dtype=np.uint8)


@pytest.fixture
def gray_gradient():
    # 120 x 160, horizontal gradient with a narrow range so equalization visibly changes it
    row = np.linspace(100, 140, 160).astype(np.uint8)
    return np.tile(row, (120, 1))
