import cv2
import numpy as np
from typing import List, Optional, Tuple

from ..detection.config import default_cascade_path
from ..detection.detect_object import detect_largest_object, detect_many_objects
from ..detection.rect import Rect


class HaarDetector:
    """
    Owns a loaded cv2.CascadeClassifier. Not safe to share between threads.
    """

    def __init__(self, cascade_path: Optional[str] = None):
        self.cascade_path = cascade_path or default_cascade_path()
        self.detector = cv2.CascadeClassifier(self.cascade_path)
        if self.detector.empty():
            raise FileNotFoundError(f"Could not load cascade at {self.cascade_path}")

    def detectMultiScale(self, image: np.ndarray, scaleFactor: float = 1.1, minNeighbors: int = 4,
                         flags: int = cv2.CASCADE_SCALE_IMAGE,
                         minSize: Tuple[int, int] = (20, 20)) -> List[Tuple[int, int, int, int]]:
        # returns list of (x,y,w,h)
        found = self.detector.detectMultiScale(
            image,
            scaleFactor=scaleFactor,
            minNeighbors=minNeighbors,
            flags=flags,
            minSize=minSize,
        )
        boxes = [(int(x), int(y), int(w), int(h)) for (x, y, w, h) in found]
        # new-style cascades ignore FIND_BIGGEST_OBJECT, so put the biggest first ourselves
        if flags & cv2.CASCADE_FIND_BIGGEST_OBJECT:
            boxes.sort(key=lambda b: b[2] * b[3], reverse=True)
        return boxes

    def largest(self, img: np.ndarray, scaled_width: int = 320) -> Rect:
        return detect_largest_object(img, self, scaled_width)

    def many(self, img: np.ndarray, scaled_width: int = 320) -> List[Rect]:
        return detect_many_objects(img, self, scaled_width)
