"""
Object detection helpers around an OpenCV cascade classifier (Haar or LBP).

Works for face detection, but also eyes, mouths, cars... whatever the cascade was trained on.
The input is temporarily shrunk to `scaled_width` for much faster detection, then the boxes
are mapped back to the original image and kept inside it.
"""
from typing import Any, Iterable, List, Optional, Protocol, Sequence, Tuple

import cv2
import numpy as np

from .config import LARGEST_OBJECT_PARAMS, MANY_OBJECTS_PARAMS, params_for_mode
from .rect import INVALID_RECT, Rect, clamp_rect, scale_rect


class CascadeLike(Protocol):
    """Anything with the cv2.CascadeClassifier.detectMultiScale call signature."""

    def detectMultiScale(self, image: np.ndarray, scaleFactor: float = ..., minNeighbors: int = ...,
                         flags: int = ..., minSize: Tuple[int, int] = ...) -> Iterable[Sequence[Any]]:
        ...


def to_gray(img: np.ndarray) -> np.ndarray:
    """
    Reduce a BGR / BGRA image to one channel. Single-channel input is returned as is.
    :param img: (H, W), (H, W, 1), (H, W, 3) or (H, W, 4) uint8 image.
    :return: Grayscale image.
    """
    channels = 1 if img.ndim == 2 else img.shape[2]
    if channels == 3:
        return cv2.cvtColor(img, cv2.COLOR_BGR2GRAY)
    if channels == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2GRAY)
    return img


def shrink_to_width(gray: np.ndarray, scaled_width: int) -> Tuple[np.ndarray, float]:
    """
    Shrink an image to scaled_width, keeping its aspect ratio.
    Images that are already narrow enough are not touched.
    :param gray: Grayscale image.
    :param scaled_width: Working width in pixels.
    :return: (working image, scale) where scale = original width / scaled_width,
             or 1.0 when no shrinking happened.
    """
    rows, cols = gray.shape[:2]
    scale = cols / float(scaled_width)
    if cols > scaled_width:
        scaled_height = int(round(rows / scale))
        return cv2.resize(gray, (scaled_width, scaled_height)), scale
    return gray, 1.0


def detect_objects_custom(img: np.ndarray, cascade: CascadeLike, scaled_width: int, flags: int,
                          min_feature_size: Tuple[int, int], search_scale_factor: float,
                          min_neighbors: int) -> List[Rect]:
    """
    Search for objects in the image using the given parameters.
    :param img: Input image, gray / BGR / BGRA. Not modified.
    :param cascade: Loaded cv2.CascadeClassifier (or anything with its detectMultiScale).
    :param scaled_width: Width the image is shrunk to before detection.
    :param flags: cv2.CASCADE_* search flags.
    :param min_feature_size: Smallest object size (w, h) in the shrunk image.
    :param search_scale_factor: Pyramid step, must be larger than 1.0.
    :param min_neighbors: How many overlapping hits are needed to keep a detection.
    :return: Rects in original image coordinates, in the order the detector returned them.
             An empty list when nothing was found.
    """
    gray = to_gray(img)
    small, scale = shrink_to_width(gray, scaled_width)

    # Standardize brightness and contrast to improve dark images.
    equalized = cv2.equalizeHist(small)

    found = cascade.detectMultiScale(
        equalized,
        scaleFactor=search_scale_factor,
        minNeighbors=min_neighbors,
        flags=flags,
        minSize=tuple(min_feature_size),
    )
    objects = [Rect.from_xywh(r) for r in found]

    # Enlarge the results if the image was temporarily shrunk.
    if img.shape[1] > scaled_width:
        objects = [scale_rect(r, scale) for r in objects]

    # Make sure the object is completely within the image, in case it was on a border.
    rows, cols = img.shape[:2]
    return [clamp_rect(r, cols, rows) for r in objects]


def detect_many_objects(img: np.ndarray, cascade: CascadeLike, scaled_width: int = 320) -> List[Rect]:
    """
    Search for many objects in the image, such as all the faces.
    :return: All rects found, possibly empty.
    """
    p = MANY_OBJECTS_PARAMS
    return detect_objects_custom(img, cascade, scaled_width, p.flags, p.min_feature_size,
                                 p.search_scale_factor, p.min_neighbors)


def detect_largest_object(img: np.ndarray, cascade: CascadeLike, scaled_width: int = 320) -> Rect:
    """
    Search for just a single object in the image, such as the largest face.
    Should be faster than detect_many_objects.
    :return: The first (largest) rect, or INVALID_RECT (-1, -1, -1, -1) if nothing was found.
    """
    p = LARGEST_OBJECT_PARAMS
    objects = detect_objects_custom(img, cascade, scaled_width, p.flags, p.min_feature_size,
                                    p.search_scale_factor, p.min_neighbors)
    if objects:
        return objects[0]
    return INVALID_RECT


def find_largest_object(img: np.ndarray, cascade: CascadeLike, scaled_width: int = 320) -> Optional[Rect]:
    """Same search as detect_largest_object, but returns None instead of INVALID_RECT."""
    rect = detect_largest_object(img, cascade, scaled_width)
    return rect if rect != INVALID_RECT else None


def detect_objects_for_mode(img: np.ndarray, cascade: CascadeLike, mode: str, scaled_width: int = 320) -> List[Rect]:
    """
    Run the preset search named by mode ("largest" or "many", any case).
    :return: All rects for "many"; at most the first rect for "largest" (empty when nothing was found).
    """
    p = params_for_mode(mode)
    objects = detect_objects_custom(img, cascade, scaled_width, p.flags, p.min_feature_size,
                                    p.search_scale_factor, p.min_neighbors)
    if p is LARGEST_OBJECT_PARAMS:
        return objects[:1]
    return objects
