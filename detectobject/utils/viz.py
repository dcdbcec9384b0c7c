import cv2, numpy as np
from typing import Optional, Sequence, Tuple

from ..detection.rect import Rect


def draw_label(img, text: str, x: int, y: int, color: Tuple[int, int, int] = (0, 255, 0)):
    """
    Draw a label on the image just above the given position.
    :param img: The image on which to draw the label.
    :param text: The label text to draw.
    :param x: The x-coordinate for the label position.
    :param y: The y-coordinate for the label position.
    :param color: BGR text color.
    """
    cv2.putText(img, text, (x, max(y - 8, 12)), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 2, cv2.LINE_AA)


def draw_boxes_with_labels(img, boxes: Sequence[Sequence[int]], labels: Optional[Sequence[str]] = None,
                           color: Tuple[int, int, int] = (0, 255, 0), thickness: int = 2):
    """
    Draw bounding boxes and optional labels on the image, in place.
    Boxes with a non-positive size (e.g. INVALID_RECT) are skipped.
    :param img: BGR image on which to draw.
    :param boxes: A sequence of bounding boxes, each defined as (x, y, w, h).
    :param labels: Labels matching boxes, or None for no text.
    :param color: BGR box color.
    :param thickness: Line thickness in pixels.
    :return: The image with drawn boxes and labels.
    """
    if labels is None:
        labels = [None] * len(boxes)
    for box, lab in zip(boxes, labels):
        r = Rect.from_xywh(box)
        if not r.is_valid():
            continue
        cv2.rectangle(img, (r.x, r.y), (r.x + r.width, r.y + r.height), color, thickness)
        if lab:
            draw_label(img, lab, r.x, r.y, color)
    return img


def to_bgr(img: np.ndarray) -> np.ndarray:
    """Return a 3-channel BGR copy of a gray / BGR / BGRA image, ready to draw on in color."""
    if img.ndim == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)
    return img.copy()
