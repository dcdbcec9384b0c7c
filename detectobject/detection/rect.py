from typing import NamedTuple, Sequence


class Rect(NamedTuple):
    """
    Axis-aligned box in pixel coordinates, (x, y, width, height).
    Same layout as the (x, y, w, h) rows returned by cv2.CascadeClassifier.detectMultiScale.
    """
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def from_xywh(cls, box: Sequence[int]) -> "Rect":
        """
        Build a Rect from any 4-element (x, y, w, h) row, numpy ints included.
        :param box: Sequence of four numbers.
        :return: Rect with plain Python ints.
        """
        x, y, w, h = box
        return cls(int(x), int(y), int(w), int(h))

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def area(self) -> int:
        return self.width * self.height


# returned by the single-object routines when nothing was found
INVALID_RECT = Rect(-1, -1, -1, -1)


def scale_rect(rect: Rect, scale: float) -> Rect:
    """
    Map a rect from the shrunk working image back to the original image.
    Every field is multiplied by scale and rounded to the nearest integer
    (ties to even, same as cvRound).
    :param rect: Rect in working-image coordinates.
    :param scale: original width / working width.
    :return: Rect in original-image coordinates.
    """
    return Rect(
        int(round(rect.x * scale)),
        int(round(rect.y * scale)),
        int(round(rect.width * scale)),
        int(round(rect.height * scale)),
    )


def clamp_rect(rect: Rect, img_width: int, img_height: int) -> Rect:
    """
    Keep a rect inside the image by shifting it, never by resizing it.
    - negative x / y become 0
    - a box running past the right / bottom edge is moved back so it ends on that edge
    :param rect: Rect in original-image coordinates.
    :param img_width: Image width in pixels.
    :param img_height: Image height in pixels.
    :return: The shifted Rect (width and height unchanged).
    """
    x, y, w, h = rect
    if x < 0:
        x = 0
    if y < 0:
        y = 0
    if x + w > img_width:
        x = img_width - w
    if y + h > img_height:
        y = img_height - h
    return Rect(x, y, w, h)
