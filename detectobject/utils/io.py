import os
import cv2
import numpy as np


def ensure_dir(path: str) -> None:
    """
    Ensure that the directory exists, creating it if necessary.
    If the directory already exists (or path is empty), this function does nothing.
    :param path: The directory path to ensure.
    """
    if path:
        os.makedirs(path, exist_ok=True)


def load_image(path: str) -> np.ndarray:
    """
    Read an image from disk, keeping its channel count (gray, BGR or BGRA).
    16-bit and float files are stretched down to 8 bit, which is what the detector works on.
    :param path: The image file path.
    :return: uint8 image array.
    """
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise FileNotFoundError(f"Could not read image at {path}")
    if img.dtype != np.uint8:
        img = cv2.normalize(img, None, 0, 255, cv2.NORM_MINMAX, dtype=cv2.CV_8U)
    return img


def save_image(path: str, img: np.ndarray) -> None:
    """
    Write an image to disk, creating the parent directory first.
    :param path: The destination file path; the extension picks the format.
    :param img: The image to write.
    """
    ensure_dir(os.path.dirname(path))
    if not cv2.imwrite(path, img):
        raise RuntimeError(f"Could not write image to {path}")
