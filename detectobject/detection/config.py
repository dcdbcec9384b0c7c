# detectobject/detection/config.py
import os
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

import cv2

DEFAULT_CASCADE = "haarcascade_frontalface_default.xml"


def default_cascade_path(name: str = DEFAULT_CASCADE) -> str:
    """
    Path of a cascade bundled with opencv-python.
    :param name: Cascade file name, e.g. 'haarcascade_eye.xml' or 'lbpcascade_frontalface.xml'.
    :return: Path inside cv2.data.haarcascades.
    """
    return os.path.join(getattr(cv2.data, "haarcascades", ""), name)


@dataclass(frozen=True)
class DetectionParams:
    flags: int
    min_feature_size: Tuple[int, int] = (20, 20)  # smallest object size
    search_scale_factor: float = 1.1  # how detailed the search is, must be > 1.0
    # 2 -> lots of good+bad detections, 6 -> only good ones but some are missed
    min_neighbors: int = 4


# Only search for 1 object (the biggest in the image).
LARGEST_OBJECT_PARAMS = DetectionParams(flags=cv2.CASCADE_FIND_BIGGEST_OBJECT)
# Search for many objects in the one image.
MANY_OBJECTS_PARAMS = DetectionParams(flags=cv2.CASCADE_SCALE_IMAGE)

MODES = ("largest", "many")


def params_for_mode(mode: str) -> DetectionParams:
    mode = mode.lower()
    if mode == "largest":
        return LARGEST_OBJECT_PARAMS
    if mode == "many":
        return MANY_OBJECTS_PARAMS
    raise ValueError(f"Unknown detection mode: {mode}")


@dataclass
class DetectConfig:
    # --- detector ---
    cascade_path: str = default_cascade_path()
    # input is shrunk to this width before detection; 200-320 is plenty for faces
    scaled_width: int = 320
    mode: str = "largest"  # "largest" or "many"

    # --- webcam ---
    camera_index: int = 0  # 0 = default camera
    detect_every_n: int = 2  # run detector every N frames for speed
    box_thickness: int = 2
    window_title: str = "Object Detection"


def default_config() -> DetectConfig:
    return DetectConfig()


def with_overrides(base: Optional[DetectConfig] = None, **over: Any) -> DetectConfig:
    cfg = base or default_config()
    return replace(cfg, **over)
