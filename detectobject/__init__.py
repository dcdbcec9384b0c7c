# detectobject/__init__.py
from .detection import (Rect, INVALID_RECT, detect_objects_custom, detect_largest_object,
                        detect_many_objects, find_largest_object)
from .realtime.HaarDetector import HaarDetector

__all__ = ["Rect", "INVALID_RECT", "detect_objects_custom", "detect_largest_object",
           "detect_many_objects", "find_largest_object", "HaarDetector"]
