# detectobject/detection/__init__.py
from .rect import Rect, INVALID_RECT
from .detect_object import detect_objects_custom, detect_largest_object, detect_many_objects, find_largest_object

__all__ = ["Rect", "INVALID_RECT", "detect_objects_custom", "detect_largest_object",
           "detect_many_objects", "find_largest_object"]
