# detectobject/realtime/__init__.py
from .HaarDetector import HaarDetector

__all__ = ["HaarDetector"]
