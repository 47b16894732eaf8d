"""IoU-based tracking of detected objects across frames, with PNG rendering."""

__version__ = "0.1.0"
__all__ = ["__version__"]