"""Image format module"""

from .formats import FormatDetector, ImageFormat

__all__ = ["ImageFormat", "FormatDetector"]
