"""
Image Format Detection
"""

import os
from enum import Enum
from typing import Optional, Set, Union


class ImageFormat(Enum):
    """Formats that carry EXIF metadata we can extract"""
    JPEG = "JPEG"
    TIFF = "TIFF"
    HEIC = "HEIC"  # Apple
    HEIF = "HEIF"


class FormatDetector:
    """Detect and validate image formats from file names"""

    SUPPORTED_EXTENSIONS: Set[str] = {
        '.jpg', '.jpeg', '.tiff', '.tif', '.heic', '.heif'
    }

    FORMAT_MAP = {
        '.jpg': ImageFormat.JPEG,
        '.jpeg': ImageFormat.JPEG,
        '.tiff': ImageFormat.TIFF,
        '.tif': ImageFormat.TIFF,
        '.heic': ImageFormat.HEIC,
        '.heif': ImageFormat.HEIF,
    }

    @staticmethod
    def extension(file_name: Union[str, os.PathLike]) -> str:
        """Lower-cased extension including the dot ('' if none)"""
        return os.path.splitext(os.fspath(file_name))[1].lower()

    @staticmethod
    def detect_format(file_name: Union[str, os.PathLike]) -> Optional[ImageFormat]:
        """
        Detect format from file extension.

        Args:
            file_name: File name or path

        Returns:
            ImageFormat enum or None if unsupported
        """
        return FormatDetector.FORMAT_MAP.get(FormatDetector.extension(file_name))

    @staticmethod
    def is_supported(file_name: Union[str, os.PathLike]) -> bool:
        """
        Check if format is supported (case-insensitive).

        Args:
            file_name: File name or path

        Returns:
            True if format is supported
        """
        return FormatDetector.extension(file_name) in FormatDetector.SUPPORTED_EXTENSIONS
