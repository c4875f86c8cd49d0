"""Data models for exifmeta-core"""

from .metadata import (
    CameraInfo,
    DateTimeInfo,
    GPSCoordinates,
    ImageInfo,
    ImageMetadata,
    is_valid_coordinate,
)
from .result import (
    ExtractionError,
    ExtractionFailure,
    ExtractionOptions,
    ExtractionResult,
    GPSResult,
)

__all__ = [
    "GPSCoordinates",
    "CameraInfo",
    "ImageInfo",
    "DateTimeInfo",
    "ImageMetadata",
    "is_valid_coordinate",
    "ExtractionError",
    "ExtractionFailure",
    "ExtractionOptions",
    "ExtractionResult",
    "GPSResult",
]
