"""
exifmeta-core - EXIF metadata extraction and GPS resolution

This library provides:
- EXIF metadata extraction (camera, image, date/time blocks)
- GPS coordinate resolution to decimal degrees
- Shutter speed formatting
- Input validation (JPEG, TIFF, HEIC/HEIF)

Example:
    >>> from exifmeta_core import extract_image_metadata
    >>> from pathlib import Path
    >>> 
    >>> result = extract_image_metadata(Path("photo.jpg"))
    >>> if result.success:
    ...     print(f"Camera: {result.data.camera_label}")
    ...     print(f"GPS: {result.data.gps}")
"""

import logging

from .version import __version__

# Exceptions
from .exceptions import ExifDecodeError, ExifMetaError

# Metadata extraction
from .metadata import (
    ExifDecoder,
    ExifTag,
    MetadataAssembler,
    dms_to_decimal,
    extract_number,
    extract_string,
    format_shutter_speed,
    parse_gps_coordinates,
)

# Image formats
from .image import FormatDetector, ImageFormat

# Models
from .models import (
    CameraInfo,
    DateTimeInfo,
    ExtractionError,
    ExtractionFailure,
    ExtractionOptions,
    ExtractionResult,
    GPSCoordinates,
    GPSResult,
    ImageInfo,
    ImageMetadata,
)

# Validation
from .validation import InputValidator

# High-level API
from .api import batch_extract, extract_gps_only, extract_image_metadata, has_gps_data

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ExifMetaError",
    "ExifDecodeError",
    # Metadata
    "ExifDecoder",
    "ExifTag",
    "MetadataAssembler",
    "dms_to_decimal",
    "extract_number",
    "extract_string",
    "format_shutter_speed",
    "parse_gps_coordinates",
    # Image
    "ImageFormat",
    "FormatDetector",
    # Models
    "GPSCoordinates",
    "CameraInfo",
    "ImageInfo",
    "DateTimeInfo",
    "ImageMetadata",
    "ExtractionError",
    "ExtractionFailure",
    "ExtractionOptions",
    "ExtractionResult",
    "GPSResult",
    # Validation
    "InputValidator",
    # High-level API
    "extract_image_metadata",
    "extract_gps_only",
    "has_gps_data",
    "batch_extract",
]
