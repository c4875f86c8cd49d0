"""
Extraction Result Model

Represents the outcome of extracting metadata from a single image.
Failures are returned as data, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .metadata import GPSCoordinates, ImageMetadata


class ExtractionError(Enum):
    """Kinds of extraction failure"""
    INVALID_FILE = "INVALID_FILE"
    UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
    NO_EXIF_DATA = "NO_EXIF_DATA"
    CORRUPTED_DATA = "CORRUPTED_DATA"
    GPS_PARSING_ERROR = "GPS_PARSING_ERROR"


@dataclass(frozen=True)
class ExtractionOptions:
    """
    Options for metadata extraction.

    Attributes:
        include_raw_exif: Attach the decoded tag groups to the result
        validate_gps: Fail with GPS_PARSING_ERROR on out-of-range coordinates
                      instead of dropping GPS
        custom_fields: Reserved, currently unused
    """
    include_raw_exif: bool = False
    validate_gps: bool = False
    custom_fields: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExtractionOptions':
        """Create from dictionary, accepting camelCase or snake_case keys"""
        aliases = {
            'includeRawExif': 'include_raw_exif',
            'validateGPS': 'validate_gps',
            'customFields': 'custom_fields',
        }
        values = {}
        for key, value in data.items():
            name = aliases.get(key, key)
            if name not in ('include_raw_exif', 'validate_gps', 'custom_fields'):
                raise ValueError(f"Unknown extraction option: {key}")
            if name == 'custom_fields':
                value = tuple(value or ())
            else:
                value = bool(value)
            values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class ExtractionFailure:
    """Why an extraction failed"""
    kind: ExtractionError
    message: str


@dataclass(frozen=True)
class ExtractionResult:
    """
    Result from extracting metadata from a single image.

    Exactly one of data/error is populated.
    """
    success: bool
    data: Optional[ImageMetadata] = None
    error: Optional[ExtractionFailure] = None

    def __post_init__(self):
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("Successful result must carry data and no error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("Failed result must carry an error and no data")

    @classmethod
    def ok(cls, data: ImageMetadata) -> 'ExtractionResult':
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, kind: ExtractionError, message: str) -> 'ExtractionResult':
        return cls(success=False, error=ExtractionFailure(kind, message))

    @property
    def failed(self) -> bool:
        """Check if extraction failed"""
        return not self.success

    @property
    def error_kind(self) -> Optional[ExtractionError]:
        return self.error.kind if self.error else None


@dataclass(frozen=True)
class GPSResult:
    """Result of a GPS-only extraction. has_gps is (gps is not None)."""
    gps: Optional[GPSCoordinates] = None
    has_gps: bool = False

    def __post_init__(self):
        if self.has_gps != (self.gps is not None):
            raise ValueError(
                f"has_gps={self.has_gps} does not match gps={self.gps!r}"
            )
