"""
Image Metadata Model - structured result of an extraction

Every instance is created fresh per extraction call and is immutable.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Mapping, Optional


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """Check latitude/longitude are within valid ranges (NaN is invalid)"""
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


@dataclass(frozen=True)
class GPSCoordinates:
    """
    GPS position in decimal degrees.

    Attributes:
        latitude: Latitude, negative south of the equator
        longitude: Longitude, negative west of Greenwich
        altitude: Altitude in meters, negative below sea level
        latitude_ref: Hemisphere reference as written in EXIF (N/S)
        longitude_ref: Hemisphere reference as written in EXIF (E/W)
    """
    latitude: float
    longitude: float
    altitude: Optional[float] = None
    latitude_ref: Optional[str] = None
    longitude_ref: Optional[str] = None

    def __post_init__(self):
        if not is_valid_coordinate(self.latitude, self.longitude):
            raise ValueError(
                f"GPS coordinates out of range: {self.latitude}, {self.longitude}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, dropping unset optional fields"""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class CameraInfo:
    """Camera and exposure settings. Every field is best-effort."""
    make: Optional[str] = None
    model: Optional[str] = None
    software: Optional[str] = None
    lens_model: Optional[str] = None
    iso: Optional[float] = None
    aperture: Optional[float] = None
    shutter_speed: Optional[str] = None  # Display string, e.g. "1/250s"
    focal_length: Optional[float] = None  # mm
    flash: Optional[str] = None
    white_balance: Optional[str] = None


@dataclass(frozen=True)
class ImageInfo:
    """Image dimensions and technical details"""
    width: Optional[float] = None
    height: Optional[float] = None
    color_space: Optional[str] = None
    orientation: Optional[float] = None
    x_resolution: Optional[float] = None
    y_resolution: Optional[float] = None
    bits_per_sample: Optional[float] = None


@dataclass(frozen=True)
class DateTimeInfo:
    """
    Timestamps exactly as written by the camera.

    No parsing or timezone normalization is done; EXIF timestamps are
    usually "YYYY:MM:DD HH:MM:SS" in camera local time.
    """
    date_time_original: Optional[str] = None
    date_time: Optional[str] = None
    date_time_digitized: Optional[str] = None
    offset_time: Optional[str] = None


@dataclass(frozen=True)
class ImageMetadata:
    """
    Complete metadata extracted from one image.

    has_gps is always equal to (gps is not None).
    raw_exif is only set when the caller asked for it, as a read-only mapping.
    file_name and file_size are only set for named inputs (paths, file handles).
    """
    gps: Optional[GPSCoordinates]
    camera: CameraInfo = field(default_factory=CameraInfo)
    image: ImageInfo = field(default_factory=ImageInfo)
    date_time: DateTimeInfo = field(default_factory=DateTimeInfo)
    has_gps: bool = False
    raw_exif: Optional[Mapping[str, Any]] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None

    def __post_init__(self):
        if self.has_gps != (self.gps is not None):
            raise ValueError(
                f"has_gps={self.has_gps} does not match gps={self.gps!r}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Dictionary suitable for JSON serialization
        """
        data = {
            'gps': self.gps.to_dict() if self.gps else None,
            'camera': asdict(self.camera),
            'image': asdict(self.image),
            'date_time': asdict(self.date_time),
            'has_gps': self.has_gps,
            'file_name': self.file_name,
            'file_size': self.file_size,
        }
        if self.raw_exif is not None:
            data['raw_exif'] = {
                group: {name: jsonable(tag) for name, tag in tags.items()}
                for group, tags in self.raw_exif.items()
            }
        return data

    @property
    def has_location(self) -> bool:
        """Check if image has GPS coordinates"""
        return self.gps is not None

    @property
    def camera_label(self) -> Optional[str]:
        """Get formatted camera info string"""
        if self.camera.make and self.camera.model:
            return f"{self.camera.make} {self.camera.model}"
        elif self.camera.model:
            return self.camera.model
        return None


def jsonable(value: Any) -> Any:
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, bytes):
        return value.hex()
    if isinstance(value, (list, tuple)):
        return [jsonable(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): jsonable(v) for k, v in value.items()}
    if isinstance(value, (bool, int, str)) or value is None:
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    # NaN (e.g. a rational with zero denominator) is not valid JSON
    return None if number != number else number
