"""
Shared fixtures for exifmeta-core tests.

Test images are small synthetic images generated with Pillow, with
specific EXIF metadata written into them.
"""

from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional

import pytest
from PIL import Image

EXIF_IFD = 0x8769
GPS_IFD = 0x8825


def create_exif_data(
    camera_make: Optional[str] = None,
    camera_model: Optional[str] = None,
    exif_tags: Optional[Dict[int, Any]] = None,
    gps: Optional[Dict[int, Any]] = None,
) -> Image.Exif:
    """Build an Exif block Pillow can write"""
    exif = Image.Exif()
    if camera_make:
        exif[271] = camera_make  # Make
    if camera_model:
        exif[272] = camera_model  # Model
    if exif_tags:
        exif[EXIF_IFD] = exif_tags
    if gps:
        exif[GPS_IFD] = gps
    return exif


def gps_tags(lat_dms, lat_ref, lon_dms, lon_ref, altitude=None, below_sea_level=False) -> Dict[int, Any]:
    """GPS IFD entries from DMS tuples"""
    tags = {
        1: lat_ref,  # GPSLatitudeRef
        2: tuple(float(v) for v in lat_dms),  # GPSLatitude
        3: lon_ref,  # GPSLongitudeRef
        4: tuple(float(v) for v in lon_dms),  # GPSLongitude
    }
    if altitude is not None:
        tags[5] = b'\x01' if below_sea_level else b'\x00'  # GPSAltitudeRef
        tags[6] = float(altitude)  # GPSAltitude
    return tags


def image_bytes(width: int = 64, height: int = 48, fmt: str = "JPEG", exif: Optional[Image.Exif] = None) -> bytes:
    """Encode a solid-color image, optionally with EXIF"""
    img = Image.new('RGB', (width, height), (70, 130, 180))
    buf = BytesIO()
    if exif is not None:
        img.save(buf, format=fmt, exif=exif)
    else:
        img.save(buf, format=fmt)
    return buf.getvalue()


# Oslo, Norway: 59° 54' 50.04" N, 10° 45' 7.92" E
OSLO_LAT = (59, 54, 50.04)
OSLO_LON = (10, 45, 7.92)


@pytest.fixture
def plain_jpeg() -> bytes:
    """JPEG without any EXIF"""
    return image_bytes()


@pytest.fixture
def camera_jpeg() -> bytes:
    """JPEG with camera EXIF but no GPS"""
    exif = create_exif_data(
        camera_make="Canon",
        camera_model="EOS R5",
        exif_tags={
            33434: 0.01,  # ExposureTime
            33437: 2.8,  # FNumber
            34855: 400,  # ISOSpeedRatings
            37386: 50.0,  # FocalLength
            36867: "2023:12:25 10:15:30",  # DateTimeOriginal
            42036: "RF50mm F1.8 STM",  # LensModel
        },
    )
    return image_bytes(exif=exif)


@pytest.fixture
def gps_jpeg() -> bytes:
    """JPEG with camera EXIF and GPS (Oslo, 23 m)"""
    exif = create_exif_data(
        camera_make="Nikon",
        camera_model="D850",
        exif_tags={33434: 0.004},
        gps=gps_tags(OSLO_LAT, "N", OSLO_LON, "E", altitude=23),
    )
    return image_bytes(exif=exif)


@pytest.fixture
def southern_jpeg() -> bytes:
    """JPEG with GPS in the southern/western hemispheres, below sea level"""
    exif = create_exif_data(
        camera_make="Sony",
        gps=gps_tags((33, 52, 4.0), "S", (70, 40, 12.0), "W", altitude=12, below_sea_level=True),
    )
    return image_bytes(exif=exif)


@pytest.fixture
def image_file(tmp_path):
    """Factory writing bytes to a named file under tmp_path"""
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


class FakeDecoder:
    """Decoder stand-in returning fixed tag groups"""

    def __init__(self, groups=None, error: Optional[Exception] = None):
        self.groups = groups
        self.error = error
        self.calls = []

    def load(self, buffer, expanded=True, include_unknown=True):
        self.calls.append({'buffer': buffer, 'expanded': expanded, 'include_unknown': include_unknown})
        if self.error is not None:
            raise self.error
        return self.groups


@pytest.fixture
def fake_decoder():
    return FakeDecoder
