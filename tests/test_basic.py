"""
Basic tests for exifmeta-core

Run with: pytest tests/
"""

import pytest
from pathlib import Path
from exifmeta_core import (
    ExtractionError,
    ExtractionOptions,
    FormatDetector,
    GPSCoordinates,
    InputValidator,
    extract_gps_only,
    extract_image_metadata,
    has_gps_data,
    __version__
)


def test_version():
    """Test that version is defined"""
    assert __version__ == "1.0.0"


def test_input_validator():
    """Test InputValidator"""
    # Non-existent file should fail validation
    assert not InputValidator.is_valid(Path("nonexistent.jpg"))


def test_format_detector():
    """Test FormatDetector"""
    assert FormatDetector.is_supported("photo.JPG")
    assert not FormatDetector.is_supported("photo.png")


def test_gps_coordinates_model():
    """Test GPSCoordinates creation and serialization"""
    gps = GPSCoordinates(latitude=59.9139, longitude=10.7522)

    assert gps.to_dict() == {'latitude': 59.9139, 'longitude': 10.7522}

    with pytest.raises(ValueError):
        GPSCoordinates(latitude=91.0, longitude=0.0)


def test_extract_nonexistent():
    """Test extract_image_metadata with non-existent file"""
    result = extract_image_metadata(Path("nonexistent.jpg"))

    assert not result.success
    assert result.error.kind == ExtractionError.INVALID_FILE
    assert "not found" in result.error.message.lower()


def test_extract_with_options_nonexistent():
    """Test extract_image_metadata with options on non-existent file"""
    options = ExtractionOptions(include_raw_exif=True, validate_gps=True)
    result = extract_image_metadata(Path("nonexistent.jpg"), options)

    assert result.failed
    assert result.data is None


def test_gps_helpers_nonexistent():
    """GPS helpers should never raise"""
    gps_result = extract_gps_only(Path("nonexistent.jpg"))

    assert gps_result.gps is None
    assert gps_result.has_gps is False
    assert has_gps_data(Path("nonexistent.jpg")) is False
