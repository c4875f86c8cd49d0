"""
Tests for input validation

Tests input validation before decoding:
- Missing input
- Buffers, paths and file handles
- Format support
- File access
"""

import io

import pytest
from pathlib import Path
from exifmeta_core.image.formats import FormatDetector, ImageFormat
from exifmeta_core.models.result import ExtractionError
from exifmeta_core.validation.input_validator import ImageSource, InputValidator


class TestMissingInput:
    """Test absent or unusable inputs"""

    def test_none(self):
        """Should reject missing input"""
        source, failure = InputValidator.validate_input(None)

        assert source is None
        assert failure.kind == ExtractionError.INVALID_FILE
        assert failure.message == "No image file provided"

    def test_unsupported_type(self):
        """Should reject inputs that are neither bytes, paths nor handles"""
        source, failure = InputValidator.validate_input(12345)

        assert source is None
        assert failure.kind == ExtractionError.INVALID_FILE
        assert "int" in failure.message


class TestBuffers:
    """Test raw byte inputs"""

    @pytest.mark.parametrize("factory", [bytes, bytearray, memoryview])
    def test_buffer_types(self, factory, plain_jpeg):
        """Should accept any bytes-like buffer"""
        source, failure = InputValidator.validate_input(factory(plain_jpeg))

        assert failure is None
        assert source == ImageSource(buffer=plain_jpeg)

    def test_buffer_has_no_name(self, plain_jpeg):
        """Buffers carry no file name or size"""
        source, _ = InputValidator.validate_input(plain_jpeg)

        assert source.file_name is None
        assert source.file_size is None

    def test_empty_buffer_passes_validation(self):
        """Empty buffers are left for the decoder to reject"""
        source, failure = InputValidator.validate_input(b"")

        assert failure is None
        assert source.buffer == b""


class TestPaths:
    """Test path inputs"""

    def test_existing_file(self, image_file, plain_jpeg):
        """Should read an existing JPEG file"""
        path = image_file("photo.jpg", plain_jpeg)
        source, failure = InputValidator.validate_input(path)

        assert failure is None
        assert source.buffer == plain_jpeg
        assert source.file_name == "photo.jpg"
        assert source.file_size == len(plain_jpeg)

    def test_string_path(self, image_file, plain_jpeg):
        """Should accept paths given as strings"""
        path = image_file("photo.jpeg", plain_jpeg)
        source, failure = InputValidator.validate_input(str(path))

        assert failure is None
        assert source.file_name == "photo.jpeg"

    def test_nonexistent_file(self, tmp_path):
        """Should reject nonexistent file"""
        source, failure = InputValidator.validate_input(tmp_path / "missing.jpg")

        assert source is None
        assert failure.kind == ExtractionError.INVALID_FILE
        assert "not found" in failure.message.lower()

    def test_directory_as_file(self, tmp_path):
        """Should reject directory"""
        directory = tmp_path / "album.jpg"
        directory.mkdir()
        _, failure = InputValidator.validate_input(directory)

        assert failure.kind == ExtractionError.INVALID_FILE
        assert "not a file" in failure.message.lower()

    @pytest.mark.parametrize("name", ["notes.txt", "image.png", "photo.nef", "README"])
    def test_unsupported_extension(self, name, image_file, plain_jpeg):
        """Should reject unsupported extensions before reading"""
        path = image_file(name, plain_jpeg)
        _, failure = InputValidator.validate_input(path)

        assert failure.kind == ExtractionError.UNSUPPORTED_FORMAT
        assert failure.message == f"Unsupported file format: {name}"

    def test_extension_checked_before_existence(self, tmp_path):
        """Unsupported names fail as UNSUPPORTED_FORMAT even when missing"""
        _, failure = InputValidator.validate_input(tmp_path / "missing.gif")
        assert failure.kind == ExtractionError.UNSUPPORTED_FORMAT

    def test_uppercase_extension(self, image_file, plain_jpeg):
        """Extensions are case-insensitive"""
        path = image_file("IMG_0001.JPG", plain_jpeg)
        assert InputValidator.is_valid(path)


class TestFileHandles:
    """Test file-like inputs"""

    def test_open_file(self, image_file, plain_jpeg):
        """Should read name and bytes from an open binary file"""
        path = image_file("holiday.jpg", plain_jpeg)
        with open(path, 'rb') as f:
            source, failure = InputValidator.validate_input(f)

        assert failure is None
        assert source.file_name == "holiday.jpg"
        assert source.file_size == len(plain_jpeg)
        assert source.buffer == plain_jpeg

    def test_named_stream(self, plain_jpeg):
        """Only the base name of .name is kept"""
        stream = io.BytesIO(plain_jpeg)
        stream.name = "uploads/2023/scan.tif"
        source, _ = InputValidator.validate_input(stream)

        assert source.file_name == "scan.tif"

    def test_anonymous_stream(self, plain_jpeg):
        """Streams without a name behave like buffers"""
        source, failure = InputValidator.validate_input(io.BytesIO(plain_jpeg))

        assert failure is None
        assert source.file_name is None
        assert source.file_size is None

    def test_unsupported_name(self, plain_jpeg):
        """Should reject handles with an unsupported name"""
        stream = io.BytesIO(plain_jpeg)
        stream.name = "clip.mp4"
        _, failure = InputValidator.validate_input(stream)

        assert failure.kind == ExtractionError.UNSUPPORTED_FORMAT

    def test_text_mode(self):
        """Should reject text-mode handles"""
        _, failure = InputValidator.validate_input(io.StringIO("not bytes"))

        assert failure.kind == ExtractionError.INVALID_FILE
        assert "binary" in failure.message


class TestFormatDetector:
    """Test format detection"""

    @pytest.mark.parametrize("name,expected", [
        ("a.jpg", ImageFormat.JPEG),
        ("a.JPEG", ImageFormat.JPEG),
        ("a.tif", ImageFormat.TIFF),
        ("a.tiff", ImageFormat.TIFF),
        ("a.heic", ImageFormat.HEIC),
        ("a.HEIF", ImageFormat.HEIF),
    ])
    def test_detect_format(self, name, expected):
        """Should map supported extensions to formats"""
        assert FormatDetector.detect_format(name) == expected

    def test_unknown_format(self):
        """Should return None for unsupported extensions"""
        assert FormatDetector.detect_format("a.png") is None
        assert FormatDetector.detect_format(Path("no_extension")) is None
