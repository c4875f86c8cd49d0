"""Version information for exifmeta-core"""

__version__ = "1.0.0"
