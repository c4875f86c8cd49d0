"""Input validation module"""

from .input_validator import ImageSource, InputValidator

__all__ = ["ImageSource", "InputValidator"]
