"""Shutter speed formatting"""

from typing import Optional

from .tag_values import RawTagValue, extract_string, format_number, parse_float


def format_shutter_speed(raw: RawTagValue) -> Optional[str]:
    """
    Format an exposure time for display.

    Already formatted values ("1/250", "2s") pass through unchanged.
    Values below one second become fractions ("1/100s"), others get an
    "s" suffix ("2s").

    Args:
        raw: ExposureTime or ShutterSpeedValue tag value

    Returns:
        Display string or None
    """
    if not raw:
        return None

    text = extract_string(raw)
    if not text:
        return None

    if '/' in text or 's' in text:
        return text

    seconds = parse_float(text)
    if seconds is None:
        return text

    if 0 < seconds < 1:
        return f"1/{round(1 / seconds)}s"
    return f"{format_number(seconds)}s"
