"""
TCCalc - SMPTE Timecode Arithmetic
Converts between SMPTE timecode text and frame counts, with drop-frame support.
"""

__version__ = "0.1.0"

from .errors import (
    TimecodeError,
    ParseError,
    InvalidFormatError,
    FrameRateMismatchError,
    FormatError,
    BufferTooSmallError,
)
from .frame_rate import FrameRate, FrameRateConfig, Rational
from .timecode import Timecode
from .smpte import TimecodeConverter, parse, format, format_into, add, difference, is_valid

__all__ = [
    "TimecodeError",
    "ParseError",
    "InvalidFormatError",
    "FrameRateMismatchError",
    "FormatError",
    "BufferTooSmallError",
    "FrameRate",
    "FrameRateConfig",
    "Rational",
    "Timecode",
    "TimecodeConverter",
    "parse",
    "format",
    "format_into",
    "add",
    "difference",
    "is_valid",
]
