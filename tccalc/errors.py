"""Exception hierarchy for timecode conversion."""

from typing import Optional


class TimecodeError(ValueError):
    """Base exception for timecode conversion errors."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.text = text


class ParseError(TimecodeError):
    """Raised when timecode text cannot be converted to a frame count."""


class InvalidFormatError(ParseError):
    """Raised when timecode text is not four numeric fields."""


class FrameRateMismatchError(ParseError):
    """Raised when the frames field exceeds the configured frame rate."""

    def __init__(self, message: str, text: Optional[str] = None,
                 frames: int = 0, fps: float = 0.0):
        super().__init__(message, text)
        self.frames = frames
        self.fps = fps


class FormatError(TimecodeError):
    """Raised when a frame count cannot be rendered as timecode text."""


class BufferTooSmallError(FormatError):
    """Raised when a destination buffer cannot hold the formatted timecode."""

    def __init__(self, message: str, text: Optional[str] = None,
                 required: int = 0, available: int = 0):
        super().__init__(message, text)
        self.required = required
        self.available = available
