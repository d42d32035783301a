"""
SMPTE timecode field record.

Text form is HH:MM:SS:FF for non-drop-frame and HH:MM:SS;FF for drop-frame.
Parsing accepts either separator in any position; adjacent separators are
collapsed, so "01::00:00:00" tokenizes like "01:00:00:00".
"""

import re
from dataclasses import dataclass

from tccalc.errors import InvalidFormatError

_SEPARATORS = re.compile(r"[:;]")
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Timecode:
    """
    SMPTE timecode fields.

    Fields are plain non-negative integers; hours are not limited to 0-23
    and minutes/seconds are not range checked, so values outside the usual
    clock ranges survive a round trip through text unchanged.
    """
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    frames: int = 0

    # Drop frame flag: selects ';' before the frames field
    drop_frame: bool = False

    @property
    def total_minutes(self) -> int:
        return 60 * self.hours + self.minutes

    @classmethod
    def from_string(cls, text: str) -> 'Timecode':
        """
        Split timecode text into its four fields.

        Args:
            text: "HH:MM:SS:FF" or "HH:MM:SS;FF"

        Returns:
            Timecode with drop_frame set if the last separator is ';'

        Raises:
            InvalidFormatError: if there are not exactly four numeric fields
        """
        if not isinstance(text, str):
            raise InvalidFormatError(f"Timecode must be a string, got {type(text).__name__}")

        tokens = [t for t in _SEPARATORS.split(text) if t]
        if len(tokens) != 4:
            raise InvalidFormatError(f"Invalid timecode format: {text!r} "
                                     f"(expected 4 fields, got {len(tokens)})", text)

        for token in tokens:
            if not _DIGITS.fullmatch(token):
                raise InvalidFormatError(f"Invalid timecode field {token!r} in {text!r}", text)

        hours, minutes, seconds, frames = (int(t) for t in tokens)
        separators = _SEPARATORS.findall(text)
        drop_frame = bool(separators) and separators[-1] == ";"

        return cls(hours, minutes, seconds, frames, drop_frame)

    def __str__(self) -> str:
        """Format timecode as HH:MM:SS:FF (or HH:MM:SS;FF for drop-frame)."""
        separator = ";" if self.drop_frame else ":"
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}{separator}{self.frames:02d}"
