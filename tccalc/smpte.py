"""
SMPTE Timecode Converter

Converts between SMPTE timecode text and absolute frame counts for both
non-drop-frame and drop-frame timebases.

Drop-frame timecode keeps the clock aligned with real time at 29.97 and 59.94
fps by skipping frame numbers (not frames): the first 2 (or 4) frame numbers
of every minute are skipped, except for minutes divisible by ten. Conversion
in both directions uses the closed-form Duncan/Heidelberger arithmetic:

- Timecode -> frames: count nominal frames, then subtract the frame numbers
  skipped in every elapsed minute that is not a multiple of ten.
- Frames -> timecode: wrap at 24 hours, re-insert the skipped frame numbers
  (9 per whole 10-minute block plus one per extra minute), then split the
  nominal count with the rounded frame rate exactly like non-drop-frame.

Frame counts are signed, but timecode text has no sign: a negative count is
formatted as its magnitude.
"""

import logging
import operator
from typing import List

from tccalc.errors import BufferTooSmallError, FrameRateMismatchError, ParseError
from tccalc.frame_rate import FrameRateConfig
from tccalc.timecode import Timecode

# Module-level logger
_logger = logging.getLogger(__name__)


class TimecodeConverter:
    """
    SMPTE timecode <-> frame count converter.

    Holds a single immutable FrameRateConfig; every method is a pure function
    of its arguments, so one converter can be shared between threads.
    """

    def __init__(self, config: FrameRateConfig):
        """
        Initialize converter.

        Args:
            config: Frame rate and drop-frame flag
        """
        self.config = config

    @classmethod
    def from_rate(cls, fps: float, drop_frame: bool = False) -> 'TimecodeConverter':
        return cls(FrameRateConfig.from_rate(fps, drop_frame))

    @classmethod
    def from_rational(cls, numerator: int, denominator: int,
                      drop_frame: bool = False) -> 'TimecodeConverter':
        return cls(FrameRateConfig.from_rational(numerator, denominator, drop_frame))

    def parse(self, text: str) -> int:
        """
        Convert timecode text to a frame count.

        Args:
            text: "HH:MM:SS:FF" or "HH:MM:SS;FF"

        Returns:
            Frame count from 00:00:00:00

        Raises:
            InvalidFormatError: if the text is not four numeric fields
            FrameRateMismatchError: if the frames field exceeds the frame rate
        """
        tc = Timecode.from_string(text)
        cfg = self.config

        # Lenient on purpose: compares against the unrounded rate with '>',
        # so 24 is accepted at 24 fps. The separator is not checked.
        if tc.frames > cfg.fps:
            raise FrameRateMismatchError(
                f"Frames field {tc.frames} exceeds frame rate {cfg.fps:g} in {text!r}",
                text, frames=tc.frames, fps=cfg.fps,
            )

        total_minutes = tc.total_minutes

        if cfg.drop_frame:
            hour_frames = cfg.time_base * 60 * 60
            minute_frames = cfg.time_base * 60
            frames = (hour_frames * tc.hours + minute_frames * tc.minutes
                      + cfg.time_base * tc.seconds + tc.frames)
            frames -= cfg.drop_per_minute * (total_minutes - total_minutes // 10)
        else:
            frames = (total_minutes * 60 + tc.seconds) * cfg.time_base + tc.frames

        _logger.debug(f"parse {text!r} @ {cfg} -> {frames}")
        return frames

    def split(self, frames: int) -> Timecode:
        """
        Convert a frame count to timecode fields.

        Args:
            frames: Frame count; the sign is discarded

        Returns:
            Timecode fields for abs(frames)
        """
        abs_frames = abs(operator.index(frames))
        cfg = self.config
        fps_int = cfg.time_base

        if cfg.drop_frame:
            drop = cfg.drop_per_minute

            # Drop-frame timecode wraps at 24 hours
            working_frames = abs_frames % cfg.frames_per_24_hours

            d, m = divmod(working_frames, cfg.frames_per_10_minutes)
            if m > drop:
                working_frames += drop * 9 * d + drop * ((m - drop) // cfg.frames_per_minute)
            else:
                working_frames += drop * 9 * d

            return Timecode(
                hours=working_frames // (fps_int * 60 * 60),
                minutes=(working_frames // (fps_int * 60)) % 60,
                seconds=(working_frames // fps_int) % 60,
                frames=working_frames % fps_int,
                drop_frame=True,
            )

        fr_hour = fps_int * 3600
        fr_min = fps_int * 60

        hours = abs_frames // fr_hour
        minutes = (abs_frames - hours * fr_hour) // fr_min
        seconds = (abs_frames - hours * fr_hour - minutes * fr_min) // fps_int
        remainder = abs_frames - hours * fr_hour - minutes * fr_min - seconds * fps_int

        return Timecode(hours, minutes, seconds, int(round(float(remainder))), drop_frame=False)

    def format(self, frames: int) -> str:
        """
        Convert a frame count to timecode text.

        Args:
            frames: Frame count (negative counts format as their magnitude)

        Returns:
            "HH:MM:SS:FF", or "HH:MM:SS;FF" in drop-frame mode
        """
        text = str(self.split(frames))
        _logger.debug(f"format {frames} @ {self.config} -> {text}")
        return text

    def format_into(self, frames: int, buffer) -> int:
        """
        Write timecode text as ASCII into a caller-supplied buffer.

        Args:
            frames: Frame count
            buffer: Writable buffer (bytearray, memoryview, uint8 array)

        Returns:
            Number of bytes written

        Raises:
            BufferTooSmallError: if the buffer cannot hold the whole text
        """
        text = self.format(frames)
        data = text.encode("ascii")
        view = memoryview(buffer).cast("B")
        if len(view) < len(data):
            raise BufferTooSmallError(
                f"Buffer of {len(view)} bytes cannot hold {len(data)}-byte timecode {text!r}",
                text, required=len(data), available=len(view),
            )
        view[:len(data)] = data
        return len(data)

    def add(self, text: str, delta: int) -> str:
        """Add a signed number of frames to a timecode."""
        return self.format(self.parse(text) + operator.index(delta))

    def difference(self, start: str, end: str) -> int:
        """Calculate end - start in frames (negative if end is earlier)."""
        return self.parse(end) - self.parse(start)

    def is_valid(self, text: str) -> bool:
        """Check if a timecode parses for the current frame rate."""
        try:
            self.parse(text)
        except ParseError:
            return False
        return True

    def count_up(self, start: str, duration: int) -> List[str]:
        """
        Generate a count-up sequence.

        Args:
            start: Starting timecode
            duration: Number of frames to advance

        Returns:
            duration + 1 timecodes, starting with start
        """
        start_total = self.parse(start)
        return [self.format(start_total + i) for i in range(duration + 1)]

    def count_down(self, start: str, duration: int) -> List[str]:
        """
        Generate a countdown sequence.

        The sequence stops at 00:00:00:00 instead of going negative.

        Args:
            start: Starting timecode
            duration: Number of frames to count down

        Returns:
            Up to duration + 1 timecodes, starting with start
        """
        start_total = self.parse(start)
        result = []
        for i in range(duration + 1):
            remaining = start_total - i
            if remaining < 0:
                break
            result.append(self.format(remaining))
        return result


def parse(text: str, config: FrameRateConfig) -> int:
    """Convert timecode text to a frame count."""
    return TimecodeConverter(config).parse(text)


def format(frames: int, config: FrameRateConfig) -> str:
    """Convert a frame count to timecode text."""
    return TimecodeConverter(config).format(frames)


def format_into(frames: int, buffer, config: FrameRateConfig) -> int:
    """Write timecode text into buffer, returning the number of bytes written."""
    return TimecodeConverter(config).format_into(frames, buffer)


def add(text: str, delta: int, config: FrameRateConfig) -> str:
    """Add a signed number of frames to a timecode."""
    return TimecodeConverter(config).add(text, delta)


def difference(start: str, end: str, config: FrameRateConfig) -> int:
    """Calculate end - start in frames."""
    return TimecodeConverter(config).difference(start, end)


def is_valid(text: str, config: FrameRateConfig) -> bool:
    """Check if a timecode parses for the given frame rate."""
    return TimecodeConverter(config).is_valid(text)
