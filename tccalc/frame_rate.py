"""
Frame rate configuration for SMPTE timecode arithmetic.

A timebase is described by its nominal rate (a real number such as 29.97)
and a drop-frame flag. All modular arithmetic works on integers derived from
the nominal rate:

- time_base:             rounded fps (30 for 29.97, 24 for 23.976)
- drop_per_minute:       frame numbers skipped each minute in drop-frame
                         mode (2 at 29.97, 4 at 59.94)
- frames_per_hour:       real frames in one hour (107892 at 29.97)
- frames_per_24_hours:   drop-frame timecode wraps after this many frames
- frames_per_10_minutes: real frames in ten minutes (17982 at 29.97)
- frames_per_minute:     frames in a minute that drops frame numbers
                         (1798 at 29.97)

These are computed once when the configuration is built. Rounding is half
away from zero, matching the broadcast definition, not Python's round().
"""

import logging
import math
from dataclasses import dataclass, field
from enum import IntEnum

# Module-level logger
_logger = logging.getLogger(__name__)

# Drop-frame skips 2 frame numbers per minute at 29.97, i.e. fps * 1/15
DROP_FRAME_RATIO = 0.066666


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    if value < 0:
        return -round_half_away(-value)
    # No addition before flooring: 0.49999999999999994 + 0.5 rounds up to 1.0
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


@dataclass(frozen=True)
class Rational:
    """Frame rate as a fraction, e.g. 30000/1001 for 29.97."""
    numerator: int
    denominator: int

    @property
    def fps(self) -> float:
        if self.denominator == 0:
            raise ValueError(f"Frame rate denominator cannot be zero ({self})")
        return self.numerator / self.denominator

    @classmethod
    def parse(cls, text: str) -> 'Rational':
        """
        Parse "NUM/DEN" text, e.g. "24000/1001".

        Raises:
            ValueError: if the text is not two positive integers
        """
        parts = text.strip().split('/')
        if len(parts) != 2 or not all(p.strip().isdigit() for p in parts):
            raise ValueError(f"Invalid rational frame rate: {text!r}")
        numerator, denominator = (int(p) for p in parts)
        if numerator == 0 or denominator == 0:
            raise ValueError(f"Rational frame rate must be positive: {text!r}")
        return cls(numerator, denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(frozen=True)
class FrameRateConfig:
    """
    Immutable frame rate configuration.

    Only ``fps`` and ``drop_frame`` are constructor arguments; the integer
    constants are derived from them and take no part in equality.
    """
    fps: float
    drop_frame: bool = False

    time_base: int = field(init=False, repr=False, compare=False)
    drop_per_minute: int = field(init=False, repr=False, compare=False)
    frames_per_hour: int = field(init=False, repr=False, compare=False)
    frames_per_24_hours: int = field(init=False, repr=False, compare=False)
    frames_per_10_minutes: int = field(init=False, repr=False, compare=False)
    frames_per_minute: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        time_base = round_half_away(self.fps)
        drop_per_minute = round_half_away(self.fps * DROP_FRAME_RATIO)
        frames_per_hour = round_half_away(self.fps * 3600)

        derived = {
            "time_base": time_base,
            "drop_per_minute": drop_per_minute,
            "frames_per_hour": frames_per_hour,
            "frames_per_24_hours": frames_per_hour * 24,
            "frames_per_10_minutes": round_half_away(self.fps * 600),
            "frames_per_minute": time_base * 60 - drop_per_minute,
        }
        for name, value in derived.items():
            object.__setattr__(self, name, value)

        # Drop-frame counting is only standardized for 29.97 and 59.94
        if self.drop_frame and (time_base == 0 or time_base % 30 != 0):
            _logger.warning(f"Drop-frame requested at {self.fps} fps; "
                            f"drop-frame is only defined for 30 and 60 fps timebases")

    @classmethod
    def from_rate(cls, fps: float, drop_frame: bool = False) -> 'FrameRateConfig':
        """Create a configuration from a nominal frame rate."""
        return cls(float(fps), bool(drop_frame))

    @classmethod
    def from_rational(cls, numerator: int, denominator: int,
                      drop_frame: bool = False) -> 'FrameRateConfig':
        """Create a configuration from a rational rate such as 30000/1001."""
        return cls(Rational(numerator, denominator).fps, bool(drop_frame))

    @classmethod
    def from_standard(cls, frame_rate: 'FrameRate') -> 'FrameRateConfig':
        """Create a configuration for one of the standard broadcast rates."""
        return cls(frame_rate.fps, frame_rate.drop_frame)

    @property
    def separator(self) -> str:
        """Separator placed before the frames field."""
        return ";" if self.drop_frame else ":"

    def __str__(self) -> str:
        suffix = " DF" if self.drop_frame else ""
        return f"{self.fps:g} fps{suffix}"


class FrameRate(IntEnum):
    """Standard SMPTE frame rates."""
    FPS_23_98 = 0  # 24 * 1000/1001
    FPS_24 = 1
    FPS_25 = 2
    FPS_29_97_NDF = 3  # 29.97 non-drop
    FPS_29_97_DROP = 4  # 29.97 drop-frame
    FPS_30 = 5
    FPS_50 = 6
    FPS_59_94_NDF = 7
    FPS_59_94_DROP = 8
    FPS_60 = 9

    @property
    def fps(self) -> float:
        """Get nominal frame rate as float."""
        return _STANDARD_RATES[self]

    @property
    def drop_frame(self) -> bool:
        """Check if this rate uses drop-frame numbering."""
        return self in (FrameRate.FPS_29_97_DROP, FrameRate.FPS_59_94_DROP)

    @property
    def config(self) -> FrameRateConfig:
        return FrameRateConfig.from_standard(self)


_STANDARD_RATES = {
    FrameRate.FPS_23_98: 23.976,
    FrameRate.FPS_24: 24.0,
    FrameRate.FPS_25: 25.0,
    FrameRate.FPS_29_97_NDF: 29.97,
    FrameRate.FPS_29_97_DROP: 29.97,
    FrameRate.FPS_30: 30.0,
    FrameRate.FPS_50: 50.0,
    FrameRate.FPS_59_94_NDF: 59.94,
    FrameRate.FPS_59_94_DROP: 59.94,
    FrameRate.FPS_60: 60.0,
}
