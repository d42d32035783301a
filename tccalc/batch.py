"""
Vectorized timecode conversion for arrays of frame counts.

Uses the same integer arithmetic as TimecodeConverter, applied to whole
numpy arrays at once (e.g. a column of event positions from an edit list).
"""

import logging
from typing import Iterable, List

import numpy as np

from tccalc.frame_rate import FrameRateConfig
from tccalc.smpte import TimecodeConverter

# Module-level logger
_logger = logging.getLogger(__name__)


def split_frames(frames, config: FrameRateConfig) -> np.ndarray:
    """
    Split frame counts into timecode fields.

    Args:
        frames: Sequence or array of integer frame counts (signs discarded)
        config: Frame rate configuration

    Returns:
        int64 array of shape (n, 4): hours, minutes, seconds, frames
    """
    values = np.asarray(frames)
    if values.size and not np.issubdtype(values.dtype, np.integer):
        raise TypeError(f"Frame counts must be integers, got {values.dtype}")

    working = np.abs(values.astype(np.int64).reshape(-1))
    fps_int = config.time_base

    if config.drop_frame:
        drop = config.drop_per_minute
        working = working % config.frames_per_24_hours
        d, m = np.divmod(working, config.frames_per_10_minutes)
        extra = np.where(m > drop, drop * ((m - drop) // config.frames_per_minute), 0)
        working = working + drop * 9 * d + extra

        fields = np.stack([
            working // (fps_int * 3600),
            (working // (fps_int * 60)) % 60,
            (working // fps_int) % 60,
            working % fps_int,
        ], axis=1)
    else:
        hours, rest = np.divmod(working, fps_int * 3600)
        minutes, rest = np.divmod(rest, fps_int * 60)
        seconds, rest = np.divmod(rest, fps_int)
        fields = np.stack([hours, minutes, seconds, rest], axis=1)

    _logger.debug(f"split {len(working)} frame counts @ {config}")
    return fields.astype(np.int64)


def format_frames(frames, config: FrameRateConfig) -> List[str]:
    """
    Format frame counts as timecode text.

    Args:
        frames: Sequence or array of integer frame counts
        config: Frame rate configuration

    Returns:
        List of "HH:MM:SS:FF" / "HH:MM:SS;FF" strings
    """
    separator = config.separator
    return [
        f"{hh:02d}:{mm:02d}:{ss:02d}{separator}{ff:02d}"
        for hh, mm, ss, ff in split_frames(frames, config).tolist()
    ]


def parse_timecodes(texts: Iterable[str], config: FrameRateConfig) -> np.ndarray:
    """
    Parse timecode strings into an int64 array of frame counts.

    Raises:
        InvalidFormatError: if any string is malformed
        FrameRateMismatchError: if any frames field exceeds the frame rate
    """
    converter = TimecodeConverter(config)
    return np.array([converter.parse(text) for text in texts], dtype=np.int64)
