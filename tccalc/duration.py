"""
Duration notation for command-line input.

Formats:
- "1:30"        -> MM:SS
- "1:30:00"     -> HH:MM:SS
- "1:30:00:15"  -> HH:MM:SS:FF (or HH:MM:SS;FF, drop-frame aware)
- "90s"         -> 90 seconds
- "5m"          -> 5 minutes
- "1h"          -> 1 hour
- "12f"         -> 12 frames
- "2h30m"       -> 2 hours 30 minutes
- "7h6m5s4f"    -> 7 hours 6 minutes 5 seconds 4 frames
"""

import re

from tccalc.errors import InvalidFormatError
from tccalc.frame_rate import FrameRateConfig
from tccalc.smpte import TimecodeConverter

_UNIT_TOKEN = re.compile(r"([0-9]+)([hmsf]?)")


def parse_duration(text: str, config: FrameRateConfig) -> int:
    """
    Parse a duration to a frame count.

    Four-field timecodes go through the converter so drop-frame numbering
    applies. Every other form counts nominal frames at the rounded rate.

    Raises:
        InvalidFormatError: if the text is not a recognized duration
    """
    time_str = text.strip()
    if not time_str:
        raise InvalidFormatError(f"Invalid duration: {text!r}", text)

    if ':' in time_str or ';' in time_str:
        parts = re.split(r"[:;]", time_str)
        if len(parts) == 4:
            return TimecodeConverter(config).parse(time_str)
        if not all(p.isdigit() for p in parts):
            raise InvalidFormatError(f"Invalid duration: {text!r}", text)
        if len(parts) == 2:
            # MM:SS (minutes:seconds) - common duration format
            hours, minutes, seconds = 0, int(parts[0]), int(parts[1])
        elif len(parts) == 3:
            hours, minutes, seconds = (int(p) for p in parts)
        else:
            raise InvalidFormatError(f"Invalid duration: {text!r}", text)
        return _nominal_frames(config, hours, minutes, seconds, 0)

    values = {"h": 0, "m": 0, "s": 0, "f": 0}
    pos = 0
    trailing = None
    while pos < len(time_str):
        match = _UNIT_TOKEN.match(time_str, pos)
        if match is None or trailing is not None:
            raise InvalidFormatError(f"Invalid duration: {text!r}", text)
        number, unit = match.groups()
        if unit:
            values[unit] = int(number)
        else:
            trailing = int(number)
        pos = match.end()

    # A bare number is seconds; after other units it is frames
    if trailing is not None:
        if values["h"] or values["m"] or values["s"]:
            values["f"] = trailing
        else:
            values["s"] = trailing

    return _nominal_frames(config, values["h"], values["m"], values["s"], values["f"])


def _nominal_frames(config: FrameRateConfig, hours: int, minutes: int,
                    seconds: int, frames: int) -> int:
    return (hours * 3600 + minutes * 60 + seconds) * config.time_base + frames
