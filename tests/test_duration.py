"""Duration notation tests."""

import pytest

from tccalc.duration import parse_duration
from tccalc.errors import FrameRateMismatchError, InvalidFormatError
from tccalc.frame_rate import FrameRateConfig


@pytest.fixture
def ndf24():
    return FrameRateConfig.from_rate(24.0)


class TestParseDuration:
    @pytest.mark.parametrize("text,frames", [
        ("1:30", 90 * 24),
        ("1:30:00", 5400 * 24),
        ("00:00:04:04", 100),
        ("30s", 30 * 24),
        ("5m", 300 * 24),
        ("1h", 3600 * 24),
        ("12f", 12),
        ("2h30m", 9000 * 24),
        ("1h30s", 3630 * 24),
        ("7h6m5s4f", 25565 * 24 + 4),
        ("90", 90 * 24),
        ("1m12", 60 * 24 + 12),
        (" 5m ", 300 * 24),
        ("5m3s2", 303 * 24 + 2),
    ])
    def test_formats(self, ndf24, text, frames):
        assert parse_duration(text, ndf24) == frames

    def test_drop_frame_timecode(self):
        config = FrameRateConfig.from_rate(29.97, True)
        assert parse_duration("00:01:00;02", config) == 1800
        assert parse_duration("1m", config) == 1800

    @pytest.mark.parametrize("text", ["", "   ", "abc", "5x", "h5", "1:a", "1:2:3:4:5", "5 5"])
    def test_invalid(self, ndf24, text):
        with pytest.raises(InvalidFormatError):
            parse_duration(text, ndf24)

    def test_four_fields_validated(self, ndf24):
        with pytest.raises(FrameRateMismatchError):
            parse_duration("00:00:00:99", ndf24)
