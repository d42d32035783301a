"""Frame rate configuration tests."""

import dataclasses
import logging

import pytest

from tccalc.frame_rate import FrameRate, FrameRateConfig, Rational, round_half_away
from tccalc.smpte import TimecodeConverter


class TestRoundHalfAway:
    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (1.4999, 1),
        (29.97, 30),
        (23.976, 24),
        (-2.5, -3),
        (0.0, 0),
        (0.49999999999999994, 0),
        (-0.49999999999999994, 0),
        (4503599627370495.5, 4503599627370496),
    ])
    def test_rounding(self, value, expected):
        assert round_half_away(value) == expected


class TestDerivedConstants:
    def test_2997_drop_frame(self):
        cfg = FrameRateConfig.from_rate(29.97, True)
        assert cfg.time_base == 30
        assert cfg.drop_per_minute == 2
        assert cfg.frames_per_hour == 107892
        assert cfg.frames_per_24_hours == 107892 * 24
        assert cfg.frames_per_10_minutes == 17982
        assert cfg.frames_per_minute == 1798

    def test_5994_drop_frame(self):
        cfg = FrameRateConfig.from_rate(59.94, True)
        assert cfg.time_base == 60
        assert cfg.drop_per_minute == 4
        assert cfg.frames_per_hour == 215784
        assert cfg.frames_per_10_minutes == 35964
        assert cfg.frames_per_minute == 3596

    def test_23976(self):
        cfg = FrameRateConfig.from_rate(23.976)
        assert cfg.time_base == 24
        assert not cfg.drop_frame

    def test_integer_rate_is_stored_as_float(self):
        cfg = FrameRateConfig.from_rate(25)
        assert isinstance(cfg.fps, float)
        assert cfg.time_base == 25


class TestRationalConstructor:
    def test_ntsc(self):
        cfg = FrameRateConfig.from_rational(30000, 1001, True)
        assert cfg.fps == pytest.approx(29.97, abs=1e-3)
        assert cfg.time_base == 30
        assert cfg.drop_per_minute == 2
        assert cfg.frames_per_10_minutes == 17982

    def test_film(self):
        cfg = FrameRateConfig.from_rational(24000, 1001, False)
        assert cfg.fps == pytest.approx(23.976, abs=1e-3)
        assert cfg.time_base == 24

    def test_zero_denominator(self):
        with pytest.raises(ValueError):
            FrameRateConfig.from_rational(30, 0)


class TestRational:
    def test_fps(self):
        assert Rational(50, 2).fps == 25.0

    def test_parse(self):
        assert Rational.parse("30000/1001") == Rational(30000, 1001)
        assert str(Rational.parse(" 24000/1001 ")) == "24000/1001"

    @pytest.mark.parametrize("text", ["30000", "a/b", "0/1", "1/0", "1/2/3", "-24/1"])
    def test_parse_invalid(self, text):
        with pytest.raises(ValueError):
            Rational.parse(text)


class TestImmutability:
    def test_frozen(self):
        cfg = FrameRateConfig.from_rate(24.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.fps = 25.0

    def test_derived_fields_frozen(self):
        cfg = FrameRateConfig.from_rate(24.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.time_base = 25

    def test_equality_and_hash(self):
        a = FrameRateConfig.from_rate(29.97, True)
        b = FrameRateConfig(29.97, True)
        assert a == b
        assert hash(a) == hash(b)
        assert a != FrameRateConfig(29.97, False)

    def test_str(self):
        assert str(FrameRateConfig(29.97, True)) == "29.97 fps DF"
        assert str(FrameRateConfig(24.0)) == "24 fps"


class TestSeparator:
    def test_separator(self):
        assert FrameRateConfig(29.97, True).separator == ";"
        assert FrameRateConfig(29.97, False).separator == ":"


class TestDropFrameWarning:
    def test_warns_for_unsupported_rate(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tccalc.frame_rate"):
            FrameRateConfig.from_rate(25.0, True)
        assert "Drop-frame requested" in caplog.text

    def test_no_warning_for_2997(self, caplog):
        with caplog.at_level(logging.WARNING, logger="tccalc.frame_rate"):
            FrameRateConfig.from_rate(29.97, True)
            FrameRateConfig.from_rate(59.94, True)
        assert caplog.text == ""


class TestFrameRate:
    @pytest.mark.parametrize("rate,fps,drop_frame", [
        (FrameRate.FPS_23_98, 23.976, False),
        (FrameRate.FPS_24, 24.0, False),
        (FrameRate.FPS_25, 25.0, False),
        (FrameRate.FPS_29_97_NDF, 29.97, False),
        (FrameRate.FPS_29_97_DROP, 29.97, True),
        (FrameRate.FPS_30, 30.0, False),
        (FrameRate.FPS_50, 50.0, False),
        (FrameRate.FPS_59_94_NDF, 59.94, False),
        (FrameRate.FPS_59_94_DROP, 59.94, True),
        (FrameRate.FPS_60, 60.0, False),
    ])
    def test_properties(self, rate, fps, drop_frame):
        assert rate.fps == fps
        assert rate.drop_frame is drop_frame
        assert rate.config == FrameRateConfig(fps, drop_frame)

    def test_from_standard(self):
        cfg = FrameRateConfig.from_standard(FrameRate.FPS_29_97_DROP)
        assert cfg.drop_frame
        assert cfg.drop_per_minute == 2

    @pytest.mark.parametrize("rate", list(FrameRate), ids=lambda r: r.name)
    def test_every_standard_rate_round_trips(self, rate):
        converter = TimecodeConverter(rate.config)
        limit = rate.config.frames_per_24_hours
        for frames in list(range(0, 40000, 7)) + list(range(40000, limit, 4999)):
            assert converter.parse(converter.format(frames)) == frames
