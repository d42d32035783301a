#!/usr/bin/env python3
"""
TCCalc CLI - SMPTE timecode arithmetic from the command line.
"""

import argparse
import logging
import sys
from typing import List, Optional

from tccalc.duration import parse_duration
from tccalc.errors import TimecodeError
from tccalc.frame_rate import FrameRateConfig, Rational
from tccalc.smpte import TimecodeConverter

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tccalc",
        description="Convert and calculate SMPTE timecodes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -r 24 frames 00:00:04:04          # -> 100
  %(prog)s -r 29.97 --drop-frame timecode 1800 # -> 00:01:00;02
  %(prog)s -r 24 add 00:00:10:00 240         # -> 00:00:20:00
  %(prog)s -r 24 add 01:00:00:00 -- -1m      # subtract one minute
  %(prog)s -r 24 diff 00:00:10:00 00:00:20:00  # -> 240
  %(prog)s --rational 30000/1001 --drop-frame check 00:01:00;02
  %(prog)s -r 25 count 00:00:59:20 10f --countdown

Durations (add, count):
  240        = 240 frames (add) or 240 seconds (count)
  1:30       = 1 minute 30 seconds
  1:30:00:15 = 1 hour 30 minutes 15 frames
  30s, 5m, 1h, 12f, 2h30m, 7h6m5s4f

Drop-frame timecodes use ';' before the frames field (HH:MM:SS;FF).
Negative frame counts are shown without a sign.
        """,
    )
    parser.add_argument(
        "-r", "--frame-rate",
        type=float,
        default=30.0,
        help="Frame rate in fps, e.g. 23.976, 24, 25, 29.97, 30 (default: 30.0)",
    )
    parser.add_argument(
        "--rational",
        type=Rational.parse,
        default=None,
        help="Frame rate as NUM/DEN, e.g. 30000/1001 (overrides --frame-rate)",
    )
    parser.add_argument(
        "--drop-frame",
        action="store_true",
        help="Use drop-frame numbering (for 29.97 or 59.94 fps)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output with debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("frames", help="Convert a timecode to a frame count")
    cmd.add_argument("timecode", help="Timecode (HH:MM:SS:FF or HH:MM:SS;FF)")

    cmd = commands.add_parser("timecode", help="Convert a frame count to a timecode")
    cmd.add_argument("frames", type=int, help="Frame count")

    cmd = commands.add_parser("add", help="Add frames or a duration to a timecode")
    cmd.add_argument("timecode", help="Starting timecode")
    cmd.add_argument("delta", help="Frames (e.g. 240, -12) or duration (e.g. 5m, 1:30)")

    cmd = commands.add_parser("diff", help="Frames from START to END")
    cmd.add_argument("start", help="Start timecode")
    cmd.add_argument("end", help="End timecode")

    cmd = commands.add_parser("check", help="Validate timecodes")
    cmd.add_argument("timecodes", nargs="+", help="Timecodes to validate")

    cmd = commands.add_parser("count", help="Print a count-up or countdown sequence")
    cmd.add_argument("start", help="Starting timecode")
    cmd.add_argument("duration", help="Duration (e.g. 10f, 2s, 1:00)")
    cmd.add_argument(
        "--countdown",
        action="store_true",
        help="Count down instead of up (stops at 00:00:00:00)",
    )

    return parser


def _parse_delta(text: str, config: FrameRateConfig) -> int:
    """Signed frame count, or a signed duration in any notation parse_duration accepts."""
    sign = 1
    body = text.strip()
    if body and body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body.isdigit():
        return sign * int(body)
    return sign * parse_duration(body, config)


def run(args: argparse.Namespace) -> int:
    if args.rational is not None:
        config = FrameRateConfig.from_rational(
            args.rational.numerator, args.rational.denominator, args.drop_frame)
    else:
        config = FrameRateConfig.from_rate(args.frame_rate, args.drop_frame)
    converter = TimecodeConverter(config)

    _logger.debug(f"Command {args.command} @ {config}")

    if args.command == "frames":
        print(converter.parse(args.timecode))
    elif args.command == "timecode":
        print(converter.format(args.frames))
    elif args.command == "add":
        print(converter.add(args.timecode, _parse_delta(args.delta, config)))
    elif args.command == "diff":
        print(converter.difference(args.start, args.end))
    elif args.command == "check":
        all_valid = True
        for tc in args.timecodes:
            valid = converter.is_valid(tc)
            all_valid = all_valid and valid
            print(f"{tc}: {'valid' if valid else 'invalid'}")
        return 0 if all_valid else 1
    elif args.command == "count":
        duration = parse_duration(args.duration, config)
        if args.countdown:
            sequence = converter.count_down(args.start, duration)
        else:
            sequence = converter.count_up(args.start, duration)
        for tc in sequence:
            print(tc)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    try:
        return run(args)
    except (TimecodeError, ValueError, OverflowError, ZeroDivisionError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
