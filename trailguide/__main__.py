#!/usr/bin/env python3
"""
Trailguide - Off-trail warnings and heading corrections for hikers

Usage:
    python -m trailguide PATH_FILE [options]

PATH_FILE is JSON: either [[lat, lon], ...] or {"name": ..., "points": [[lat, lon], ...]}

Options:
    --playback FILE   Play back a GPS trace from JSON file instead of live GPS
    --speed FACTOR    Playback speed multiplier (default: 1.0)
    --lat LAT         Check a single location (requires --lon)
    --lon LON         Check a single location (requires --lat)
    --off-path M      Distance from the trail before corrections are reported
    --proximity M     Minimum move before the travel-direction anchor is replaced
    --log FILE        Log file path (default: trailguide_TIMESTAMP.log)
    --quiet           Do not speak hints
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path as FilePath

from .config import CONFIG
from .gps import GPSPlayback, FixedLocation
from .models import Path
from .session import TrailSession


def load_path(path_file: str) -> Path:
    """Read a trail from a JSON file"""
    try:
        with open(path_file) as f:
            data = json.load(f)
        if isinstance(data, dict):
            return Path.from_points(data["points"], name=data.get("name"))
        return Path.from_points(data, name=FilePath(path_file).stem)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid path file {path_file}: {e}") from e


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Trailguide - Off-trail warnings and heading corrections for hikers"
    )
    parser.add_argument("path_file", metavar="PATH_FILE",
                        help="Trail as JSON list of [lat, lon] points")
    parser.add_argument("--playback", metavar="FILE",
                        help="Playback GPS trace from JSON file")
    parser.add_argument("--speed", type=float, default=1.0,
                        help="Playback speed multiplier (default: 1.0)")
    parser.add_argument("--lat", type=float, metavar="LAT",
                        help="Check a single latitude (requires --lon)")
    parser.add_argument("--lon", type=float, metavar="LON",
                        help="Check a single longitude (requires --lat)")
    parser.add_argument("--off-path", type=float, metavar="M",
                        default=CONFIG["off_path_threshold"],
                        help=f"Off-trail distance in meters (default: {CONFIG['off_path_threshold']})")
    parser.add_argument("--proximity", type=float, metavar="M",
                        default=CONFIG["proximity_threshold"],
                        help=f"Anchor move threshold in meters (default: {CONFIG['proximity_threshold']})")
    parser.add_argument("--log", metavar="FILE",
                        help="Log file path (default: trailguide_TIMESTAMP.log)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not speak hints")

    args = parser.parse_args(argv)

    # Validate lat/lon - must provide both or neither
    if (args.lat is None) != (args.lon is None):
        parser.error("--lat and --lon must be used together")
    if args.lat is not None and args.playback:
        parser.error("--lat/--lon cannot be combined with --playback")
    if args.speed <= 0:
        parser.error("--speed must be positive")

    if not FilePath(args.path_file).exists():
        print(f"Path file not found: {args.path_file}")
        sys.exit(1)
    try:
        path = load_path(args.path_file)
    except ValueError as e:
        print(e)
        sys.exit(1)

    source = None
    if args.playback:
        if not FilePath(args.playback).exists():
            print(f"Playback file not found: {args.playback}")
            sys.exit(1)
        try:
            source = GPSPlayback(args.playback, args.speed)
        except ValueError as e:
            print(e)
            sys.exit(1)
        print(f"Loaded GPS trace from {args.playback} ({len(source.trace)} entries)")
    elif args.lat is not None:
        source = FixedLocation(args.lat, args.lon)

    log_path = args.log
    if not log_path:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = f"trailguide_{timestamp}.log"

    session = TrailSession(
        path,
        off_path_threshold=args.off_path,
        proximity_threshold=args.proximity,
        log_path=log_path,
        speak=not args.quiet,
    )
    if source is not None:
        session.set_gps_source(source)

    session.run()
    if args.lat is not None:
        print(session.describe_last_fix())


if __name__ == "__main__":
    main()
