# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for apparent solar positions.

Usage:
    # Equatorial coordinates and equation of time
    helion --date 2024-06-20T12:00:00Z

    # Add azimuth/altitude for an observer (longitude east-positive)
    helion --date 2024-06-20T12:00:00Z --lat 51.4769 --lon -0.0005

    # Meeus-style longitude (positive west of Greenwich)
    helion --date 2024-06-20T18:00:00Z --lat 30 --lon 90 --west-positive

    # Years outside datetime's range, Julian Day only
    helion --year -1000 --month 7 --day 12 --time 12:00 --julian-calendar --jd-only

    # Export a day of positions to CSV
    helion --date 2024-06-20T00:00:00Z --until 2024-06-21T00:00:00Z \\
        --step-minutes 10 --lat 51.4769 --lon 0 --export-csv sun.csv
"""
import argparse
import dataclasses
import json
import logging
import sys
from datetime import datetime, timedelta, timezone
from typing import Optional

from helion.adapters.csv_exporter import CsvSolarPositionExporter
from helion.domain.julian_day import (
    CalendarInstant,
    julian_day,
    julian_ephemeris_day,
)
from helion.domain.solar_position import (
    GeographicLocation,
    SolarPosition,
    solar_position,
    solar_position_series,
)


def parse_utc(text: str) -> datetime:
    """Parse an ISO-8601 timestamp; no offset means UTC."""
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _parse_time_of_day(text: str) -> tuple[int, int, int, int]:
    parts = text.split(':')
    if not 1 <= len(parts) <= 3:
        raise ValueError(f"invalid time of day '{text}', expected HH[:MM[:SS[.ffffff]]]")
    hour = int(parts[0])
    minute = int(parts[1]) if len(parts) > 1 else 0
    second, microsecond = 0, 0
    if len(parts) > 2:
        whole, _, frac = parts[2].partition('.')
        second = int(whole)
        microsecond = int((frac + '000000')[:6]) if frac else 0
    return hour, minute, second, microsecond


def build_instant(args: argparse.Namespace) -> CalendarInstant:
    """CalendarInstant from either --date or --year/--month/--day/--time."""
    if args.date is not None:
        return CalendarInstant.from_datetime(parse_utc(args.date))
    hour, minute, second, microsecond = _parse_time_of_day(args.time)
    return CalendarInstant(
        args.year, args.month, args.day, hour, minute, second, microsecond,
    )


def build_location(
    lat: Optional[float],
    lon: Optional[float],
    west_positive: bool = False,
) -> Optional[GeographicLocation]:
    if lat is None or lon is None:
        return None
    if west_positive:
        return GeographicLocation.from_west_positive(lat, lon)
    return GeographicLocation(lat, lon)


def format_position(
    instant: CalendarInstant,
    jd: float,
    position: SolarPosition,
) -> str:
    """Human-readable summary of one solar position."""
    lines = [
        f"Instant           {instant.isoformat()}",
        f"JD                {jd:.6f}",
        f"JDE               {position.jde:.6f}",
        f"Equation of time  {position.equation_of_time_min:+.4f} min",
        f"Right ascension   {position.right_ascension_deg:.6f} deg",
        f"Declination       {position.declination_deg:+.6f} deg",
        f"Radius vector     {position.radius_au:.8f} AU",
    ]
    if position.has_horizontal:
        lines.append(f"Azimuth           {position.azimuth_deg:.6f} deg (from north, eastward)")
        lines.append(f"Altitude          {position.altitude_deg:+.6f} deg")
    return "\n".join(lines)


def run_single(
    instant: CalendarInstant,
    location: Optional[GeographicLocation] = None,
    gregorian: bool = True,
    jd_only: bool = False,
    as_json: bool = False,
) -> str:
    """Compute and format the result for one instant."""
    jd = julian_day(instant, gregorian)

    if jd_only:
        jde = julian_ephemeris_day(instant)
        if as_json:
            return json.dumps({"instant": instant.isoformat(), "jd": jd, "jde": jde}, indent=2)
        return f"JD   {jd:.6f}\nJDE  {jde:.6f}"

    position = solar_position(instant, location=location)
    if as_json:
        payload = {"instant": instant.isoformat(), "jd": jd}
        payload.update(dataclasses.asdict(position))
        return json.dumps(payload, indent=2)
    return format_position(instant, jd, position)


def run_export(
    start: datetime,
    stop: datetime,
    step_minutes: float,
    path: str,
    location: Optional[GeographicLocation] = None,
) -> int:
    """Write positions from start to stop (inclusive) to CSV. Returns row count."""
    rows = solar_position_series(
        start, stop, timedelta(minutes=step_minutes), location=location,
    )
    return CsvSolarPositionExporter().export(rows, path)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Apparent position of the Sun (Meeus, Astronomical Algorithms)"
    )
    parser.add_argument(
        '--date', '-d',
        help="UTC instant in ISO-8601 (e.g. 2024-06-20T12:00:00Z); no offset means UTC"
    )

    extended = parser.add_argument_group('explicit calendar fields (any proleptic year)')
    extended.add_argument('--year', type=int, help="Astronomical year (0 = 1 BC)")
    extended.add_argument('--month', type=int, default=1, help="Month 1-12 (default: 1)")
    extended.add_argument('--day', type=int, default=1, help="Day of month (default: 1)")
    extended.add_argument(
        '--time', default='00:00',
        help="UTC time of day HH[:MM[:SS[.ffffff]]] (default: 00:00)"
    )
    extended.add_argument(
        '--julian-calendar', action='store_true', default=False,
        help="Interpret the date in the proleptic Julian calendar for the JD line"
    )

    observer = parser.add_argument_group('observer')
    observer.add_argument('--lat', type=float, help="Latitude in degrees, north positive")
    observer.add_argument('--lon', type=float, help="Longitude in degrees, east positive")
    observer.add_argument(
        '--west-positive', action='store_true', default=False,
        help="Treat --lon as positive west of Greenwich (Meeus convention)"
    )

    output = parser.add_argument_group('output')
    output.add_argument(
        '--jd-only', action='store_true', default=False,
        help="Print only the Julian Day and Julian Ephemeris Day"
    )
    output.add_argument('--json', action='store_true', default=False, help="Print JSON")
    output.add_argument('--export-csv', help="Write a time series to CSV (requires --until)")
    output.add_argument('--until', help="End of the CSV time series, ISO-8601 UTC (inclusive)")
    output.add_argument(
        '--step-minutes', type=float, default=60.0,
        help="Step of the CSV time series in minutes (default: 60)"
    )
    output.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.date is None and args.year is None:
        parser.error("one of --date or --year is required")
    if args.date is not None and args.year is not None:
        parser.error("--date and --year are mutually exclusive")
    if args.export_csv and not (args.date and args.until):
        parser.error("--export-csv requires --date and --until")

    location = build_location(args.lat, args.lon, args.west_positive)

    try:
        if args.export_csv:
            n = run_export(
                parse_utc(args.date),
                parse_utc(args.until),
                args.step_minutes,
                args.export_csv,
                location=location,
            )
            print(f"Exported {n} positions to {args.export_csv}")
            return

        print(run_single(
            build_instant(args),
            location=location,
            gregorian=not args.julian_calendar,
            jd_only=args.jd_only,
            as_json=args.json,
        ))
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
