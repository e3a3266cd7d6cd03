"""CLI entry point for analemma chart export.

    uv run analemma-chart --lat 59.3293 --lon 18.0686 --hour 12:00 --format svg
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from analemma.compute import TraceCache, build_chart_data
from analemma.config import load_settings
from analemma.models import ClockTime, DomainError, GeoCoordinate
from analemma.renderers import static
from analemma.renderers.svg_2d import render_svg

logger = logging.getLogger(__name__)


def _parser(defaults) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="analemma-chart",
        description="Draw the sun's analemma for every hour of the day at a location.",
    )
    p.add_argument("--lat", type=float, default=defaults.location.latitude)
    p.add_argument("--lon", type=float, default=defaults.location.longitude)
    p.add_argument("--hour", default=defaults.hour, help="Highlighted hour, HH:00")
    p.add_argument(
        "--below-horizon",
        action="store_true",
        default=defaults.show_below_horizon,
        help="Also draw positions below the horizon",
    )
    p.add_argument(
        "--today-path",
        action="store_true",
        default=defaults.show_today_path,
        help="Overlay today's sun path",
    )
    p.add_argument("--dark", action="store_true")
    p.add_argument("--format", choices=("png", "svg"), default="png")
    p.add_argument("--width", type=int, default=1000)
    p.add_argument("--height", type=int, default=600)
    p.add_argument("--output", type=Path, default=None)
    return p


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)
    args = _parser(settings).parse_args(argv)

    try:
        coordinate = GeoCoordinate(latitude=args.lat, longitude=args.lon)
        hour = ClockTime.parse(args.hour).label
        chart = build_chart_data(
            TraceCache(coordinate),
            hour,
            show_below_horizon=args.below_horizon,
            now=datetime.now(),
            show_today_path=args.today_path,
            workers=settings.workers,
        )
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.format == "svg":
        output = args.output or static.RESULTS_DIR / static.default_filename(chart, "svg")
        output.parent.mkdir(parents=True, exist_ok=True)
        svg = render_svg(
            chart,
            width=args.width,
            height=args.height,
            dark=args.dark,
            margin_fraction=settings.margin_fraction,
        )
        output.write_text(svg, encoding="utf-8")
    else:
        output = static.save_static_chart(
            chart,
            args.output,
            width=args.width,
            height=args.height,
            dark=args.dark,
            margin_fraction=settings.margin_fraction,
        )

    logger.info("Chart scale %.0f°", chart.scale.max_altitude_deg)
    print(f"Saved: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
