"""
CLI wrapper for create_reading().

Usage:
    celestial-guide --name NAME --birth-date YYYY-MM-DD --birth-time HH:MM \
        [--gender GENDER] [--output PATH] [--no-reading] [--open] [--verbose]
"""

import argparse
import json
import logging
import os
import webbrowser

from celestial.errors import InvalidRequest
from celestial.reader import DEFAULT_GENDER, GENDERS, ReadingRequest, create_reading


def build_parser():
    parser = argparse.ArgumentParser(
        prog="celestial-guide",
        description="Draw a natal chart and ask the stars for a reading.",
    )
    parser.add_argument("--name", required=True)
    parser.add_argument("--gender", default=DEFAULT_GENDER, choices=GENDERS)
    parser.add_argument("--birth-date", required=True, dest="birth_date",
                        help="YYYY-MM-DD")
    parser.add_argument("--birth-time", required=True, dest="birth_time",
                        help="HH:MM, local clock time")
    parser.add_argument("--output", help="HTML output path")
    parser.add_argument("--no-reading", action="store_true", dest="no_reading",
                        help="Draw the chart only, skip the AI reading")
    parser.add_argument("--open", action="store_true", help="Open in browser after generating")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        request = ReadingRequest.from_strings(
            name=args.name,
            gender=args.gender,
            birth_date=args.birth_date,
            birth_time=args.birth_time,
        ).validate()
    except InvalidRequest as e:
        parser.error(str(e))

    result = create_reading(request, output_path=args.output,
                            with_reading=not args.no_reading)

    print(json.dumps(result, indent=2, ensure_ascii=False))

    if args.open:
        webbrowser.open(f"file://{os.path.abspath(result['path'])}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
