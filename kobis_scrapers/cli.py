"""Command line entry point for the KOBIS scrapers."""
from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
from pathlib import Path
from typing import List

from . import KobisScraper, KobisSettings
from .base import ImageKind
from .errors import DateNotScrapedError, KobisError
from .runner import collect_movie_details

EXIT_ERROR = 1
EXIT_DATE_NOT_SCRAPED = 3

_IMAGE_KINDS = {"poster": ImageKind.POSTER, "still-cut": ImageKind.STILL_CUT}


def _iso_date(value: str) -> dt.date:
    try:
        return dt.date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape movie and box-office data from KOBIS")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON to this path instead of stdout")
    subparsers = parser.add_subparsers(dest="command", required=True)

    box = subparsers.add_parser("boxoffice", help="Daily box-office rankings for a date range")
    box.add_argument("--start", type=_iso_date, required=True, help="First day (YYYY-MM-DD)")
    box.add_argument("--end", type=_iso_date, required=True, help="Last day (YYYY-MM-DD)")
    box.add_argument("--date", type=_iso_date, default=None, help="Only print this day's ranking")

    find = subparsers.add_parser("search", help="List movie codes by opening year")
    find.add_argument("--start-year", type=int, required=True)
    find.add_argument("--end-year", type=int, required=True)
    find.add_argument("--page", type=int, default=1)
    find.add_argument("--movie-name", default="")
    find.add_argument("--director-name", default="")

    for name, help_text in (
        ("synopsis", "Print a movie's synopsis"),
        ("poster", "Print a movie's main poster URL"),
        ("actors", "List a movie's cast"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("code", type=int)

    images = subparsers.add_parser("images", help="List poster or still-cut image URLs")
    images.add_argument("code", type=int)
    images.add_argument("--kind", choices=sorted(_IMAGE_KINDS), default="poster")
    images.add_argument("--thumbnail", action="store_true", help="Return thumbnail-size URLs")

    details = subparsers.add_parser("details", help="Collect every detail for several movies")
    details.add_argument("codes", type=int, nargs="+")
    details.add_argument("--parallel", action="store_true", help="Fetch movies in parallel")
    details.add_argument("--max-workers", type=int, default=None, help="Maximum worker threads when using --parallel")
    return parser


def _run(args: argparse.Namespace, scraper: KobisScraper) -> object:
    if args.command == "boxoffice":
        box_office = scraper.daily_box_office(args.start, args.end)
        if args.date is not None:
            return [entry.as_dict() for entry in box_office.get_by_date(args.date)]
        return box_office.as_dict()
    if args.command == "search":
        hits = scraper.search_movies(
            args.start_year,
            args.end_year,
            args.page,
            movie_name=args.movie_name,
            director_name=args.director_name,
        )
        return [hit.as_dict() for hit in hits]
    if args.command == "synopsis":
        return scraper.get_synopsis(args.code)
    if args.command == "poster":
        return scraper.get_main_poster(args.code)
    if args.command == "images":
        return scraper.get_image_urls(args.code, _IMAGE_KINDS[args.kind], args.thumbnail)
    if args.command == "actors":
        return [actor.as_dict() for actor in scraper.get_actor_list(args.code)]
    if args.command == "details":
        return collect_movie_details(scraper, args.codes, parallel=args.parallel, max_workers=args.max_workers)
    raise AssertionError(f"unhandled command {args.command!r}")


def main(argv: List[str] | None = None, scraper: KobisScraper | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    scraper = scraper or KobisScraper(settings=KobisSettings())

    try:
        result = _run(args, scraper)
    except DateNotScrapedError as exc:
        print(f"⚠️ [KOBIS] {exc}", file=sys.stderr)
        return EXIT_DATE_NOT_SCRAPED
    except KobisError as exc:
        print(f"ERROR: [KOBIS] {exc}", file=sys.stderr)
        return EXIT_ERROR

    payload = json.dumps(result, ensure_ascii=False, indent=2)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload, encoding="utf-8")
        print(f"✅ Saved results to {args.output}", file=sys.stderr)
    else:
        print(payload)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
