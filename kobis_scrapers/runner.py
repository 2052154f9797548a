"""Batch collection of movie details."""
from __future__ import annotations

import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List

from .base import ImageKind
from .errors import FieldNotFoundError
from .scraper import KobisScraper


def _collect_single(scraper: KobisScraper, code: int) -> Dict[str, object]:
    print(f"[KOBIS] Collecting details for {code} …", file=sys.stderr)
    try:
        synopsis = scraper.get_synopsis(code)
    except FieldNotFoundError:
        synopsis = None
    return {
        "code": code,
        "synopsis": synopsis,
        "main_poster": scraper.get_main_poster(code),
        "posters": scraper.get_image_urls(code, ImageKind.POSTER),
        "still_cuts": scraper.get_image_urls(code, ImageKind.STILL_CUT),
        "actors": [actor.as_dict() for actor in scraper.get_actor_list(code)],
    }


def collect_movie_details(
    scraper: KobisScraper,
    codes: Iterable[int],
    *,
    parallel: bool = False,
    max_workers: int | None = None,
) -> List[Dict[str, object]]:
    """Gather details for each code sequentially or in a thread pool.

    Codes that fail are reported and skipped; results keep the input order.
    """

    code_list = list(dict.fromkeys(codes))
    collected: Dict[int, Dict[str, object]] = {}

    if not parallel or len(code_list) <= 1:
        for code in code_list:
            try:
                collected[code] = _collect_single(scraper, code)
            except Exception as exc:  # noqa: BLE001 - we need to log and continue
                print(f"⚠️ [KOBIS] Error for {code}: {exc}", file=sys.stderr)
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_map = {executor.submit(_collect_single, scraper, code): code for code in code_list}
            for future in as_completed(future_map):
                code = future_map[future]
                try:
                    collected[code] = future.result()
                except Exception as exc:  # noqa: BLE001 - we need to log and continue
                    print(f"⚠️ [KOBIS] Error for {code}: {exc}", file=sys.stderr)

    print(f"→ {len(collected)} of {len(code_list)} movies collected.", file=sys.stderr)
    return [collected[code] for code in code_list if code in collected]
