"""Configuration helpers for the KOBIS scrapers."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://www.kobis.or.kr"

SEARCH_PATH = "/kobis/business/mast/mvie/searchUserMovCdList.do"
DAILY_BOX_OFFICE_PATH = "/kobis/business/stat/boxs/findDailyBoxOfficeList.do"
DETAIL_PATH = "/kobis/business/mast/mvie/searchMovieDtl.do"
ACTOR_LIST_PATH = "/kobis/business/mast/mvie/searchMovActorLists.do"

DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/125.0 Safari/537.36"
    )
}

JSON_HEADERS = {
    "Accept": "application/json, text/javascript, */*; q=0.01",
    "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
}

# The site rejects requests that omit a field, so every field is always sent.
# Order matters only for readability of captured traffic.
SEARCH_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("curPage", ""),
    ("searchType", ""),
    ("point", ""),
    ("orderBy", ""),
    ("auth", ""),
    ("ordering", "updDttmOrder"),
    ("searchOpen", ""),
    ("movieNm", ""),
    ("movieCd", ""),
    ("directorNm", ""),
    ("prdtStartYear", ""),
    ("prdtEndYear", ""),
    ("openStartDt", ""),
    ("openEndDt", ""),
    ("repNationCd", ""),
    ("showTypeStr", ""),
)

DAILY_BOX_OFFICE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("loadEnd", "0"),
    ("sMultiMovieYn", ""),
    ("sRepNationCd", ""),
    ("sSearchFrom", ""),
    ("sSearchTo", ""),
    ("sWideAreaCd", ""),
    ("searchType", "search"),
)

DETAIL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("code", ""),
    ("sType", ""),
    ("titleYN", "Y"),
    ("etcParam", ""),
    ("isOuterReq", "false"),
)

ACTOR_LIST_FIELDS: Tuple[Tuple[str, str], ...] = (("movieCd", ""),)


def build_form(template: Tuple[Tuple[str, str], ...], **values: object) -> List[Tuple[str, str]]:
    """Fill a form template, keeping field order and blanking anything unset.

    Unknown keys raise ``KeyError`` so a typo never silently drops a field.
    """
    known = {name for name, _ in template}
    unknown = set(values) - known
    if unknown:
        raise KeyError(f"Unknown form field(s): {', '.join(sorted(unknown))}")
    form: List[Tuple[str, str]] = []
    for name, default in template:
        value = values.get(name)
        form.append((name, default if value is None else str(value)))
    return form


def _get_int(key: str, default: int) -> int:
    val = os.getenv(key, "")
    if val.strip() == "":
        return default
    return int(val)


def _get_float(key: str, default: float) -> float:
    val = os.getenv(key, "")
    if val.strip() == "":
        return default
    return float(val)


@dataclass(slots=True)
class KobisSettings:
    """Central configuration that may be adjusted via environment variables."""

    base_url: str = field(default_factory=lambda: os.getenv("KOBIS_BASE_URL", DEFAULT_BASE_URL).rstrip("/"))
    timeout: float = field(default_factory=lambda: _get_float("KOBIS_TIMEOUT", 30.0))
    max_retries: int = field(default_factory=lambda: _get_int("KOBIS_MAX_RETRIES", 0))
    backoff_factor: float = field(default_factory=lambda: _get_float("KOBIS_BACKOFF_FACTOR", 0.5))
    detail_cache_size: int = field(default_factory=lambda: _get_int("KOBIS_DETAIL_CACHE_SIZE", 0))
    request_headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"
