"""Decoders for the per-movie detail popup (synopsis, poster, still cuts)."""
from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from .base import ImageKind
from .cache import DetailCache
from .config import DEFAULT_BASE_URL, DETAIL_FIELDS, DETAIL_PATH, KobisSettings, build_form
from .errors import FieldNotFoundError
from .utils.http import HttpClient
from .utils.parsing import (
    attr_of,
    parse_html,
    rewrite_image_src,
    select_all,
    select_first,
    select_nth,
    text_of,
)

__all__ = [
    "SYNOPSIS_LABEL",
    "load_detail_document",
    "get_synopsis",
    "get_main_poster",
    "get_image_urls",
]

SYNOPSIS_LABEL = "시놉시스"
INFO_PANEL_PATH = "div.info2"
MAIN_POSTER_PATH = "a.fl.thumb"


def load_detail_document(http: HttpClient, settings: KobisSettings, code: int) -> BeautifulSoup:
    """Fetch and parse the detail popup for ``code``. Used as the cache's fetcher."""
    form = build_form(DETAIL_FIELDS, code=code)
    return parse_html(http.post(settings.url(DETAIL_PATH), form))


def get_synopsis(cache: DetailCache, code: int) -> str:
    document = cache.get(code)
    for panel in select_all(document, INFO_PANEL_PATH):
        label = select_first(panel, "strong", required=False)
        if label is None or text_of(label) != SYNOPSIS_LABEL:
            continue
        return text_of(select_first(panel, ".desc_info"))
    raise FieldNotFoundError(code, SYNOPSIS_LABEL)


def get_main_poster(cache: DetailCache, code: int, *, base_url: str = DEFAULT_BASE_URL) -> str:
    anchor = select_first(cache.get(code), MAIN_POSTER_PATH)
    return f"{base_url}{attr_of(anchor, 'href')}"


def get_image_urls(
    cache: DetailCache,
    code: int,
    kind: ImageKind,
    thumbnail: bool = False,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> List[str]:
    """Return absolute URLs for every poster or still cut of ``code``.

    Posters live in the first info panel and still cuts in the second.
    """
    panel = select_nth(cache.get(code), INFO_PANEL_PATH, kind.panel_index)
    return [
        rewrite_image_src(attr_of(img, "src"), thumbnail=thumbnail, base_url=base_url)
        for img in select_all(panel, "img")
    ]
