"""Markup extraction helpers shared by the KOBIS decoders."""
from __future__ import annotations

import datetime as dt
import re
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import MalformedPageError

HEADING_DATE_FORMAT = "%Y년 %m월 %d일"
# Headings end with a weekday annotation such as "(일)".
HEADING_SUFFIX_LENGTH = 3
THUMBNAIL_SIZE = "thumb_x640"

_THUMB_SIZE_RE = re.compile(r"thumb_x\d{3}")
_THUMB_DIR_RE = re.compile(r"thumb_x\d{3}/thn_")


def parse_html(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


def select_all(node: Tag, path: str) -> List[Tag]:
    return list(node.select(path))


def select_first(node: Tag, path: str, *, required: bool = True) -> Optional[Tag]:
    found = node.select_one(path)
    if found is None and required:
        raise MalformedPageError(f"No element matches '{path}'")
    return found


def select_nth(node: Tag, path: str, index: int) -> Tag:
    matches = node.select(path)
    if index >= len(matches):
        raise MalformedPageError(f"Expected at least {index + 1} element(s) for '{path}', found {len(matches)}")
    return matches[index]


def text_of(node: Tag) -> str:
    """Rendered text with every whitespace run collapsed to a single space."""
    return " ".join(node.get_text(" ").split())


def attr_of(node: Tag, name: str, default: Optional[str] = None) -> str:
    value = node.get(name)
    if value is None:
        if default is not None:
            return default
        raise MalformedPageError(f"<{node.name}> has no '{name}' attribute")
    if isinstance(value, list):
        return " ".join(value)
    return value


def extract_onclick_code(handler: str) -> int:
    """Pull the movie code out of ``mstView('movie','20226254');return false;``."""
    parts = handler.split("','")
    if len(parts) < 2:
        raise MalformedPageError(f"Unexpected click handler: {handler!r}")
    raw = parts[1].split("');")[0]
    try:
        return int(raw)
    except ValueError as exc:
        raise MalformedPageError(f"Click handler carries no numeric code: {handler!r}") from exc


def parse_heading_date(text: str) -> dt.date:
    """Convert a ranking heading such as '2022년 11월 20일(일)' to a date."""
    stripped = text.strip()
    try:
        return dt.datetime.strptime(stripped[:-HEADING_SUFFIX_LENGTH].strip(), HEADING_DATE_FORMAT).date()
    except ValueError as exc:
        raise MalformedPageError(f"Unparseable ranking heading: {text!r}") from exc


def parse_int(text: str, what: str) -> int:
    try:
        return int(text.strip().replace(",", ""))
    except ValueError as exc:
        raise MalformedPageError(f"Expected an integer {what}, got {text!r}") from exc


def rewrite_image_src(src: str, *, thumbnail: bool, base_url: str) -> str:
    """Return an absolute image URL at thumbnail or full size."""
    if thumbnail:
        path = _THUMB_SIZE_RE.sub(THUMBNAIL_SIZE, src, count=1)
    else:
        path = _THUMB_DIR_RE.sub("", src, count=1)
    return f"{base_url}{path}"
