"""Utility helpers shared across scrapers."""
from .http import HttpClient, build_session
from .parsing import (
    attr_of,
    extract_onclick_code,
    parse_heading_date,
    parse_html,
    rewrite_image_src,
    select_all,
    select_first,
    select_nth,
    text_of,
)

__all__ = [
    "HttpClient",
    "build_session",
    "attr_of",
    "extract_onclick_code",
    "parse_heading_date",
    "parse_html",
    "rewrite_image_src",
    "select_all",
    "select_first",
    "select_nth",
    "text_of",
]
