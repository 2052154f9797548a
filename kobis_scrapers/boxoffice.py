"""Daily box-office rankings for a date range."""
from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional, Sequence, Tuple

from bs4.element import Tag

from .base import BoxOfficeEntry
from .config import DAILY_BOX_OFFICE_FIELDS, DAILY_BOX_OFFICE_PATH, KobisSettings, build_form
from .errors import DateNotScrapedError, MalformedPageError
from .utils.http import HttpClient
from .utils.parsing import (
    attr_of,
    extract_onclick_code,
    parse_heading_date,
    parse_html,
    parse_int,
    select_all,
    select_first,
    text_of,
)

__all__ = ["DailyBoxOffice", "parse_daily_box_office"]

TABLE_PATH = ".rst_sch > div > table"
HEADING_PATH = ".rst_sch > div > h4"


def _parse_row(row: Tag, date: dt.date) -> BoxOfficeEntry:
    cols = select_all(row, "td")
    if len(cols) < 2:
        raise MalformedPageError(f"Ranking row has {len(cols)} column(s), expected at least 2")
    anchor = select_first(cols[1], "a")
    return BoxOfficeEntry(
        rank=parse_int(text_of(cols[0]), "rank"),
        title=attr_of(anchor, "title"),
        code=extract_onclick_code(attr_of(anchor, "onclick")),
        date=date,
    )


def _pair_headings_with_tables(headings: Sequence[Tag], tables: Sequence[Tag]) -> List[Tuple[dt.date, Tag]]:
    """Match the Nth heading to the Nth table.

    The page gives no explicit link between a heading and its table, so the
    pairing is purely positional.
    """
    if len(headings) != len(tables):
        raise MalformedPageError(
            f"Found {len(headings)} ranking heading(s) but {len(tables)} table(s)"
        )
    return [(parse_heading_date(text_of(h4)), table) for h4, table in zip(headings, tables)]


def parse_daily_box_office(markup: str) -> Dict[dt.date, List[BoxOfficeEntry]]:
    """Parse a daily box-office response into entries grouped by date."""
    document = parse_html(markup)
    pairs = _pair_headings_with_tables(select_all(document, HEADING_PATH), select_all(document, TABLE_PATH))
    index: Dict[dt.date, List[BoxOfficeEntry]] = {}
    for date, table in pairs:
        body = select_first(table, "tbody")
        index[date] = [_parse_row(row, date) for row in select_all(body, "tr")]
    return index


class DailyBoxOffice:
    """Box-office rankings for ``start``..``end``, fetched once on construction.

    Passing ``markup`` parses an already fetched response instead.
    """

    def __init__(
        self,
        start: dt.date,
        end: dt.date,
        *,
        http: Optional[HttpClient] = None,
        settings: Optional[KobisSettings] = None,
        markup: Optional[str] = None,
    ) -> None:
        if start > end:
            raise ValueError(f"start ({start}) is after end ({end})")
        self.start = start
        self.end = end
        self.settings = settings or KobisSettings()
        if markup is None:
            http = http or HttpClient.from_settings(self.settings)
            form = build_form(
                DAILY_BOX_OFFICE_FIELDS,
                sSearchFrom=start.isoformat(),
                sSearchTo=end.isoformat(),
            )
            markup = http.post(self.settings.url(DAILY_BOX_OFFICE_PATH), form)
        self._index = parse_daily_box_office(markup)

    def get_by_date(self, date: dt.date) -> List[BoxOfficeEntry]:
        """Return the ranking for ``date``.

        Raises DateNotScrapedError when the response had no block for that date.
        """
        try:
            return list(self._index[date])
        except KeyError:
            raise DateNotScrapedError(date) from None

    @property
    def dates(self) -> List[dt.date]:
        return sorted(self._index)

    def as_dict(self) -> Dict[str, List[dict]]:
        return {date.isoformat(): [entry.as_dict() for entry in self._index[date]] for date in self.dates}

    def __contains__(self, date: object) -> bool:
        return date in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"DailyBoxOffice(start={self.start}, end={self.end}, dates={len(self._index)})"
