"""Movie code search over a range of opening years."""
from __future__ import annotations

from typing import List, Optional

from .base import MovieCode
from .config import SEARCH_FIELDS, SEARCH_PATH, KobisSettings, build_form
from .errors import FailurePolicy, with_failure_policy
from .utils.http import HttpClient
from .utils.parsing import attr_of, parse_html, parse_int, select_all, text_of

RESULT_ROW_PATH = ".tbl3 > tbody > tr"
# Result rows have exactly this many cells; header and "no results" rows do not.
RESULT_COLUMNS = 8


def parse_search_results(markup: str) -> List[MovieCode]:
    results: List[MovieCode] = []
    for row in select_all(parse_html(markup), RESULT_ROW_PATH):
        cells = select_all(row, "td")
        if len(cells) != RESULT_COLUMNS:
            continue
        title = attr_of(cells[0], "title", default="")
        results.append(MovieCode(title=title, code=parse_int(text_of(cells[-1]), "movie code")))
    return results


def search_movies(
    http: HttpClient,
    settings: KobisSettings,
    open_start_year: int,
    open_end_year: int,
    page: int = 1,
    *,
    movie_name: str = "",
    director_name: str = "",
    policy: Optional[FailurePolicy] = None,
) -> List[MovieCode]:
    """Return one page of movies that opened between the two years.

    By default a transport failure yields an empty list instead of raising.
    """
    form = build_form(
        SEARCH_FIELDS,
        curPage=page,
        movieNm=movie_name,
        directorNm=director_name,
        openStartDt=open_start_year,
        openEndDt=open_end_year,
    )
    return with_failure_policy(
        "search_movies",
        lambda: parse_search_results(http.post(settings.url(SEARCH_PATH), form)),
        list,
        policy,
    )
