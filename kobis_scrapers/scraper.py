"""High-level client bundling the transport and the detail cache."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from functools import partial
from typing import List, Optional

from . import actors, detail, search
from .base import ActorEntry, ImageKind, MovieCode
from .boxoffice import DailyBoxOffice
from .cache import DetailCache
from .config import KobisSettings
from .errors import FailurePolicy, with_failure_policy
from .utils.http import HttpClient


@dataclass
class KobisScraper:
    """Entry point for every KOBIS operation.

    Each instance owns its own detail cache, so two scrapers never share
    fetched popups.
    """

    settings: KobisSettings = field(default_factory=KobisSettings)
    http: Optional[HttpClient] = None
    detail_cache: Optional[DetailCache] = None

    def __post_init__(self) -> None:
        if self.http is None:
            self.http = HttpClient.from_settings(self.settings)
        if self.detail_cache is None:
            self.detail_cache = DetailCache(
                partial(detail.load_detail_document, self.http, self.settings),
                max_entries=self.settings.detail_cache_size,
            )

    def daily_box_office(self, start: dt.date, end: dt.date) -> DailyBoxOffice:
        return with_failure_policy(
            "daily_box_office",
            lambda: DailyBoxOffice(start, end, http=self.http, settings=self.settings),
            lambda: DailyBoxOffice(start, end, settings=self.settings, markup=""),
        )

    def search_movies(
        self,
        open_start_year: int,
        open_end_year: int,
        page: int = 1,
        *,
        movie_name: str = "",
        director_name: str = "",
        policy: Optional[FailurePolicy] = None,
    ) -> List[MovieCode]:
        return search.search_movies(
            self.http,
            self.settings,
            open_start_year,
            open_end_year,
            page,
            movie_name=movie_name,
            director_name=director_name,
            policy=policy,
        )

    def get_synopsis(self, code: int) -> str:
        return with_failure_policy("get_synopsis", lambda: detail.get_synopsis(self.detail_cache, code), str)

    def get_main_poster(self, code: int) -> str:
        return with_failure_policy(
            "get_main_poster",
            lambda: detail.get_main_poster(self.detail_cache, code, base_url=self.settings.base_url),
            str,
        )

    def get_image_urls(self, code: int, kind: ImageKind, thumbnail: bool = False) -> List[str]:
        return with_failure_policy(
            "get_image_urls",
            lambda: detail.get_image_urls(self.detail_cache, code, kind, thumbnail, base_url=self.settings.base_url),
            list,
        )

    def get_actor_list(self, code: int) -> List[ActorEntry]:
        return with_failure_policy("get_actor_list", lambda: actors.get_actor_list(self.http, self.settings, code), list)

    def clear_detail_cache(self) -> None:
        self.detail_cache.clear()
