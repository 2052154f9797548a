"""Exceptions raised by the KOBIS scrapers, plus per-operation failure policies."""
from __future__ import annotations

import datetime as dt
import sys
from enum import Enum
from typing import Callable, Dict, Optional, TypeVar

__all__ = [
    "KobisError",
    "TransportError",
    "MalformedPageError",
    "DateNotScrapedError",
    "FieldNotFoundError",
    "FailurePolicy",
    "OPERATION_POLICIES",
    "with_failure_policy",
]

T = TypeVar("T")


class KobisError(Exception):
    """Base class for every error raised by this package."""


class TransportError(KobisError):
    """The site could not be reached or the exchange did not complete."""

    def __init__(self, url: str, message: Optional[str] = None) -> None:
        self.url = url
        super().__init__(message or f"Request to {url} failed")


class MalformedPageError(KobisError):
    """An element the extractor relies on is missing from the page."""


class DateNotScrapedError(KobisError, LookupError):
    """The requested date is not part of the scraped box-office range."""

    def __init__(self, date: dt.date) -> None:
        self.date = date
        super().__init__(f"No box-office data was scraped for {date.isoformat()}")


class FieldNotFoundError(KobisError, LookupError):
    """A labelled info panel is absent from an otherwise valid detail page."""

    def __init__(self, code: int, field: str) -> None:
        self.code = code
        self.field = field
        super().__init__(f"Movie {code} has no '{field}' panel")


class FailurePolicy(Enum):
    PROPAGATE = "propagate"
    DEGRADE_TO_EMPTY = "degrade_to_empty"


# Only transport failures are ever degraded; parsing errors always propagate.
OPERATION_POLICIES: Dict[str, FailurePolicy] = {
    "daily_box_office": FailurePolicy.PROPAGATE,
    "search_movies": FailurePolicy.DEGRADE_TO_EMPTY,
    "get_synopsis": FailurePolicy.PROPAGATE,
    "get_main_poster": FailurePolicy.PROPAGATE,
    "get_image_urls": FailurePolicy.PROPAGATE,
    "get_actor_list": FailurePolicy.PROPAGATE,
}


def with_failure_policy(
    operation: str,
    call: Callable[[], T],
    empty: Callable[[], T],
    policy: Optional[FailurePolicy] = None,
) -> T:
    """Run ``call`` under ``operation``'s failure policy.

    ``policy`` overrides the entry in :data:`OPERATION_POLICIES`. Under
    ``DEGRADE_TO_EMPTY`` a :class:`TransportError` is reported on stderr and
    ``empty()`` is returned; every other error propagates.
    """
    policy = policy or OPERATION_POLICIES[operation]
    try:
        return call()
    except TransportError as exc:
        if policy is FailurePolicy.PROPAGATE:
            raise
        print(f"⚠️ [KOBIS] {operation} failed, returning an empty result: {exc}", file=sys.stderr)
        return empty()
