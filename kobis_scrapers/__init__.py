"""High-level entry points for the KOBIS scrapers."""
from .base import ActorEntry, BoxOfficeEntry, ImageKind, MovieCode, RoleType
from .boxoffice import DailyBoxOffice
from .cache import DetailCache
from .config import KobisSettings
from .errors import (
    DateNotScrapedError,
    FailurePolicy,
    FieldNotFoundError,
    KobisError,
    MalformedPageError,
    TransportError,
)
from .scraper import KobisScraper

__all__ = [
    "ActorEntry",
    "BoxOfficeEntry",
    "ImageKind",
    "MovieCode",
    "RoleType",
    "DailyBoxOffice",
    "DetailCache",
    "KobisSettings",
    "KobisScraper",
    "KobisError",
    "TransportError",
    "MalformedPageError",
    "DateNotScrapedError",
    "FieldNotFoundError",
    "FailurePolicy",
]
