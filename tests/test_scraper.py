"""
Unit tests for KobisScraper's per-operation failure policies.
"""

import datetime as dt

import pytest

from kobis_scrapers import KobisScraper
from kobis_scrapers.base import ImageKind
from kobis_scrapers.config import DETAIL_PATH
from kobis_scrapers.errors import (
    OPERATION_POLICIES,
    FailurePolicy,
    MalformedPageError,
    TransportError,
    with_failure_policy,
)

from .conftest import FakeHttpClient

pytestmark = pytest.mark.unit

CODE = 20226254

OPERATIONS = {
    "daily_box_office": lambda s: s.daily_box_office(dt.date(2022, 11, 18), dt.date(2022, 11, 20)),
    "get_synopsis": lambda s: s.get_synopsis(CODE),
    "get_main_poster": lambda s: s.get_main_poster(CODE),
    "get_image_urls": lambda s: s.get_image_urls(CODE, ImageKind.POSTER),
    "get_actor_list": lambda s: s.get_actor_list(CODE),
    "search_movies": lambda s: s.search_movies(2022, 2022),
}


@pytest.fixture
def offline_scraper(settings):
    return KobisScraper(settings=settings, http=FakeHttpClient(error=TransportError("https://www.kobis.or.kr", "down")))


def test_every_operation_has_a_policy():
    assert set(OPERATIONS) == set(OPERATION_POLICIES)


@pytest.mark.parametrize("operation", sorted(set(OPERATIONS) - {"search_movies"}))
def test_propagating_operations_raise(offline_scraper, operation):
    with pytest.raises(TransportError):
        OPERATIONS[operation](offline_scraper)


@pytest.mark.parametrize("operation", sorted(OPERATIONS))
def test_policy_table_decides(offline_scraper, monkeypatch, capsys, operation):
    monkeypatch.setitem(OPERATION_POLICIES, operation, FailurePolicy.DEGRADE_TO_EMPTY)
    result = OPERATIONS[operation](offline_scraper)
    assert not result
    assert f"[KOBIS] {operation} failed" in capsys.readouterr().err


def test_degraded_box_office_has_no_dates(offline_scraper, monkeypatch):
    monkeypatch.setitem(OPERATION_POLICIES, "daily_box_office", FailurePolicy.DEGRADE_TO_EMPTY)
    box_office = offline_scraper.daily_box_office(dt.date(2022, 11, 18), dt.date(2022, 11, 20))
    assert box_office.dates == []


def test_search_switched_to_propagate(offline_scraper, monkeypatch):
    monkeypatch.setitem(OPERATION_POLICIES, "search_movies", FailurePolicy.PROPAGATE)
    with pytest.raises(TransportError):
        offline_scraper.search_movies(2022, 2022)


def test_parse_errors_propagate_even_when_degrading(scraper, fake_http, monkeypatch):
    monkeypatch.setitem(OPERATION_POLICIES, "get_main_poster", FailurePolicy.DEGRADE_TO_EMPTY)
    fake_http.responses[DETAIL_PATH] = "<html><body></body></html>"
    with pytest.raises(MalformedPageError):
        scraper.get_main_poster(CODE)


def test_explicit_policy_overrides_table():
    def fail():
        raise TransportError("https://www.kobis.or.kr", "down")

    assert with_failure_policy("get_actor_list", fail, list, FailurePolicy.DEGRADE_TO_EMPTY) == []
    with pytest.raises(TransportError):
        with_failure_policy("search_movies", fail, list, FailurePolicy.PROPAGATE)
