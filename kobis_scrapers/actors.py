"""Cast list decoder backed by the site's JSON endpoint."""
from __future__ import annotations

import json
from typing import List

from .base import ActorEntry
from .config import ACTOR_LIST_FIELDS, ACTOR_LIST_PATH, KobisSettings, build_form
from .errors import MalformedPageError
from .utils.http import HttpClient


def parse_actor_list(body: str) -> List[ActorEntry]:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise MalformedPageError(f"Actor list is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise MalformedPageError(f"Actor list should be a JSON array, got {type(payload).__name__}")
    return [ActorEntry.from_record(record) for record in payload if isinstance(record, dict)]


def get_actor_list(http: HttpClient, settings: KobisSettings, code: int) -> List[ActorEntry]:
    form = build_form(ACTOR_LIST_FIELDS, movieCd=code)
    return parse_actor_list(http.post_json(settings.url(ACTOR_LIST_PATH), form))
