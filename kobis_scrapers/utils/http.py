"""Shared HTTP helpers used by the KOBIS scrapers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

import requests
from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import JSON_HEADERS, KobisSettings
from ..errors import TransportError

FormFields = Sequence[Tuple[str, str]]


def build_session(settings: KobisSettings) -> Session:
    """Create a session with the default headers and, if configured, a retry policy."""
    s = requests.Session()
    if settings.max_retries > 0:
        retries = Retry(
            total=settings.max_retries,
            backoff_factor=settings.backoff_factor,
            status_forcelist=(429, 500, 502, 503, 504),
            allowed_methods={"POST"},
            # Return the last response, whatever its status, once retries run out.
            raise_on_status=False,
        )
        s.mount("https://", HTTPAdapter(max_retries=retries))
        s.mount("http://", HTTPAdapter(max_retries=retries))
    s.headers.update(settings.request_headers)
    return s


@dataclass(slots=True)
class HttpClient:
    """Small wrapper around :class:`requests.Session` for form-encoded POSTs."""

    session: Session
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: float = 30.0

    @classmethod
    def from_settings(cls, settings: KobisSettings) -> "HttpClient":
        return cls(session=build_session(settings), headers=dict(settings.request_headers), timeout=settings.timeout)

    def post(self, url: str, fields: FormFields, **kwargs) -> str:
        """POST ``fields`` form-encoded and return the body, whatever the status."""
        merged_headers = dict(self.headers)
        merged_headers.update(kwargs.pop("headers", {}))
        try:
            response = self.session.post(
                url,
                data=list(fields),
                headers=merged_headers,
                timeout=kwargs.pop("timeout", self.timeout),
                **kwargs,
            )
        except requests.RequestException as exc:
            raise TransportError(url, f"Request to {url} failed: {exc}") from exc
        if not response.encoding or response.encoding.upper() == "ISO-8859-1":
            response.encoding = "utf-8"
        return response.text

    def post_json(self, url: str, fields: FormFields, **kwargs) -> str:
        """Same as :meth:`post` but negotiates a JSON response body."""
        headers = dict(JSON_HEADERS)
        headers.update(kwargs.pop("headers", {}))
        return self.post(url, fields, headers=headers, **kwargs)

