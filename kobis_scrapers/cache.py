"""Process-lifetime memo of parsed detail popups, keyed by movie code."""
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Callable, Dict, Optional

from bs4 import BeautifulSoup

DetailFetcher = Callable[[int], BeautifulSoup]


class DetailCache:
    """Fetch each detail popup at most once.

    ``max_entries`` of ``None`` (or 0) keeps every document until :meth:`clear`.
    A positive value evicts the least recently used document instead.

    Concurrent callers asking for the same code wait for a single fetch;
    fetches for different codes run in parallel.
    """

    def __init__(self, fetcher: DetailFetcher, max_entries: Optional[int] = None) -> None:
        self._fetcher = fetcher
        self._max_entries = max_entries if max_entries and max_entries > 0 else None
        self._documents: "OrderedDict[int, BeautifulSoup]" = OrderedDict()
        self._lock = threading.Lock()
        self._in_flight: Dict[int, threading.Lock] = {}

    def _lookup(self, code: int) -> Optional[BeautifulSoup]:
        document = self._documents.get(code)
        if document is not None:
            self._documents.move_to_end(code)
        return document

    def get(self, code: int) -> BeautifulSoup:
        with self._lock:
            document = self._lookup(code)
            if document is not None:
                return document
            code_lock = self._in_flight.setdefault(code, threading.Lock())

        with code_lock:
            with self._lock:
                document = self._lookup(code)
                if document is not None:
                    return document
            try:
                # Store only after a complete fetch; a failure leaves the cache untouched.
                document = self._fetcher(code)
                with self._lock:
                    self._documents[code] = document
                    if self._max_entries is not None:
                        while len(self._documents) > self._max_entries:
                            self._documents.popitem(last=False)
            finally:
                with self._lock:
                    if self._in_flight.get(code) is code_lock:
                        del self._in_flight[code]
            return document

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()

    def __contains__(self, code: object) -> bool:
        return code in self._documents

    def __len__(self) -> int:
        return len(self._documents)
