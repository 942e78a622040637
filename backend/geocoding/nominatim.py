# -*- coding: utf-8 -*-
"""Nominatim place search client.

Respects the public usage policy: a User-Agent is always sent and requests
are spaced by ``min_interval`` seconds (1 request per second by default).
"""
from __future__ import annotations
import json
import logging
import threading
import time
import urllib.parse
from typing import Any, Dict, List, Optional
from urllib.request import Request, urlopen

from ..utils.errors import ResolverError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://nominatim.openstreetmap.org/search'


class NominatimClient:
    """Issues place-name lookups against a Nominatim-compatible endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = 'mullai-land-claims',
        accept_language: str = 'en',
        timeout: float = 15.0,
        min_interval: float = 1.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.accept_language = accept_language
        self.timeout = timeout
        self.min_interval = max(0.0, min_interval)
        self._last_request_ts = 0.0
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, geocoder_config) -> "NominatimClient":
        return cls(
            base_url=geocoder_config.base_url,
            user_agent=geocoder_config.user_agent,
            accept_language=geocoder_config.accept_language,
            timeout=geocoder_config.timeout,
            min_interval=geocoder_config.min_interval,
        )

    def _throttle(self):
        if self.min_interval <= 0:
            return
        with self._lock:
            now = time.monotonic()
            wait = self._last_request_ts + self.min_interval - now
            if wait > 0:
                time.sleep(wait)
            self._last_request_ts = time.monotonic()

    def build_url(self, query: str) -> str:
        params = {
            'format': 'json',
            'q': query,
            'limit': 1,
        }
        return self.base_url + '?' + urllib.parse.urlencode(params)

    def search(self, query: str) -> List[Dict[str, Any]]:
        """Run a lookup and return the decoded result list.

        Raises:
            ResolverError: On transport failure or a body that is not a JSON array
        """
        self._throttle()
        url = self.build_url(query)
        headers = {
            'User-Agent': self.user_agent,
            'Accept-Language': self.accept_language,
        }
        req = Request(url, headers=headers)
        logger.debug(f"Geocoding request: {url}")
        try:
            with urlopen(req, timeout=self.timeout) as resp:
                data = resp.read().decode('utf-8', 'replace')
        except (OSError, ValueError) as e:
            # URLError, HTTPError and socket timeouts are all OSError subclasses
            logger.warning(f"Geocoding request failed for {query!r}: {e}")
            raise ResolverError.request_failed(query, e)

        try:
            parsed = json.loads(data)
        except json.JSONDecodeError as e:
            logger.warning(f"Geocoding response for {query!r} is not JSON")
            raise ResolverError.invalid_response(query, 'Response is not JSON', e)
        if not isinstance(parsed, list):
            raise ResolverError.invalid_response(query, 'Expected a JSON array of results')
        return parsed


def first_result_coordinates(results: List[Dict[str, Any]]) -> Optional[tuple]:
    """Return ``(lat, lon)`` floats of the first result, or None if empty.

    Raises:
        ValueError: If the first result lacks numeric lat/lon fields
    """
    if not results:
        return None
    item = results[0]
    try:
        return float(item['lat']), float(item['lon'])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Unparseable result coordinates: {item!r}") from e
