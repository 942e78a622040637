# -*- coding: utf-8 -*-
"""Search-text resolution.

``"lat, lon"`` text resolves locally; anything else goes to the place
search client. Successful and not-found lookups are cached per query.
"""
from __future__ import annotations
import logging
import threading
from typing import Any, Dict, List, Optional, Protocol

from ..models.claim import Coordinate
from ..utils.errors import NotFoundError, ResolverError
from .coordinate_parser import parse_coordinate_pair
from .nominatim import NominatimClient, first_result_coordinates

logger = logging.getLogger(__name__)


class PlaceSearchClient(Protocol):
    def search(self, query: str) -> List[Dict[str, Any]]: ...


class GeocodeResolver:
    """Turns free text into a Coordinate.

    Raises ``NotFoundError`` when nothing matches and ``ResolverError`` when
    the lookup itself fails. Neither is retried.
    """

    def __init__(self, search_client: PlaceSearchClient, use_cache: bool = True):
        self.search_client = search_client
        self.use_cache = use_cache
        # query -> Coordinate, or None for a cached not-found
        self._cache: Dict[str, Optional[Coordinate]] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, geocoder_config) -> "GeocodeResolver":
        return cls(NominatimClient.from_config(geocoder_config))

    def resolve(self, text: str) -> Coordinate:
        direct = parse_coordinate_pair(text)
        if direct is not None:
            return direct

        query = (text or '').strip()
        if not query:
            raise NotFoundError.for_query(query)

        if self.use_cache:
            with self._lock:
                if query in self._cache:
                    cached = self._cache[query]
                    if cached is None:
                        raise NotFoundError.for_query(query)
                    return cached

        coordinate = self._lookup(query)
        if self.use_cache:
            with self._lock:
                self._cache[query] = coordinate
        if coordinate is None:
            logger.info(f"No place found for {query!r}")
            raise NotFoundError.for_query(query)
        logger.info(f"Resolved {query!r} to {coordinate}")
        return coordinate

    def _lookup(self, query: str) -> Optional[Coordinate]:
        results = self.search_client.search(query)
        try:
            pair = first_result_coordinates(results)
        except ValueError as e:
            raise ResolverError.invalid_response(query, str(e), e)
        if pair is None:
            return None
        return Coordinate(latitude=pair[0], longitude=pair[1])
