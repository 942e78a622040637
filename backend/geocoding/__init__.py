"""Geocoding: coordinate parsing and place-name search."""

from .coordinate_parser import parse_coordinate_pair
from .nominatim import NominatimClient
from .resolver import GeocodeResolver, PlaceSearchClient

__all__ = [
    'parse_coordinate_pair',
    'NominatimClient',
    'GeocodeResolver',
    'PlaceSearchClient',
]
