# -*- coding: utf-8 -*-
"""Coordinate pair parsing.

Recognises search input of the form ``"lat, lon"`` so that it can be used
directly without a place search.
"""
from __future__ import annotations
import math
from typing import Optional

from ..models.claim import Coordinate


def _parse_number(token: str) -> Optional[float]:
    token = token.strip()
    if not token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_coordinate_pair(text: str) -> Optional[Coordinate]:
    """Return a Coordinate for ``"lat, lon"`` text, else None.

    Exactly two comma-separated numeric tokens are required and both must
    fall inside the latitude/longitude ranges; anything else is left for the
    place search.
    """
    if text is None:
        return None
    parts = text.split(',')
    if len(parts) != 2:
        return None
    lat = _parse_number(parts[0])
    lon = _parse_number(parts[1])
    if lat is None or lon is None:
        return None
    coordinate = Coordinate(latitude=lat, longitude=lon)
    if not coordinate.in_range():
        return None
    return coordinate
