"""Claim input data models."""

from dataclasses import dataclass
from enum import Enum

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True)
class Coordinate:
    """
    A point picked on the map or produced by a place search.

    Out-of-range values are representable; rule evaluation accepts them.
    Use ``in_range`` where a caller needs the geographic bounds enforced.

    Attributes:
        latitude: Degrees north, valid range [-90, 90]
        longitude: Degrees east, valid range [-180, 180]
    """
    latitude: float
    longitude: float

    def in_range(self) -> bool:
        return (
            LATITUDE_RANGE[0] <= self.latitude <= LATITUDE_RANGE[1]
            and LONGITUDE_RANGE[0] <= self.longitude <= LONGITUDE_RANGE[1]
        )

    def to_dict(self) -> dict:
        return {"latitude": self.latitude, "longitude": self.longitude}

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"


class Purpose(str, Enum):
    """Declared intended use of the land parcel."""
    COMMERCIAL = "Commercial"
    PROTECTED = "Protected"
    INDUSTRIAL = "Industrial"
    AGRICULTURAL = "Agricultural"

    @classmethod
    def parse(cls, value) -> "Purpose":
        """
        Coerce a Purpose or its display value into a Purpose.

        Raises:
            ValueError: If the value names no known purpose
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Unknown purpose {value!r}; expected one of "
                f"{', '.join(p.value for p in cls)}"
            ) from None


DEFAULT_PURPOSE = Purpose.COMMERCIAL
