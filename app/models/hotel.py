from typing import Any, Dict, NamedTuple, Optional


# Order matters: a create request reports the first one missing.
REQUIRED_FIELDS = (
    "title",
    "description",
    "guestCount",
    "bedroomCount",
    "bathroomCount",
    "amenities",
    "hostInfo",
    "address",
    "latitude",
    "longitude",
    "rooms",
)

DISPLAY_ORDER = (
    "id",
    "slug",
    "images",
    "title",
    "description",
    "guestCount",
    "bedroomCount",
    "bathroomCount",
    "amenities",
    "hostInfo",
    "address",
    "latitude",
    "longitude",
    "rooms",
)


def reorder_hotel_properties(hotel: Dict[str, Any]) -> Dict[str, Any]:
    """Return the hotel with its fields laid out in display order."""
    return {field: hotel.get(field) for field in DISPLAY_ORDER}


class HotelKey(NamedTuple):
    """A path identifier, resolved to a numeric id when it looks like one."""

    hotel_id: Optional[int]
    slug: str

    @classmethod
    def parse(cls, identifier: str) -> "HotelKey":
        value = identifier.strip()
        hotel_id = int(value) if value.isascii() and value.isdigit() else None
        return cls(hotel_id=hotel_id, slug=value)

    @property
    def is_numeric(self) -> bool:
        return self.hotel_id is not None
