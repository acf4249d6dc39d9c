import logging
from typing import Any, Dict, Optional

from fastapi import Depends

from app.exceptions import (
    ConflictError,
    HotelNotFoundError,
    InvalidHotelIdError,
    MissingFieldError,
)
from app.models.hotel import REQUIRED_FIELDS, HotelKey, reorder_hotel_properties
from app.store import JsonFileStore, Record, get_store
from app.utils.slug import create_slug

logger = logging.getLogger(__name__)


class HotelRepository:
    def __init__(self, store: JsonFileStore):
        self.store = store

    def create(self, payload: Dict[str, Any]) -> Record:
        """
        Persist a new hotel and return it in display order.

        - Fails on the first missing required field, in declared order.
        - The id is the highest stored id plus one.
        - A slug already taken by another hotel gets ``-<id>`` appended.
        """
        for field in REQUIRED_FIELDS:
            if field not in payload:
                logger.error(f"Missing required field: {field}")
                raise MissingFieldError(field)

        with self.store.lock:
            hotel_id = self.store.next_id()
            images = payload.get("images")
            hotel = {**payload, "id": hotel_id, "images": images if images is not None else []}
            hotel["slug"] = create_slug(hotel["title"])

            if self.store.exists(hotel_id):
                logger.error(f"Hotel file already exists for id: {hotel_id}")
                raise ConflictError()

            if self.store.find_by_slug(hotel["slug"]) is not None:
                hotel["slug"] = f"{hotel['slug']}-{hotel_id}"

            self.store.write(hotel_id, hotel)

        logger.debug(f"Created hotel: {hotel_id}, slug: {hotel['slug']}")
        return reorder_hotel_properties(hotel)

    def find(self, identifier: str) -> Optional[Record]:
        """Look a hotel up by numeric id, falling back to its slug."""
        key = HotelKey.parse(identifier)
        hotel = None
        if key.is_numeric:
            hotel = self.store.read(key.hotel_id)
        if hotel is None:
            hotel = self.store.find_by_slug(key.slug)
        return hotel

    def get(self, identifier: str) -> Record:
        hotel = self.find(identifier)
        if hotel is None:
            logger.error(f"Hotel not found: {identifier}")
            raise HotelNotFoundError()
        return reorder_hotel_properties(hotel)

    def get_by_id(self, hotel_id: str) -> Record:
        """Strict numeric lookup; no slug fallback."""
        key = HotelKey.parse(hotel_id)
        if not key.is_numeric:
            logger.error(f"Invalid hotel id: {hotel_id}")
            raise InvalidHotelIdError()
        hotel = self.store.read(key.hotel_id)
        if hotel is None:
            logger.error(f"Hotel not found: {key.hotel_id}")
            raise HotelNotFoundError()
        return hotel

    def update(self, hotel_id: str, payload: Dict[str, Any]) -> Record:
        """
        Merge ``payload`` over the stored hotel.

        The id never changes. The slug is only recomputed when a title is
        supplied, and is suffixed if another hotel already owns it.
        """
        with self.store.lock:
            existing = self.get_by_id(hotel_id)
            numeric_id = HotelKey.parse(hotel_id).hotel_id

            images = payload.get("images")
            if images is None:
                images = existing.get("images") or []
            updated = {**existing, **payload, "id": numeric_id, "images": images}

            if payload.get("title"):
                updated["slug"] = create_slug(payload["title"])
                owner = self.store.find_by_slug(updated["slug"])
                if owner is not None and owner.get("id") != numeric_id:
                    updated["slug"] = f"{updated['slug']}-{numeric_id}"

            self.store.write(numeric_id, updated)

        logger.debug(f"Updated hotel: {numeric_id}, slug: {updated.get('slug')}")
        return reorder_hotel_properties(updated)

    def save(self, hotel: Record):
        self.store.write(hotel["id"], hotel)


def get_repository(store: JsonFileStore = Depends(get_store)) -> HotelRepository:
    return HotelRepository(store)
