import logging
from typing import List, Optional

from fastapi import UploadFile

from app import config
from app.exceptions import HotelNotFoundError, RoomNotFoundError, StorageError, UploadError
from app.repositories.hotel_repository import HotelRepository
from app.repositories.image_storage_repository import ImageStorage

logger = logging.getLogger(__name__)


def normalize_room_slug(slug: str) -> str:
    return slug.strip().lower()


def attach_hotel_images(
    repository: HotelRepository,
    storage: ImageStorage,
    identifier: str,
    image_files: List[UploadFile],
) -> List[str]:
    """Append uploaded images to a hotel's gallery, found by id or slug."""
    if len(image_files) > config.MAX_HOTEL_IMAGES:
        raise UploadError(f"Too many files. Maximum is {config.MAX_HOTEL_IMAGES}.")

    with repository.store.lock:
        hotel = repository.find(identifier)
        if hotel is None:
            logger.error(f"Hotel not found for image upload: {identifier}")
            raise HotelNotFoundError()

        new_urls = storage.save_hotel_images(image_files)
        hotel["images"] = list(hotel.get("images") or []) + new_urls
        try:
            repository.save(hotel)
        except StorageError:
            for url in new_urls:
                storage.remove_hotel_image(url)
            raise

    logger.debug(f"Added {len(new_urls)} image(s) to hotel {hotel['id']}")
    return hotel["images"]


def attach_room_image(
    repository: HotelRepository,
    storage: ImageStorage,
    hotel_id: str,
    room_slug: str,
    image_file: Optional[UploadFile],
) -> str:
    """
    Replace the image of one room, matched by slug ignoring case and
    surrounding whitespace. Only numeric hotel ids are accepted.
    """
    requested_slug = room_slug.strip()

    with repository.store.lock:
        hotel = repository.get_by_id(hotel_id)

        if image_file is None:
            raise UploadError()

        rooms = hotel.get("rooms") or []
        target = normalize_room_slug(requested_slug)
        room = next(
            (r for r in rooms if normalize_room_slug(str(r.get("roomSlug", ""))) == target),
            None,
        )
        if room is None:
            logger.error(f"Room '{requested_slug}' not found in hotel {hotel['id']}")
            raise RoomNotFoundError(
                details={
                    "requestedSlug": requested_slug,
                    "availableRooms": [
                        {"slug": r.get("roomSlug"), "title": r.get("roomTitle")} for r in rooms
                    ],
                }
            )

        image_url = storage.save_room_image(image_file)
        room["roomImage"] = image_url
        repository.save(hotel)

    logger.debug(f"Set image for room '{requested_slug}' of hotel {hotel['id']}: {image_url}")
    return image_url
