from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from app.repositories.hotel_repository import HotelRepository, get_repository
from app.repositories.image_repository import attach_hotel_images, attach_room_image
from app.repositories.image_storage_repository import ImageStorage, get_image_storage
from app.schemas.hotel import ImagesResponse, RoomImageResponse


router = APIRouter(
    prefix="/images",
    tags=["images"],
)


@router.post(
    "/rooms/{hotel_id}/{room_slug}",
    response_model=RoomImageResponse,
    summary="Upload a room image",
)
def upload_room_image(
    hotel_id: str,
    room_slug: str,
    roomImage: Optional[UploadFile] = File(None),
    repository: HotelRepository = Depends(get_repository),
    storage: ImageStorage = Depends(get_image_storage),
):
    """
    Replace the image of one room. The hotel must be given by numeric id;
    the room slug is matched ignoring case and surrounding whitespace.
    """
    image_url = attach_room_image(repository, storage, hotel_id, room_slug, roomImage)
    return {
        "message": "Room image uploaded and updated successfully.",
        "roomImage": image_url,
    }


@router.post(
    "/{identifier}",
    response_model=ImagesResponse,
    summary="Upload hotel images",
)
def upload_hotel_images(
    identifier: str,
    images: List[UploadFile] = File(...),
    repository: HotelRepository = Depends(get_repository),
    storage: ImageStorage = Depends(get_image_storage),
):
    """
    Append one or more images (field **images**, up to 10) to the gallery
    of the hotel with the given id or slug.
    """
    all_images = attach_hotel_images(repository, storage, identifier, images)
    return {
        "message": "Image uploaded and hotel updated successfully",
        "images": all_images,
    }
