from fastapi import APIRouter, Depends, status

from app.repositories.hotel_repository import HotelRepository, get_repository
from app.schemas.hotel import HotelEnvelope, HotelPayload, HotelResponse


router = APIRouter(
    prefix="/hotels",
    tags=["hotels"],
)


@router.post(
    "",
    response_model=HotelEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a hotel",
)
def create_hotel(
    hotel: HotelPayload,
    repository: HotelRepository = Depends(get_repository),
):
    """
    Create a hotel. The id and slug are assigned by the server.

    - **title**, **description**, **hostInfo**, **address**: non-empty strings.
    - **guestCount**, **bedroomCount**, **bathroomCount**: integers of at least 1.
    - **amenities**: list of strings.
    - **latitude**, **longitude**: numbers.
    - **rooms**: list of rooms.
    - **images**: (Optional) list of image URLs.
    """
    created = repository.create(hotel.to_fields())
    return {"message": "Hotel created successfully", "hotel": created}


@router.get(
    "/{identifier}",
    response_model=HotelResponse,
    summary="Get a hotel by id or slug",
)
def get_hotel(identifier: str, repository: HotelRepository = Depends(get_repository)):
    """
    Retrieve a hotel. A numeric identifier is tried as an id first, then
    as a slug.
    """
    return repository.get(identifier)


@router.put(
    "/{hotel_id}",
    response_model=HotelEnvelope,
    summary="Update a hotel",
)
def update_hotel(
    hotel_id: str,
    hotel: HotelPayload,
    repository: HotelRepository = Depends(get_repository),
):
    """
    Update the fields sent in the body. Sending a new **title** regenerates
    the slug.
    """
    updated = repository.update(hotel_id, hotel.to_fields())
    return {"message": "Hotel updated successfully", "hotel": updated}
