from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.utils.validation_helpers import (
    validate_array,
    validate_coordinate,
    validate_not_empty,
    validate_positive_count,
)


class RoomPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    hotelSlug: Optional[str] = None
    roomSlug: Optional[str] = None
    roomTitle: Optional[str] = None
    roomImage: Optional[str] = None
    bedroomCount: Optional[int] = None


class HotelPayload(BaseModel):
    """
    Shape of a hotel in create and update requests.

    Every field is optional here: a field is only checked when it is sent.
    Whether the required ones are all present is decided when the hotel
    is created.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    guestCount: Any = None
    bedroomCount: Any = None
    bathroomCount: Any = None
    amenities: Optional[List[str]] = None
    hostInfo: Optional[str] = None
    address: Optional[str] = None
    latitude: Any = None
    longitude: Any = None
    rooms: Optional[List[RoomPayload]] = None
    images: Optional[List[str]] = None

    @field_validator("title", "description", "hostInfo", "address")
    @classmethod
    def check_not_empty(cls, value, info):
        labels = {
            "title": "Title",
            "description": "Description",
            "hostInfo": "Host info",
            "address": "Address",
        }
        return validate_not_empty(value, labels[info.field_name])

    @field_validator("guestCount", "bedroomCount", "bathroomCount")
    @classmethod
    def check_counts(cls, value, info):
        labels = {
            "guestCount": "Guest count",
            "bedroomCount": "Bedroom count",
            "bathroomCount": "Bathroom count",
        }
        return validate_positive_count(value, labels[info.field_name])

    @field_validator("latitude", "longitude")
    @classmethod
    def check_coordinates(cls, value, info):
        return validate_coordinate(value, info.field_name.capitalize())

    @field_validator("amenities", mode="before")
    @classmethod
    def check_amenities(cls, value):
        return validate_array(value, "Amenities")

    @field_validator("rooms", mode="before")
    @classmethod
    def check_rooms(cls, value):
        return validate_array(value, "Rooms")

    def to_fields(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


class HotelResponse(BaseModel):
    id: int
    slug: Optional[str] = None
    images: Optional[List[str]] = None
    title: Optional[str] = None
    description: Optional[str] = None
    guestCount: Optional[int] = None
    bedroomCount: Optional[int] = None
    bathroomCount: Optional[int] = None
    amenities: Optional[List[str]] = None
    hostInfo: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    rooms: Optional[List[Dict[str, Any]]] = None


class HotelEnvelope(BaseModel):
    message: str
    hotel: HotelResponse


class ImagesResponse(BaseModel):
    message: str
    images: List[str]


class RoomImageResponse(BaseModel):
    message: str
    roomImage: str
