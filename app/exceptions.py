from typing import Any, Dict, Optional


class HotelAPIError(Exception):
    """Base error; carries the HTTP status and the message sent to clients."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        if message is not None:
            self.message = message
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(HotelAPIError):
    status_code = 400
    message = "Invalid request"


class MissingFieldError(ValidationError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidHotelIdError(ValidationError):
    message = "Invalid hotel ID. It must be a number."


class UploadError(ValidationError):
    message = "No image file uploaded."


class NotFoundError(HotelAPIError):
    status_code = 404
    message = "Not found."


class HotelNotFoundError(NotFoundError):
    message = "Hotel not found."


class RoomNotFoundError(NotFoundError):
    message = "Room not found."


class ConflictError(HotelAPIError):
    status_code = 400
    message = "Hotel with this ID already exists."


class StorageError(HotelAPIError):
    """I/O or parse failure. Clients only ever see the generic message."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__()
