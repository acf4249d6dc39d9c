import os

from fastapi import status

from tests.conf_tests import (
    TEST_ROOM_IMAGES_DIR,
    TEST_UPLOAD_DIR,
    client,
    clear_store,
    existing_hotel,
    test_store,
)


def image_file(name="photo.jpg", content=b"\xff\xd8\xff fake jpeg"):
    return (name, content, "image/jpeg")


# pylint: disable-next=redefined-outer-name
def test_upload_hotel_images_by_id(existing_hotel):
    files = [("images", image_file("a.jpg")), ("images", image_file("b.jpg"))]
    response = client.post("/images/1", files=files)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["message"] == "Image uploaded and hotel updated successfully"
    assert len(data["images"]) == 2
    assert data["images"][0].startswith("http://testserver/uploads/")
    assert data["images"][0].endswith("-a.jpg")
    assert data["images"][1].endswith("-b.jpg")
    assert test_store.read(1)["images"] == data["images"]
    assert len(os.listdir(TEST_UPLOAD_DIR)) == 2


# pylint: disable-next=redefined-outer-name
def test_upload_hotel_images_appends_by_slug(existing_hotel):
    first = client.post("/images/1", files=[("images", image_file("first.jpg"))]).json()["images"]
    response = client.post("/images/existing-hotel", files=[("images", image_file("second.jpg"))])
    assert response.status_code == status.HTTP_200_OK
    images = response.json()["images"]
    assert images[0] == first[0]
    assert images[1].endswith("-second.jpg")


def test_upload_hotel_images_hotel_not_found():
    response = client.post("/images/missing-hotel", files=[("images", image_file())])
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Hotel not found."}
    assert os.listdir(TEST_UPLOAD_DIR) == []


# pylint: disable-next=redefined-outer-name
def test_upload_hotel_images_too_many(existing_hotel):
    files = [("images", image_file(f"{i}.jpg")) for i in range(11)]
    response = client.post("/images/1", files=files)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Too many files. Maximum is 10."}


# pylint: disable-next=redefined-outer-name
def test_upload_room_image_matches_slug_loosely(existing_hotel):
    response = client.post(
        "/images/rooms/1/%20Room-1%20",
        files={"roomImage": image_file("suite.jpg")},
    )
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["message"] == "Room image uploaded and updated successfully."
    assert data["roomImage"].startswith("/roomImages/")
    assert data["roomImage"].endswith("-suite.jpg")

    rooms = test_store.read(1)["rooms"]
    assert rooms[0]["roomImage"] == data["roomImage"]
    assert rooms[1]["roomImage"] == "/roomImages/old.jpg"
    assert len(os.listdir(TEST_ROOM_IMAGES_DIR)) == 1


# pylint: disable-next=redefined-outer-name
def test_upload_room_image_overwrites_previous(existing_hotel):
    client.post("/images/rooms/1/room-2", files={"roomImage": image_file("one.jpg")})
    response = client.post("/images/rooms/1/room-2", files={"roomImage": image_file("two.jpg")})
    assert response.status_code == status.HTTP_200_OK
    assert test_store.read(1)["rooms"][1]["roomImage"].endswith("-two.jpg")


# pylint: disable-next=redefined-outer-name
def test_upload_room_image_room_not_found(existing_hotel):
    response = client.post(
        "/images/rooms/1/penthouse",
        files={"roomImage": image_file()},
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {
        "error": "Room not found.",
        "details": {
            "requestedSlug": "penthouse",
            "availableRooms": [
                {"slug": "room-1", "title": "Luxury Suite"},
                {"slug": "room-2", "title": "Garden Room"},
            ],
        },
    }
    assert os.listdir(TEST_ROOM_IMAGES_DIR) == []


# pylint: disable-next=redefined-outer-name
def test_upload_room_image_requires_numeric_hotel_id(existing_hotel):
    response = client.post(
        "/images/rooms/existing-hotel/room-1",
        files={"roomImage": image_file()},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Invalid hotel ID. It must be a number."}


def test_upload_room_image_hotel_not_found():
    response = client.post("/images/rooms/9999/room-1", files={"roomImage": image_file()})
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "Hotel not found."}


# pylint: disable-next=redefined-outer-name
def test_upload_room_image_without_file(existing_hotel):
    response = client.post("/images/rooms/1/room-1", data={"note": "no file"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "No image file uploaded."}


# pylint: disable-next=redefined-outer-name
def test_upload_hotel_images_removed_when_record_save_fails(existing_hotel, monkeypatch):
    def fail_replace(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("app.store.os.replace", fail_replace)
    response = client.post("/images/1", files=[("images", image_file("a.jpg"))])
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Internal server error"}
    assert os.listdir(TEST_UPLOAD_DIR) == []
    assert test_store.read(1)["images"] == []
