import logging
import os
import shutil
import time
import uuid
from typing import List

from fastapi import UploadFile

from app import config
from app.exceptions import StorageError

logger = logging.getLogger(__name__)


class ImageStorage:
    """Writes uploaded images to disk and builds the references stored on hotels."""

    def __init__(self, upload_dir: str, room_images_dir: str, base_url: str):
        self.upload_dir = upload_dir
        self.room_images_dir = room_images_dir
        self.base_url = base_url.rstrip("/")

    @staticmethod
    def unique_name(filename: str) -> str:
        original = os.path.basename(filename or "") or "image"
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}-{original}"

    def _write(self, image_file: UploadFile, directory: str) -> str:
        name = self.unique_name(image_file.filename)
        file_path = os.path.join(directory, name)
        try:
            os.makedirs(directory, exist_ok=True)
            with open(file_path, "wb") as buffer:
                shutil.copyfileobj(image_file.file, buffer)
        except OSError as e:
            logger.exception(f"Could not save upload to {file_path}")
            raise StorageError(str(e)) from e
        finally:
            image_file.file.close()
        return name

    def save_hotel_image(self, image_file: UploadFile) -> str:
        name = self._write(image_file, self.upload_dir)
        return f"{self.base_url}/uploads/{name}"

    def save_hotel_images(self, image_files: List[UploadFile]) -> List[str]:
        """
        Save a batch of gallery images.

        If one of them fails, the ones already written are removed before
        the error is re-raised.
        """
        saved_urls = []
        try:
            for image_file in image_files:
                saved_urls.append(self.save_hotel_image(image_file))
        except StorageError:
            for url in saved_urls:
                self.remove_hotel_image(url)
            raise
        return saved_urls

    def save_room_image(self, image_file: UploadFile) -> str:
        name = self._write(image_file, self.room_images_dir)
        return f"/roomImages/{name}"

    def remove_hotel_image(self, url: str) -> bool:
        file_path = os.path.join(self.upload_dir, os.path.basename(url))
        try:
            if os.path.exists(file_path):
                os.remove(file_path)
                return True
        except OSError as e:
            logger.error(f"Could not remove {file_path}: {e}")
        return False


def get_image_storage() -> ImageStorage:
    return ImageStorage(config.UPLOAD_DIR, config.ROOM_IMAGES_DIR, config.PUBLIC_BASE_URL)
