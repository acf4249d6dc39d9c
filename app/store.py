import json
import logging
import os
import tempfile
import threading
from typing import Any, Dict, Iterator, Optional

from app import config
from app.exceptions import StorageError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class JsonFileStore:
    """
    One JSON file per hotel, named after its id.

    Every lookup other than ``read`` is a linear scan of the directory,
    which is fine for a few hundred hotels and nothing more.

    ``lock`` only serializes callers inside this process. Two processes
    writing the same directory can still allocate the same id.
    """

    def __init__(self, directory: str):
        self.directory = directory
        self.lock = threading.RLock()

    def init(self):
        """Create the hotels directory if it is missing."""
        try:
            os.makedirs(self.directory, exist_ok=True)
        except OSError as e:
            logger.exception(f"Could not create hotels directory {self.directory}")
            raise StorageError(str(e)) from e

    def path_for(self, hotel_id: int) -> str:
        return os.path.join(self.directory, f"{hotel_id}.json")

    def exists(self, hotel_id: int) -> bool:
        return os.path.exists(self.path_for(hotel_id))

    def read(self, hotel_id: int) -> Optional[Record]:
        path = self.path_for(hotel_id)
        if not os.path.exists(path):
            return None
        return self._load(path)

    def write(self, hotel_id: int, record: Record):
        path = self.path_for(hotel_id)
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(record, f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        except OSError as e:
            logger.exception(f"Could not write hotel record {path}")
            raise StorageError(str(e)) from e
        logger.debug(f"Wrote hotel record: {path}")

    def scan(self) -> Iterator[Record]:
        try:
            names = sorted(os.listdir(self.directory))
        except OSError as e:
            logger.exception(f"Could not list hotels directory {self.directory}")
            raise StorageError(str(e)) from e
        for name in names:
            if name.endswith(".json"):
                yield self._load(os.path.join(self.directory, name))

    def next_id(self) -> int:
        max_id = 0
        for record in self.scan():
            hotel_id = record.get("id")
            if isinstance(hotel_id, int) and hotel_id > max_id:
                max_id = hotel_id
        return max_id + 1

    def find_by_slug(self, slug: str) -> Optional[Record]:
        for record in self.scan():
            if record.get("slug") == slug:
                return record
        return None

    def _load(self, path: str) -> Record:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.exception(f"Could not read hotel record {path}")
            raise StorageError(str(e)) from e


store = JsonFileStore(config.HOTELS_DIR)


def init_storage():
    """Create every directory the app writes to. Called once at startup."""
    store.init()
    for directory in (config.UPLOAD_DIR, config.ROOM_IMAGES_DIR):
        os.makedirs(directory, exist_ok=True)


def get_store():
    """Provide the hotel record store."""
    return store
