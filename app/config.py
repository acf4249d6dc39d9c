import os


DATA_DIR = os.getenv("HOTELS_DATA_DIR", "./data")
HOTELS_DIR = os.path.join(DATA_DIR, "hotels")
UPLOAD_DIR = os.getenv("HOTELS_UPLOAD_DIR", "./upload")
ROOM_IMAGES_DIR = os.getenv("ROOM_IMAGES_DIR", "./public/roomImages")

# Base used when building gallery image URLs
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")

MAX_HOTEL_IMAGES = int(os.getenv("MAX_HOTEL_IMAGES", "10"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
