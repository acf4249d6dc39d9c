import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app import config
from app.exceptions import HotelAPIError, StorageError
from app.routers import hotels, images
from app.store import init_storage

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    "lifespan for creating the storage directories"
    init_storage()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="Hotel listings",
    description="Hotel listings with photo galleries, stored as JSON files.",
    version="0.0.1",
)


@app.exception_handler(HotelAPIError)
async def hotel_api_error_handler(request: Request, exc: HotelAPIError):
    if isinstance(exc, StorageError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.reason}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        location, *path = error["loc"]
        cause = (error.get("ctx") or {}).get("error")
        errors.append(
            {
                "location": location,
                "path": ".".join(str(part) for part in path),
                "msg": str(cause) if cause is not None else error["msg"],
            }
        )
    logger.debug(f"Rejected {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


@app.get("/")
def read_root():
    return {"message": "Hotel listings API ready"}


app.include_router(hotels.router)
app.include_router(images.router)

app.mount("/uploads", StaticFiles(directory=config.UPLOAD_DIR, check_dir=False), name="uploads")
app.mount(
    "/roomImages",
    StaticFiles(directory=config.ROOM_IMAGES_DIR, check_dir=False),
    name="roomImages",
)
