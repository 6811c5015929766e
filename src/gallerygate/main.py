import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gallerygate.api.auth import router as auth_router
from gallerygate.api.image import router as image_router
from gallerygate.api.sign import router as sign_router
from gallerygate.api.user import router as user_router
from gallerygate.errors import ConflictError, GalleryError, ValidationError
from gallerygate.metrics import setup_metrics
from gallerygate.s3_service import AsyncS3Client

# uvicorn imports this module when starting the app, so logging is configured
# before any request is served
from .logging_config import configure_logging

configure_logging(level="INFO")

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle: startup and shutdown.

    This context manager initializes the S3 client on startup and cleans up
    resources on shutdown.
    """
    logger.info("Starting up application...")
    try:
        app.state.object_store = AsyncS3Client()
        logger.info("S3 client initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize S3 client: {e}")
        raise

    yield

    logger.info("Shutting down application...")
    await app.state.object_store.close()
    app.state.object_store = None


app = FastAPI(redoc_url=None, redirect_slashes=False, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(GalleryError)
async def gallery_error_handler(request: Request, exc: GalleryError) -> JSONResponse:
    if isinstance(exc, (ValidationError, ConflictError)):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    else:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"statusCode": exc.status_code, "message": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"statusCode": exc.status_code, "message": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "; ".join(f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors) or "Invalid request"
    return JSONResponse(status_code=422, content={"statusCode": 422, "message": message})


app.include_router(auth_router)
app.include_router(user_router)
app.include_router(sign_router)
app.include_router(image_router)

setup_metrics(app)


@app.get("/")
def read_root():
    return {"message": "Hello from gallerygate!"}
