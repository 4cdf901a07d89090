from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from stockroom.core.config import settings
from stockroom.core.exceptions import StorageError, ValidationError
from stockroom.core.logging_config import RequestLoggingMiddleware, get_logger, setup_logging
from stockroom.routers import pages, stock
from stockroom.services.firebase_service import close_firebase_app, get_firestore_client, init_firebase_app
from stockroom.services.inventory_store import FirestoreInventoryStore

setup_logging(
    service_name=settings.service_name,
    level=settings.log_level,
    version=settings.service_version,
    environment=settings.environment,
)

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    firebase_app = None
    # A store may already be attached, e.g. an in-memory one under test
    if getattr(app.state, "inventory_store", None) is None:
        firebase_app = init_firebase_app(settings)
        app.state.inventory_store = FirestoreInventoryStore(
            get_firestore_client(firebase_app),
            collection=settings.inventory_collection,
        )
        logger.info(f"Connected to Firestore collection '{settings.inventory_collection}'")

    logger.info(f"{settings.service_name} {settings.service_version} started")
    yield

    if firebase_app is not None:
        close_firebase_app(firebase_app)
        app.state.inventory_store = None
    logger.info(f"Shutting down {settings.service_name}")


app = FastAPI(
    title="Stockroom API",
    description="Per-brand, per-size apparel stock tracking.",
    version=settings.service_version,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(stock.router)
app.include_router(pages.router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg", ""))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(messages) or "Invalid request"},
    )


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    if request.method == "POST":
        message = "Failed to update inventory"
    elif request.url.path.endswith("/summary"):
        message = "Failed to fetch inventory summary"
    else:
        message = "Failed to fetch inventory"
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


@app.get("/health", tags=["Health Check"])
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("stockroom.main:app", host="0.0.0.0", port=8000, reload=True)
