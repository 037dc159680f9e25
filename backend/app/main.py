"""Shiptivity Backend API - FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from shiptivity.protocols import StorageError, ValidationError
from shiptivity.types import Lane

from .config import get_settings
from .database import open_store
from .logging_config import configure_logging, get_logger, log_request_rejected
from .models import RootResponse
from .rate_limit import limiter
from .routes import clients_router

logger = get_logger("shiptivity.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting Shiptivity Backend API (debug={settings.debug})")
    app.state.store = open_store(settings)
    yield
    # Shutdown
    logger.info("Shutting down Shiptivity Backend API")
    app.state.store.close()


app = FastAPI(
    title="Shiptivity Backend API",
    description="Client swimlane board with dense per-lane priorities",
    version="0.1.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    log_request_rejected(request.url.path, getattr(exc, "client_id", None), exc.long_message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    # Log full error server-side; return a generic message to the client
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "message": "Storage error.",
            "long_message": "The operation could not be completed.",
        },
    )


# CORS middleware
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(clients_router)


@app.get("/", response_model=RootResponse)
async def root():
    """API banner."""
    return {"message": "SHIPTIVITY API. Read documentation to see API docs"}


@app.get("/health")
def health(request: Request):
    """Health check with an actual database query."""
    db_status = "disconnected"
    try:
        request.app.state.store.count_lane(Lane.BACKLOG)
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {str(e)[:50]}"

    overall_status = "healthy" if db_status == "connected" else "degraded"

    return {
        "status": overall_status,
        "database": db_status,
    }
