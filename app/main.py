# /app/main.py

# --- Core FastAPI Imports ---
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core.config import get_settings
from .core.errors import AppError, describe_validation_errors
from .db.base import Base
from .db.database import engine
from .routers import (
    auth_router,
    classrooms_router,
    dashboard_router,
    subjects_router,
)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once at startup. Alembic owns schema changes; this only fills in missing tables.
    Base.metadata.create_all(bind=engine)
    logger.info("Classroom backend started.")
    yield


# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="Classroom Management API",
    description="Accounts, classrooms and subjects for a school, behind role-based access control.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error Handlers ---
# Every failure leaves the API as {"message": ...}.

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": describe_validation_errors(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


# --- API Router Inclusion ---
app.include_router(auth_router.router, tags=["Authentication"])
app.include_router(classrooms_router.router, prefix="/classrooms", tags=["Classrooms"])
app.include_router(subjects_router.router, prefix="/subjects", tags=["Subjects"])
app.include_router(dashboard_router.router, prefix="/dashboard", tags=["Dashboard"])


# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "Classroom backend is running!", "version": app.version}
