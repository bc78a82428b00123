from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv
import logging

# Load environment variables as early as possible
load_dotenv()

from .config import settings
from .exceptions import http_exception_handler, request_validation_exception_handler
from .middleware import ErrorHandlingMiddleware, LoggingMiddleware
from .persistence.store import open_store
from .routers import appointments_router, doctors_router, patients_router, health_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")
    app.state.store = await open_store(settings)
    yield
    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")
    await app.state.store.close()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url=("/docs" if settings.DOCS_ENABLED else None),
    redoc_url=("/redoc" if settings.DOCS_ENABLED else None),
    openapi_url=("/openapi.json" if settings.DOCS_ENABLED else None)
)

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)

app.add_middleware(ErrorHandlingMiddleware)
app.add_middleware(LoggingMiddleware)

# CORS (ALLOWED_ORIGINS defaults to every origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials="*" not in settings.allowed_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(appointments_router.router, prefix=settings.API_PREFIX)
app.include_router(doctors_router.router, prefix=settings.API_PREFIX)
app.include_router(patients_router.router, prefix=settings.API_PREFIX)
app.include_router(health_router.router)


def run():
    import uvicorn
    logger.info(f"Server started on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "clinic_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        workers=1,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
