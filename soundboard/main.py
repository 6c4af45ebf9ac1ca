import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from soundboard.api.router import api_router
from soundboard.core.config import settings
from soundboard.core.exceptions import SoundboardAPIError
from soundboard.db.session import engine
from soundboard.db.base import Base
from soundboard import models  # noqa: F401  registers tables on Base.metadata
from soundboard.services.soundboard_service import SoundboardService
from soundboard.services.storage_service import StorageService
from soundboard.services.tts_service import SpeechSynthesizer

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database synced successfully")

    storage = StorageService.from_settings(settings)
    synthesizer = SpeechSynthesizer.from_settings(settings)
    app.state.storage = storage
    app.state.soundboard_service = SoundboardService(storage, synthesizer)

    logger.info("Available routes:")
    for route in app.routes:
        for method in sorted(getattr(route, "methods", None) or ()):
            logger.info("- %-7s %s", method, route.path)
    yield
    # Shutdown
    synthesizer.close()
    storage.close()
    await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Soundboard API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[str(origin).rstrip("/") for origin in settings.BACKEND_CORS_ORIGINS] or ["*"],
    allow_credentials=bool(settings.BACKEND_CORS_ORIGINS),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(SoundboardAPIError)
async def soundboard_error_handler(request: Request, exc: SoundboardAPIError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"success": False, "message": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = sorted({".".join(str(part) for part in err["loc"][1:]) for err in exc.errors()})
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": f"Invalid or missing fields: {', '.join(fields)}"},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "message": str(exc)})


@app.get("/")
async def root():
    return {"success": True, "message": "Welcome to the jungle", "version": settings.VERSION}


@app.get("/health")
async def health_check():
    return {
        "success": True,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - STARTED_AT,
        "status": "healthy",
    }


def run() -> None:
    import uvicorn

    uvicorn.run("soundboard.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
