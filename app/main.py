import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load environment variables at the very beginning
load_dotenv()

from app.config import settings  # noqa: E402

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

from app.api import analysis, system  # noqa: E402
from app.api.system import ENDPOINTS  # noqa: E402
from app.core.errors import ValidationError  # noqa: E402
from app.integrations import http_client  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    try:
        await http_client.initialize()
    except Exception as e:
        logger.error(f"[STARTUP] Failed to initialize HTTP session: {e}")
        raise

    logger.info(f"[STARTUP] {settings.service_name} v{settings.service_version} ready")
    logger.info(f"[STARTUP] Object gateway: {settings.ipfs_gateway_url} (timeout {settings.gateway_timeout_sec}s)")
    logger.info(f"[STARTUP] Endpoints: GET /health, POST {ENDPOINTS[0]}, GET {ENDPOINTS[1]}")

    yield

    await http_client.close()
    logger.info("[SHUTDOWN] Analysis service stopped")


app = FastAPI(title="Artwork Authenticity API", lifespan=lifespan)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info(f"[ERROR HANDLER] {exc.status_code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"[ERROR HANDLER] Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": "Internal server error"},
    )


# ---- CORS ----
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system.router)
app.include_router(analysis.router)


if __name__ == "__main__":
    import uvicorn

    # Hosting platforms inject PORT; fall back to the configured port locally
    port = int(os.getenv("PORT") or settings.port)
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, log_level=settings.log_level.lower())
