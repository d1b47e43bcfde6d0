import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ecovision.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "ecovision.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from ecovision.models.route import RouteErrorKind
from ecovision.routers import eco, route_logs
from ecovision.services.directions_client import directions_client
from ecovision.services.geocoder import geocoder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.routing_configured:
        logger.warning("OPENROUTE_API_KEY not set; /api/eco/route will return 503 until configured")

    yield

    # Shutdown
    await geocoder.close()
    await directions_client.close()
    logger.info("Provider HTTP clients closed")


app = FastAPI(
    title="EcoVision",
    description="Sustainability tracking — eco-friendly route comparison",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed eco-route bodies are client validation errors (400), like empty fields."""
    if request.url.path.startswith("/api/eco/"):
        logger.warning(f"Rejected eco-route body on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=400,
            content={"detail": "Both origin and destination are required as text."},
            headers={"X-Error-Kind": RouteErrorKind.VALIDATION_ERROR.value},
        )
    return await request_validation_exception_handler(request, exc)


app.include_router(eco.router, prefix="/api/eco", tags=["eco-routes"])
app.include_router(route_logs.router, prefix="/api/routes", tags=["route-logs"])


@app.get("/api/health")
async def health_check():
    return {
        "status": "ok",
        "service": "ecovision",
        "routing_configured": settings.routing_configured,
    }
