import logging
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from sleeperboard.config import settings
from sleeperboard.database import init_db
from sleeperboard.api.router import api_router
from sleeperboard.dependencies import ServiceContainer
from sleeperboard.services.exceptions import DashboardError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Built client bundle; relative paths resolve against the repository root
REPO_ROOT = Path(__file__).resolve().parents[2]
CLIENT_DIST_DIR = Path(settings.client_dist_dir)
if not CLIENT_DIST_DIR.is_absolute():
    CLIENT_DIST_DIR = REPO_ROOT / CLIENT_DIST_DIR


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await init_db()
    logger.info(f"Database ready; Sleeper API at {settings.sleeper_base_url}")

    yield

    # Shutdown - cleanup HTTP clients
    await ServiceContainer.shutdown()


app = FastAPI(
    title=settings.app_name,
    description="Fantasy football league dashboard backed by the Sleeper API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DashboardError)
async def dashboard_error_handler(request: Request, exc: DashboardError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc) or exc.__class__.__name__})


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name}


@app.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    """Serve built client files, falling back to index.html for client-side routes."""
    index = CLIENT_DIST_DIR / "index.html"
    if not index.is_file():
        return PlainTextResponse(
            "Frontend build not found. Did the client build step run?", status_code=503
        )

    candidate = (CLIENT_DIST_DIR / full_path).resolve()
    if full_path and candidate.is_file() and candidate.is_relative_to(CLIENT_DIST_DIR.resolve()):
        return FileResponse(candidate)
    return FileResponse(index)
