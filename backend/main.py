import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Load environment variables from .env before settings are read
load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import settings
from core.database import init_db
from core.errors import NotFound, TravelError
from routers import auth, favorites, hotels, places, regions, search

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # create tables + seed the catalog once per process
    init_db()
    logger.info(f"🚀 {settings.PROJECT_NAME} API ready ({settings.ENVIRONMENT})")
    yield


# App
app = FastAPI(
    title="BharatExplore API",
    description="Travel guide API: regions, places, favorites and AI hotel suggestions",
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error responses: always {"error": "..."} ---
@app.exception_handler(TravelError)
async def travel_error_handler(request: Request, exc: TravelError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # same 404 body as NotFound raised by the services
    message = NotFound.message if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal server error"})


# Health check
@app.get("/api/health")
def health_check():
    return {"status": "ok", "version": settings.VERSION}


# Register routers
app.include_router(auth.router)
app.include_router(regions.router)
app.include_router(places.router)
app.include_router(search.router)
app.include_router(hotels.router)
app.include_router(favorites.router)


# --- Production: serve the built single-page app ---
FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def register_frontend(app: FastAPI, static_dir: str) -> None:
    """Serve the built client from static_dir; unknown /api paths stay JSON 404s."""
    static_root = os.path.realpath(static_dir)
    index_file = os.path.join(static_root, "index.html")
    assets_dir = os.path.join(static_root, "assets")

    if os.path.isdir(assets_dir):
        app.mount("/assets", StaticFiles(directory=assets_dir), name="assets")

    @app.api_route("/{full_path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
    def spa_fallback(full_path: str, request: Request):
        is_api = full_path == "api" or full_path.startswith("api/")
        if is_api or request.method not in ("GET", "HEAD"):
            raise NotFound()

        candidate = os.path.realpath(os.path.join(static_root, full_path))
        if full_path and candidate.startswith(static_root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)
        return FileResponse(index_file)


if settings.is_production and os.path.isdir(settings.STATIC_DIR):
    register_frontend(app, settings.STATIC_DIR)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
