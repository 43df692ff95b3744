"""FastAPI application entrypoint. No business logic; only wiring, middleware and error rendering."""

from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from catalog_api import __version__
from catalog_api.api import router as api_router
from catalog_api.core.config import settings
from catalog_api.core.errors import ApiError

app = FastAPI(
    title="Catalog API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render domain errors as {"detail": message} with their HTTP status."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


app.include_router(api_router, prefix=settings.API_PREFIX)

static_dir = Path(settings.STATIC_DIR)
if static_dir.is_dir():
    # Mounted last so API routes take precedence; html=True serves index.html at "/".
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
else:

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Catalog API"}
