"""Astro API: FastAPI app serving cached astro data per location."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from astrocache.cache.astro_cache import AstroCache
from astrocache.errors import AstroError, ValidationError

logger = logging.getLogger(__name__)

MISSING_LOCATION_MESSAGE = (
    "Error: 'location' query parameter is missing. "
    "Please provide a valid location."
)


def create_app(cache: AstroCache, cors_origins: list[str] | None = None) -> FastAPI:
    """Build the API around one shared AstroCache instance."""
    app = FastAPI(title="Astro Cache", version="0.1.0")
    app.state.cache = cache
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or [],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/astro")
    def get_astro(request: Request, location: str = ""):
        """Sunrise, sunset and moon data for a location."""
        cache: AstroCache = request.app.state.cache
        try:
            record = cache.get_astro(location)
        except ValidationError as e:
            logger.error("Rejected astro request: %s", e)
            raise HTTPException(status_code=400, detail=MISSING_LOCATION_MESSAGE) from e
        except AstroError as e:
            logger.error("Error fetching astro data for location %r: %s", location, e)
            raise HTTPException(
                status_code=500,
                detail=(
                    f"Error: failed to get astro data for location '{location}'. "
                    "Please try again later."
                ),
            ) from e
        return record.to_dict()

    @app.get("/health")
    def health(request: Request):
        cache: AstroCache = request.app.state.cache
        return {"status": "ok", "cache": asdict(cache.stats())}

    return app
