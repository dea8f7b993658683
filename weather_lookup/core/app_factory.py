"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from weather_lookup import __version__
from weather_lookup.config import get_settings
from weather_lookup.core.lifespan import lifespan
from weather_lookup.core.middleware import setup_middleware
from weather_lookup.middleware.error_handlers import register_error_handlers
from weather_lookup.routers import health_router, view_router, weather_router


def custom_openapi(app: FastAPI):
    """Generate OpenAPI schema without the HTML tile fragments."""
    if app.openapi_schema:
        return app.openapi_schema

    from fastapi.openapi.utils import get_openapi

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        license_info=app.license_info,
    )

    # Tile endpoints are HTML fragments for HTMX, not useful in API docs
    paths_to_remove = [path for path in openapi_schema.get("paths", {}) if path.startswith("/tiles/")]
    for path in paths_to_remove:
        del openapi_schema["paths"][path]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Weather Lookup API",
        description="""
        **Weather Lookup** - current conditions from weatherapi.com

        ## Lookups
        - `/api/weather/search?city=` - search by city name
        - `/api/weather/coordinates?lat=&lon=` - search by coordinates
        - `POST /api/location` - report the device location and fetch its weather
        - `/api/weather/current-location` - refresh weather for the reported location

        ## Display
        - `/api/weather/current` - last lookup in the selected unit
        - `PUT /api/weather/unit` - switch between Celsius and Fahrenheit

        ## Health
        - `/health` - Basic health check
        - `/health/ready` - Readiness of local prerequisites
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings)
    register_error_handlers(app)

    # View routes (HTML page and tile fragments) - no prefix
    app.include_router(view_router.router, tags=["views"])

    app.include_router(health_router.router, tags=["health"])

    # API routes
    app.include_router(weather_router.router, prefix="/api/weather", tags=["weather"])
    app.include_router(weather_router.location_router, prefix="/api/location", tags=["location"])

    app.openapi = lambda: custom_openapi(app)

    return app
