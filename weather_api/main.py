"""
FastAPI application entry point.
Lifespan loads the weather data and builds the search indexes before any
request is served; a bad data file aborts startup.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from weather_api.config import RESOURCES_DIR, settings
from weather_api.indexes import IndexBuilder
from weather_api.middleware import RequestLoggingMiddleware
from weather_api.models.query import QueryError
from weather_api.planner import QueryPlanner
from weather_api.routers import query
from weather_api.store import WeatherDataStore

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger("weather-api")

WELCOME_CONTENT = (RESOURCES_DIR / "welcome.html").read_text(encoding="utf-8")


def build_planner(data_path: Path) -> QueryPlanner:
    """Load the data, build the indexes once, and hand them to a planner."""
    store = WeatherDataStore(data_path)
    indexes = IndexBuilder(store).build()
    return QueryPlanner(indexes)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    app.state.planner = build_planner(settings.data_path)
    logger.info("Starting weather-query server")
    yield
    # Shutdown
    logger.info("Received shutdown signal. Stopping server")


app = FastAPI(
    title="Weather Query API",
    description="Indexed, read-only queries over daily Seattle weather observations",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Custom middleware
app.add_middleware(RequestLoggingMiddleware)

# Routers
app.include_router(query.router, prefix="/query", tags=["Query"])


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
def welcome():
    return WELCOME_CONTENT


# Global error handlers
@app.exception_handler(QueryError)
async def query_error_handler(request: Request, exc: QueryError):
    logger.info("Query parameters are invalid. Returning 400 error: %s", exc.message)
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid query",
            "detail": exc.message,
            "status_code": 400,
        },
    )
