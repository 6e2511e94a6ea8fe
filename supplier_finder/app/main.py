"""Main FastAPI application entry point for the supplier finder."""

import os
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from supplier_finder.app.config import get_settings
from supplier_finder.app.routes import search_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up application...")

    if not get_settings().serpapi_key:
        logger.warning("SERPAPI_KEY is not configured; supplier searches will fail.")

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="Supplier Finder API",
    description="Web search for industrial suppliers with heuristic relevance scoring",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(search_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    serpapi = "configured" if get_settings().serpapi_key else "missing"
    return {"status": "healthy", "serpapi": serpapi}


# Front-end assets; mounted last so the API routes above take precedence
if os.path.isdir(settings.static_dir):
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")
else:
    logger.info(f"Static directory '{settings.static_dir}' not found; serving API only")


def main():
    import uvicorn
    port = get_settings().port
    logger.info(f"Server running on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
