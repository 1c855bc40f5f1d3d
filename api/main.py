#!/usr/bin/env python3
"""
Packing List Analytics API - ingestion and dashboard analytics for shipment tables.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from core.config import settings
from api.middleware.logging import LoggingMiddleware
from api.routers import health, packing_list
from etl.packing_list_parser import ParseError
from services.dataset import packing_list_dataset

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initial load: analyze the built-in sample packing list."""
    if settings.load_sample_on_startup:
        try:
            packing_list_dataset.load_sample()
        except ParseError as e:
            logger.warning(f"Failed to load sample packing list: {e}")
    yield


# Create FastAPI app
app = FastAPI(
    title=settings.project_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
    description="Parses packing list tables and serves derived shipment analytics"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=settings.allowed_methods,
    allow_headers=settings.allowed_headers,
)
app.add_middleware(LoggingMiddleware)

# Expose health checks both at root and versioned paths
app.include_router(health.router, prefix=settings.api_v1_prefix)
app.include_router(packing_list.router, prefix=f"{settings.api_v1_prefix}/packing-list")
logger.info("Health and packing list routers included")


@app.get("/healthz")
async def root_health_check():
    """Root-level health endpoint for external monitors."""
    return await health.health_check()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
