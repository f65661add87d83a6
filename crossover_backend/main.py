"""CrossForge Backend — FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crossover_backend import config
from crossover_backend.routes import advisory, catalog, crossover, networks

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="CrossForge API",
    description="Passive loudspeaker crossover calculator",
    version="0.1.0",
)

# CORS — allow frontend origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.FRONTEND_URL] if config.FRONTEND_URL else [],
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register route modules
app.include_router(catalog.router, prefix="/api", tags=["Catalog"])
app.include_router(crossover.router, prefix="/api", tags=["Crossover"])
app.include_router(networks.router, prefix="/api", tags=["Networks"])
app.include_router(advisory.router, prefix="/api", tags=["Advisory"])


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "service": "crossforge-backend"}
