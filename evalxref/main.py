"""evalxref FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from evalxref.api.evaluations import router as evaluations_router
from evalxref.api.health import router as health_router
from evalxref.config import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="evalxref - Evaluation Cross-Reference Service",
    description="Conflict-of-interest links and consistency checks for search evaluations",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Read-only API; the presentation layer may be served from anywhere
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["Health"])
app.include_router(evaluations_router, prefix="/v1", tags=["Evaluations"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": "evalxref", "version": "0.1.0", "docs": "/docs"}
