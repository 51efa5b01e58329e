import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from medal_table import __version__
from medal_table.api.v1 import medals
from medal_table.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Read-only API for Olympic medal counts by country",
    version=__version__
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(medals.router, prefix=settings.API_V1_PREFIX)

@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "status": "ok",
        "message": settings.PROJECT_NAME,
        "version": __version__
    }

@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "healthy"}
