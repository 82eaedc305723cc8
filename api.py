import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from SmartRecipe import __version__
from SmartRecipe.database import init_db
from SmartRecipe.logger import get_logger
from SmartRecipe.routers import base

load_dotenv()

logger = get_logger(__name__)

app = FastAPI(
    title="Smart Recipe API",
    description="Procedural recipe suggestions from ingredients, cuisine, time and skill level.",
    version=__version__
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(base.api_router)


# ============================================================================
# Startup
# ============================================================================

@app.on_event("startup")
def startup_event():
    """Initialize database on startup."""
    init_db()
    logger.info("✓ Database initialized")


# ============================================================================
# Health Check
# ============================================================================

@app.get("/")
def read_root():
    return {
        "message": "Smart Recipe API",
        "version": __version__,
        "status": "online",
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "database": "connected",
        "api": "running"
    }


# ============================================================================
# Main
# ============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True
    )
