import src.models
from src.dictionary.router import router as dictionary_router
from src.dictionary.dependencies import get_ingestion_service
from src.config import settings
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import logging

from src.utils.logging import configure_logging

# Load environment variables from .env file
load_dotenv()

# Configure logging from logging.ini file
configure_logging(level=settings.LOG_LEVEL, log_file=settings.LOG_FILE)

# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    swagger_ui_parameters={"docExpansion": "none"}
)

# Add CORS middleware
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin)
                       for origin in settings.BACKEND_CORS_ORIGINS],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(dictionary_router, prefix=settings.API_V1_STR)

# Root endpoint


@app.get("/")
async def root():
    return {
        "message": "Chào mừng đến với HSR Dictionary!",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }

# Health check endpoint


@app.get("/health")
async def health_check():
    return {"status": "hoạt động bình thường"}

# Startup event


@app.on_event("startup")
async def startup_event():
    logger = logging.getLogger(__name__)
    logger.info("Application starting up...")

    # Optional: auto run alembic migrations on startup
    if settings.AUTO_MIGRATE_ON_STARTUP:
        try:
            import subprocess
            subprocess.run(["alembic", "upgrade", "head"], check=True)
            logger.info("[Startup] Alembic migrations applied")
        except Exception as e:
            logger.error(f"[Startup] Alembic migration failed: {e}")

    # Optional: reload the dictionary before serving
    if settings.UPDATE_ON_STARTUP:
        try:
            async with get_ingestion_service() as ingestion:
                count = await ingestion.refresh()
            logger.info(f"[Startup] Dictionary refreshed with {count} items")
        except Exception as e:
            logger.error(f"[Startup] Dictionary refresh failed: {e!r}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=3001)
