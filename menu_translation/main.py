import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from menu_translation.config import settings
from menu_translation.utils.logging import configure_logging
from menu_translation.translation.router import router as translation_router
from menu_translation.dictionary.router import router as dictionary_router
from menu_translation.morphological.router import router as morphological_router
from menu_translation.synonyms.router import router as synonyms_router

# Load environment variables from .env file
load_dotenv()

# Configure logging from logging.ini file
logging_config_path = Path(__file__).parent.parent / "logging.ini"
if configure_logging(logging_config_path, settings.LOG_LEVEL):
    print(f"[Startup] Logging configured from {logging_config_path}")
else:
    print(f"[Startup] Logging config file not found at {logging_config_path}, using basic configuration")

logger = logging.getLogger(__name__)

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
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(translation_router, prefix=settings.API_V1_STR)
app.include_router(dictionary_router, prefix=settings.API_V1_STR)
app.include_router(morphological_router, prefix=settings.API_V1_STR)
app.include_router(synonyms_router, prefix=settings.API_V1_STR)


@app.get("/")
async def root():
    return {
        "message": "Menu Translation API",
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
async def health_check():
    return {"status": "ok"}


@app.on_event("startup")
async def startup_event():
    logger.info("Application starting up...")
    logger.info(f"[Startup] MT provider: {settings.MT_PROVIDER}, database: {settings.USE_DATABASE}")

    # Optional: auto run alembic migrations on startup
    if settings.USE_DATABASE and settings.AUTO_MIGRATE_ON_STARTUP:
        try:
            import subprocess
            subprocess.run(["alembic", "upgrade", "head"], check=True)
            logger.info("[Startup] Alembic migrations applied")
        except Exception as e:
            logger.error(f"[Startup] Alembic migration failed: {e}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
