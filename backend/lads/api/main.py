# lads/api/main.py
import os
from lads.api.routes import waitlist_routes
from lads.config import logging_config
from lads.config.constants import DEFAULT_CORS_ORIGINS
from lads.core.database import database
from lads.core.exceptions import add_exception_handlers
from lads.core.services.waitlist_service import WaitlistStore, unique_index_enabled
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from dotenv import load_dotenv
import logging

# Load environment variables
load_dotenv()

logger = logging.getLogger("lads.api")


def cors_origins():
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or DEFAULT_CORS_ORIGINS


def create_app() -> FastAPI:
    logger.info("Initializing FastAPI application")

    app = FastAPI(title="Lads Waitlist API", redirect_slashes=False)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    app.include_router(waitlist_routes.router, prefix="/api/waitlist", tags=["waitlist"])

    @app.get("/")
    async def read_root():
        return {"status": "ok"}

    @app.on_event("startup")
    async def startup_event():
        try:
            await database.ping()
            logger.info("Successfully connected to MongoDB!")
            if unique_index_enabled():
                await WaitlistStore().ensure_indexes()
        except Exception as e:
            # Requests still report storage errors individually
            logger.error(f"Startup error: {e}")

    @app.on_event("shutdown")
    async def shutdown_event():
        database.close_client()
        logger.info("Application shutdown complete")

    return app


# Setup logging first, before anything else
logging_config.setup_logging()

app = create_app()


def start():
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting FastAPI server on {host}:{port}")
    uvicorn.run("lads.api.main:app", host=host, port=port)


if __name__ == "__main__":
    start()
