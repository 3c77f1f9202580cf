import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api import audio, chat, files, matters, sessions, summary

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting %s %s...", settings.app_name, settings.app_version)

    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY is not set; chat, summaries and OCR will fail")
    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY is not set; audio transcription will fail")

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(files.router, prefix="/api/files", tags=["Files"])
app.include_router(audio.router, prefix="/api/audio", tags=["Audio"])
app.include_router(chat.router, prefix="/api/chat", tags=["Chat"])
app.include_router(summary.router, prefix="/api/summary", tags=["Summary"])
app.include_router(sessions.router, prefix="/api/sessions", tags=["Sessions"])
app.include_router(matters.router, prefix="/api/matters", tags=["Matters"])


@app.get("/")
def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
def health_check():
    return {"status": "healthy"}
