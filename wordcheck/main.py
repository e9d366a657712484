"""
FastAPI application exposing the spell-check service.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordcheck import __version__
from wordcheck.config import settings
from wordcheck.middleware.logging import RequestLoggingMiddleware
from wordcheck.routes import health, spellcheck
from wordcheck.services.context import SpellCheckContext
from wordcheck.services.dictionary import DictionaryLoadError
from wordcheck.utils.logger import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Loads the dictionary on startup; the service does not start without it.
    """
    logger.info("Starting spell-check service")
    logger.info(f"Environment: {'DEBUG' if settings.DEBUG else 'PRODUCTION'}")

    try:
        app.state.spellcheck = SpellCheckContext.from_settings()
    except DictionaryLoadError as e:
        raise RuntimeError(f"Cannot start without a dictionary: {e}") from e

    yield

    logger.info("Shutting down spell-check service")
    app.state.spellcheck = None


app = FastAPI(
    title="Spell-check Service",
    description="Dictionary spell checking with edit-distance suggestions",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router, tags=["Health"])
app.include_router(
    spellcheck.router,
    prefix="/api/v1",
    tags=["Spell-check"]
)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint redirect to docs."""
    return {
        "message": "Spell-check Service",
        "docs": "/docs",
        "health": "/health"
    }


def run() -> None:
    import uvicorn

    uvicorn.run(
        "wordcheck.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
