"""
Ephemeral Paste - Main FastAPI application.
"""
import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ephemeral_paste.config import settings
from ephemeral_paste.errors import register_exception_handlers
from ephemeral_paste.routes import health, pages, pastes
from ephemeral_paste.store import PasteStore, current_time_ms

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


async def sweep_periodically(store: PasteStore, interval: float) -> None:
    """Evict time-expired pastes every `interval` seconds until cancelled."""
    while True:
        await asyncio.sleep(interval)
        store.sweep(current_time_ms())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown handling."""
    logger.info("Ephemeral Paste application starting...")
    logger.warning("Pastes are held in memory and will NOT persist across restarts")

    sweeper = None
    interval = app.state.sweep_interval
    if interval > 0:
        logger.info(f"Expired paste sweeper running every {interval}s")
        sweeper = asyncio.create_task(sweep_periodically(app.state.store, interval))

    yield

    if sweeper is not None:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper
    logger.info(f"Ephemeral Paste application shutting down ({len(app.state.store)} pastes dropped)")


def create_app(
    store: Optional[PasteStore] = None,
    sweep_interval: Optional[float] = None,
) -> FastAPI:
    """
    Build the application around its own paste store.

    Args:
        store: Store to serve from (a fresh one if omitted)
        sweep_interval: Sweeper period in seconds, 0 disables
            (defaults to SWEEP_INTERVAL_SECONDS)
    """
    app = FastAPI(
        title="Ephemeral Paste",
        description="Share text that expires by time or by view count",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else PasteStore()
    app.state.sweep_interval = (
        settings.SWEEP_INTERVAL_SECONDS if sweep_interval is None else sweep_interval
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(pastes.router)
    app.include_router(pages.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ephemeral_paste.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
