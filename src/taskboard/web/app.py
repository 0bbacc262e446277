"""REST backend application: FastAPI app creation and startup."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import Settings, settings as default_settings
from taskboard.db.database import create_engine_and_sessionmaker, init_db

logger = logging.getLogger(__name__)

_start_time: float = time.time()


@asynccontextmanager
async def _lifespan(app: FastAPI):
    from taskboard.db.seed import seed_demo_data

    await init_db(app.state.engine)
    logger.info("Database initialized: %s", app.state.engine.url.database)
    if app.state.settings.seed_demo_data:
        async with app.state.session_factory() as session:
            await seed_demo_data(session)
    yield
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI instance and mount the API routers."""
    settings = settings or default_settings
    app = FastAPI(title="Taskboard API", lifespan=_lifespan)
    app.state.settings = settings
    app.state.engine, app.state.session_factory = create_engine_and_sessionmaker(
        settings.database_url
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from taskboard.web.routes import notes_router, status_router, tasks_router, users_router

    app.include_router(tasks_router)
    app.include_router(notes_router)
    app.include_router(users_router)
    app.include_router(status_router)
    return app


def uptime_seconds() -> int:
    return int(time.time() - _start_time)
