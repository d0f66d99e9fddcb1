"""FastAPI application factory for the mock transfer engine."""

import logging

from fastapi import FastAPI

from joblist.services.mock.engine_service import MockEngineService

logger = logging.getLogger(__name__)


def create_app(service: MockEngineService | None = None) -> FastAPI:
    from joblist.routers.mock import list as list_router

    app = FastAPI(
        title="Mock Transfer Engine",
        description="Answers list queries from an in-memory job table.",
        version="1.0.0",
    )
    app.state.engine_service = service or MockEngineService()
    logger.info(f"Mock engine serving {len(app.state.engine_service.jobs)} jobs")

    app.include_router(list_router.router, tags=["List"])

    return app
