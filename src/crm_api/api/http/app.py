"""FastAPI application: routers, middleware and lifecycle."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from crm_api import __version__
from crm_api.api.http.app_data import ApplicationDependencies
from crm_api.api.http.errors import register_exception_handlers
from crm_api.api.http.middleware import log_requests
from crm_api.api.http.routers.customers import router as customers_router
from crm_api.api.http.routers.health import router as health_router
from crm_api.api.http.routers.users import router as users_router
from crm_api.api.utils.app_startup import configure_logging
from crm_api.core.services.database.db_session import DbSessionService
from crm_api.core.services.side_effects import build_side_effects
from crm_api.runtime.context import get_config

configure_logging()


async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting {} in {} environment", config.app.name, config.app.environment)

    database_service = DbSessionService()
    database_service.create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        side_effects=build_side_effects(config.side_effects.backend),
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    deps: ApplicationDependencies = app.state.app_dependencies
    deps.database_service.engine.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def _add_cors(app: FastAPI) -> None:
    config = get_config().app

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.origins,
        allow_credentials=config.cors.allow_credentials,
        allow_methods=config.cors.allow_methods,
        allow_headers=config.cors.allow_headers,
    )


def create_app() -> FastAPI:
    is_production = get_config().app.environment == "production"
    app = FastAPI(
        title="crm-api",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )

    _add_cors(app)
    app.middleware("http")(log_requests)
    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(customers_router)
    app.include_router(users_router)

    @app.get("/")
    async def project_info() -> dict[str, object]:
        return {
            "name": get_config().app.name,
            "version": __version__,
            "description": "Customer and user management where every service handles exactly one action",
            "pattern": "single-action services",
            "resources": ["/customers", "/users"],
        }

    return app


app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_config().app.host, port=get_config().app.port, access_log=False)
