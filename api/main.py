import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apis import router as apis_router
from core import config, errors, schema
from core.db import Database
from core.log import configure_logging
from dashboards import router as dashboards_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; startup fails if the database is unreachable.
    db = await Database.connect()
    try:
        if config.auto_create_schema():
            await schema.ensure_schema(db)
        app.state.db = db
        logger.info("database_ready max_pool_size=%s", config.db_pool_max_size())
        yield
    finally:
        app.state.db = None
        await db.close()


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(title="paneboard", lifespan=lifespan)

    origins = config.cors_allow_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials with a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    errors.register_exception_handlers(app)

    prefix = config.api_prefix()
    app.include_router(users_router.router, prefix=prefix, tags=["users"])
    app.include_router(apis_router.router, prefix=prefix, tags=["apis"])
    app.include_router(dashboards_router.router, prefix=prefix, tags=["dashboards"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "paneboard api"}

    return app


app = create_app()
