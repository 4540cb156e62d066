import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from auth import router as auth_router
from business import router as business_router
from core import config, db
from core.log_config import configure_logging
from sync import router as sync_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process; a bad DATABASE_URL stops startup here.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


async def _invalid_request(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("request_invalid errors=%s", len(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": "Invalid payload"})


def create_app() -> FastAPI:
    app = FastAPI(title="sheet-sync-api", lifespan=lifespan)

    # The client app is served from other origins; the sheet script doesn't care.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_request)

    app.include_router(sync_router.router, tags=["sync"])
    app.include_router(business_router.router, tags=["business"])
    if config.auth_debug_enabled():
        app.include_router(auth_router.router, tags=["auth"])

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "Menu API is running"

    @app.get("/ping", response_class=PlainTextResponse)
    def ping() -> str:
        return "pong"

    @app.get("/db-health")
    async def db_health():
        try:
            row = await db.fetch_one("SELECT now() AS now")
        except Exception:
            logger.exception("db_health_failed")
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"ok": False, "error": "database unavailable"},
            )
        return {"ok": True, "now": (row or {}).get("now")}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=config.listen_host(), port=config.listen_port())
