import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.engine import Engine

from config.settings import Settings, load_settings
from contacts.exceptions import ContactError, StoreUnavailable
from database import create_db_engine, create_session_factory, init_schema, ping

log = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the API. The app owns its engine (and connection pool); pass
    engine to share an existing one, e.g. in tests.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)
    owns_engine = engine is None
    if owns_engine:
        engine = create_db_engine(settings.sqlalchemy_url, settings.db_pool_size)

    # ============================================================
    # INITIALIZE DATABASE SCHEMA ON STARTUP
    # ============================================================

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            init_schema(engine)
        except Exception:
            log.exception("DB init error, refusing to serve")
            raise
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(
        title='Contacts API',
        description='Contacts management CRUD service',
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.SessionLocal = create_session_factory(engine)

    # ============================================================
    # CORS + REQUEST LOGGING
    # ============================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        log.info("%s %s %d %.1f ms", request.method, request.url.path, response.status_code, elapsed)
        return response

    # ============================================================
    # ERROR HANDLERS
    # ============================================================

    @app.exception_handler(ContactError)
    async def contact_error_handler(request: Request, exc: ContactError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        return JSONResponse(status_code=400, content={"detail": errors})

    # ============================================================
    # ROUTERS
    # ============================================================

    from contacts.router import router as contacts_router

    app.include_router(contacts_router)

    # ============================================================
    # ROOT & HEALTH ENDPOINTS
    # ============================================================

    @app.get("/")
    def read_root():
        return {
            "message": "Contacts API is running!",
            "version": VERSION,
        }

    @app.get("/health", response_class=PlainTextResponse)
    def health_check(request: Request):
        try:
            ping(request.app.state.engine)
        except StoreUnavailable as e:
            log.error("Health check failed: %s", e.message)
            return PlainTextResponse("DB down", status_code=500)
        return "OK"

    return app


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
    )


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    app = create_app(settings)
    log.info("Contacts API listening on %s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
