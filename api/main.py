import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from client_settings import repository as client_settings_repository
from client_settings import router as client_settings_router
from client_settings.validation import MALFORMED_PAYLOAD_MESSAGE
from core import config, db
from core.log import configure_logging
from events import router as events_router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to repositories through `db.get_pool`.
    app.state.pool = await db.create_pool()
    try:
        await client_settings_repository.ensure_schema(app.state.pool)
        logger.info("startup_complete")
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


app = FastAPI(lifespan=lifespan)

# Allow the frontend dev server (or configured origins) to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(client_settings_router.router, tags=["client-settings"])
app.include_router(events_router.router, tags=["events"])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("request_rejected errors=%s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": MALFORMED_PAYLOAD_MESSAGE},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "ticketing settings api"}
