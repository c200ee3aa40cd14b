import logging
import sys
import uvicorn
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sec_upload.core.config import settings

# Send app logs to the terminal; uvicorn often doesn't show them otherwise
_app_log = logging.getLogger("sec_upload")
_app_log.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
if not _app_log.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    _app_log.addHandler(_handler)

from sec_upload.api.v1.endpoints import upload as upload_endpoints
from sec_upload.api.v1.endpoints import validation as validation_endpoints


@asynccontextmanager
async def lifespan(app: FastAPI):
    _app_log.info(
        f"Upload namespace {settings.UPLOAD_NAMESPACE}, "
        f"TLD whitelist: {settings.tld_whitelist_list or 'any'}"
    )
    yield
    _app_log.info("Shutting down, in-memory uploads are discarded")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

if settings.CORS_ORIGINS.strip():
    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(
    validation_endpoints.router,
    prefix="/api/v1/validation",
    tags=["validation"],
)

app.include_router(
    upload_endpoints.router,
    prefix="/api/v1/uploads",
    tags=["uploads"],
)


@app.get("/")
def root():
    return {
        "app_name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
        "debug": settings.DEBUG,
    }


@app.get("/health")
async def health():
    """Health check for load balancers and containers."""
    return {"status": "ok"}


def start():
    uvicorn.run("sec_upload.main:app", host="0.0.0.0", port=8000, reload=True)
