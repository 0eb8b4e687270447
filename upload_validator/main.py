import logging
import sys
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from upload_validator.api.v1.endpoints import validation as validation_endpoints
from upload_validator.core.config import settings

# Send package logs to the terminal; uvicorn often doesn't show them otherwise
_app_log = logging.getLogger("upload_validator")
_app_log.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
if not _app_log.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    _app_log.addHandler(_handler)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
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
    prefix="/api/v1/files",
    tags=["files"],
)


@app.get("/")
def root():
    return {
        "app_name": settings.APP_NAME,
        "app_version": settings.APP_VERSION,
        "debug": settings.DEBUG,
        "max_upload_size_bytes": settings.MAX_UPLOAD_SIZE_BYTES,
    }


@app.get("/health")
async def health():
    """Health check for load balancers and containers. No external dependencies to probe."""
    return {"status": "ok"}


def start():
    uvicorn.run("upload_validator.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
