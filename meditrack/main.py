import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meditrack.api.routes.router import api_router
from meditrack.core.config import settings
from meditrack.core.errors import StoreError
from meditrack.core.firebase import init_firebase
from meditrack.services.logger import configure_logging

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and initialize Firebase Admin at app startup."""
    configure_logging()
    init_firebase()
    yield


app = FastAPI(title=settings.APP_TITLE, lifespan=lifespan)

# The web frontend is served from a different origin in development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    log.error("Unhandled store error on %s %s: [%s] %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.user_message(), "kind": exc.kind})


@app.get("/")
async def root():
    return {"message": f"{settings.APP_TITLE} backend is running"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


app.include_router(api_router)
