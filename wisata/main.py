"""FastAPI application entrypoint. No business logic; only wiring, handlers and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wisata.api import pages
from wisata.api import router as api_router
from wisata.core.config import Settings, get_settings
from wisata.core.security import TokenCodec
from wisata.middleware import TrackInterceptionMiddleware
from wisata.services.errors import AuthError
from wisata.services.role_gate import RoleGate

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    """Client sees only the generic message for the error class."""
    logger.info(
        "Auth error",
        extra={"error": type(exc).__name__, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema failures are 400 with field-level detail."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request data",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; tests pass their own Settings (e.g. a distinct JWT_SECRET)."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    if settings.uses_insecure_jwt_secret:
        log = logger.warning if settings.APP_ENV == "prod" else logger.info
        log("JWT_SECRET is not set; signing sessions with the insecure development secret")

    codec = TokenCodec(
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )

    app = FastAPI(
        title="Wisata API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.token_codec = codec

    app.add_exception_handler(AuthError, auth_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.add_middleware(TrackInterceptionMiddleware, gate=RoleGate(codec))
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS or (["*"] if settings.APP_ENV == "dev" else []),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(pages.router)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Wisata API"}

    return app


app = create_app()
