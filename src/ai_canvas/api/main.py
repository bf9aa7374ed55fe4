import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mangum import Mangum
from starlette.exceptions import HTTPException as StarletteHTTPException

from ai_canvas.api import pages, routers
from ai_canvas.core.config import Settings, get_settings
from ai_canvas.core.dependencies import build_checkout_service, build_image_service
from ai_canvas.core.errors import AppError, ConfigurationError
from ai_canvas.core.logging_config import configure_logging

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        context = {"path": request.url.path, "status_code": exc.status_code}
        if isinstance(exc, ConfigurationError):
            logger.error(f"Configuration error on {request.url.path}: {exc.detail}", extra=context)
        elif exc.status_code >= 500:
            logger.error(f"Upstream error on {request.url.path}: {exc.message}", extra=context)
        else:
            logger.info(f"Rejected request to {request.url.path}: {exc.message}", extra=context)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Invalid request body on {request.url.path}: {exc.errors()}")
        return error_response(400, "Invalid request body.")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return error_response(500, UNEXPECTED_ERROR_MESSAGE)


def create_app(
    settings: Optional[Settings] = None,
    image_service=None,
    checkout_service=None
) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="AI Canvas",
        root_path=settings.ROOT_PATH
    )

    app.state.settings = settings
    app.state.image_service = image_service or build_image_service(settings)
    app.state.checkout_service = checkout_service or build_checkout_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    register_exception_handlers(app)

    @app.get("/healthz", include_in_schema=False)
    def health():
        return {"status": "ok"}

    app.include_router(routers.router)
    app.include_router(pages.router)

    if settings.IMAGE_PROVIDER == "huggingface" and not settings.HUGGINGFACE_API_KEY:
        logger.warning("HUGGINGFACE_API_KEY is not set; image generation requests will fail")
    if not settings.STRIPE_SECRET_KEY:
        logger.warning("STRIPE_SECRET_KEY is not set; checkout requests will fail")

    return app


configure_logging(get_settings().LOG_LEVEL)

app = create_app()

handler = Mangum(app)
