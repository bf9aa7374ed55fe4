from fastapi import Request

from ai_canvas.core.config import Settings
from ai_canvas.services.checkout_service import CheckoutService
from ai_canvas.services.image_service import HuggingFaceImageService, ImageService, PollinationsImageService


def build_image_service(settings: Settings) -> ImageService:
    if settings.IMAGE_PROVIDER == "pollinations":
        return PollinationsImageService()
    return HuggingFaceImageService(
        api_key=settings.HUGGINGFACE_API_KEY,
        model_url=settings.HUGGINGFACE_MODEL_URL,
        timeout=settings.IMAGE_TIMEOUT_SECONDS
    )


def build_checkout_service(settings: Settings) -> CheckoutService:
    return CheckoutService(
        secret_key=settings.STRIPE_SECRET_KEY,
        api_version=settings.STRIPE_API_VERSION,
        currency=settings.CHECKOUT_CURRENCY,
        minimum_amount=settings.MIN_DONATION_CENTS
    )


def get_image_service(request: Request) -> ImageService:
    return request.app.state.image_service


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def base_path(request: Request) -> str:
    return request.scope.get("root_path", "").rstrip("/")


def request_origin(request: Request) -> str:
    """Public URL prefix of the app: ``Origin`` header plus the mount path."""
    origin = request.headers.get("origin")
    if origin:
        return origin.rstrip("/") + base_path(request)
    return str(request.base_url).rstrip("/")
