from fastapi import APIRouter, Depends, Request
import logging

from ai_canvas.core.dependencies import get_checkout_service, get_image_service, request_origin
from ai_canvas.api.schemas import (
    CheckoutSessionRequest,
    CheckoutSessionResponse,
    ErrorResponse,
    GenerateImageRequest,
    GenerateImageResponse,
)
from ai_canvas.services.checkout_service import CheckoutService
from ai_canvas.services.image_service import ImageService

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "/generate",
    response_model=GenerateImageResponse,
    responses=ERROR_RESPONSES
)
async def generate_image(
    body: GenerateImageRequest,
    image_service: ImageService = Depends(get_image_service)
):
    image = await image_service.generate(body.prompt)
    return GenerateImageResponse(image=image)


@router.post(
    "/create-checkout-session",
    response_model=CheckoutSessionResponse,
    response_model_by_alias=True,
    responses=ERROR_RESPONSES
)
async def create_checkout_session(
    body: CheckoutSessionRequest,
    request: Request,
    checkout_service: CheckoutService = Depends(get_checkout_service)
):
    session = await checkout_service.create_session(
        amount=body.amount,
        origin=request_origin(request)
    )
    return CheckoutSessionResponse(session_id=session.session_id, url=session.url)
