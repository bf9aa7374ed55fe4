from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ai_canvas.core.config import Settings
from ai_canvas.core.dependencies import (
    base_path,
    get_app_settings,
    get_checkout_service,
    get_image_service,
    request_origin,
)
from ai_canvas.services.checkout_service import CheckoutService
from ai_canvas.services.image_service import ImageService
from ai_canvas.views.canvas import CanvasState, render_canvas, submit
from ai_canvas.views.support import SupportState, donate, donate_custom, from_query, render_support

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def canvas_page(request: Request):
    return render_canvas(CanvasState(), base_path=base_path(request))


@router.post("/")
async def canvas_generate(
    request: Request,
    prompt: str = Form(""),
    image_service: ImageService = Depends(get_image_service)
):
    state = await submit(CanvasState(prompt=prompt), image_service.generate)
    return render_canvas(state, base_path=base_path(request))


@router.get("/support")
def support_page(request: Request, settings: Settings = Depends(get_app_settings)):
    state = from_query(request.query_params, base_path=base_path(request))
    return render_support(state, base_path=base_path(request), minimum=settings.MIN_DONATION_CENTS)


@router.post("/support")
async def support_donate(
    request: Request,
    amount: Optional[int] = Form(None),
    custom_amount: str = Form(""),
    settings: Settings = Depends(get_app_settings),
    checkout_service: CheckoutService = Depends(get_checkout_service)
):
    origin = request_origin(request)

    async def create_session(amount_cents: int):
        return await checkout_service.create_session(amount_cents, origin)

    if amount is not None:
        state = await donate(SupportState(), amount, create_session, settings.STRIPE_PUBLISHABLE_KEY)
    else:
        state = await donate_custom(
            SupportState(),
            custom_amount,
            create_session,
            settings.STRIPE_PUBLISHABLE_KEY,
            minimum=settings.MIN_DONATION_CENTS
        )

    if state.redirect_url:
        return RedirectResponse(state.redirect_url, status_code=303)
    return render_support(state, base_path=base_path(request), minimum=settings.MIN_DONATION_CENTS)
