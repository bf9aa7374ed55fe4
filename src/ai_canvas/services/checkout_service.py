import logging
from typing import Any, Optional

import stripe
from fastapi.concurrency import run_in_threadpool

from ai_canvas.core.errors import ConfigurationError, InvalidInputError, UpstreamError
from ai_canvas.models.checkout import CheckoutSession

logger = logging.getLogger(__name__)

PRODUCT_NAME = "Support for Developer Education"
PRODUCT_DESCRIPTION = "One-time donation to support the developer's education."


def validate_amount(amount: Any, minimum: int) -> int:
    # bool is an int subclass; floats pass only when they are whole subunits
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidInputError("Invalid amount provided.")
    if isinstance(amount, float) and not amount.is_integer():
        raise InvalidInputError("Invalid amount provided.")
    if amount < minimum:
        raise InvalidInputError("Invalid amount provided.")
    return int(amount)


class CheckoutService:
    def __init__(
        self,
        secret_key: Optional[str],
        api_version: str,
        currency: str = "usd",
        minimum_amount: int = 50
    ):
        self.secret_key = secret_key
        self.api_version = api_version
        self.currency = currency
        self.minimum_amount = minimum_amount

    def build_session_params(self, amount: int, origin: str) -> dict:
        origin = origin.rstrip("/")
        return {
            "payment_method_types": ["card"],
            "line_items": [
                {
                    "price_data": {
                        "currency": self.currency,
                        "product_data": {
                            "name": PRODUCT_NAME,
                            "description": PRODUCT_DESCRIPTION,
                        },
                        "unit_amount": amount,
                    },
                    "quantity": 1,
                }
            ],
            "mode": "payment",
            "success_url": f"{origin}/support?success=true",
            "cancel_url": f"{origin}/support?canceled=true",
            "metadata": {"donation_amount_cents": amount},
        }

    async def create_session(self, amount: Any, origin: str) -> CheckoutSession:
        amount = validate_amount(amount, self.minimum_amount)

        if not self.secret_key:
            raise ConfigurationError("STRIPE_SECRET_KEY is not set in the environment")

        params = self.build_session_params(amount, origin)
        try:
            session = await run_in_threadpool(
                stripe.checkout.Session.create,
                api_key=self.secret_key,
                stripe_version=self.api_version,
                **params
            )
        except stripe.StripeError as e:
            logger.error(f"Error creating Stripe Checkout session: {e}")
            raise UpstreamError(e.user_message or str(e) or "Failed to create checkout session.") from e

        logger.info(f"Created checkout session {session.id} for {amount} {self.currency}", extra={"session_id": session.id})
        return CheckoutSession(session_id=session.id, url=session.url)
