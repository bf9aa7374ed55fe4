"""Support page: preset and custom donations through hosted checkout."""
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from enum import Enum
from typing import Awaitable, Callable, Mapping, Optional, Sequence

from ai_canvas.core.errors import AppError
from ai_canvas.models.checkout import DONATION_OPTIONS, CheckoutSession, DonationOption
from ai_canvas.views.templating import render

SUPPORT_PATH = "/support"
SUCCESS_MESSAGE = "Thank you for your generous support! Your contribution means a lot."
CANCELED_MESSAGE = "Payment canceled. No worries, you can always support later!"
MISSING_KEY_MESSAGE = "Stripe Publishable Key is not configured."
INVALID_AMOUNT_MESSAGE = "Please enter a valid amount (minimum $0.50)."

FALSE_FLAGS = {"", "0", "false", "no"}

CreateSession = Callable[[int], Awaitable[CheckoutSession]]


class SupportStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    CANCELED = "canceled"
    REDIRECTING = "redirecting"
    ERROR = "error"


@dataclass(frozen=True)
class SupportState:
    status: SupportStatus = SupportStatus.IDLE
    message: str = ""
    # full browser navigation target (hosted checkout page)
    redirect_url: Optional[str] = None
    # history entry to swap in once a return flag was shown
    replace_url: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.status is SupportStatus.ERROR


def _flag(params: Mapping[str, str], name: str) -> bool:
    value = params.get(name)
    return value is not None and value.strip().lower() not in FALSE_FLAGS


def from_query(params: Mapping[str, str], base_path: str = "") -> SupportState:
    page = f"{base_path}{SUPPORT_PATH}"
    if _flag(params, "success"):
        return SupportState(SupportStatus.SUCCEEDED, SUCCESS_MESSAGE, replace_url=page)
    if _flag(params, "canceled"):
        return SupportState(SupportStatus.CANCELED, CANCELED_MESSAGE, replace_url=page)
    return SupportState()


def parse_amount(text: str, minimum: int = 50) -> Optional[int]:
    """Convert a decimal currency string such as ``"12.50"`` into cents."""
    try:
        value = Decimal(text.strip())
        if not value.is_finite():
            return None
        cents = int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (InvalidOperation, AttributeError):
        # quantize overflows the context precision for huge values such as "1e30"
        return None
    if cents < minimum:
        return None
    return cents


async def donate(
    state: SupportState,
    amount_cents: int,
    create_session: CreateSession,
    publishable_key: Optional[str]
) -> SupportState:
    state = replace(state, status=SupportStatus.LOADING, message="", replace_url=None)

    if not publishable_key:
        return replace(state, status=SupportStatus.ERROR, message=MISSING_KEY_MESSAGE)

    try:
        session = await create_session(amount_cents)
    except AppError as e:
        return replace(state, status=SupportStatus.ERROR, message=f"Error: {e.message}")

    return replace(state, status=SupportStatus.REDIRECTING, redirect_url=session.url)


async def donate_custom(
    state: SupportState,
    text: str,
    create_session: CreateSession,
    publishable_key: Optional[str],
    minimum: int = 50
) -> SupportState:
    amount_cents = parse_amount(text, minimum)
    if amount_cents is None:
        return replace(state, status=SupportStatus.ERROR, message=INVALID_AMOUNT_MESSAGE, replace_url=None)
    return await donate(state, amount_cents, create_session, publishable_key)


def render_support(
    state: SupportState,
    options: Sequence[DonationOption] = DONATION_OPTIONS,
    base_path: str = "",
    minimum: int = 50
) -> str:
    return render(
        "support.html",
        state=state,
        options=options,
        base_path=base_path,
        minimum_dollars=f"{minimum / 100:.2f}"
    )
