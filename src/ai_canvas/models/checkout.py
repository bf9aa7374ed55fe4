from pydantic import BaseModel


class CheckoutSession(BaseModel):
    session_id: str
    url: str


class DonationOption(BaseModel):
    label: str
    amount_cents: int


DONATION_OPTIONS = [
    DonationOption(label="$5", amount_cents=500),
    DonationOption(label="$10", amount_cents=1000),
    DonationOption(label="$25", amount_cents=2500),
]
