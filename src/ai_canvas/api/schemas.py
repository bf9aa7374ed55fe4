from pydantic import BaseModel, Field
from typing import Any, Optional

class GenerateImageRequest(BaseModel):
    prompt: Optional[str] = None

class GenerateImageResponse(BaseModel):
    image: str

class CheckoutSessionRequest(BaseModel):
    # validated by CheckoutService so that strings and booleans are rejected, not coerced
    amount: Any = None

class CheckoutSessionResponse(BaseModel):
    session_id: str = Field(serialization_alias="sessionId")
    url: str

class ErrorResponse(BaseModel):
    error: str
