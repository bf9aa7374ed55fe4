from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal, Optional

DEFAULT_MODEL_URL = "https://api-inference.huggingface.co/models/stabilityai/stable-diffusion-xl-base-1.0"

class Settings(BaseSettings):

    IMAGE_PROVIDER: Literal["huggingface", "pollinations"] = "huggingface"
    HUGGINGFACE_API_KEY: Optional[str] = None
    HUGGINGFACE_MODEL_URL: str = DEFAULT_MODEL_URL
    IMAGE_TIMEOUT_SECONDS: float = 120.0

    STRIPE_PUBLISHABLE_KEY: Optional[str] = None
    STRIPE_SECRET_KEY: Optional[str] = None
    STRIPE_API_VERSION: str = "2022-11-15"
    CHECKOUT_CURRENCY: str = "usd"
    MIN_DONATION_CENTS: int = 50

    ROOT_PATH: str = ""
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
