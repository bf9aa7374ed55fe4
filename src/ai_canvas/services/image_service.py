import base64
import logging
import random
from typing import Optional, Protocol
from urllib.parse import quote, urlencode

import httpx

from ai_canvas.core.errors import ConfigurationError, InvalidInputError, UpstreamError

logger = logging.getLogger(__name__)

POLLINATIONS_BASE_URL = "https://image.pollinations.ai/prompt/"
IMAGE_SIZE = 1024


class ImageService(Protocol):
    async def generate(self, prompt: Optional[str]) -> str: ...


def validate_prompt(prompt: Optional[str]) -> str:
    if not isinstance(prompt, str) or not prompt.strip():
        raise InvalidInputError("Prompt is required")
    return prompt


class HuggingFaceImageService:
    """Fetches a PNG from the Hugging Face inference API and returns it as a data URL."""

    def __init__(
        self,
        api_key: Optional[str],
        model_url: str,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.model_url = model_url
        self.timeout = timeout
        self.transport = transport

    async def generate(self, prompt: Optional[str]) -> str:
        prompt = validate_prompt(prompt)

        if not self.api_key:
            raise ConfigurationError(
                "HUGGINGFACE_API_KEY is not set in the environment",
                public_message="Server configuration error: image provider API key missing."
            )

        logger.info(f"Generating image with model {self.model_url}", extra={"provider": "huggingface"})

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.model_url,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                    json={"inputs": prompt}
                )
        except httpx.HTTPError as e:
            logger.error(f"Hugging Face request failed: {e}")
            raise UpstreamError(f"Failed to reach Hugging Face API: {e}") from e

        if not response.is_success:
            logger.error(f"Hugging Face API error {response.status_code}: {response.text}", extra={"provider": "huggingface", "status_code": response.status_code})
            raise UpstreamError(f"Failed to generate image from Hugging Face API: {response.text}")

        encoded = base64.b64encode(response.content).decode("ascii")
        return f"data:image/png;base64,{encoded}"


class PollinationsImageService:
    """Builds a keyless Pollinations URL; the browser fetches the image itself."""

    def __init__(self, base_url: str = POLLINATIONS_BASE_URL, rng: Optional[random.Random] = None):
        self.base_url = base_url
        self.rng = rng or random.Random()

    async def generate(self, prompt: Optional[str]) -> str:
        prompt = validate_prompt(prompt)
        query = urlencode({
            "width": IMAGE_SIZE,
            "height": IMAGE_SIZE,
            "seed": self.rng.randint(0, 1_000_000),
            "nologo": "true",
        })
        return f"{self.base_url}{quote(prompt, safe='')}?{query}"
