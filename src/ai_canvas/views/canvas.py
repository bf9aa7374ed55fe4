"""Canvas page: prompt form, generated image and local download.

The page is a four-state machine (idle, loading, success, error). Transition
functions return new ``CanvasState`` values and ``render_canvas`` turns any
state into HTML, so the flow can be exercised without a browser.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Awaitable, Callable, Optional

from ai_canvas.core.errors import AppError
from ai_canvas.views.templating import render

DOWNLOAD_FILENAME = "generated_image.png"
EMPTY_PROMPT_MESSAGE = "Please enter a prompt."
UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred."


class CanvasStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class CanvasState:
    status: CanvasStatus = CanvasStatus.IDLE
    prompt: str = ""
    image: Optional[str] = None
    error: str = ""

    @property
    def loading(self) -> bool:
        return self.status is CanvasStatus.LOADING


@dataclass(frozen=True)
class Download:
    """Link that saves the displayed image; the browser already holds its content."""
    filename: str
    href: str


def edit_prompt(state: CanvasState, prompt: str) -> CanvasState:
    return replace(state, prompt=prompt)


def start(state: CanvasState) -> CanvasState:
    if not state.prompt.strip():
        return replace(state, status=CanvasStatus.ERROR, error=EMPTY_PROMPT_MESSAGE)
    return replace(state, status=CanvasStatus.LOADING, image=None, error="")


def succeed(state: CanvasState, image: str) -> CanvasState:
    return replace(state, status=CanvasStatus.SUCCESS, image=image, error="")


def fail(state: CanvasState, message: str) -> CanvasState:
    return replace(state, status=CanvasStatus.ERROR, error=message or UNEXPECTED_ERROR_MESSAGE)


async def submit(state: CanvasState, generate: Callable[[str], Awaitable[str]]) -> CanvasState:
    """Run one generate cycle; ``generate`` is never called for a blank prompt."""
    state = start(state)
    if not state.loading:
        return state
    try:
        image = await generate(state.prompt)
    except AppError as e:
        return fail(state, e.message)
    return succeed(state, image)


def download(state: CanvasState) -> Optional[Download]:
    if not state.image:
        return None
    return Download(filename=DOWNLOAD_FILENAME, href=state.image)


def render_canvas(state: CanvasState, base_path: str = "") -> str:
    return render(
        "canvas.html",
        state=state,
        download=download(state),
        base_path=base_path
    )
