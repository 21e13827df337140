"""
Storyboard Orchestrator - analyzes a scene, renders its frame, merges the results.

Both calls run through the backoff executor, analysis first so a bad scene
fails before the more expensive image call is made. A StoryboardResult is
only built once both have succeeded.
"""

from __future__ import annotations
import asyncio
import functools
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from google.genai import errors as genai_errors

from .config import DEFAULT_INITIAL_DELAY, DEFAULT_MAX_ATTEMPTS, StoryboardSettings, load_settings
from .errors import StoryboardError
from .gemini_client import get_genai_client
from .image_generator import generate_frame_image
from .retry import run_with_backoff
from .scene_analyst import SceneAnalysis, analyze_scene
from .utils import extract_nested_error_message, get_logger

logger = get_logger("storyboard")

ERROR_PREFIX = "Failed to generate storyboard:"

SceneAnalyzer = Callable[[str], Awaitable[SceneAnalysis]]
ImageGenerator = Callable[[str], Awaitable[str]]


@dataclass(frozen=True)
class StoryboardResult:
    """One generated storyboard frame with its camera and mood direction."""
    image_url: str
    camera_angle: str
    mood: str

    def to_dict(self) -> dict:
        return {
            "imageUrl": self.image_url,
            "cameraAngle": self.camera_angle,
            "mood": self.mood,
        }


def api_error_message(exc: BaseException) -> Optional[str]:
    """
    Find the provider's message on a google-genai APIError.

    Looks at the exception itself, then what it wraps (RetryExhaustedError's
    last_error, or the __cause__ chain).
    """
    pending = [exc]
    seen = set()
    while pending:
        current = pending.pop(0)
        if current is None or id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, genai_errors.APIError):
            if current.message:
                return str(current.message)
            details = current.details
            error = details.get("error") if isinstance(details, dict) else None
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        pending.append(getattr(current, "last_error", None))
        pending.append(current.__cause__)
    return None


def normalize_error_message(exc: BaseException) -> str:
    """
    Build the user-facing message for a failed generation.

    Prefers the message carried by an API error, then the nested
    error.message of a JSON payload embedded in the exception text, else
    the text itself.
    """
    message = str(exc)
    nested = api_error_message(exc) or extract_nested_error_message(message)
    return f"{ERROR_PREFIX} {nested or message}"


class StoryboardOrchestrator:
    """Sequences scene analysis and image generation for one scene description."""

    def __init__(
        self,
        analyze: SceneAnalyzer,
        generate_image: ImageGenerator,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        initial_delay: float = DEFAULT_INITIAL_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        owned_client=None,
    ):
        self._analyze = analyze
        self._generate_image = generate_image
        self._max_attempts = max_attempts
        self._initial_delay = initial_delay
        self._sleep = sleep
        self._owned_client = owned_client

    @classmethod
    def from_settings(cls, settings: StoryboardSettings, client=None) -> "StoryboardOrchestrator":
        """
        Wire the Gemini-backed analyzer and image generator.

        A client built here is owned by the orchestrator and closed by aclose();
        a client passed in stays the caller's to close.
        """
        owned_client = None
        if client is None:
            client = owned_client = get_genai_client(settings)
        return cls(
            analyze=functools.partial(analyze_scene, client, model_name=settings.analysis_model),
            generate_image=functools.partial(generate_frame_image, client, model_name=settings.image_model),
            max_attempts=settings.max_attempts,
            initial_delay=settings.initial_delay,
            owned_client=owned_client,
        )

    async def aclose(self) -> None:
        """Close the async transport of an owned Gemini client."""
        client, self._owned_client = self._owned_client, None
        if client is not None:
            await client.aio.aclose()

    async def __aenter__(self) -> "StoryboardOrchestrator":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _run(self, call, description: str, label: str):
        return await run_with_backoff(
            lambda: call(description),
            self._max_attempts,
            self._initial_delay,
            sleep=self._sleep,
            label=label,
        )

    async def generate(self, description: str) -> StoryboardResult:
        """
        Produce one storyboard frame for a non-empty scene description.

        Raises:
            StoryboardError: with a single displayable message if either call fails
        """
        try:
            analysis = await self._run(self._analyze, description, "scene analysis")
            image_url = await self._run(self._generate_image, description, "image generation")
        except Exception as exc:
            logger.error(f"Error generating storyboard frame: {exc}")
            raise StoryboardError(normalize_error_message(exc)) from exc

        logger.info(f"Storyboard frame ready: {analysis.camera_angle} / {analysis.mood}")
        return StoryboardResult(
            image_url=image_url,
            camera_angle=analysis.camera_angle,
            mood=analysis.mood,
        )


async def generate_storyboard_frame(
    description: str,
    settings: Optional[StoryboardSettings] = None,
) -> StoryboardResult:
    """
    Generate a storyboard frame for a scene description.

    Args:
        description: Non-empty scene text
        settings: Validated settings (loaded from the environment if omitted)

    Returns:
        StoryboardResult
    """
    if settings is None:
        settings = load_settings()
    async with StoryboardOrchestrator.from_settings(settings) as orchestrator:
        return await orchestrator.generate(description)
