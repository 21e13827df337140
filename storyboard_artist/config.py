"""
Configuration, constants, and settings for Storyboard Artist.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

# ---------- Scene Metadata ----------
CAMERA_ANGLES = (
    "Wide Shot",
    "Close-Up",
    "Top Shot",
    "Shoulder Level",
    "Eye Level",
    "High Angle",
    "Low Angle",
)

# ---------- Gemini Models ----------
DEFAULT_ANALYSIS_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"

# ---------- Image Output ----------
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_ASPECT_RATIO = "16:9"
IMAGE_COUNT = 1

# ---------- Retry Policy ----------
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_INITIAL_DELAY = 5.0  # seconds


DEFAULT_ANALYST_PROMPT = """You are a professional Storyboard Artist AI. Analyze the following scene description and determine the best camera angle and overall mood.

Scene: "{scene}"

Respond with ONLY a JSON object with two keys: "cameraAngle" and "mood".
- For "cameraAngle", choose from: {camera_angles}.
- For "mood", provide a short, descriptive phrase (e.g., "Tense and suspenseful", "Joyful and celebratory", "Somber and reflective").
"""

DEFAULT_IMAGE_PROMPT = """A single storyboard frame visualizing the scene: {scene}.

Style guidelines:
- Art Style: Hand-drawn, sketchy black and white art style, similar to professional film storyboards. Use clear line work and dramatic shading.
- Color: Strictly grayscale.
- Aspect Ratio: 16:9 landscape.
- Quality: High quality, high detail.
- Composition: Cinematic, clear visual storytelling.
"""


# ---------- Settings ----------
@dataclass(frozen=True)
class StoryboardSettings:
    """Validated runtime settings, loaded once and injected into the orchestrator."""
    api_key: str
    analysis_model: str = DEFAULT_ANALYSIS_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    initial_delay: float = DEFAULT_INITIAL_DELAY

    def __post_init__(self):
        if not self.api_key:
            raise ConfigurationError("API_KEY environment variable not set")
        if self.max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.initial_delay < 0:
            raise ConfigurationError(f"initial_delay must be >= 0, got {self.initial_delay}")


def _read_number(env: Mapping[str, str], name: str, cast, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from exc


def load_settings(env: Optional[Mapping[str, str]] = None) -> StoryboardSettings:
    """
    Build settings from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Returns:
        StoryboardSettings instance

    Raises:
        ConfigurationError: if the API key is missing or a number is malformed
    """
    if env is None:
        env = os.environ
    # Prefer official GEMINI_API_KEY; fall back to the older names for compatibility.
    api_key = env.get("GEMINI_API_KEY") or env.get("GOOGLE_GENAI_API_KEY") or env.get("API_KEY") or ""
    return StoryboardSettings(
        api_key=api_key.strip(),
        analysis_model=env.get("GEMINI_MODEL") or DEFAULT_ANALYSIS_MODEL,
        image_model=env.get("GEMINI_IMAGE_MODEL") or DEFAULT_IMAGE_MODEL,
        max_attempts=_read_number(env, "STORYBOARD_MAX_ATTEMPTS", int, DEFAULT_MAX_ATTEMPTS),
        initial_delay=_read_number(env, "STORYBOARD_INITIAL_DELAY", float, DEFAULT_INITIAL_DELAY),
    )
