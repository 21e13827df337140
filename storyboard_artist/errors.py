"""
Exception types raised by Storyboard Artist.
"""

from __future__ import annotations
from typing import Optional


class StoryboardError(Exception):
    """User-facing failure. The message is ready to display as-is."""


class ConfigurationError(StoryboardError):
    """Settings are missing or invalid."""


class TransientError(Exception):
    """A failure the caller may retry (rate or quota limiting)."""


class RetryExhaustedError(Exception):
    """Every attempt failed with a transient error."""

    def __init__(self, attempts: int, last_error: Optional[BaseException]):
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"API call failed after {attempts} attempts: {last_error}")


class SceneAnalysisError(Exception):
    """The analysis response could not be read as scene metadata."""


class ImageGenerationError(Exception):
    """The image service returned no usable image."""
