"""
Gemini API client initialization.
"""

from __future__ import annotations

from google import genai

from .config import StoryboardSettings


def get_genai_client(settings: StoryboardSettings) -> "genai.Client":
    """
    Initialize a Gemini API client from validated settings.

    Args:
        settings: StoryboardSettings holding the API key

    Returns:
        genai.Client instance
    """
    return genai.Client(api_key=settings.api_key)
