"""
Image Generator - renders a grayscale 16:9 storyboard frame with Imagen.
"""

from __future__ import annotations

from google.genai import types as genai_types

from .config import (
    DEFAULT_IMAGE_MODEL,
    DEFAULT_IMAGE_PROMPT,
    IMAGE_ASPECT_RATIO,
    IMAGE_COUNT,
    IMAGE_MIME_TYPE,
)
from .errors import ImageGenerationError
from .utils import get_logger, to_data_uri

logger = get_logger("image_generator")


def build_image_prompt(description: str) -> str:
    return DEFAULT_IMAGE_PROMPT.format(scene=description)


async def generate_frame_image(client, description: str, model_name: str = DEFAULT_IMAGE_MODEL) -> str:
    """
    Generate one storyboard frame for a scene.

    Args:
        client: genai.Client
        description: Scene text
        model_name: Imagen model

    Returns:
        Image as a data URI

    Raises:
        ImageGenerationError: if the service returned no image bytes
    """
    response = await client.aio.models.generate_images(
        model=model_name,
        prompt=build_image_prompt(description),
        config=genai_types.GenerateImagesConfig(
            number_of_images=IMAGE_COUNT,
            output_mime_type=IMAGE_MIME_TYPE,
            aspect_ratio=IMAGE_ASPECT_RATIO,
        ),
    )
    images = response.generated_images or []
    image = images[0].image if images else None
    if image is None or not image.image_bytes:
        raise ImageGenerationError("Image generation failed or returned no images.")

    logger.info(f"Storyboard frame generated ({len(image.image_bytes)} bytes)")
    return to_data_uri(image.image_bytes, IMAGE_MIME_TYPE)
