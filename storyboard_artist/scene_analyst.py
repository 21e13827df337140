"""
Scene Analyst - picks a camera angle and mood for a scene using Gemini.
"""

from __future__ import annotations

from google.genai import types as genai_types
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .config import CAMERA_ANGLES, DEFAULT_ANALYSIS_MODEL, DEFAULT_ANALYST_PROMPT
from .errors import SceneAnalysisError
from .utils import get_logger, strip_code_fences

logger = get_logger("scene_analyst")

_ANGLE_LOOKUP = {angle.lower(): angle for angle in CAMERA_ANGLES}


class SceneAnalysis(BaseModel):
    """Camera angle and mood chosen for one scene."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    camera_angle: str = Field(alias="cameraAngle")
    mood: str

    @field_validator("camera_angle")
    @classmethod
    def _known_angle(cls, value: str) -> str:
        angle = _ANGLE_LOOKUP.get(value.strip().lower())
        if angle is None:
            raise ValueError(f"unknown camera angle: {value!r}")
        return angle

    @field_validator("mood")
    @classmethod
    def _non_empty_mood(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("mood must not be empty")
        return value


RESPONSE_SCHEMA = genai_types.Schema(
    type=genai_types.Type.OBJECT,
    properties={
        "cameraAngle": genai_types.Schema(
            type=genai_types.Type.STRING,
            description="The selected camera angle for the scene.",
            enum=list(CAMERA_ANGLES),
        ),
        "mood": genai_types.Schema(
            type=genai_types.Type.STRING,
            description="The determined mood of the scene.",
        ),
    },
    required=["cameraAngle", "mood"],
)


def build_analysis_prompt(description: str) -> str:
    angles = ", ".join(f'"{angle}"' for angle in CAMERA_ANGLES)
    return DEFAULT_ANALYST_PROMPT.format(scene=description, camera_angles=angles)


def parse_scene_analysis(text: str) -> SceneAnalysis:
    """
    Validate a JSON analysis response.

    Raises:
        SceneAnalysisError: if the text is not a valid scene-analysis object
    """
    try:
        return SceneAnalysis.model_validate_json(strip_code_fences(text))
    except ValidationError as exc:
        logger.error(f"Failed to parse JSON from analysis response: {text!r} ({exc.error_count()} errors)")
        raise SceneAnalysisError("Could not determine scene metadata.") from exc


async def analyze_scene(client, description: str, model_name: str = DEFAULT_ANALYSIS_MODEL) -> SceneAnalysis:
    """
    Ask Gemini for the best camera angle and mood of a scene.

    Args:
        client: genai.Client
        description: Scene text
        model_name: Gemini text model

    Returns:
        SceneAnalysis
    """
    response = await client.aio.models.generate_content(
        model=model_name,
        contents=build_analysis_prompt(description),
        config=genai_types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMA,
        ),
    )
    text = response.text or ""
    logger.info(f"Scene analysis response received ({len(text)} chars)")
    return parse_scene_analysis(text)
