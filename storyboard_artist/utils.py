"""
Utility functions for Storyboard Artist.
"""

from __future__ import annotations
import base64
import binascii
import io
import json
import logging
import re
from typing import Optional, Tuple

from PIL import Image

_LOGGER_ROOT = "storyboard_artist"
_JSON_SPAN = re.compile(r"\{.*\}", re.DOTALL)


def get_logger(name: str) -> logging.Logger:
    """
    Return a namespaced logger, attaching one stream handler to the package root.

    Args:
        name: Short module name, e.g. "retry"
    """
    root = logging.getLogger(_LOGGER_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root.getChild(name)


def strip_code_fences(blob: str) -> str:
    """
    Strip markdown code fences and a leading "json" tag from a model response.

    Args:
        blob: Raw response text

    Returns:
        Text ready for JSON parsing
    """
    text = (blob or "").strip()
    if text.startswith("```"):
        parts = text.split("```")
        if len(parts) >= 2:
            text = parts[1].strip()
    if text.lower().startswith("json"):
        text = text[4:].strip()
    return text


def extract_nested_error_message(message: str) -> Optional[str]:
    """
    Find a JSON object embedded in an error message and return its error.message.

    API errors often carry the provider payload, e.g.
    'got status 429 {"error":{"code":429,"message":"Quota exceeded"}}'.

    Returns:
        The nested message, or None if no parsable payload is found
    """
    match = _JSON_SPAN.search(message or "")
    if not match:
        return None
    try:
        payload = json.loads(match.group(0))
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return None


def to_data_uri(image_bytes: bytes, mime_type: str) -> str:
    """Encode raw image bytes as a data URI suitable for direct display."""
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def decode_data_uri(uri: str) -> Tuple[bytes, str]:
    """
    Decode a base64 data URI.

    Returns:
        Tuple of (image_bytes, mime_type)

    Raises:
        ValueError: if the URI is not a base64 data URI
    """
    header, sep, data = (uri or "").partition(",")
    if not sep or not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URI")
    mime_type = header[len("data:"):-len(";base64")]
    try:
        return base64.b64decode(data, validate=True), mime_type
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc


def data_uri_to_png(uri: str) -> bytes:
    """
    Convert a data-URI image to PNG bytes (used for the download button).
    """
    image_bytes, _ = decode_data_uri(uri)
    image = Image.open(io.BytesIO(image_bytes)).convert("RGB")
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()
