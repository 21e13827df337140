import io

import pytest
from PIL import Image

from storyboard_artist.utils import (
    data_uri_to_png,
    decode_data_uri,
    extract_nested_error_message,
    get_logger,
    strip_code_fences,
    to_data_uri,
)


@pytest.mark.parametrize(
    "message, expected",
    [
        ('got error {"error":{"message":"Quota exceeded"}} after call', "Quota exceeded"),
        ('{"error": {"code": 429, "message": "Resource has been exhausted", "status": "RESOURCE_EXHAUSTED"}}',
         "Resource has been exhausted"),
        ("plain text", None),
        ("{broken", None),
        ("a {not: json} b", None),
        ('{"error": "flat string"}', None),
        ('{"error": {"code": 500}}', None),
        ("[1, 2] {}", None),
    ],
)
def test_extract_nested_error_message(message, expected):
    assert extract_nested_error_message(message) == expected


def test_multiline_payload_is_found():
    message = 'APIError:\n{\n  "error": {\n    "message": "Try again later"\n  }\n}\n'
    assert extract_nested_error_message(message) == "Try again later"


@pytest.mark.parametrize(
    "blob, expected",
    [
        ('{"a": 1}', '{"a": 1}'),
        ('```json\n{"a": 1}\n```', '{"a": 1}'),
        ('```\n{"a": 1}\n```', '{"a": 1}'),
        ('  json {"a": 1}', '{"a": 1}'),
        (None, ""),
    ],
)
def test_strip_code_fences(blob, expected):
    assert strip_code_fences(blob) == expected


def test_data_uri_encoding():
    uri = to_data_uri(b"abc", "image/jpeg")
    assert uri == "data:image/jpeg;base64,YWJj"
    assert decode_data_uri(uri) == (b"abc", "image/jpeg")


@pytest.mark.parametrize("uri", ["", "https://example.com/a.jpg", "data:image/png,rawtext", "data:image/png;base64,!!"])
def test_decode_rejects_non_base64_uris(uri):
    with pytest.raises(ValueError):
        decode_data_uri(uri)


def test_data_uri_to_png_converts_jpeg():
    buf = io.BytesIO()
    Image.new("L", (16, 9), color=128).save(buf, format="JPEG")
    uri = to_data_uri(buf.getvalue(), "image/jpeg")

    png = data_uri_to_png(uri)

    image = Image.open(io.BytesIO(png))
    assert image.format == "PNG"
    assert image.size == (16, 9)


def test_loggers_share_package_namespace():
    logger = get_logger("retry")
    assert logger.name == "storyboard_artist.retry"
    assert get_logger("storyboard").parent is logger.parent
