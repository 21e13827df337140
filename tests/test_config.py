import pytest

from storyboard_artist.config import (
    DEFAULT_ANALYSIS_MODEL,
    DEFAULT_IMAGE_MODEL,
    StoryboardSettings,
    load_settings,
)
from storyboard_artist.errors import ConfigurationError, StoryboardError


def test_defaults_when_only_key_is_set():
    settings = load_settings({"GEMINI_API_KEY": "secret"})

    assert settings.api_key == "secret"
    assert settings.analysis_model == DEFAULT_ANALYSIS_MODEL
    assert settings.image_model == DEFAULT_IMAGE_MODEL
    assert settings.max_attempts == 5
    assert settings.initial_delay == 5.0


@pytest.mark.parametrize("name", ["GEMINI_API_KEY", "GOOGLE_GENAI_API_KEY", "API_KEY"])
def test_any_supported_key_name_is_accepted(name):
    assert load_settings({name: "k"}).api_key == "k"


def test_official_key_name_wins():
    env = {"GEMINI_API_KEY": "official", "API_KEY": "legacy"}
    assert load_settings(env).api_key == "official"


@pytest.mark.parametrize("env", [{}, {"GEMINI_API_KEY": ""}, {"API_KEY": "   "}])
def test_missing_key_fails_fast(env):
    with pytest.raises(ConfigurationError) as info:
        load_settings(env)
    assert "API_KEY environment variable not set" in str(info.value)


def test_configuration_error_is_user_facing():
    assert issubclass(ConfigurationError, StoryboardError)


def test_overrides_are_read():
    settings = load_settings(
        {
            "GEMINI_API_KEY": "k",
            "GEMINI_MODEL": "gemini-x",
            "GEMINI_IMAGE_MODEL": "imagen-x",
            "STORYBOARD_MAX_ATTEMPTS": "2",
            "STORYBOARD_INITIAL_DELAY": "0.25",
        }
    )
    assert settings.analysis_model == "gemini-x"
    assert settings.image_model == "imagen-x"
    assert settings.max_attempts == 2
    assert settings.initial_delay == 0.25


@pytest.mark.parametrize(
    "name, value",
    [
        ("STORYBOARD_MAX_ATTEMPTS", "many"),
        ("STORYBOARD_MAX_ATTEMPTS", "0"),
        ("STORYBOARD_INITIAL_DELAY", "soon"),
        ("STORYBOARD_INITIAL_DELAY", "-1"),
    ],
)
def test_invalid_numbers_are_rejected(name, value):
    with pytest.raises(ConfigurationError):
        load_settings({"GEMINI_API_KEY": "k", name: value})


def test_settings_are_immutable():
    settings = StoryboardSettings(api_key="k")
    with pytest.raises(AttributeError):
        settings.api_key = "other"
