"""
Storyboard Artist - Modular Components

This package contains the core modules for Storyboard Artist:
- config: Constants, prompts, and validated settings
- errors: Exception types
- utils: Logging and parsing helpers
- gemini_client: Gemini API client initialization
- retry: Exponential-backoff executor for rate-limited calls
- scene_analyst: Scene Analyst (camera angle + mood)
- image_generator: Storyboard frame rendering (Imagen)
- storyboard: Orchestrator combining both calls
"""

# Lazy imports to avoid circular dependencies and hot-reload issues
__all__ = [
    # Config
    "CAMERA_ANGLES",
    "StoryboardSettings",
    "load_settings",
    # Errors
    "StoryboardError",
    "ConfigurationError",
    "TransientError",
    "RetryExhaustedError",
    "SceneAnalysisError",
    "ImageGenerationError",
    # Utils
    "data_uri_to_png",
    "decode_data_uri",
    # Retry
    "ErrorKind",
    "classify_error",
    "run_with_backoff",
    # Agents
    "SceneAnalysis",
    "analyze_scene",
    "generate_frame_image",
    # Orchestrator
    "StoryboardResult",
    "StoryboardOrchestrator",
    "generate_storyboard_frame",
]

_SOURCES = {
    "CAMERA_ANGLES": "config",
    "StoryboardSettings": "config",
    "load_settings": "config",
    "StoryboardError": "errors",
    "ConfigurationError": "errors",
    "TransientError": "errors",
    "RetryExhaustedError": "errors",
    "SceneAnalysisError": "errors",
    "ImageGenerationError": "errors",
    "data_uri_to_png": "utils",
    "decode_data_uri": "utils",
    "ErrorKind": "retry",
    "classify_error": "retry",
    "run_with_backoff": "retry",
    "SceneAnalysis": "scene_analyst",
    "analyze_scene": "scene_analyst",
    "generate_frame_image": "image_generator",
    "StoryboardResult": "storyboard",
    "StoryboardOrchestrator": "storyboard",
    "generate_storyboard_frame": "storyboard",
}


def __getattr__(name):
    """Lazy import to avoid circular dependencies and streamlit hot-reload issues."""
    if name in _SOURCES:
        import importlib
        module = importlib.import_module(f".{_SOURCES[name]}", __name__)
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
