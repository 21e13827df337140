"""
Streamlit frontend for Storyboard Artist.

Describe a scene and get a cinematic storyboard frame with camera and mood
direction. The page collects the description and hands it to the storyboard
orchestrator (scene analysis, then image generation).

Environment Variables:
- GEMINI_API_KEY (or GOOGLE_GENAI_API_KEY / API_KEY): Required for Gemini calls
- GEMINI_MODEL: (Optional) Text model for scene analysis (default: gemini-2.5-flash)
- GEMINI_IMAGE_MODEL: (Optional) Image model (default: imagen-4.0-generate-001)
- STORYBOARD_MAX_ATTEMPTS: (Optional) Attempts per call on rate limits (default: 5)
- STORYBOARD_INITIAL_DELAY: (Optional) First backoff wait in seconds (default: 5)
"""

import asyncio

import streamlit as st
from dotenv import load_dotenv

from storyboard_artist import (
    ConfigurationError,
    StoryboardError,
    data_uri_to_png,
    decode_data_uri,
    generate_storyboard_frame,
    load_settings,
)

# Load environment variables from .env file
load_dotenv()

# ---------- Streamlit Page Configuration ----------
st.set_page_config(
    page_title="Storyboard Artist AI",
    page_icon="🎬",
    layout="centered"
)


@st.cache_resource
def get_settings():
    """Validate settings once per process."""
    return load_settings()


# ---------- Main UI ----------
st.title("🎬 Storyboard Artist AI")
st.markdown(
    "_Visualize your screenplay. Describe a scene and get a cinematic storyboard "
    "frame with camera and mood direction._"
)

try:
    settings = get_settings()
except ConfigurationError as exc:
    st.error(f"⚠️ {exc}. Add it to your environment or a .env file.")
    st.stop()

with st.sidebar:
    st.markdown("**Models**")
    st.caption(f"Scene analysis: {settings.analysis_model}")
    st.caption(f"Image: {settings.image_model}")
    st.caption(
        f"Rate-limit retries: up to {settings.max_attempts} attempts, "
        f"starting at {settings.initial_delay:g}s"
    )

scene_description = st.text_area(
    "Scene description",
    placeholder=(
        "e.g., A lone astronaut stands on a desolate red planet, "
        "gazing at two suns setting on the horizon."
    ),
    height=110,
)

generate = st.button(
    "🪄 Generate",
    type="primary",
    use_container_width=True,
    disabled=not scene_description.strip(),
)
result_placeholder = st.empty()

# ---------- Generation Logic ----------
if generate:
    try:
        with st.spinner("Generating cinematic frame... This may take a moment."):
            result = asyncio.run(generate_storyboard_frame(scene_description.strip(), settings))
    except StoryboardError as exc:
        result_placeholder.error(str(exc))
    else:
        with result_placeholder.container():
            image_bytes, _ = decode_data_uri(result.image_url)
            st.image(image_bytes, caption="Storyboard frame", width="stretch")
            col_angle, col_mood = st.columns(2)
            with col_angle:
                st.markdown("**🎥 Camera Angle**")
                st.info(result.camera_angle)
            with col_mood:
                st.markdown("**🎭 Mood**")
                st.info(result.mood)
            st.download_button(
                "⬇️ Download frame (PNG)",
                data=data_uri_to_png(result.image_url),
                file_name="storyboard_frame.png",
                mime="image/png",
            )
else:
    result_placeholder.info("💡 Describe your scene above to get started.")

st.caption("Built with Streamlit + Google Gemini AI.")
