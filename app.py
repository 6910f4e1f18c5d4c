###############################################################################
# Nano Banana  – Gemini img2img editor
###############################################################################
import asyncio

import streamlit as st

from banana_editor.config import ConfigError, load_settings
from banana_editor.credentials import CredentialStore
from banana_editor.intake import ACCEPTED_TYPES, read_upload
from banana_editor.logging_setup import configure_logging
from banana_editor.presentation import download_filename
from banana_editor.request import MODELS
from banana_editor.service import generate
from banana_editor.state import EditorState


###############################################################################
# 0 · Settings + credential store
###############################################################################
st.set_page_config("Nano Banana", page_icon="🍌", layout="centered")

try:
    settings = load_settings()
except ConfigError as exc:
    st.error(str(exc))
    st.stop()

configure_logging(settings.log_level)
store = CredentialStore(settings.credential_file)


###############################################################################
# 1 · Session-state
###############################################################################
if "editor" not in st.session_state:
    st.session_state.editor = EditorState(
        credential = store.load() or settings.env_api_key,
        model      = settings.model,
    )

state: EditorState = st.session_state.editor

# Widget keys are seeded once so reruns keep what the user typed.
if "credential_input" not in st.session_state: st.session_state.credential_input = state.credential
if "model_input"      not in st.session_state: st.session_state.model_input      = state.model
if "prompt_input"     not in st.session_state: st.session_state.prompt_input     = state.prompt
if "pending"          not in st.session_state: st.session_state.pending          = False


def on_upload():
    uploaded = st.session_state.source_upload
    # Removing the file in the widget does not clear the source; only a new pick replaces it.
    if uploaded is not None:
        st.session_state.editor.select_image(read_upload(uploaded))


###############################################################################
# 2 · Header
###############################################################################
st.title("✨ Nano Banana")
st.caption("IMG2IMG EDITOR")


###############################################################################
# 3 · Form  – key / image / model / prompt
###############################################################################
state.set_credential(
    st.text_input(
        "🔑 Gemini API Key",
        key         = "credential_input",
        type        = "password",
        placeholder = "AIzaSy...",
    )
)

st.file_uploader(
    "🖼️ Source Image",
    type      = ACCEPTED_TYPES,
    key       = "source_upload",
    on_change = on_upload,
    help      = "PNG, JPG, WEBP",
)

if state.source:
    st.image(state.source.data_url, caption="Source", use_container_width=True)

state.set_model(
    st.selectbox("Model", MODELS, key="model_input")
)

state.set_prompt(
    st.text_area(
        "✨ Prompt",
        key         = "prompt_input",
        placeholder = "Describe what you want to generate from the image...",
        height      = 100,
    )
)

if state.error:
    st.error(state.error, icon="⚠️")

# The click only flags the request; the rerun that follows renders the button
# disabled while the stream is consumed below.
st.button(
    "✨ Generate Image",
    type                = "primary",
    disabled            = state.busy or st.session_state.pending or not state.can_submit,
    on_click            = lambda: st.session_state.update(pending=True),
    use_container_width = True,
)


###############################################################################
# 4 · Gemini call
###############################################################################
if st.session_state.pending:
    st.session_state.pending = False
    with st.spinner("Generating..."):
        asyncio.run(generate(state, store, settings))
    st.rerun()


###############################################################################
# 5 · Result
###############################################################################
if state.result:
    st.markdown("---")
    st.subheader("Result")

    st.download_button(
        "💾 Download",
        data       = state.result.data,
        file_name  = download_filename(state.result.mime_type),
        mime       = state.result.mime_type,
    )
    st.image(state.result.data_url, caption="Generated result", use_container_width=True)

    for note in state.commentary:
        st.caption(note)
