###############################################################################
# Request assembly  – validated inputs  ->  generate_content_stream arguments
###############################################################################
from dataclasses import dataclass

from google.genai import types


FLASH_IMAGE_MODEL = "gemini-2.5-flash-image"
PRO_IMAGE_MODEL   = "gemini-3-pro-image-preview"

DEFAULT_MODEL = FLASH_IMAGE_MODEL
MODELS        = [FLASH_IMAGE_MODEL, PRO_IMAGE_MODEL]

# Only the pro model accepts an output size.
IMAGE_SIZES = {PRO_IMAGE_MODEL: "1K"}

RESPONSE_MODALITIES = ["IMAGE", "TEXT"]


class SubmissionError(ValueError):
    """A required form input is missing; nothing is sent."""

    field   = ""
    message = ""

    def __init__(self):
        super().__init__(self.message)


class MissingCredentialError(SubmissionError):
    field   = "credential"
    message = "Please enter a Gemini API Key."


class MissingImageError(SubmissionError):
    field   = "image"
    message = "Please select a source image."


class MissingPromptError(SubmissionError):
    field   = "prompt"
    message = "Please enter a prompt."


@dataclass(frozen=True)
class GenerationRequest:
    model:    str
    contents: list
    config:   types.GenerateContentConfig


def _blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def missing_fields(credential, source, prompt) -> list[SubmissionError]:
    """Every missing input, in check order (credential -> image -> prompt)."""
    missing = []
    if _blank(credential):
        missing.append(MissingCredentialError())
    if source is None:
        missing.append(MissingImageError())
    if _blank(prompt):
        missing.append(MissingPromptError())
    return missing


def validate_submission(credential, source, prompt) -> None:
    """Raise the highest-priority SubmissionError, if any."""
    missing = missing_fields(credential, source, prompt)
    if missing:
        raise missing[0]


def build_config(model: str) -> types.GenerateContentConfig:
    kwargs = {"response_modalities": RESPONSE_MODALITIES}
    if model in IMAGE_SIZES:
        kwargs["image_config"] = types.ImageConfig(image_size=IMAGE_SIZES[model])
    return types.GenerateContentConfig(**kwargs)


def build_contents(source, prompt: str) -> list:
    """One user turn: the image, then the instruction."""
    return [
        types.Content(
            role  = "user",
            parts = [
                types.Part(inline_data=types.Blob(data=source.raw, mime_type=source.mime_type)),
                types.Part(text=prompt),
            ],
        )
    ]


def build_request(credential, source, prompt, model: str = DEFAULT_MODEL) -> GenerationRequest:
    validate_submission(credential, source, prompt)
    if model not in MODELS:
        raise ValueError(f"Unknown image model: {model}")

    return GenerationRequest(
        model    = model,
        contents = build_contents(source, prompt),
        config   = build_config(model),
    )
