###############################################################################
# Generation service  – validate -> open stream -> first image -> EditorState
###############################################################################
from google import genai
from google.genai import types

from banana_editor.logging_setup import get_logger
from banana_editor.request import SubmissionError, build_request
from banana_editor.stream import consume_first_image

logger = get_logger(__name__)

NO_IMAGE_MESSAGE      = "No image generated. Please check your prompt or try again."
GENERIC_ERROR_MESSAGE = "An unknown error occurred."


def make_client(api_key: str, api_version: str = "v1alpha") -> genai.Client:
    return genai.Client(
        api_key      = api_key,
        http_options = types.HttpOptions(api_version=api_version),
    )


async def open_stream(client, request):
    return await client.aio.models.generate_content_stream(
        model    = request.model,
        contents = request.contents,
        config   = request.config,
    )


async def generate(state, store, settings, client_factory=make_client):
    """Run one edit for the current form state.

    Returns the StreamOutcome, or None when validation stopped the submission
    or the request failed.
    """
    try:
        request = build_request(state.credential, state.source, state.prompt, state.model)
    except SubmissionError as exc:
        state.fail(exc.message)
        return None

    state.begin()
    try:
        client  = client_factory(state.credential, settings.api_version)
        stream  = await open_stream(client, request)
        outcome = await consume_first_image(stream)

        if outcome.found_image:
            state.complete(outcome.image, outcome.commentary)
            store.save(state.credential)
        else:
            state.fail(NO_IMAGE_MESSAGE)
        return outcome
    except Exception as exc:
        logger.exception("Generation with %s failed", request.model)
        state.fail(str(exc) or GENERIC_ERROR_MESSAGE)
        return None
    finally:
        state.finish()
