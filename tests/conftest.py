"""
Shared test fixtures.

Provides: sample image bytes, Gemini chunk builders, a recording stream and a
fake genai client, settings pointing at a temporary credential file.
Dependencies: pytest, google-genai types
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from google.genai import types

from banana_editor.config import Settings
from banana_editor.credentials import CredentialStore
from banana_editor.intake import SourceImage
from banana_editor.request import DEFAULT_MODEL

# Smallest valid PNG header plus filler, enough to act as "file bytes".
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 40


def image_chunk(data: bytes = b"generated-bytes", mime_type: str | None = "image/png"):
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))],
                )
            )
        ]
    )


def text_chunk(text: str):
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=[types.Part(text=text)]))
        ]
    )


class RecordingStream:
    """Async iterator that counts how many chunks were pulled."""

    def __init__(self, chunks):
        self._chunks = list(chunks)
        self.pulled = 0
        self.closed = False

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self.pulled >= len(self._chunks):
            raise StopAsyncIteration
        chunk = self._chunks[self.pulled]
        self.pulled += 1
        return chunk

    async def aclose(self):
        self.closed = True


class FakeModels:
    def __init__(self, stream=None, error=None):
        self.stream = stream
        self.error = error
        self.calls = []

    async def generate_content_stream(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.stream


def fake_client(stream=None, error=None):
    return SimpleNamespace(aio=SimpleNamespace(models=FakeModels(stream, error)))


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def source_image():
    return SourceImage.from_bytes(PNG_BYTES, "image/png", "cat.png")


@pytest.fixture
def settings(tmp_path):
    return Settings(
        model           = DEFAULT_MODEL,
        api_version     = "v1alpha",
        credential_file = tmp_path / "nano" / "api_key",
        log_level       = "INFO",
    )


@pytest.fixture
def store(settings):
    return CredentialStore(settings.credential_file)


@pytest.fixture
def client_factory():
    """Factory returning a fake client; tests set ``.return_value``."""
    return MagicMock(return_value=fake_client(RecordingStream([])))
