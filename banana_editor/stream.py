###############################################################################
# Streamed response consumer  – chunks decoded once at the boundary:
#   ImageChunk(data, mime_type)   first part carries inline binary data
#   TextChunk(text)               model commentary, consumption continues
#   EmptyChunk(reason)            nothing usable; skipped, never an error
###############################################################################
import base64
from contextlib import aclosing
from dataclasses import dataclass, field
from typing import AsyncIterator, Union

from banana_editor.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_IMAGE_MIME_TYPE = "image/png"


@dataclass(frozen=True)
class ImageChunk:
    data:      bytes
    mime_type: str


@dataclass(frozen=True)
class TextChunk:
    text: str


@dataclass(frozen=True)
class EmptyChunk:
    reason: str


DecodedChunk = Union[ImageChunk, TextChunk, EmptyChunk]


@dataclass(frozen=True)
class ResultImage:
    """The generated image currently on display."""

    data:      bytes
    mime_type: str = DEFAULT_IMAGE_MIME_TYPE

    @property
    def b64(self) -> str:
        return base64.b64encode(self.data).decode("utf-8")

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.b64}"


@dataclass
class StreamOutcome:
    image:       ResultImage | None = None
    commentary:  list[str] = field(default_factory=list)
    chunks_seen: int = 0

    @property
    def found_image(self) -> bool:
        return self.image is not None


def _blob_bytes(data) -> bytes:
    # The SDK hands back raw bytes; raw JSON chunks carry base64 text.
    if isinstance(data, str):
        return base64.b64decode(data)
    return bytes(data)


def decode_chunk(chunk) -> DecodedChunk:
    candidates = getattr(chunk, "candidates", None)
    if not candidates:
        return EmptyChunk("no candidates")

    content = getattr(candidates[0], "content", None)
    if content is None:
        return EmptyChunk(f"no content (finish_reason={getattr(candidates[0], 'finish_reason', None)})")

    parts = getattr(content, "parts", None)
    if not parts:
        return EmptyChunk("no parts")

    inline = getattr(parts[0], "inline_data", None)
    if inline is not None and getattr(inline, "data", None):
        return ImageChunk(
            data      = _blob_bytes(inline.data),
            mime_type = getattr(inline, "mime_type", None) or DEFAULT_IMAGE_MIME_TYPE,
        )

    text = "".join(
        p.text for p in parts
        if getattr(p, "text", None) and not getattr(p, "thought", False)
    )
    if text:
        return TextChunk(text)
    return EmptyChunk("parts carry neither inline data nor text")


async def decoded(stream: AsyncIterator) -> AsyncIterator[DecodedChunk]:
    """Decode ``stream`` lazily; closing this generator closes the source."""
    try:
        async for chunk in stream:
            yield decode_chunk(chunk)
    finally:
        aclose = getattr(stream, "aclose", None)
        if aclose is not None:
            await aclose()


async def consume_first_image(stream: AsyncIterator) -> StreamOutcome:
    outcome = StreamOutcome()

    async with aclosing(decoded(stream)) as chunks:
        async for chunk in chunks:
            outcome.chunks_seen += 1

            if isinstance(chunk, ImageChunk):
                outcome.image = ResultImage(chunk.data, chunk.mime_type)
                logger.info(
                    "Image received in chunk %d (%s, %d bytes)",
                    outcome.chunks_seen, chunk.mime_type, len(chunk.data),
                )
                break

            if isinstance(chunk, TextChunk):
                logger.info("Model text response: %s", chunk.text)
                outcome.commentary.append(chunk.text)
            else:
                logger.warning("Skipping chunk %d: %s", outcome.chunks_seen, chunk.reason)

    if not outcome.found_image:
        logger.info("Stream ended after %d chunks without an image", outcome.chunks_seen)
    return outcome
