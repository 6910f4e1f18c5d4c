###############################################################################
# Image intake  – uploaded file  ->  transmitted payload + preview
###############################################################################
import base64
import mimetypes
from dataclasses import dataclass

# File-picker filter; nothing beyond this is validated before submission.
ACCEPTED_TYPES = ["png", "jpg", "jpeg", "webp", "heic", "heif"]

FALLBACK_MIME_TYPE = "image/png"

encode_b64 = lambda b: base64.b64encode(b).decode("utf-8")
decode_b64 = lambda s: base64.b64decode(s)


@dataclass(frozen=True)
class SourceImage:
    """The image being edited, held in the form it is transmitted."""

    payload:   str          # base64
    mime_type: str
    name:      str = ""

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str | None = None, name: str = "") -> "SourceImage":
        if not mime_type:
            mime_type = mimetypes.guess_type(name)[0] if name else None
        return cls(
            payload   = encode_b64(data),
            mime_type = mime_type or FALLBACK_MIME_TYPE,
            name      = name,
        )

    @property
    def raw(self) -> bytes:
        return decode_b64(self.payload)

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.payload}"

    @property
    def size(self) -> int:
        return len(self.raw)


def read_upload(uploaded) -> SourceImage:
    """Convert a Streamlit ``UploadedFile`` (or lookalike) into a SourceImage."""
    return SourceImage.from_bytes(
        uploaded.getvalue(),
        mime_type = getattr(uploaded, "type", None),
        name      = getattr(uploaded, "name", "") or "",
    )
