"""
Unit tests for image intake.

Dependencies: pytest, banana_editor.intake, banana_editor.request
"""

import base64
from types import SimpleNamespace

from banana_editor.intake import ACCEPTED_TYPES, SourceImage, read_upload
from banana_editor.request import build_request


class FakeUpload:
    """Mimics streamlit's UploadedFile."""

    def __init__(self, data, type, name):
        self._data = data
        self.type = type
        self.name = name

    def getvalue(self):
        return self._data


class TestSourceImage:
    def test_payload_is_base64_of_file(self, png_bytes):
        source = SourceImage.from_bytes(png_bytes, "image/png", "cat.png")
        assert base64.b64decode(source.payload) == png_bytes
        assert source.raw == png_bytes
        assert source.size == len(png_bytes)

    def test_data_url_preview(self, png_bytes):
        source = SourceImage.from_bytes(png_bytes, "image/png")
        prefix = "data:image/png;base64,"
        assert source.data_url.startswith(prefix)
        assert base64.b64decode(source.data_url[len(prefix):]) == png_bytes

    def test_mime_type_guessed_from_name(self):
        assert SourceImage.from_bytes(b"x", None, "photo.jpg").mime_type == "image/jpeg"

    def test_mime_type_fallback(self):
        assert SourceImage.from_bytes(b"x").mime_type == "image/png"


class TestReadUpload:
    def test_reads_uploaded_file(self, png_bytes):
        source = read_upload(FakeUpload(png_bytes, "image/webp", "cat.webp"))
        assert source.raw == png_bytes
        assert source.mime_type == "image/webp"
        assert source.name == "cat.webp"

    def test_missing_type_falls_back_to_name(self):
        upload = SimpleNamespace(getvalue=lambda: b"data", type="", name="cat.png")
        assert read_upload(upload).mime_type == "image/png"

    def test_preview_matches_transmitted_bytes(self, png_bytes):
        source = read_upload(FakeUpload(png_bytes, "image/png", "cat.png"))
        request = build_request("k1", source, "make it wearing a hat")

        transmitted = request.contents[0].parts[0].inline_data.data
        previewed = base64.b64decode(source.data_url.split(",", 1)[1])
        assert transmitted == previewed == png_bytes


def test_accepted_types_cover_picker_filter():
    assert {"png", "jpg", "jpeg", "webp", "heic", "heif"} <= set(ACCEPTED_TYPES)
