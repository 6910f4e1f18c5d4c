"""Nano Banana img2img editor: Gemini-backed single-page image editing."""

__version__ = "0.1.0"
