###############################################################################
# API key persistence  – one file under ~, read at startup, written on success
###############################################################################
import os
from pathlib import Path

from banana_editor.logging_setup import get_logger

logger = get_logger(__name__)


class CredentialStore:
    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> str:
        """Return the stored key, or an empty string when none is saved."""
        try:
            return self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return ""

    def save(self, secret: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(secret)
        logger.debug("API key saved to %s", self.path)
