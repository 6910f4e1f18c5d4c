###############################################################################
# Runtime settings  – read from the process environment / .env
###############################################################################
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from banana_editor.request import DEFAULT_MODEL, MODELS


DEFAULT_API_VERSION     = "v1alpha"
DEFAULT_CREDENTIAL_FILE = Path.home() / ".nano-banana" / "api_key"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(RuntimeError):
    """Raised when an environment value cannot be used."""


@dataclass(frozen=True)
class Settings:
    model:           str
    api_version:     str
    credential_file: Path
    log_level:       str
    env_api_key:     str = ""


def load_settings() -> Settings:
    load_dotenv()

    model = os.getenv("GEMINI_MODEL", DEFAULT_MODEL)
    if model not in MODELS:
        raise ConfigError(
            f"GEMINI_MODEL={model!r} is not an image model "
            f"(expected one of: {', '.join(MODELS)})"
        )

    log_level = os.getenv("NANO_BANANA_LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(
            f"NANO_BANANA_LOG_LEVEL={log_level!r} is not a log level "
            f"(expected one of: {', '.join(LOG_LEVELS)})"
        )

    credential_file = os.getenv("NANO_BANANA_CREDENTIAL_FILE")

    return Settings(
        model           = model,
        api_version     = os.getenv("GEMINI_API_VERSION", DEFAULT_API_VERSION),
        credential_file = Path(credential_file).expanduser() if credential_file else DEFAULT_CREDENTIAL_FILE,
        log_level       = log_level,
        env_api_key     = os.getenv("GEMINI_API_KEY", ""),
    )
