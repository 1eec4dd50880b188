# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All settings come from environment variables.  Entry points (main.py,
# api/server.py) call load_dotenv() first, so a .env file in the project
# root works too.  Nothing here reads a file on its own.
#
#   STUDENTS_DATA_FILE   path of the students JSON file
#   STUDENTS_UNIQUE      "true" rejects duplicate given+family names on add
#   MODEL_NAME           LiteLlm model string (provider/model)
#   MODEL_TEMPERATURE    sampling temperature
#   MODEL_TIMEOUT        LLM request timeout, seconds
#   HOST / PORT          HTTP server bind address
#   LOG_LEVEL            root log level
#   DEBUG                "true" for verbose agent/tool logging
# =============================================================================

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "./data/alumnos.json"
DEFAULT_MODEL_NAME = "ollama_chat/qwen3:1.7b"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_file: str = DEFAULT_DATA_FILE
    enforce_unique: bool = False
    model_name: str = DEFAULT_MODEL_NAME
    temperature: float = 0.75
    llm_timeout: int = 120
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    debug: bool = False


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_number(name: str, default, cast):
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return cast(value)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %r", name, value, default)
        return default


def _env_log_level(name: str, default: str) -> str:
    value = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(value), int):
        logger.warning("Ignoring invalid %s=%r, using %r", name, value, default)
        return default
    return value


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    return Settings(
        data_file=os.getenv("STUDENTS_DATA_FILE", DEFAULT_DATA_FILE),
        enforce_unique=_env_bool("STUDENTS_UNIQUE", False),
        model_name=os.getenv("MODEL_NAME", DEFAULT_MODEL_NAME),
        temperature=_env_number("MODEL_TEMPERATURE", 0.75, float),
        llm_timeout=_env_number("MODEL_TIMEOUT", 120, int),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_env_number("PORT", 3000, int),
        log_level=_env_log_level("LOG_LEVEL", "INFO"),
        debug=_env_bool("DEBUG", False),
    )
