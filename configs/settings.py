from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_SESSION_SECRET = "secret"

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


class Settings:
    """
    Central configuration for the todo-list manager.

    Values are loaded once from environment variables (with sensible defaults)
    and then exposed via typed properties.
    """

    def __init__(self) -> None:
        # Session cookie configuration
        self._session_secret = os.getenv("TODO_SESSION_SECRET") or DEFAULT_SESSION_SECRET
        self._session_cookie = os.getenv("TODO_SESSION_COOKIE", "todo_session")
        self._session_max_age = int(os.getenv("TODO_SESSION_MAX_AGE", "1209600"))

        # Templates
        self._templates_dir = Path(
            os.getenv("TODO_TEMPLATES_DIR", str(_PACKAGE_ROOT / "runtime" / "templates"))
        )

        # Server
        self._host = os.getenv("TODO_HOST", "127.0.0.1")
        self._port = int(os.getenv("TODO_PORT", "8000"))
        self._log_level = os.getenv("TODO_LOG_LEVEL", "INFO").upper()

    # ------------------------------------------------------------------
    # Session settings
    # ------------------------------------------------------------------

    @property
    def session_secret(self) -> str:
        if self._session_secret == DEFAULT_SESSION_SECRET:
            logger.warning(
                "[SETTINGS] TODO_SESSION_SECRET is not set; using the development "
                "default. Set it in your environment or a .env file."
            )
        return self._session_secret

    @property
    def session_cookie(self) -> str:
        return self._session_cookie

    @property
    def session_max_age(self) -> int:
        return self._session_max_age

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def templates_dir(self) -> Path:
        return self._templates_dir

    # ------------------------------------------------------------------
    # Server
    # ------------------------------------------------------------------

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def log_level(self) -> str:
        return self._log_level


settings = Settings()
