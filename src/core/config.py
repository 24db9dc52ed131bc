"""
Client configuration.

Loads settings from environment variables (prefix CHESS_CLIENT_) or a .env file, with Pydantic validation.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Where the backend lives and how to talk to it."""

    model_config = SettingsConfigDict(
        env_prefix="CHESS_CLIENT_", env_file=".env", env_file_encoding="utf-8"
    )

    # --- Backend ---
    backend_url: str = "http://127.0.0.1:8000"
    request_timeout: float = 10.0

    # --- Command routes ---
    board_path: str = "/board"
    moves_path: str = "/moves"
    fen_path: str = "/fen"
    undo_path: str = "/undo"

    # --- Push channel ---
    events_path: str = "/events"
    update_event: str = "update"

    # --- Behaviour ---
    # Re-fetch the board after a successful move / FEN / undo, instead of only waiting for the push update
    refresh_after_command: bool = True

    # --- Logging ---
    log_level: str = "INFO"
    app_log_level: str = "DEBUG"
    log_file: Optional[str] = None


@lru_cache()
def get_settings() -> ClientSettings:
    return ClientSettings()
