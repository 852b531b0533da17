"""User-configurable settings for the console front end."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    show_coordinates: bool = True
    use_unicode: bool = False
    show_banner: bool = True

    # Diagnostics
    log_level: str = "WARNING"
