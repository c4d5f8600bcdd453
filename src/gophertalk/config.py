"""Configuration settings for Gopher Talk."""

from __future__ import annotations

from dataclasses import dataclass

MIN_PORT = 1
MAX_PORT = 65535


@dataclass
class Settings:
    """Application settings."""

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    timeout_seconds: int = 5
    log_level: str = "info"

    # History
    history_workers: int = 4


def validate_port(value: int | str) -> int:
    """Parse and check a TCP port number.

    Raises:
        ValueError: If the value is not an integer in 1..65535
    """
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid port: {value!r} is not a number") from e

    if port < MIN_PORT or port > MAX_PORT:
        raise ValueError(
            "Invalid port: port must be in the interval "
            f"({MIN_PORT - 1},{MAX_PORT + 1})"
        )
    return port
