"""
Configuration constants for dccli

This module contains all tunable constants used throughout the application.
Each constant can be overridden by setting an environment variable with the same name.
"""

import os


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Attempts to parse the environment variable as an integer. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}"
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Attempts to parse the environment variable as a float. If the variable
    is not set or cannot be parsed, prints a warning and returns the default value.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# IRC defaults
DEFAULT_SERVER = os.getenv("DEFAULT_SERVER", "irc.rizon.net")
DEFAULT_PORT = _get_env_int("DEFAULT_PORT", 6667)
DEFAULT_NICK = os.getenv("DEFAULT_NICK", "TestTest")

# Control connection
IRC_CONNECT_TIMEOUT = _get_env_float(
    "IRC_CONNECT_TIMEOUT", 15.0
)  # Seconds to establish the control connection
IRC_WRITE_TIMEOUT = _get_env_float(
    "IRC_WRITE_TIMEOUT", 15.0
)  # Seconds allowed for a single outbound line to drain
IRC_POLL_TIMEOUT = _get_env_float(
    "IRC_POLL_TIMEOUT", 0.1
)  # Seconds a single poll waits for inbound bytes
IRC_READ_SIZE = _get_env_int("IRC_READ_SIZE", 1024)  # Max bytes per control read

# Transfer connection
DCC_CONNECT_TIMEOUT = _get_env_float(
    "DCC_CONNECT_TIMEOUT", 15.0
)  # Seconds to establish the DCC connection
DCC_READ_SIZE = _get_env_int("DCC_READ_SIZE", 4096)  # Max bytes per transfer read

# Progress reporting
PROGRESS_LOG_STEP = _get_env_int(
    "PROGRESS_LOG_STEP", 10
)  # Percentage step between progress log lines
