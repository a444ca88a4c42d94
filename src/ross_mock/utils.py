"""Shared helpers for the mocks.

This module holds the package-wide logger factory and small formatting
helpers used when building failure diagnostics.
"""

from typing import Iterable

from mephew_python_commons.logger_factory import LoggerFactory

logger_factory = LoggerFactory(
    log_files_prefix="ross_mock",
)


def format_bytes(data: Iterable[int]) -> str:
    """Formats a byte sequence as a bracketed list of hex literals.

    Example:
        format_bytes(b"\\x11\\x22") == "[0x11, 0x22]"

    Args:
        data (Iterable[int]): The bytes to format.

    Returns:
        str: The formatted representation.
    """
    return "[" + ", ".join(f"0x{byte:02x}" for byte in data) + "]"
