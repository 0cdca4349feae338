"""Exception types raised by shellpath."""

from __future__ import annotations


class ShellPathError(Exception):
    """Base class for shellpath errors."""


class PathFormatError(ShellPathError, ValueError):
    """
    Raised when a path fragment violates the active policy's grammar.

    Parameters
    ----------
    path : str
        The fragment that was rejected.
    reason : str
        Human-readable explanation of the violation.

    Attributes
    ----------
    path : str
        The fragment that was rejected.
    """

    def __init__(self, path: str, reason: str) -> None:
        msg = f"{reason}: {path}"
        super().__init__(msg)
        self.path = path


__all__ = ["PathFormatError", "ShellPathError"]
