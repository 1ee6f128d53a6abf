"""
Canonical exception types for wavdump.

Library code raises these; only the CLI turns them into user-facing messages.
"""

from __future__ import annotations

from typing import Optional


class WavdumpError(Exception):
    """Base class for every error raised by wavdump."""


class ArgumentError(WavdumpError):
    """Invalid command-line value (e.g., non-positive duration, frequency out of range)."""

    def __init__(self, argument: str, literal: str, requirement: str):
        self.argument = argument
        self.literal = literal
        self.requirement = requirement
        super().__init__(f"argument '{argument}' {requirement} (got '{literal}')")


class WavWriteError(WavdumpError, OSError):
    """Output file could not be opened or written."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason or "unknown error"
        super().__init__(f"could not write '{path}': {self.reason}")


class HeaderError(WavdumpError):
    """File does not start with a canonical PCM RIFF/WAVE header."""


__all__ = ["WavdumpError", "ArgumentError", "WavWriteError", "HeaderError"]
