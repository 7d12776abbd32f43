"""
Fatal error kinds raised by the codec, the locator and the mutations.

Soft outcomes (a missing optional section, a rejected override key) are not
exceptions; they are recorded on the MutationResult instead.
"""

from __future__ import annotations

from pathlib import Path


class ChainSpecError(Exception):
    """Base class for errors that end an edit of a chain spec."""


class ParseError(ChainSpecError):
    """The chain spec is not well-formed JSON (or could not be read)."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.path = path
        if path is not None:
            message = f"{message} (path: {path})"
        super().__init__(message)


class WriteError(ChainSpecError):
    """The chain spec could not be written back to storage."""

    def __init__(self, path: Path | str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to write the chain spec with path: {path} ({reason})")


class RegistryNotFound(ChainSpecError):
    """A parachain or HRMP registry is missing from the runtime config."""

    def __init__(self, registry: str):
        self.registry = registry
        super().__init__(f"{registry} not found in runtimeConfig")
