"""Exceptions raised by the parsing core and the chooser."""

from __future__ import annotations


class ManifestFzfError(Exception):
    """Base class for all manifest-fzf failures."""


class ManifestDecodeError(ManifestFzfError):
    """A document could not be decoded (strict mode only)."""

    def __init__(self, document: int, reason: str):
        self.document = document
        self.reason = reason
        super().__init__(f"document {document}: {reason}")


class NoObjectsError(ManifestFzfError):
    def __init__(self, message: str = "no Kubernetes objects found in input"):
        super().__init__(message)


class ChooserNotFoundError(ManifestFzfError):
    pass


class SelectionAborted(ManifestFzfError):
    def __init__(self, message: str = "selection aborted"):
        super().__init__(message)


class NoSelectionError(ManifestFzfError):
    def __init__(self, message: str = "no selection"):
        super().__init__(message)
