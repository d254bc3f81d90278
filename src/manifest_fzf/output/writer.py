"""Write selected documents back out as a YAML stream."""

from __future__ import annotations

from typing import BinaryIO

from manifest_fzf.config.settings import Settings
from manifest_fzf.core.formatter import format_document
from manifest_fzf.models import ManifestObject

SEPARATOR = b"---\n"


def write_selected(stream: BinaryIO, objects: list[ManifestObject], settings: Settings) -> None:
    """Write each object's document, separated by ``---`` lines."""
    for i, obj in enumerate(objects):
        if i > 0:
            stream.write(SEPARATOR)
        content = format_document(obj.raw, settings)
        stream.write(content.encode("utf-8", errors="surrogateescape"))
    stream.flush()
