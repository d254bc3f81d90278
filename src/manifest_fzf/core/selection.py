"""Map chooser output back to parsed objects."""

from __future__ import annotations

import re

from manifest_fzf.models import ManifestObject

_INDEX_RE = re.compile(r"-?[0-9]+")


def has_output(out: str) -> bool:
    """True when the chooser printed at least one non-blank line."""
    return any(line.strip() for line in out.split("\n"))


def parse_selection_output(out: str) -> list[int]:
    """Extract the leading index of every selected line.

    Blank lines and lines whose first tab-delimited field is not a
    decimal integer are ignored.  Duplicates and output order are kept.
    """
    indices: list[int] = []
    for line in out.split("\n"):
        if not line.strip():
            continue
        field = line.split("\t", 1)[0].strip()
        if _INDEX_RE.fullmatch(field):
            indices.append(int(field))
    return indices


def pick_objects(objects: list[ManifestObject], indices: list[int]) -> list[ManifestObject]:
    """Resolve indices to objects, skipping any that are out of range."""
    return [objects[i] for i in indices if 0 <= i < len(objects)]
