"""Data models for manifest-fzf."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ManifestObject:
    """One Kubernetes-style document from the input stream.

    ``raw`` is the original document text, trimmed, with exactly one
    trailing newline.
    """

    api_version: str = ""
    kind: str = ""
    namespace: str = ""
    name: str = ""
    raw: str = ""


@dataclass(frozen=True)
class CandidateLine:
    index: int
    display: str

    def render(self) -> str:
        return f"{self.index}\t{self.display}"
