"""Build the tab-delimited candidate lines fed to the chooser."""

from __future__ import annotations

from manifest_fzf.models import CandidateLine, ManifestObject
from manifest_fzf.output.themes import styled_kind

PLACEHOLDER = "-"


def kind_label(obj: ManifestObject, show_api_version: bool = False) -> str:
    label = obj.kind or PLACEHOLDER
    if show_api_version and obj.api_version:
        label = f"{obj.api_version}.{label}"
    return label


def name_label(obj: ManifestObject, show_namespace: bool = False) -> str:
    label = obj.name or PLACEHOLDER
    if show_namespace and obj.namespace:
        label = f"{obj.namespace}.{label}"
    return label


def build_candidates(
    objects: list[ManifestObject],
    show_api_version: bool = False,
    show_namespace: bool = False,
    color: bool = False,
) -> list[CandidateLine]:
    """Return one candidate per object, indexed by position.

    The display text is ``(apiVersion.)Kind (namespace.)name``; the index
    is an internal column the chooser is told to hide.
    """
    candidates: list[CandidateLine] = []
    for i, obj in enumerate(objects):
        kind = kind_label(obj, show_api_version)
        if color:
            kind = styled_kind(kind)
        candidates.append(CandidateLine(i, f"{kind} {name_label(obj, show_namespace)}"))
    return candidates


def build_candidate_lines(
    objects: list[ManifestObject],
    show_api_version: bool = False,
    show_namespace: bool = False,
    color: bool = False,
) -> list[str]:
    return [c.render() for c in build_candidates(objects, show_api_version, show_namespace, color)]
