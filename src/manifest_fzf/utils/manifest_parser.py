"""Split multi-document YAML streams and extract Kubernetes object metadata."""

from __future__ import annotations

import logging

import yaml
from yaml.nodes import MappingNode, Node, ScalarNode

from manifest_fzf.core.errors import ManifestDecodeError
from manifest_fzf.models import ManifestObject

logger = logging.getLogger(__name__)

# Prefer the C-accelerated YAML loader when available.
_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)

_NULL_TAG = "tag:yaml.org,2002:null"
_MERGE_TAG = "tag:yaml.org,2002:merge"


class _ShapeError(ValueError):
    """The document is valid YAML but cannot hold the identifying fields."""


def split_documents(data: bytes) -> list[bytes]:
    """Split a raw stream on ``---`` lines, keeping each document verbatim.

    Separator lines are dropped.  Trailing newlines of each segment are
    trimmed; a separator with nothing accumulated before it emits nothing.
    """
    docs: list[bytes] = []
    current = bytearray()
    lines = data.split(b"\n")
    last = len(lines) - 1
    for i, line in enumerate(lines):
        if line.strip() == b"---":
            if current:
                docs.append(bytes(current).rstrip(b"\n"))
                current.clear()
            continue
        current += line
        if i < last:
            current += b"\n"
    if current:
        docs.append(bytes(current).rstrip(b"\n"))
    return docs


def is_comment_only(doc: str) -> bool:
    """True when every non-blank line of *doc* starts with ``#``."""
    for line in doc.split("\n"):
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            return False
    return True


def _scalar_text(node: Node | None, field: str) -> str:
    if node is None:
        return ""
    if not isinstance(node, ScalarNode):
        raise _ShapeError(f"{field} must be a scalar")
    if node.tag == _NULL_TAG:
        return ""
    return node.value


def _mapping_get(node: MappingNode, key: str) -> Node | None:
    found = None
    for key_node, value_node in node.value:
        if isinstance(key_node, ScalarNode) and key_node.value == key:
            found = value_node
    return found


def _check_duplicate_keys(root: Node) -> None:
    """Reject any mapping in the document that repeats a scalar key."""
    seen_nodes: set[int] = set()
    pending = [root]
    while pending:
        node = pending.pop()
        if id(node) in seen_nodes or isinstance(node, ScalarNode):
            continue
        seen_nodes.add(id(node))
        if isinstance(node, MappingNode):
            keys: set[tuple[str, str]] = set()
            for key_node, value_node in node.value:
                if isinstance(key_node, ScalarNode) and key_node.tag != _MERGE_TAG:
                    key = (key_node.tag, key_node.value)
                    if key in keys:
                        raise _ShapeError(f"mapping key {key_node.value!r} already defined")
                    keys.add(key)
                pending += [key_node, value_node]
        else:
            pending += node.value


def _is_null(node: Node | None) -> bool:
    return node is None or (isinstance(node, ScalarNode) and node.tag == _NULL_TAG)


def decode_object(text: str) -> ManifestObject:
    """Decode the identifying fields of one document.

    Scalars are read as their source text, so nothing is type-coerced.
    Merge keys (``<<``) are applied and repeated keys are rejected.
    Raises ``yaml.YAMLError`` on malformed YAML and ``ValueError`` when
    the document is not shaped like an object.  The returned object has
    no ``raw`` text yet.
    """
    loader = _YamlLoader(text)
    try:
        # only the first document of the segment is read
        root = loader.get_node() if loader.check_node() else None
        if _is_null(root):
            return ManifestObject()
        if not isinstance(root, MappingNode):
            raise _ShapeError("document is not a mapping")
        _check_duplicate_keys(root)
        loader.flatten_mapping(root)

        namespace = name = ""
        metadata = _mapping_get(root, "metadata")
        if not _is_null(metadata):
            if not isinstance(metadata, MappingNode):
                raise _ShapeError("metadata must be a mapping")
            loader.flatten_mapping(metadata)
            namespace = _scalar_text(_mapping_get(metadata, "namespace"), "metadata.namespace")
            name = _scalar_text(_mapping_get(metadata, "name"), "metadata.name")

        return ManifestObject(
            api_version=_scalar_text(_mapping_get(root, "apiVersion"), "apiVersion"),
            kind=_scalar_text(_mapping_get(root, "kind"), "kind"),
            namespace=namespace,
            name=name,
        )
    finally:
        loader.dispose()


def parse_manifest(data: bytes, strict: bool = False) -> list[ManifestObject]:
    """Parse a multi-document YAML stream into ManifestObjects.

    Empty and comment-only documents are skipped, as are documents that
    carry neither apiVersion nor kind.  Malformed documents are skipped
    too unless *strict* is set, in which case ManifestDecodeError is raised.
    """
    objects: list[ManifestObject] = []
    for number, segment in enumerate(split_documents(data), start=1):
        trimmed = segment.decode("utf-8", errors="surrogateescape").strip()
        if not trimmed or is_comment_only(trimmed):
            continue
        try:
            obj = decode_object(trimmed)
        except (yaml.YAMLError, ValueError) as e:
            if strict:
                raise ManifestDecodeError(number, str(e)) from e
            logger.debug("Skipping undecodable document %d", number, exc_info=True)
            continue
        if not obj.api_version and not obj.kind:
            logger.debug("Skipping document %d without apiVersion or kind", number)
            continue
        objects.append(ManifestObject(
            api_version=obj.api_version,
            kind=obj.kind,
            namespace=obj.namespace,
            name=obj.name,
            raw=trimmed + "\n",
        ))
    return objects


def resource_counts(objects: list[ManifestObject]) -> dict[str, int]:
    """Count parsed objects by kind."""
    counts: dict[str, int] = {}
    for obj in objects:
        counts[obj.kind] = counts.get(obj.kind, 0) + 1
    return counts
