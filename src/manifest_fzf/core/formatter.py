"""Optional cosmetic reformatting of documents through yq."""

from __future__ import annotations

import logging
import subprocess

from manifest_fzf.config.settings import Settings

logger = logging.getLogger(__name__)


def run_yq(yq_path: str, document: str, color: bool) -> str:
    """Run ``yq .`` over *document*; raises on any failure."""
    mode = "-C" if color else "-r"
    result = subprocess.run(
        [yq_path, mode, "."],
        input=document.encode("utf-8", errors="surrogateescape"),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
    )
    return result.stdout.decode("utf-8", errors="surrogateescape")


def format_document(raw: str, settings: Settings) -> str:
    """Return *raw* reformatted by yq, or *raw* itself if that is not possible."""
    yq = settings.formatter_path()
    if yq is None:
        return raw
    try:
        formatted = run_yq(yq, raw, settings.color)
    except (OSError, subprocess.SubprocessError):
        logger.debug("yq formatting failed, using raw document", exc_info=True)
        return raw
    if not formatted.strip():
        return raw
    if not formatted.endswith("\n"):
        formatted += "\n"
    return formatted
