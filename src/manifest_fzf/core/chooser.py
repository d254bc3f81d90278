"""Run fzf over parsed manifests and map the user's choice back."""

from __future__ import annotations

import logging
import shlex
import subprocess
import tempfile
from pathlib import Path

from manifest_fzf.config.settings import FZF_BIN_ENV, Settings
from manifest_fzf.core.candidates import build_candidate_lines
from manifest_fzf.core.errors import (
    ChooserNotFoundError,
    NoObjectsError,
    NoSelectionError,
    SelectionAborted,
)
from manifest_fzf.core.selection import has_output, parse_selection_output, pick_objects
from manifest_fzf.models import ManifestObject

logger = logging.getLogger(__name__)

PREVIEW_PREFIX = "manifest-fzf-"


def resolve_fzf(settings: Settings) -> str:
    if settings.fzf_bin:
        return settings.fzf_bin
    path = settings.tools.lookup("fzf")
    if path is None:
        raise ChooserNotFoundError(
            f"fzf executable not found in PATH; install fzf or set {FZF_BIN_ENV}"
        )
    return path


def write_previews(objects: list[ManifestObject], directory: Path) -> None:
    """Stage one file per object so fzf's preview can show it by index."""
    for i, obj in enumerate(objects):
        path = directory / f"{PREVIEW_PREFIX}{i}.yaml"
        path.write_bytes(obj.raw.encode("utf-8", errors="surrogateescape"))
        path.chmod(0o600)


def preview_command(directory: Path, settings: Settings) -> str:
    target = f"{shlex.quote(str(directory))}/{PREVIEW_PREFIX}{{1}}.yaml"
    if settings.formatter_path() is None:
        return f"cat {target}"
    color_flag = "-C " if settings.color else ""
    return f"yq {color_flag}'.' {target} 2>/dev/null || cat {target}"


def fzf_args(directory: Path, settings: Settings) -> list[str]:
    args: list[str] = []
    if settings.multi:
        args.append("--multi")
    args += [
        "--ansi",
        "--delimiter", "\t",
        "--with-nth=2..",  # first field is the internal index
        "--preview", preview_command(directory, settings),
        "--preview-window", "right:60%:wrap",
    ]
    return args


def select_objects(objects: list[ManifestObject], settings: Settings) -> list[ManifestObject]:
    """Let the user pick objects through fzf.

    Returns the chosen objects in the order fzf reported them.  Raises
    SelectionAborted when the user cancels or fzf prints nothing, and
    NoSelectionError when none of the printed lines maps to an object.
    """
    if not objects:
        raise NoObjectsError("no objects to select")
    fzf = resolve_fzf(settings)

    lines = build_candidate_lines(
        objects,
        show_api_version=settings.show_api_version,
        show_namespace=settings.show_namespace,
        color=settings.color,
    )
    payload = ("\n".join(lines) + "\n").encode("utf-8", errors="surrogateescape")

    with tempfile.TemporaryDirectory(prefix="manifest-fzf-") as tmp:
        directory = Path(tmp)
        write_previews(objects, directory)
        cmd = [fzf, *fzf_args(directory, settings)]
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(cmd, input=payload, stdout=subprocess.PIPE)
        except (FileNotFoundError, PermissionError) as e:
            raise ChooserNotFoundError(f"cannot run fzf at {fzf}: {e}") from e
        except KeyboardInterrupt as e:
            raise SelectionAborted() from e

    if result.returncode != 0:
        logger.debug("fzf exited with status %d", result.returncode)
        raise SelectionAborted()

    out = result.stdout.decode("utf-8", errors="surrogateescape")
    if not has_output(out):
        logger.debug("fzf exited without a selection")
        raise SelectionAborted()

    indices = parse_selection_output(out)
    chosen = pick_objects(objects, indices)
    if not chosen:
        raise NoSelectionError()
    return chosen
