"""Root Typer application: manifest-fzf."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version as dist_version
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from manifest_fzf.cli.options import (
    FzfBinOption,
    MultiOption,
    NoAlignOption,
    NoColorOption,
    NoYqOption,
    ShowApiVersionOption,
    ShowNamespaceOption,
    StrictOption,
    VerboseOption,
    VersionOption,
)
from manifest_fzf.config.settings import Settings
from manifest_fzf.core.chooser import select_objects
from manifest_fzf.core.errors import (
    ChooserNotFoundError,
    ManifestDecodeError,
    NoObjectsError,
    NoSelectionError,
    SelectionAborted,
)
from manifest_fzf.output.writer import write_selected
from manifest_fzf.utils.manifest_parser import parse_manifest, resource_counts

logger = logging.getLogger(__name__)

USAGE = "Usage: cat manifests.yaml | manifest-fzf [--multi] [--show-apiversion] [--show-namespace] [--no-yq]"

# fzf's own exit status when interrupted
ABORTED_EXIT_CODE = 130

app = typer.Typer(
    name="manifest-fzf",
    help="manifest-fzf - Interactively filter Kubernetes manifests via fzf.",
    add_completion=False,
)


def _package_version() -> str:
    try:
        return dist_version("manifest-fzf")
    except PackageNotFoundError:
        return "dev"


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _stdin_is_terminal() -> bool:
    return sys.stdin.isatty()


def _fail(message: str, code: int = 1) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=code)


@app.command()
def run(
    multi: bool = MultiOption,
    show_apiversion: bool = ShowApiVersionOption,
    show_namespace: bool = ShowNamespaceOption,
    no_yq: bool = NoYqOption,
    no_color: bool = NoColorOption,
    fzf_bin: Optional[str] = FzfBinOption,
    strict: bool = StrictOption,
    verbose: bool = VerboseOption,
    no_align: bool = NoAlignOption,
    version: bool = VersionOption,
) -> None:
    """Pick Kubernetes manifests from a YAML stream on stdin."""
    if version:
        typer.echo(_package_version())
        raise typer.Exit()
    _configure_logging(verbose)

    if _stdin_is_terminal():
        raise _fail(USAGE)

    settings = Settings(
        multi=multi,
        show_api_version=show_apiversion,
        show_namespace=show_namespace,
        no_formatter=no_yq,
        strict=strict,
    )
    if no_color:
        settings.no_color = True
    if fzf_bin:
        settings.fzf_bin = fzf_bin

    try:
        objects = parse_manifest(sys.stdin.buffer.read(), strict=settings.strict)
        if not objects:
            raise NoObjectsError()
        logger.debug("Parsed %d objects: %s", len(objects), resource_counts(objects))
        selected = select_objects(objects, settings)
    except SelectionAborted as e:
        raise _fail(str(e), ABORTED_EXIT_CODE)
    except (ManifestDecodeError, NoObjectsError, ChooserNotFoundError, NoSelectionError) as e:
        raise _fail(f"error: {e}")

    write_selected(sys.stdout.buffer, selected, settings)


def main() -> None:
    app()
