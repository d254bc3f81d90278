"""Shared CLI options."""

from __future__ import annotations

import typer

MultiOption = typer.Option(False, "--multi", "-m", help="Allow selecting multiple manifests")
ShowApiVersionOption = typer.Option(False, "--show-apiversion", help="Show apiVersion prefix before Kind")
ShowNamespaceOption = typer.Option(False, "--show-namespace", help="Show namespace prefix before Name")
NoYqOption = typer.Option(False, "--no-yq", help="Disable yq formatting (preview & output)")
NoColorOption = typer.Option(False, "--no-color", help="Disable colored output")
FzfBinOption = typer.Option(None, "--fzf-bin", help="Path to the fzf executable (default: search PATH)")
StrictOption = typer.Option(False, "--strict", help="Fail on the first malformed document instead of skipping it")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr")
NoAlignOption = typer.Option(False, "--no-align", hidden=True, help="Legacy no-op")
VersionOption = typer.Option(False, "--version", help="Print version and exit")
