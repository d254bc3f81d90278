"""Application configuration and defaults."""

from __future__ import annotations

import os
import shutil
import threading
from dataclasses import dataclass, field

FZF_BIN_ENV = "MANIFEST_FZF_FZF_BIN"
NO_COLOR_ENV = "MANIFEST_FZF_NO_COLOR"


def _default_fzf_bin() -> str | None:
    return os.environ.get(FZF_BIN_ENV) or None


def _default_no_color() -> bool:
    """Honour both our own switch and the informal NO_COLOR convention."""
    return bool(os.environ.get(NO_COLOR_ENV, "") or os.environ.get("NO_COLOR", ""))


class ToolLocator:
    """Resolve external executables on PATH, at most once per name.

    Lookups are serialised by a lock, so concurrent callers converge on
    a single cached result.  A missing tool is cached as ``None``.
    """

    def __init__(self, which=None):
        self._which = which or shutil.which
        self._lock = threading.Lock()
        self._paths: dict[str, str | None] = {}

    def lookup(self, name: str) -> str | None:
        with self._lock:
            if name not in self._paths:
                self._paths[name] = self._which(name)
            return self._paths[name]


@dataclass
class Settings:
    multi: bool = False
    show_api_version: bool = False
    show_namespace: bool = False
    no_formatter: bool = False
    no_color: bool = field(default_factory=_default_no_color)
    fzf_bin: str | None = field(default_factory=_default_fzf_bin)
    strict: bool = False
    tools: ToolLocator = field(default_factory=ToolLocator, repr=False, compare=False)

    @property
    def color(self) -> bool:
        return not self.no_color

    def formatter_path(self) -> str | None:
        """Path to yq, or None when formatting is disabled or yq is missing."""
        if self.no_formatter:
            return None
        return self.tools.lookup("yq")
