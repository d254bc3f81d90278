"""Shared fixtures."""

from __future__ import annotations

import pytest

from manifest_fzf.config.settings import Settings, ToolLocator

SCENARIO_A = (
    b"---\n"
    b"apiVersion: v1\nkind: ConfigMap\nmetadata:\n  name: cm1\n  namespace: ns\n"
    b"---\n"
    b"# just a comment\n"
    b"---\n"
    b"apiVersion: apps/v1\nkind: Deployment\nmetadata:\n  name: web\n"
)


def locator(**paths: str | None) -> ToolLocator:
    """A ToolLocator that only knows the given tools."""
    return ToolLocator(which=lambda name: paths.get(name))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("NO_COLOR", "MANIFEST_FZF_NO_COLOR", "MANIFEST_FZF_FZF_BIN"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def plain_settings() -> Settings:
    """Settings with no color, no yq and fzf at a fixed path."""
    return Settings(no_color=True, fzf_bin="/usr/bin/fzf", tools=locator())
