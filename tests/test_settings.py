"""Tests for configuration defaults and the tool locator."""

from __future__ import annotations

import threading

import pytest

from manifest_fzf.config.settings import Settings, ToolLocator

from conftest import locator


class TestSettingsDefaults:
    def test_plain_defaults(self) -> None:
        s = Settings()
        assert not s.multi
        assert not s.show_api_version
        assert not s.show_namespace
        assert not s.strict
        assert s.color
        assert s.fzf_bin is None

    @pytest.mark.parametrize("var", ["NO_COLOR", "MANIFEST_FZF_NO_COLOR"])
    def test_no_color_from_env(self, monkeypatch: pytest.MonkeyPatch, var: str) -> None:
        monkeypatch.setenv(var, "1")
        assert not Settings().color

    def test_fzf_bin_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MANIFEST_FZF_FZF_BIN", "/opt/fzf")
        assert Settings().fzf_bin == "/opt/fzf"

    def test_formatter_path(self) -> None:
        s = Settings(tools=locator(yq="/usr/bin/yq"))
        assert s.formatter_path() == "/usr/bin/yq"

    def test_formatter_disabled(self) -> None:
        s = Settings(no_formatter=True, tools=locator(yq="/usr/bin/yq"))
        assert s.formatter_path() is None

    def test_each_settings_owns_its_locator(self) -> None:
        assert Settings().tools is not Settings().tools


class TestToolLocator:
    def test_lookup_is_memoized(self) -> None:
        calls: list[str] = []

        def which(name: str) -> str:
            calls.append(name)
            return f"/bin/{name}"

        tools = ToolLocator(which=which)
        assert tools.lookup("yq") == "/bin/yq"
        assert tools.lookup("yq") == "/bin/yq"
        assert tools.lookup("fzf") == "/bin/fzf"
        assert calls == ["yq", "fzf"]

    def test_missing_tool_is_cached(self) -> None:
        calls: list[str] = []

        def which(name: str) -> None:
            calls.append(name)
            return None

        tools = ToolLocator(which=which)
        assert tools.lookup("yq") is None
        assert tools.lookup("yq") is None
        assert calls == ["yq"]

    def test_concurrent_callers_probe_once(self) -> None:
        calls: list[str] = []
        start = threading.Barrier(8)

        def which(name: str) -> str:
            calls.append(name)
            return "/bin/yq"

        tools = ToolLocator(which=which)
        results: list[str | None] = []

        def worker() -> None:
            start.wait()
            results.append(tools.lookup("yq"))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert calls == ["yq"]
        assert results == ["/bin/yq"] * 8
