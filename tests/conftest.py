"""Shared pytest fixtures for stylekit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from stylekit.core.ir import DesignTokens, FontFamily, Spacing, Typography


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's log level setting out of the tests."""
    monkeypatch.delenv("STYLEKIT_LOG_LEVEL", raising=False)


@pytest.fixture
def minimal_tokens() -> DesignTokens:
    """Return a small token set with only the required color roles."""
    return DesignTokens(
        name="Minimal",
        description="Only what is required",
        mode="light",
        type="sans",
        colors={"primary": "#0052FF", "background": "#FFFFFF", "foreground": "#000000"},
        typography=Typography(
            font_family=FontFamily(display="Inter, sans-serif", body="Inter, sans-serif"),
            font_sizes=("14px", "16px"),
            font_weights=(400, 700),
        ),
        spacing=Spacing(base=4, scale=(0, 4, 8)),
    )


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Return an empty working directory with no stylekit.toml above it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_manifest(project_dir: Path):
    """Return a helper that writes stylekit.toml into the project directory."""

    def _write(content: str) -> Path:
        path = project_dir / "stylekit.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
