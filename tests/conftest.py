"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

MakeProject = Callable[..., Path]


@pytest.fixture
def make_project(tmp_path: Path) -> MakeProject:
    """Return a factory that writes a package.json (and optional tsconfig) into a project dir."""

    def _make(
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        *,
        scripts: dict[str, str] | None = None,
        tsconfig: bool = False,
        name: str = "project",
        extra: dict[str, Any] | None = None,
    ) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        manifest: dict[str, Any] = {"name": name, "version": "1.0.0"}
        if dependencies is not None:
            manifest["dependencies"] = dependencies
        if dev_dependencies is not None:
            manifest["devDependencies"] = dev_dependencies
        if scripts is not None:
            manifest["scripts"] = scripts
        if extra:
            manifest.update(extra)
        (root / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        if tsconfig:
            (root / "tsconfig.json").write_text("{}", encoding="utf-8")
        return root

    return _make
