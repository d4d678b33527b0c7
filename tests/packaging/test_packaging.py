"""Packaging correctness verification for json-diagram.

These tests inspect the current installation and the built wheel rather
than creating temporary virtualenvs.
"""

from __future__ import annotations

import re
import shutil
import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        if shutil.which("poetry") is None:
            pytest.skip("poetry is not installed")
        dist_dir = PROJECT_ROOT / "dist"
        result = subprocess.run(
            ["poetry", "build", "-f", "wheel"],
            cwd=str(PROJECT_ROOT),
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path) -> None:
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            assert any(n.endswith("py.typed") for n in names), names

    def test_all_source_modules_in_wheel(self, wheel_path: Path) -> None:
        expected_modules = [
            "json_diagram/__init__.py",
            "json_diagram/api.py",
            "json_diagram/config.py",
            "json_diagram/id_sources.py",
            "json_diagram/protocols.py",
            "json_diagram/theme.py",
            "json_diagram/graph/__init__.py",
            "json_diagram/graph/builder.py",
            "json_diagram/graph/classifier.py",
            "json_diagram/graph/consolidator.py",
            "json_diagram/graph/emitter.py",
            "json_diagram/graph/identifiers.py",
            "json_diagram/graph/nodes.py",
            "json_diagram/graph/root.py",
            "json_diagram/graph/validation.py",
            "json_diagram/integrations/__init__.py",
            "json_diagram/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self) -> None:
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")
        ours = [ep for ep in pytest11_eps if ep.value.startswith("json_diagram.")]
        assert ours, (
            f"No pytest11 entry point found for json-diagram. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_defined_in_plugin(self) -> None:
        import importlib

        mod = importlib.import_module("json_diagram.integrations._pytest_plugin")
        assert callable(mod.assert_valid_diagram)

    def test_plugin_discovery_via_pytest(self) -> None:
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_valid_diagram" in result.stdout


class TestPackageMetadata:
    def test_version(self) -> None:
        import json_diagram

        assert json_diagram.__version__ == "0.1.0"

    def test_all_exports(self) -> None:
        import json_diagram

        expected = {
            "Annotation",
            "CounterIdSource",
            "DiagramConfig",
            "DiagramConnector",
            "DiagramData",
            "DiagramNode",
            "DisplayContent",
            "IdSource",
            "RandomIdSource",
            "ThemeMode",
            "ThemeService",
            "ThemeSettings",
            "find_graph_issues",
            "process_data",
            "process_json",
            "theme_settings",
        }
        actual = set(json_diagram.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )

    def test_base_dependency_only_cachetools(self) -> None:
        from importlib.metadata import requires

        base = [r for r in requires("json-diagram") or [] if "extra ==" not in r]
        names = [re.match(r"[A-Za-z0-9._-]+", r).group(0) for r in base]  # type: ignore[union-attr]
        assert names == ["cachetools"]
