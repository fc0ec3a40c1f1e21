"""
Structure lint tests
Verify that the component skeleton exists and follows conventions.
"""

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent

COMPONENTS = ["render", "render_posts", "assets", "site"]


class TestProjectStructure:
    """Verify project structure follows conventions."""

    def test_core_directories_exist(self) -> None:
        """Core functional directories must exist."""
        assert (PROJECT_ROOT / "src" / "core").is_dir()
        assert (PROJECT_ROOT / "src" / "core" / "ports").is_dir()

    def test_shell_directories_exist(self) -> None:
        """Shell (imperative) directories must exist."""
        assert (PROJECT_ROOT / "src" / "api").is_dir()
        assert (PROJECT_ROOT / "src" / "app_shell").is_dir()

    def test_adapters_directory_exists(self) -> None:
        """Adapters directory must exist."""
        assert (PROJECT_ROOT / "src" / "adapters").is_dir()

    def test_tests_structure_exists(self) -> None:
        """Test directories must follow conventions."""
        assert (PROJECT_ROOT / "tests").is_dir()
        assert (PROJECT_ROOT / "tests" / "unit").is_dir()

    def test_rules_file_present(self) -> None:
        assert (PROJECT_ROOT / "rules.yaml").is_file()

    @pytest.mark.parametrize("component", COMPONENTS)
    def test_component_layout(self, component: str) -> None:
        """Each component ships core, shell, models, ports and tests."""
        base = PROJECT_ROOT / "src" / "components" / component
        for name in ("__init__.py", "_impl.py", "component.py", "models.py", "ports.py"):
            assert (base / name).is_file(), f"Missing {name} in {component}"
        assert (base / "tests" / "test_unit.py").is_file()
