import unittest
from pathlib import Path


class TestBackendLayout(unittest.TestCase):
    def test_backend_code_is_scoped_under_backend_dir(self) -> None:
        repo_root = Path(__file__).resolve().parents[1]

        # Guard-rail: backend code should not drift back to repo root.
        banned_root_dirs = [
            "server",
            "application",
            "domain",
            "infrastructure",
            "config",
        ]
        found = [name for name in banned_root_dirs if (repo_root / name).exists()]
        self.assertFalse(
            found,
            msg=(
                "Backend packages must live under `backend/`. "
                f"Found unexpected root-level directories: {found}"
            ),
        )

    def test_backend_packages_are_importable_packages(self) -> None:
        """setup.py uses find_packages(); a missing __init__.py silently drops a package."""
        backend_root = Path(__file__).resolve().parents[1] / "backend"
        missing = sorted(
            str(d.relative_to(backend_root))
            for d in backend_root.rglob("*")
            if d.is_dir()
            and "__pycache__" not in d.parts
            and any(d.glob("*.py"))
            and not (d / "__init__.py").exists()
        )
        self.assertFalse(missing, msg=f"Packages without __init__.py: {missing}")
