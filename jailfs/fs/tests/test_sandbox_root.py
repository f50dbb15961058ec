"""Tests for SandboxRoot lifecycle."""

import gc
from pathlib import Path

import pytest

from jailfs.fs.root import SandboxRoot


class TestSandboxRootCreate:
    """Allocation of the temporary directory."""

    def test_creates_empty_directory(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        try:
            assert root.path.is_dir()
            assert list(root.path.iterdir()) == []
        finally:
            root.teardown()

    def test_path_is_absolute_and_canonical(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        try:
            assert root.path.is_absolute()
            assert root.path == root.path.resolve()
        finally:
            root.teardown()

    def test_names_are_unique(self, tmp_path: Path) -> None:
        roots = [SandboxRoot.create(temp_dir=tmp_path) for _ in range(5)]
        try:
            assert len({r.path for r in roots}) == 5
            assert len({r.session_id for r in roots}) == 5
        finally:
            for r in roots:
                r.teardown()

    def test_name_carries_prefix_and_session(self, tmp_path: Path) -> None:
        with SandboxRoot.create(temp_dir=tmp_path, prefix="case-") as root:
            assert root.path.name.startswith(f"case-{root.session_id.lower()}-")

    def test_missing_parent_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            SandboxRoot.create(temp_dir=tmp_path / "does" / "not" / "exist")


class TestSandboxRootTeardown:
    """Removal of the directory tree."""

    def test_teardown_removes_tree(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        (root.path / "a" / "b").mkdir(parents=True)
        (root.path / "a" / "b" / "f.txt").write_text("x")

        root.teardown()

        assert not root.path.exists()
        assert root.closed

    def test_teardown_runs_once(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        root.teardown()
        # a new directory at the same place must survive a second teardown
        root.path.mkdir()
        root.teardown()
        assert root.path.exists()

    def test_teardown_tolerates_external_removal(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        root.path.rmdir()
        root.teardown()
        assert root.closed

    def test_context_manager(self, tmp_path: Path) -> None:
        with SandboxRoot.create(temp_dir=tmp_path) as root:
            path = root.path
            assert not root.closed
        assert not path.exists()

    def test_collected_root_is_removed(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        path = root.path

        del root
        gc.collect()

        assert not path.exists()

    def test_path_is_stable_after_teardown(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        before = root.path
        root.teardown()
        assert root.path == before

    def test_repr_reports_state(self, tmp_path: Path) -> None:
        root = SandboxRoot.create(temp_dir=tmp_path)
        assert "open" in repr(root)
        root.teardown()
        assert "closed" in repr(root)
