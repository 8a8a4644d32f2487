"""Shared fixtures for the fstraverse test suite."""

from pathlib import Path

import pytest

from fstraverse.testing import InMemoryStorage, AsyncInMemoryStorage


# root/{a.txt, sub/{b.txt, c.log}}
SIMPLE_TREE = {
    'a.txt': b'alpha',
    'sub': {
        'b.txt': b'bravo',
        'c.log': b'charlie',
    },
}


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests (deselect with '-m \"not slow\"')")


def create_test_tree(base_dir: Path) -> None:
    """Create a test directory structure.

    Structure:
    base_dir/
    ├── file1.txt
    ├── file2.py
    ├── dir1/
    │   ├── file3.txt
    │   ├── file4.py
    │   └── subdir1/
    │       └── file5.txt
    ├── dir2/
    │   └── file6.txt
    └── empty/
    """
    (base_dir / "dir1").mkdir()
    (base_dir / "dir1" / "subdir1").mkdir()
    (base_dir / "dir2").mkdir()
    (base_dir / "empty").mkdir()

    (base_dir / "file1.txt").write_text("content1")
    (base_dir / "file2.py").write_text("# python file")
    (base_dir / "dir1" / "file3.txt").write_text("content3")
    (base_dir / "dir1" / "file4.py").write_text("# another python file")
    (base_dir / "dir1" / "subdir1" / "file5.txt").write_text("content5")
    (base_dir / "dir2" / "file6.txt").write_text("content6")


@pytest.fixture
def fs_tree(tmp_path):
    """Real directory tree under tmp_path; yields the root as a string."""
    create_test_tree(tmp_path)
    return str(tmp_path)


@pytest.fixture
def memory_storage():
    return InMemoryStorage(SIMPLE_TREE)


@pytest.fixture
def async_storage():
    return AsyncInMemoryStorage(SIMPLE_TREE)
