"""Sequential and concurrent modes visit the same entries."""

import pytest

from fstraverse import aio, sync
from fstraverse.testing import AsyncInMemoryStorage, InMemoryStorage


def generate_tree(width: int, depth: int, files_per_dir: int = 3) -> dict:
    """Build a nested dict tree with ``width`` subdirectories per level."""
    tree = {f'file{i}.dat': f'{depth}-{i}'.encode() for i in range(files_per_dir)}
    if depth > 0:
        for i in range(width):
            tree[f'dir{i}'] = generate_tree(width, depth - 1, files_per_dir)
    return tree


@pytest.mark.asyncio
async def test_local_filesystem_modes_agree(fs_tree):
    sequential = {e.path for e in sync.each_file_or_directory(fs_tree)}
    concurrent = {e.path for e in await aio.each_file_or_directory(fs_tree)}

    # root + 4 dirs + 6 files
    assert len(sequential) == 11
    assert sequential == concurrent


@pytest.mark.asyncio
async def test_local_filesystem_matching_modes_agree(fs_tree):
    sequential = {e.path for e in sync.each_file_matching(r'\.py$', fs_tree)}
    concurrent = {e.path for e in await aio.each_file_matching(r'\.py$', fs_tree)}

    assert len(sequential) == 2
    assert sequential == concurrent


@pytest.mark.asyncio
async def test_generated_tree_modes_agree():
    tree = generate_tree(width=3, depth=3)
    sequential = {e.path for e in sync.each_file_or_directory('root', storage=InMemoryStorage(tree))}

    storage = AsyncInMemoryStorage(tree)
    concurrent = {e.path for e in await aio.each_file_or_directory('root', storage=storage)}

    assert sequential == concurrent == set(storage.paths())


@pytest.mark.asyncio
async def test_metadata_agrees_between_modes(fs_tree):
    sequential = {e.path: e.metadata for e in sync.each_file(fs_tree)}
    concurrent = {e.path: e.metadata for e in await aio.each_file(fs_tree)}
    assert sequential == concurrent


@pytest.mark.slow
@pytest.mark.asyncio
async def test_wide_tree_sync_and_aio_agree():
    tree = generate_tree(width=6, depth=4, files_per_dir=4)
    sequential = sync.each_file_or_directory('root', storage=InMemoryStorage(tree))

    storage = AsyncInMemoryStorage(tree)
    completions = []
    session = aio.each_file_or_directory(
        'root', None, lambda *args: completions.append(args), storage=storage
    )
    concurrent = await session

    assert len(completions) == 1
    assert len(sequential) == len(concurrent) == len(storage.paths())
    assert {e.path for e in sequential} == {e.path for e in concurrent}
