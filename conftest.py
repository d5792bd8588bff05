"""Shared pytest fixtures for the EnumFiles test suite."""

import pytest

from enumfiles.testing import SAMPLE_LAYOUT, build_tree

SAMPLE_ROOT = "test/testFolder"


@pytest.fixture
def sample_tree(tmp_path, monkeypatch):
    """Build the reference tree and run the test from its parent.

    Returns the relative root path, so results read exactly like
    'test/testFolder/test1'.
    """
    monkeypatch.chdir(tmp_path)
    build_tree(SAMPLE_ROOT, SAMPLE_LAYOUT)
    return SAMPLE_ROOT
