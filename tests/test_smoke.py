"""Smoke test — verifies the package is importable."""

from __future__ import annotations

import mafpool


def test_package_importable() -> None:
    """The mafpool package must be importable with a version string."""
    assert mafpool.__version__ == "0.1.0"


def test_public_api_exported() -> None:
    assert callable(mafpool.add_openai)
    assert callable(mafpool.remove_openai)
    assert mafpool.InMemoryAgentPool is not None
