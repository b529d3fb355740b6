"""
Smoke tests for package structure and availability.

These tests strictly verify that the package is installed correctly in the
environment and that the public names are importable from the top level.
"""

from __future__ import annotations

import importlib

import okerr
from okerr import __version__


def test_package_importable() -> None:
    """Ensure the top-level package can be imported."""
    mod = importlib.import_module("okerr")
    assert mod is not None


def test_version_is_set() -> None:
    """Ensure the package exposes a valid version string."""
    assert isinstance(__version__, str)
    assert len(__version__) > 0


def test_public_api_exported() -> None:
    """Constructors, variants and the unwrap failure are re-exported."""
    for name in ("Result", "Ok", "Err", "UnwrapError", "ok", "err", "empty"):
        assert hasattr(okerr, name), f"okerr must export {name!r}"
