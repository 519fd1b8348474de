"""Pytest configuration.

Pytest 9 defaults to importlib-based importing, which does not automatically add
the ``src/`` directory onto ``sys.path`` for an uninstalled checkout.

We prepend it so the tests import ``unicode_brackets`` the same way whether or
not the package has been installed in editable mode.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent / "data"


def _ensure_src_on_syspath() -> None:
    src_root = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_src_on_syspath()


@pytest.fixture
def ucd_path() -> Path:
    """Bundled copy of the Unicode 9.0.0 BidiBrackets.txt data rows."""
    return DATA_DIR / "BidiBrackets-9.0.0.txt"
