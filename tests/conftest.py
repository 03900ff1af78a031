"""Test setup for mdlite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mdlite.options import ParseOptions  # noqa: E402


@pytest.fixture
def anchored_options() -> ParseOptions:
    """Options with heading anchors enabled."""
    return ParseOptions(header_ids=True)
