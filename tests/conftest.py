"""Test setup for syntree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def simple_sentence() -> str:
    """A small sentence with two phrases under S."""
    return "[S [NP the dog][VP barks]]"
