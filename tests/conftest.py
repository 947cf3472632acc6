from __future__ import annotations

import os
from pathlib import Path

import pytest


# Keep the config singleton from writing into the real home directory.
_TEST_ROOT = Path(__file__).resolve().parent / ".tmp_test_env"
_HOME = _TEST_ROOT / "home"
_HOME.mkdir(parents=True, exist_ok=True)
os.environ["HOME"] = str(_HOME)
os.environ["USERPROFILE"] = str(_HOME)

from pixel_helpers import make_font, make_marker  # noqa: E402


@pytest.fixture
def font():
    return make_font()


@pytest.fixture
def marker():
    return make_marker()
