from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC = ROOT / "python"

if importlib.util.find_spec("stepflow") is None:
    if str(PYTHON_SRC) not in sys.path:
        sys.path.insert(0, str(PYTHON_SRC))

from stepflow import SAMPLE_DESCRIPTION, FlowNetwork, parse  # noqa: E402


@pytest.fixture
def sample_network() -> FlowNetwork:
    return parse(SAMPLE_DESCRIPTION)
