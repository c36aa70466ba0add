"""Pytest configuration: make the project root importable, as the app does."""

import os
import sys

import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from core.schema import Inputs  # noqa: E402


@pytest.fixture
def sample_inputs() -> Inputs:
    return Inputs(incomes=[100.0, 0.0, 1000.0, -100.0], labels=["a", "b", "c", "d"])
