# Shared fixtures for the responsive breakpoint tests.

import pytest

import responsive
from responsive import BreakpointRegistry


@pytest.fixture
def registry():
    # Reference scale used throughout: sm 0 | md 768 | lg 1024
    return BreakpointRegistry({"sm": 0, "md": 768, "lg": 1024})


@pytest.fixture
def wide_registry():
    return BreakpointRegistry({"xl": 1600, "xs": 0, "md": 960, "sm": 640, "lg": 1280})


@pytest.fixture(autouse=True)
def _fresh_default_registry(monkeypatch):
    monkeypatch.delenv("RESPONSIVE_BREAKPOINTS_FILE", raising=False)
    responsive.reset_default_registry()
    yield
    responsive.reset_default_registry()
