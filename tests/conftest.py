"""Global pytest configuration for the refinements test suite.

Provides markers and fixtures shared across modules: call-counting
refinements for short-circuit checks, and runtime settings for the
contract-checking tests.
"""

from typing import Any, Callable

import pytest

from refinements import Runtime


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "construction: tests the construction protocol")
    config.addinivalue_line("markers", "combinators: tests compose, either and not_")
    config.addinivalue_line("markers", "runtime: tests debug-mode contract checks")
    config.addinivalue_line("markers", "scenarios: end-to-end domain scenarios")
    config.addinivalue_line("markers", "typing: runs the static type checker")


class CountingRefinement:
    """Refinement with a fixed verdict that records every call."""

    def __init__(self, verdict: bool):
        self.verdict = verdict
        self.calls: list[Any] = []

    def __call__(self, candidate: Any) -> bool:
        self.calls.append(candidate)
        return self.verdict

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture
def counting() -> Callable[[bool], CountingRefinement]:
    """Factory fixture for call-counting refinements."""
    def _make(verdict: bool) -> CountingRefinement:
        return CountingRefinement(verdict)
    return _make


@pytest.fixture
def debug_runtime() -> Runtime:
    """Runtime that warns on contract violations."""
    return Runtime(debug=True)


@pytest.fixture
def strict_runtime() -> Runtime:
    """Runtime that raises on contract violations."""
    return Runtime(debug=True, strict=True)


@pytest.fixture
def quiet_runtime() -> Runtime:
    """Runtime with contract checks off."""
    return Runtime()


@pytest.fixture
def integers() -> list[int]:
    """Sample domain for property checks."""
    return list(range(-10, 11))
