"""
Shared pytest fixtures and configuration for enumshift tests.

This module provides:
- Registry and settings cleanup fixtures for test isolation
- Sample typed enums
- Importable fixture modules (``tests/fixtures``) for CLI tests
"""

import sys
from enum import Enum
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure enumshift and the fixture modules are importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent / "fixtures"))

from enumshift.core.callsite import clear_call_sites
from enumshift.core.settings import clear_settings_cache


# =============================================================================
# Test Markers Configuration
# =============================================================================


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if test_path.parts and test_path.parts[0] == "cli":
            item.add_marker(pytest.mark.cli)
        else:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Cleanup Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_state_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Isolate call-site registry, settings and logging config per test."""
    for key in ("ENUMSHIFT_DEPRECATION_ACTION", "ENUMSHIFT_LOG_LEVEL", "ENUMSHIFT_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    clear_call_sites()
    clear_settings_cache()
    yield
    clear_call_sites()
    clear_settings_cache()
    structlog.reset_defaults()


@pytest.fixture
def fresh_import(monkeypatch: pytest.MonkeyPatch):
    """Drop fixture modules from sys.modules so importing them re-registers call sites."""

    def _forget(*names: str) -> None:
        for name in names:
            monkeypatch.delitem(sys.modules, name, raising=False)

    return _forget


# =============================================================================
# Sample Enums
# =============================================================================


class RefundMode(str, Enum):
    PARTIAL = "partial"
    FULL = "full"


class Priority(int, Enum):
    LOW = 1
    NORMAL = 2
    HIGH = 3


@pytest.fixture
def refund_mode() -> type[RefundMode]:
    return RefundMode


@pytest.fixture
def priority() -> type[Priority]:
    return Priority
