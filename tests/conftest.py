"""Shared fixtures for DOM transition tests."""

import logging
from unittest.mock import MagicMock

import pytest
import structlog


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "smoke: mark test as smoke test (fast, critical path - included in CI)"
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so logging tests don't leak configuration."""
    root_level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(root_level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def mock_env_vars(monkeypatch, tmp_path):
    """Clear DOM_TRANSITION_* settings so defaults apply."""
    for name in ("DOM_TRANSITION_LOG_LEVEL", "DOM_TRANSITION_LOG_JSON", "DOM_TRANSITION_LOG_TIMESTAMPS"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_browser():
    """Browser capability double with a resolvable element handle."""
    from dom_transition.browser import Browser

    browser = MagicMock(spec=Browser)
    browser.locate_element.return_value = MagicMock(name="element_handle")
    browser.fire_event.return_value = None
    return browser


@pytest.fixture
def click_transition():
    """A completed click on the submit button."""
    from dom_transition.transition import Transition

    return Transition({"#submit-btn": "click"}, {"value": "x"}).complete()
