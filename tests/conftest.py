# ABOUTME: Global pytest configuration for all tests
# ABOUTME: Isolates tests from HANGMAN_* environment variables and provides shared fixtures

import logging

import pytest

from session.game_configuration import HangmanConfiguration


@pytest.fixture(autouse=True)
def isolate_hangman_environment(monkeypatch):
    """
    Remove HANGMAN_* environment variables for every test.

    Configuration is read from the environment by pydantic-settings, so a
    developer's shell settings would otherwise leak into test results.
    """
    import os

    for name in list(os.environ):
        if name.upper().startswith("HANGMAN_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_config():
    """Default configuration: 10 guesses, 2 preamble lines, '_' marker."""
    return HangmanConfiguration()


@pytest.fixture
def test_logger():
    """A logger that keeps test output quiet but still records."""
    logger = logging.getLogger("hangman.tests")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def restore_hangman_logger():
    """setup_logging replaces handlers on the shared logger; put them back afterwards."""
    logger = logging.getLogger("hangman")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    for handler in saved[2]:
        logger.addHandler(handler)
