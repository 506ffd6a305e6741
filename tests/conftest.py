"""Shared pytest fixtures for the cee-pretty test suite."""

from __future__ import annotations

import logging

import pytest

from ceepretty.config import Config


@pytest.fixture()
def plain() -> Config:
    """No extra fields, no color — what a redirected run sees."""
    return Config(extra=False, color=False)


@pytest.fixture()
def extra() -> Config:
    return Config(extra=True, color=False)


@pytest.fixture()
def color() -> Config:
    return Config(extra=True, color=True)


@pytest.fixture()
def restore_root_logging():
    """Undo any basicConfig(force=True) done by the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
