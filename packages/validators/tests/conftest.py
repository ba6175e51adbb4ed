"""Pytest configuration and fixtures for validators package tests."""

import enum

import pytest

from checkknobs_validators import reset_settings


class Color(enum.Enum):
    RED = "red"
    GREEN = "green"


@pytest.fixture(autouse=True)
def default_settings():
    """Run every test against the built-in settings."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def color_enum():
    return Color


class MessageCounter:
    """Message callable that counts how often it is rendered."""

    def __init__(self, text: str = "failure"):
        self.text = text
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return self.text


@pytest.fixture
def counter():
    return MessageCounter()
