"""Shared pytest configuration for the lending service tests."""

from tests.fixtures import *  # noqa: F401,F403
