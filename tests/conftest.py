"""Test configuration and fixtures for the Music API."""

from tests.fixtures import *  # noqa: F401,F403
