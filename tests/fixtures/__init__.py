"""Shared pytest fixtures and helpers."""

from .core import *  # noqa: F401,F403
from .music import MusicFactory  # noqa: F401
