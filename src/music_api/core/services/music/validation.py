"""Required-field rules applied before a music is created or updated."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from src.music_api.core.errors import MusicValidationError
from src.music_api.entities.service.music import Music


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _is_null(value: Any) -> bool:
    return value is None


@dataclass(frozen=True)
class Rule:
    field: str
    violated: Callable[[Any], bool]
    message: str


# Order matters: only the first violated rule is reported.
RULES: tuple[Rule, ...] = (
    Rule("title", _is_blank, "Title is required!"),
    Rule("artist", _is_blank, "Artist is required!"),
    Rule("release_date", _is_null, "Release Date is required!"),
    Rule("duration", _is_null, "Duration is required!"),
)


def first_violation(music: Music) -> Rule | None:
    """Return the first rule ``music`` breaks, checking rules in order."""
    for rule in RULES:
        if rule.violated(getattr(music, rule.field)):
            return rule
    return None


def validate_music(music: Music) -> None:
    """Raise MusicValidationError for the first missing required field."""
    rule = first_violation(music)
    if rule is not None:
        raise MusicValidationError(rule.message, field=rule.field)
