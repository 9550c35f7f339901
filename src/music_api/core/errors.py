"""Domain errors translated to JSON responses at the HTTP boundary."""

MUSIC_NOT_FOUND_MESSAGE = "Music not found!"


class MusicApiError(Exception):
    """Base exception for errors reported to clients.

    Every subclass is answered with ``status_code`` and ``{"message": ...}``.
    """

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MusicValidationError(MusicApiError):
    """A required field is missing or empty."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class MusicNotFoundError(MusicApiError):
    """The identifier is unknown or the music was logically deleted.

    Reported as 400 rather than 404 for compatibility with existing clients.
    """

    def __init__(self, music_id: int | None = None):
        self.music_id = music_id
        super().__init__(MUSIC_NOT_FOUND_MESSAGE)
