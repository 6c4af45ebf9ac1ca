"""
Error taxonomy shared by services and routes.

Every error carries the HTTP status the API answers with; the handlers
registered in ``soundboard.main`` turn them into
``{"success": false, "message": ...}`` bodies.
"""


class SoundboardAPIError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SoundboardAPIError):
    """Missing or invalid input."""

    status_code = 400


class NotFoundError(SoundboardAPIError):
    status_code = 404


class SynthesisError(SoundboardAPIError):
    """Text-to-speech backend failed or timed out."""


class StorageError(SoundboardAPIError):
    """Object storage call failed or timed out."""


class PersistenceError(SoundboardAPIError):
    """Database write or read failed."""
