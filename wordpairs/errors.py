"""Errors raised by the word pair generator."""

from typing import Optional


class WordPairsError(Exception):
    """Base class for all generator errors."""


class RemoteCallError(WordPairsError):
    """The model endpoint answered with a non-success HTTP status."""

    def __init__(self, status: int, body: Optional[str] = None):
        self.status = status
        self.body = body
        message = f"Gemini error {status}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message)


class MalformedResponseError(WordPairsError, ValueError):
    """The endpoint answered successfully but the payload is not usable JSON."""


class InvalidBatchShapeError(WordPairsError, ValueError):
    """The batch response parsed as JSON but is not an array."""
