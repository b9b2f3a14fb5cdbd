"""metadata.core.errors
Exceptions raised by the OMDb client and mapped to user messages by
`metadata.core.state`.
"""

from __future__ import annotations


class OMDbError(RuntimeError):
    """Base class for every failed OMDb round-trip."""


class OMDbResponseError(OMDbError):
    """OMDb answered with ``"Response": "False"`` (not found, bad key, …)."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "OMDb returned an error")
        self.message = message


class OMDbConnectionError(OMDbError):
    """Network unreachable, timeout, or a body that is not a JSON object."""
