"""Client-level exception hierarchy for catalog operations."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for every failure surfaced by the catalog client.

    ``status_code`` and ``body`` are populated only when the failure came from
    an HTTP response. Transport-level failures leave both as ``None``.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, body={self.body!r})"
        )


class UpstreamError(CatalogError):
    """Raised when the catalog service answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str, *, reason: str | None = None) -> None:
        message = f"Upstream returned {status_code}"
        if reason:
            message = f"{message} {reason}"
        super().__init__(message, status_code=status_code, body=body)


class TransportError(CatalogError):
    """Raised on connection failures, timeouts or undecodable response bodies."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


__all__ = ["CatalogError", "TransportError", "UpstreamError"]
