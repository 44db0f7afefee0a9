"""Error hierarchy for mdnotion.

The Markdown conversion core never raises: malformed input degrades to
best-effort blocks.  Errors only come from the I/O layers (request
validation, the Notion API, the network).

Every error inherits from :class:`MdNotionError` and carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, a structured ``context`` dict, and an optional ``cause``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes for every error mdnotion can raise."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    API_ERROR = "API_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"


class MdNotionError(Exception):
    """Base exception for all mdnotion errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` identifying the error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


class MdNotionValidationError(MdNotionError):
    """An upload request is missing required fields.

    Context keys: ``missing`` (list of field names).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class NotionAPIError(MdNotionError):
    """The Notion API answered with a non-2xx status.

    The status code and the raw response body are kept verbatim so callers
    can pass them straight through to their own clients.

    Context keys: ``status_code``, ``body``, ``method``, ``path``.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        method: str,
        path: str,
        cause: Exception | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.method = method
        self.path = path
        super().__init__(
            code=ErrorCode.API_ERROR,
            message=f"Notion API returned {status_code} on {method} {path}: {body[:500]}",
            context={
                "status_code": status_code,
                "body": body,
                "method": method,
                "path": path,
            },
            cause=cause,
        )


class MdNotionNetworkError(MdNotionError):
    """The request never produced an HTTP response (timeout, DNS, reset, ...).

    Context keys: ``method``, ``path``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.NETWORK_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
