"""
Error taxonomy for hiero-enterprise.

Every failure raised by this package is a HieroError carrying a
machine-readable ``code``. Callers branch on the code, never on the message.

Codes:
    - MISSING_CONFIG / INVALID_CONFIG / UNSUPPORTED_NETWORK: fatal
      configuration problems, surfaced at initialize time.
    - NOT_INITIALIZED: HieroContext.get() before initialize(). Programmer error.
    - MIRROR_NODE_ERROR: the GET never completed (DNS, refused, timeout).
    - MIRROR_NODE_HTTP_ERROR: the GET completed with a non-2xx status.
    - NOT_FOUND: 404, or an empty result where exactly one item was expected.
    - INVALID_RESPONSE: body was not a JSON object or lacked a required field.
    - LISTENER_ERROR: a transaction listener raised during dispatch.
    - SDK_ERROR / UNKNOWN: normalized foreign failures.

Nothing in this package retries on any code.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Machine-readable error codes."""

    MISSING_CONFIG = "MISSING_CONFIG"
    INVALID_CONFIG = "INVALID_CONFIG"
    UNSUPPORTED_NETWORK = "UNSUPPORTED_NETWORK"
    NOT_INITIALIZED = "NOT_INITIALIZED"
    MIRROR_NODE_ERROR = "MIRROR_NODE_ERROR"
    MIRROR_NODE_HTTP_ERROR = "MIRROR_NODE_HTTP_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_RESPONSE = "INVALID_RESPONSE"
    LISTENER_ERROR = "LISTENER_ERROR"
    SDK_ERROR = "SDK_ERROR"
    UNKNOWN = "UNKNOWN"


class HieroError(Exception):
    """Base error for all hiero-enterprise failures.

    Args:
        message: Human-readable description.
        code: Machine-readable code. Plain strings are accepted so SDK
            status codes can pass through unchanged.
        context: What was being attempted (request path, "Service.method").
        status_code: HTTP status for mirror-node protocol failures.
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | str = ErrorCode.UNKNOWN,
        context: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = context
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={str(self.code)!r})"


class ListenerDispatchError(HieroError):
    """A transaction listener raised while an event was being dispatched.

    The remaining listeners of that phase were not invoked. ``invoked``
    counts the listeners that completed before the failing one, so the
    caller can decide whether partial instrumentation is acceptable.
    The listener's own exception is available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        phase: str,
        invoked: int,
        listener: Any,
        context: str | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.LISTENER_ERROR, context=context)
        self.phase = phase
        self.invoked = invoked
        self.listener = listener


def _sdk_status_code(error: BaseException) -> str | None:
    """Pull a status code off an SDK exception, if it carries one."""
    status = getattr(error, "status", None)
    if status is None:
        return None
    code = getattr(status, "code", None)
    if code is None:
        code = getattr(status, "value", None)
    if code is None and isinstance(status, int):
        code = status
    return str(code) if code is not None else None


def normalize_error(error: object, context: str | None = None) -> HieroError:
    """Coerce any failure into a HieroError.

    HieroError instances are returned as-is. Other exceptions are wrapped
    with code SDK_ERROR (or the SDK status code when one is present) and
    chained as ``__cause__``. Non-exception values become UNKNOWN.
    """
    if isinstance(error, HieroError):
        return error

    if isinstance(error, BaseException):
        wrapped = HieroError(
            str(error) or type(error).__name__,
            code=_sdk_status_code(error) or ErrorCode.SDK_ERROR,
            context=context,
        )
        wrapped.__cause__ = error
        return wrapped

    return HieroError(str(error), code=ErrorCode.UNKNOWN, context=context)
