"""Full error hierarchy for the cloudup uploader.

Every public error class inherits from CloudupError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Error codes are defined as a :class:`str` enum so that they serialise
naturally to JSON and can be matched with simple ``==`` comparisons.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error cloudup can raise."""

    INVALID_DESCRIPTOR = "INVALID_DESCRIPTOR"
    UNSUPPORTED_SCHEME = "UNSUPPORTED_SCHEME"
    MISSING_CREDENTIAL = "MISSING_CREDENTIAL"
    INVALID_PATTERN = "INVALID_PATTERN"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    UPLOAD_FAILED = "UPLOAD_FAILED"
    MALFORMED_RESPONSE = "MALFORMED_RESPONSE"
    UNEXPECTED_URL_PATH_FORMAT = "UNEXPECTED_URL_PATH_FORMAT"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class CloudupError(Exception):
    """Base exception for all cloudup errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
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


# ---------------------------------------------------------------------------
# Descriptor errors (service and tracking-store configuration)
# ---------------------------------------------------------------------------

class CloudupDescriptorError(CloudupError):
    """Base class for errors raised while parsing a connection descriptor.

    Context keys: ``descriptor`` (credentials masked).
    """

    def __init__(
        self,
        code: str = ErrorCode.INVALID_DESCRIPTOR,
        message: str = "Descriptor error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class CloudupInvalidDescriptorError(CloudupDescriptorError):
    """The descriptor (or an endpoint override) is not a well-formed URI."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DESCRIPTOR,
            message=message,
            context=context,
            cause=cause,
        )


class CloudupUnsupportedSchemeError(CloudupDescriptorError):
    """The descriptor parsed as a URI but carries the wrong scheme.

    Context keys: ``scheme``, ``expected``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED_SCHEME,
            message=message,
            context=context,
            cause=cause,
        )


class CloudupMissingCredentialError(CloudupDescriptorError):
    """The service descriptor lacks the API key or the API secret.

    Context keys: ``missing`` (``"api_key"`` or ``"api_secret"``).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.MISSING_CREDENTIAL,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Retention and tracking errors
# ---------------------------------------------------------------------------

class CloudupInvalidPatternError(CloudupError):
    """A retention pattern is not a valid regular expression.

    Context keys: ``pattern``, ``position``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PATTERN,
            message=message,
            context=context,
            cause=cause,
        )


class CloudupStoreUnavailableError(CloudupError):
    """The tracking store could not be reached while attaching it.

    Context keys: ``database``, ``collection``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Upload errors
# ---------------------------------------------------------------------------

class CloudupUploadError(CloudupError):
    """Base class for errors raised by the upload orchestrator.

    Context varies by subclass.
    """

    def __init__(
        self,
        code: str = ErrorCode.UPLOAD_FAILED,
        message: str = "Upload error",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class CloudupUploadFailedError(CloudupUploadError):
    """The remote service rejected the request or the transport failed.

    Context keys: ``url``, ``status_code`` (``None`` on transport failure).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.UPLOAD_FAILED,
            message=message,
            context=context,
            cause=cause,
        )


class CloudupMalformedResponseError(CloudupUploadError):
    """A success response could not be parsed as upload metadata.

    Context keys: ``url``, ``body``, ``missing``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.MALFORMED_RESPONSE,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Extraction errors
# ---------------------------------------------------------------------------

class CloudupUnexpectedURLPathFormatError(CloudupError):
    """A delivery URL does not end in ``<resource_type>/upload/<public_id>``.

    Callers commonly treat this as "not a managed asset" rather than a
    hard failure.

    Context keys: ``url``, ``path``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.UNEXPECTED_URL_PATH_FORMAT,
            message=message,
            context=context,
            cause=cause,
        )
