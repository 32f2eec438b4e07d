"""
Error taxonomy for the SDK.

Every error leaving a public operation is an ``SdkError`` carrying a
``location`` tag (the failing operation, e.g. ``[SDK.deploy]``), a ``kind``
and a human-readable ``message``. Raw transport, web3 and library exceptions
are converted with ``normalize`` at the operation boundary; the original
exception stays available as ``__cause__``.
"""

import asyncio
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, Tuple

import aiohttp
import httpx
from web3.exceptions import ContractLogicError, Web3Exception

from .messages import ErrorMessage

logger = logging.getLogger(__name__)

__all__ = [
    "ErrorKind",
    "SdkError",
    "ValidationError",
    "ContractStateError",
    "NetworkError",
    "PollTimeoutError",
    "normalize",
    "error_boundary",
]


class ErrorKind(str, Enum):
    VALIDATION = "Validation"
    CONTRACT_STATE = "ContractState"
    NETWORK = "Network"
    TIMEOUT = "Timeout"
    UNKNOWN = "Unknown"


class SdkError(Exception):
    """Base class for all SDK errors."""

    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str, location: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        prefix = f"{self.location} " if self.location else ""
        return f"{prefix}{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"location={self.location!r})"
        )


class ValidationError(SdkError):
    """Malformed or missing caller input. Raised before any external call."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        location: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message, location)
        self.field = field


class ContractStateError(SdkError):
    """Operation is invalid for the current state of a contract handle."""

    kind = ErrorKind.CONTRACT_STATE


class NetworkError(SdkError):
    """Transport or chain failure, including reverted executions."""

    kind = ErrorKind.NETWORK


class PollTimeoutError(SdkError):
    """A polled condition did not hold before its deadline."""

    kind = ErrorKind.TIMEOUT


# Filesystem failures are not transport failures
_LOCAL_OS_ERRORS = (FileNotFoundError, IsADirectoryError, NotADirectoryError, PermissionError)


def _rpc_payload(error: BaseException) -> Optional[dict]:
    # JSON-RPC error objects surface as ValueError({"code": ..., "message": ...})
    if isinstance(error, ValueError) and error.args and isinstance(error.args[0], dict):
        payload = error.args[0]
        if "message" in payload or "code" in payload:
            return payload
    return None


def _classify(error: BaseException) -> Tuple[ErrorKind, str]:
    """Return the kind and detail message for a raw exception."""
    if isinstance(error, ContractLogicError):
        reason = getattr(error, "message", None) or str(error)
        if not reason.startswith("execution reverted"):
            reason = f"execution reverted: {reason}"
        return ErrorKind.NETWORK, reason

    if isinstance(error, Web3Exception):
        detail = getattr(error, "message", None) or str(error) or type(error).__name__
        return ErrorKind.NETWORK, detail

    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return ErrorKind.NETWORK, f"HTTP {response.status_code}: {response.reason_phrase}"

    if isinstance(error, httpx.HTTPError):
        return ErrorKind.NETWORK, str(error) or type(error).__name__

    payload = _rpc_payload(error)
    if payload is not None:
        code = payload.get("code")
        message = payload.get("message", "Unknown JSON-RPC error")
        return ErrorKind.NETWORK, f"{message} (code={code})"

    # AsyncHTTPProvider transport failures
    if isinstance(error, aiohttp.ClientError):
        return ErrorKind.NETWORK, str(error) or type(error).__name__

    if isinstance(error, (OSError, asyncio.TimeoutError)) and not isinstance(error, _LOCAL_OS_ERRORS):
        return ErrorKind.NETWORK, str(error) or type(error).__name__

    return ErrorKind.UNKNOWN, str(error) or type(error).__name__


_KIND_TO_CLASS = {
    ErrorKind.NETWORK: NetworkError,
    ErrorKind.UNKNOWN: SdkError,
}


def normalize(error: BaseException, location: Optional[str] = None) -> SdkError:
    """
    Convert an arbitrary exception into an ``SdkError``.

    Args:
        error: The raw exception
        location: Location tag of the operation that observed the failure

    Returns:
        The structured error. SDK errors are returned as-is, with
        ``location`` filled in only if it was missing.
    """
    if isinstance(error, SdkError):
        if error.location is None and location is not None:
            error.location = location
        return error

    kind, detail = _classify(error)
    structured = _KIND_TO_CLASS[kind](f"{ErrorMessage.AN_ERROR_OCCURRED}: {detail}", location)
    structured.__cause__ = error
    return structured


@contextmanager
def error_boundary(location: str) -> Iterator[None]:
    """
    Guard a block of external calls.

    Any exception raised inside the block leaves it as an ``SdkError`` tagged
    with ``location``. Works around ``await`` expressions as well.
    """
    try:
        yield
    except SdkError as exc:
        normalize(exc, location)
        raise
    except Exception as exc:
        structured = normalize(exc, location)
        logger.debug("%s %s failure: %r", location, structured.kind.value, exc)
        raise structured from exc
