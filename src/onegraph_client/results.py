"""
Explicit per-operation result type.

A call produces one of:

- ``Success(payload)``: the response carried the expected nested field.
- ``Empty(path)``: no errors, but the nested field was absent or null.
- ``Failure(errors)``: the response (or the transport) reported errors, or
  the nested field did not match the expected model.
"""

import logging
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from pydantic import ValidationError

from onegraph_client.errors import GraphQLOperationError, MissingFieldError
from onegraph_client.transport.graphql import GraphQLResponse

logger = logging.getLogger(__name__)

INVALID_RESPONSE = "INVALID_RESPONSE"

T = TypeVar("T")


class Success(Generic[T]):
    __slots__ = ("payload",)

    ok = True

    def __init__(self, payload: T):
        self.payload = payload

    @property
    def errors(self) -> list[dict[str, Any]]:
        return []

    def unwrap(self) -> T:
        return self.payload

    def unwrap_or(self, default: Any) -> T:
        return self.payload

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Success) and other.payload == self.payload

    def __repr__(self) -> str:
        return f"Success({self.payload!r})"


class Empty:
    __slots__ = ("path",)

    ok = False

    def __init__(self, path: tuple[str, ...]):
        self.path = path

    @property
    def errors(self) -> list[dict[str, Any]]:
        return []

    def unwrap(self) -> Any:
        raise MissingFieldError(self.path)

    def unwrap_or(self, default: T) -> T:
        return default

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Empty) and other.path == self.path

    def __repr__(self) -> str:
        return f"Empty({'.'.join(self.path)!r})"


class Failure:
    __slots__ = ("_errors",)

    ok = False

    def __init__(self, errors: list[dict[str, Any]]):
        self._errors = list(errors)

    @property
    def errors(self) -> list[dict[str, Any]]:
        return self._errors

    def unwrap(self) -> Any:
        raise GraphQLOperationError(self._errors)

    def unwrap_or(self, default: T) -> T:
        return default

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Failure) and other.errors == self.errors

    def __repr__(self) -> str:
        return f"Failure({self._errors!r})"


Result = Union[Success[T], Empty, Failure]


def from_response(
    response: GraphQLResponse,
    path: tuple[str, ...],
    parse: Optional[Callable[[Any], T]] = None,
) -> "Result[T]":
    """Unwrap ``response.data`` at ``path`` into a typed result."""
    if response.has_errors:
        return Failure(response.errors or [])
    value = response.dig(*path)
    if value is None:
        return Empty(path)
    if parse is None:
        return Success(value)
    try:
        return Success(parse(value))
    except ValidationError as e:
        logger.warning(f"Unexpected shape at {'.'.join(path)}: {e}")
        return Failure([{"message": str(e), "extensions": {"code": INVALID_RESPONSE, "path": list(path)}}])
