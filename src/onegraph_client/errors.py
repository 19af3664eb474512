"""
OneGraph client error types.

GraphQL and transport failures are normally returned inline in a result;
these exceptions cover caller mistakes and explicit ``unwrap()`` calls.
"""

from typing import Any, Optional


class OneGraphError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class InvalidArgumentError(OneGraphError, ValueError):
    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("invalid_argument", message, details)


class UnknownOperationError(OneGraphError):
    def __init__(self, operation_name: str):
        super().__init__("unknown_operation", f"No GraphQL document registered for {operation_name!r}")
        self.operation_name = operation_name


class HttpStatusError(OneGraphError):
    def __init__(self, status_code: int, message: str, body: Any = None):
        super().__init__("http_error", message, {"status_code": status_code, "body": body})
        self.status_code = status_code


class GraphQLOperationError(OneGraphError):
    def __init__(self, errors: list[dict[str, Any]]):
        messages = "; ".join(str(e.get("message", e)) for e in errors) or "unknown error"
        super().__init__("graphql_error", f"GraphQL operation failed: {messages}", {"errors": errors})
        self.errors = errors


class MissingFieldError(OneGraphError):
    def __init__(self, path: tuple[str, ...]):
        super().__init__("missing_field", f"Response has no value at {'.'.join(path)}", {"path": list(path)})
        self.path = path
