"""
onegraph-client — async Python client for the OneGraph API.

Schema retrieval, persisted operation documents and CLI session
bookkeeping, including the session event poll/ack channel.
"""

from onegraph_client.client import AsyncOneGraph
from onegraph_client.config import OneGraphConfig
from onegraph_client.channel import SessionEventChannel
from onegraph_client.events import CliEventKind, describe_event
from onegraph_client.errors import (
    OneGraphError,
    InvalidArgumentError,
    UnknownOperationError,
    HttpStatusError,
    GraphQLOperationError,
    MissingFieldError,
)
from onegraph_client.results import Result, Success, Empty, Failure

__version__ = "0.1.0"
__all__ = [
    "AsyncOneGraph",
    "OneGraphConfig",
    "SessionEventChannel",
    "CliEventKind",
    "describe_event",
    "OneGraphError",
    "InvalidArgumentError",
    "UnknownOperationError",
    "HttpStatusError",
    "GraphQLOperationError",
    "MissingFieldError",
    "Result",
    "Success",
    "Empty",
    "Failure",
]
