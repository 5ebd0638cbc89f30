from contactform.api.client import create_http_client
from contactform.api.executor import (
    ApiExecutor,
    BatchOptions,
    CallOptions,
    CallState,
    FailedRequest,
)
from contactform.api.query import compact, flatten_params, stringify

__all__ = [
    "ApiExecutor",
    "BatchOptions",
    "CallOptions",
    "CallState",
    "FailedRequest",
    "compact",
    "create_http_client",
    "flatten_params",
    "stringify",
]
