"""REST runtime abstractions."""

from .auth import bearer_auth_header
from .decoding import decode_items, decode_one
from .http_client import HTTPClient, RESTResponse
from .link_header import PaginationInfo, parse_link_header
from .paginator import PaginatedSequence, paginate
from .runner import RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTResponse",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "PaginationInfo",
    "PaginatedSequence",
    "bearer_auth_header",
    "decode_items",
    "decode_one",
    "paginate",
    "parse_link_header",
]
