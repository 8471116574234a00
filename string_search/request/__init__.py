from string_search.request.handler import (
    RequestError,
    SearchRequest,
    SearchRequestHandler,
    handle_request,
    parse_request,
)

__all__ = ["RequestError", "SearchRequest", "SearchRequestHandler", "handle_request", "parse_request"]
