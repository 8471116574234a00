import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Union

from string_search.config.config import Config
from string_search.search.base import UnknownAlgorithmError
from string_search.search.dispatcher import resolve_algorithm, search
from string_search.search.position import to_row_cols

logger = logging.getLogger(__name__)

Payload = Union[bytes, bytearray, str, Dict[str, Any]]


class RequestError(ValueError):
    """Raised when a search request is malformed or exceeds configured limits."""
    pass


@dataclass(frozen=True)
class SearchRequest:
    text: str
    pattern: str
    algorithm: str


def _decode_payload(payload: Payload) -> Dict[str, Any]:
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = bytes(payload).decode("utf-8")
        except UnicodeDecodeError as e:
            raise RequestError("Invalid character encoding") from e
    try:
        body = json.loads(payload)
    except json.JSONDecodeError as e:
        raise RequestError("Invalid JSON") from e
    if not isinstance(body, dict):
        raise RequestError("Request body must be a JSON object")
    return body


def parse_request(payload: Payload, config: Config) -> SearchRequest:
    """
    Validate a ``{"text", "pattern", "algorithm"}`` request.

    Args:
        payload: JSON document as bytes or str, or an already decoded dict.
        config (Config): Supplies the default algorithm and size limits.

    Returns:
        SearchRequest: The validated request.

    Raises:
        RequestError: If the body is not a JSON object, a field is missing or
            has the wrong type, or text/pattern exceed the configured limits.
    """
    body = _decode_payload(payload)

    for field in ("text", "pattern"):
        if field not in body:
            raise RequestError(f"Missing required field '{field}'")
        if not isinstance(body[field], str):
            raise RequestError(f"Field '{field}' must be a string")

    algorithm = body.get("algorithm")
    if algorithm is None or algorithm == "":
        algorithm = config.search_algorithm
    elif not isinstance(algorithm, str):
        raise RequestError("Field 'algorithm' must be a string")

    text = body["text"]
    pattern = body["pattern"]
    if len(text) > config.max_text_length:
        raise RequestError(f"Text exceeds {config.max_text_length} characters")
    if len(pattern) > config.max_pattern_length:
        raise RequestError(f"Pattern exceeds {config.max_pattern_length} characters")

    return SearchRequest(text=text, pattern=pattern, algorithm=algorithm)


class SearchRequestHandler:
    """
    Turns search requests into responses carrying row/column locations.

    The handler holds only configuration and a request counter used for log
    correlation; each request runs an independent ``search`` call, so one
    handler can serve several threads.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self._request_count = 0
        self._lock = threading.Lock()

    def _next_request_id(self) -> int:
        with self._lock:
            self._request_count += 1
            return self._request_count

    def handle(self, payload: Payload) -> Dict[str, Any]:
        """
        Run one search request.

        Returns:
            dict: ``{"algorithm", "count", "matches": [{"index", "row", "col"}]}``

        Raises:
            RequestError: If the request is malformed or names an unknown
                algorithm while strict checking is enabled.
        """
        request_id = self._next_request_id()
        request = parse_request(payload, self.config)

        try:
            algorithm = resolve_algorithm(request.algorithm, strict=self.config.strict_algorithm)
        except UnknownAlgorithmError as e:
            logger.warning("Request #%d: %s", request_id, e)
            raise RequestError(str(e)) from e

        log_pattern = f"{request.pattern[:30]}..." if len(request.pattern) > 30 else request.pattern
        logger.info(
            "Request #%d: Search '%s' with %s in %d characters",
            request_id,
            log_pattern,
            algorithm.value,
            len(request.text),
        )

        search_start = time.perf_counter()
        indices = search(request.text, request.pattern, algorithm)
        search_time = time.perf_counter() - search_start

        locations = to_row_cols(request.text, indices)
        logger.info(
            "Response #%d: %d match(es) (%.2fms)",
            request_id,
            len(indices),
            search_time * 1000,
        )
        return {
            "algorithm": algorithm.value,
            "count": len(indices),
            "matches": [
                {"index": index, "row": row, "col": col}
                for index, (row, col) in zip(indices, locations)
            ],
        }

    def handle_json(self, payload: Payload) -> bytes:
        """
        Serialize ``handle``'s result, reporting failures as ``{"error": ...}``.

        Request errors always carry their message. Any other failure is
        reported in detail only when ``DEBUG`` is enabled.
        """
        try:
            response: Dict[str, Any] = self.handle(payload)
        except RequestError as e:
            logger.error("Rejected request: %s", e)
            response = {"error": str(e)}
        except Exception as e:
            error_msg = str(e) if self.config.debug else "Internal error"
            logger.error("Unhandled exception while handling request: %s", e, exc_info=self.config.debug)
            response = {"error": error_msg}
        return json.dumps(response).encode("utf-8")


def handle_request(payload: Payload, config: Config) -> Dict[str, Any]:
    """One-shot helper around ``SearchRequestHandler.handle``."""
    return SearchRequestHandler(config).handle(payload)
