"""
Shared HTTP transport used by every provider adapter.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from .__version__ import __version__
from .exceptions import ApiError, ResponseParseError, TransportError
from .http.adapter import HTTPAdapter
from .http.requests_adapter import RequestsAdapter
from .logging_setup import sanitize_for_logging
from .metrics import NO_RESPONSE, metrics_request
from .utils.xml import xml_to_dict

logger = logging.getLogger("cloudkit_sdk.transport")

REQUEST_ID_HEADERS = ("x-ms-request-id", "x-compute-request-id", "x-request-id")


@dataclass
class Request:
    """Outgoing request, handed to every before hook prior to sending."""

    method: str
    path: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass
class Response:
    """Provider response with its parsed body."""

    status_code: int
    headers: Dict[str, str]
    text: str
    body: Any = None

    def header(self, name: str) -> Optional[str]:
        return get_header(self.headers, name)


def get_header(headers: Dict[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


class Transport:
    """
    Executes adapter requests.

    Every request runs through the ``before`` hooks in registration order
    (providers register their signing/authentication there), is sent
    once through the HTTP adapter, and its body is parsed as XML or JSON
    according to the response content type.

    Examples:
        >>> transport = Transport(lambda path: "https://example.com/" + path)
        >>> transport.before.append(sign_request)
        >>> response = transport.request("GET", ["Tables"])
    """

    def __init__(
        self,
        base_url: Callable[[str], str],
        http_adapter: Optional[HTTPAdapter] = None,
        timeout: float = 30,
        name: str = "cloudkit",
        default_headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize transport.

        Args:
            base_url: Builds the absolute URL for a request path
            http_adapter: Optional custom HTTP adapter
            timeout: Request timeout in seconds
            name: Provider name used in logs and metrics
            default_headers: Headers sent with every request
        """
        self.base_url = base_url
        self.http = http_adapter or RequestsAdapter()
        self.timeout = timeout
        self.name = name
        self.default_headers = default_headers or {}
        self.before: List[Callable[[Request], None]] = []

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"User-Agent": f"cloudkit-python-sdk/{__version__}"}
        headers.update(self.default_headers)
        if extra:
            headers.update(extra)
        return headers

    def request(
        self,
        method: str,
        path: Union[str, Sequence[str]],
        body: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        raise_on_status: bool = True,
        parse: bool = True,
    ) -> Response:
        """
        Make HTTP request to the provider.

        Args:
            method: HTTP method
            path: Request path, or path segments joined with "/"
            body: Optional raw request body
            headers: Optional extra headers
            raise_on_status: Raise ApiError for 4xx/5xx responses
            parse: Parse the body; when off, only status, headers and text are set

        Returns:
            Response with parsed body

        Raises:
            ApiError: On error status when raise_on_status is set
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
            ResponseParseError: If parse is set and the body cannot be parsed
        """
        if not isinstance(path, str):
            path = "/".join(path)

        request = Request(
            method=method,
            path=path,
            url=self.base_url(path),
            headers=self._headers(headers),
            body=body,
        )

        for hook in self.before:
            hook(request)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Request %s %s %s",
                request.method,
                request.url,
                sanitize_for_logging(request.headers),
                extra={"provider": self.name},
            )

        start = time.monotonic()
        try:
            status, text, resp_headers = self.http.send(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body,
                timeout=self.timeout,
            )
        except TransportError as e:
            metrics_request(self.name, NO_RESPONSE, time.monotonic() - start)
            logger.error("%s %s failed: %s", method, request.url, e, extra={"provider": self.name})
            raise
        metrics_request(self.name, status, time.monotonic() - start)

        logger.debug(
            "Response %d %s", status, text[:1000] if text else "", extra={"provider": self.name}
        )

        response = Response(status_code=status, headers=resp_headers, text=text or "")

        if raise_on_status and status >= 400:
            raise self._api_error(response)

        if parse:
            response.body = self._parse(response)
        return response

    def _parse(self, response: Response) -> Any:
        text = response.text
        if not text.strip():
            return {}

        content_type = (response.header("Content-Type") or "").lower()
        stripped = text.lstrip()

        if "xml" in content_type or (not content_type and stripped.startswith("<")):
            return xml_to_dict(text)

        if "json" in content_type or (not content_type and stripped[:1] in ("{", "[")):
            try:
                return json.loads(text)
            except ValueError as e:
                raise ResponseParseError(f"Invalid JSON response: {e}") from e

        return text

    def _api_error(self, response: Response) -> ApiError:
        try:
            payload = self._parse(response)
        except ResponseParseError:
            payload = {"body": response.text}
        if not isinstance(payload, dict):
            payload = {"body": payload}

        request_id = None
        for name in REQUEST_ID_HEADERS:
            request_id = response.header(name)
            if request_id:
                break

        message = _error_message(payload) or f"API returned {response.status_code}"
        logger.warning(
            "%s returned %d: %s",
            self.name,
            response.status_code,
            message,
            extra={"provider": self.name, "request_id": request_id},
        )
        return ApiError(
            message,
            status_code=response.status_code,
            payload=payload,
            request_id=request_id,
        )


def _error_message(payload: Dict[str, Any]) -> Optional[str]:
    # {"message": ...}, {"itemNotFound": {"message": ...}} or Azure's <error><message>
    message = payload.get("message")
    if isinstance(message, dict):
        message = message.get("#")
    if isinstance(message, str) and message:
        return message
    for value in payload.values():
        if isinstance(value, dict):
            nested = _error_message(value)
            if nested:
                return nested
    return None
