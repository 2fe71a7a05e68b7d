"""
Requests-based HTTP adapter (synchronous).
"""

import requests
from typing import Dict, Optional, Union
from .adapter import HTTPAdapter, RawResponse
from ..exceptions import NetworkError, TimeoutError as CloudKitTimeoutError


class RequestsAdapter(HTTPAdapter):
    """
    Synchronous HTTP adapter using requests library.

    Connections are pooled through a single session. Requests are sent
    once; no retry strategy is mounted on the session.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance
        """
        self.session = session or requests.Session()

    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Union[str, bytes]] = None,
        timeout: float = 10,
    ) -> RawResponse:
        """
        Send HTTP request using requests library.

        Args:
            method: HTTP method
            url: Request URL
            headers: Request headers
            data: Raw request body
            timeout: Request timeout in seconds

        Returns:
            Tuple of (status_code, response_text, response_headers)

        Raises:
            NetworkError: On network connectivity issues
            TimeoutError: On request timeout
        """
        if isinstance(data, str):
            data = data.encode("utf-8")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                data=data,
                timeout=timeout,
            )

            return (
                response.status_code,
                response.text,
                dict(response.headers),
            )

        except requests.exceptions.Timeout as e:
            raise CloudKitTimeoutError(f"Request timed out: {e}") from e

        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network request failed: {e}") from e
