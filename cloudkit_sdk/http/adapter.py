"""
Wire-level sending contract shared by the transport and test doubles.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Union

# (status_code, response_text, response_headers)
RawResponse = Tuple[int, str, Dict[str, str]]


class HTTPAdapter(ABC):
    """
    Sends one fully-built request and reports what came back.

    Adapters do not interpret status codes, parse bodies or sign
    requests; the transport owns those steps. An adapter only raises
    when no HTTP response was received.
    """

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Union[str, bytes]] = None,
        timeout: float = 10,
    ) -> RawResponse:
        """
        Send a signed request exactly once.

        Args:
            method: HTTP verb
            url: Absolute URL, path already percent-encoded
            headers: Final headers after the before hooks ran
            data: XML or JSON body; str is sent as UTF-8
            timeout: Seconds before giving up

        Returns:
            (status_code, response_text, response_headers), for any status

        Raises:
            NetworkError: No response (DNS, refused, reset)
            TimeoutError: No response within timeout
        """
        raise NotImplementedError
